import os

import pytest

# QtSvg sin display (CI / contenedores).
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from sdu.utils.log import reset_logging


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """CWD sin sdu_settings.json y sin env vars SDU_* heredadas."""
    for key in ("SDU_LOG_LEVEL", "SDU_LOG_DIR", "SDU_RENDER_SIZE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
