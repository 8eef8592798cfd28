import re

import pytest

from sdu.core.encoder import (
    DataUriResult,
    build_data_uri,
    decode_data_uri,
    encode_base64,
    encode_svg,
    expected_b64_length,
)
from sdu.core.payload import DEBUG_SVG
from sdu.utils.errors import SduEncodingError, SduValidationError

PREFIX = "data:image/svg+xml;base64,"

DEBUG_SVG_B64 = (
    "PHN2ZyB4bWxucz0iaHR0cDovL3d3dy53My5vcmcvMjAwMC9zdmci"
    "IHhtbG5zOnhsaW5rPSJodHRwOi8vd3d3LnczLm9yZy8xOTk5L3hsaW5r"
    "IiB3aWR0aD0iNTAwIiBoZWlnaHQ9IjUwMCI+"
    "PHRleHQgeD0iMCIgeT0iMTUiIGZpbGw9ImJsYWNrIj5I"
    "aSEgWW91ciBicm93c2VyIGRlY29kZWQgdGhpczwvdGV4dD48L3N2Zz4="
)


def test_payload_is_the_debug_svg():
    assert DEBUG_SVG == (
        '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
        'width="500" height="500"><text x="0" y="15" fill="black">Hi! Your browser decoded this</text></svg>'
    )


def test_encode_base64_debug_payload():
    assert encode_base64(DEBUG_SVG) == DEBUG_SVG_B64
    assert len(DEBUG_SVG_B64) == 244


def test_encode_base64_known_prefix():
    # '<svg xmlns="http://www.w3.org/2000/svg"'
    assert encode_base64(DEBUG_SVG).startswith("PHN2ZyB4bWxucz0iaHR0cDovL3d3dy53My5vcmcvMjAwMC9zdmci")


@pytest.mark.parametrize(
    "text,expected",
    [("", ""), ("f", "Zg=="), ("fo", "Zm8="), ("foo", "Zm9v"), ("ñ", "w7E=")],
)
def test_encode_base64_padding_and_utf8(text, expected):
    assert encode_base64(text) == expected


def test_encode_base64_lone_surrogate_raises():
    with pytest.raises(SduEncodingError):
        encode_base64("\ud800")


def test_encode_svg_result_fields():
    res = encode_svg()
    assert isinstance(res, DataUriResult)
    assert res.svg == DEBUG_SVG
    assert res.mime == "image/svg+xml"
    assert res.uri == PREFIX + res.b64


def test_b64_alphabet_and_length():
    res = encode_svg()
    assert re.fullmatch(r"[A-Za-z0-9+/=]+", res.b64)
    assert len(res.b64) == expected_b64_length(len(DEBUG_SVG.encode("utf-8")))


def test_round_trip_through_uri():
    res = encode_svg()
    assert decode_data_uri(res.uri) == DEBUG_SVG.encode("utf-8")


def test_build_data_uri_custom_mime():
    assert build_data_uri("Zm9v", "text/plain") == "data:text/plain;base64,Zm9v"


@pytest.mark.parametrize(
    "uri",
    [
        "",
        "Zm9v",
        "data:image/svg+xml,Zm9v",
        "data:;base64,Zm9v",
        "data:image/svg+xml;base64,Zm9v!",
        "data:image/svg+xml;base64,Zm9",
        "data:image/svg+xml;base64,",
        "data:image/svg+xml;base64,Zm9=",
        "data:image/svg+xml;base64,Zg==\n",
    ],
)
def test_decode_data_uri_rejects_malformed(uri):
    with pytest.raises(SduValidationError):
        decode_data_uri(uri)


@pytest.mark.parametrize("n,expected", [(0, 0), (1, 4), (2, 4), (3, 4), (4, 8), (181, 244)])
def test_expected_b64_length(n, expected):
    assert expected_b64_length(n) == expected


def test_expected_b64_length_negative():
    with pytest.raises(SduValidationError):
        expected_b64_length(-1)


def test_decode_data_uri_accepts_other_mime():
    assert decode_data_uri("data:text/plain;base64,Zm8=") == b"fo"


def test_decode_data_uri_rejects_nonzero_padding_bits():
    # 'Zm9=' decodifica a b'fo' con stdlib, pero no es lo que produce el encoder
    assert encode_base64("fo") == "Zm8="
    with pytest.raises(SduValidationError, match="no canónico"):
        decode_data_uri("data:image/svg+xml;base64,Zm9=")


def test_decode_data_uri_rejects_empty_payload():
    with pytest.raises(SduValidationError, match="sin payload"):
        decode_data_uri("data:image/svg+xml;base64,")
