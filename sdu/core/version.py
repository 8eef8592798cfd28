"""SDU - version constants.

Keep this module tiny and dependency-free. It is imported by the CLI and the
encoder and must not have side effects.
"""

APP_NAME = "SvgDataUri"
APP_SHORT = "SDU"

APP_VERSION = "0.1.0"

# MIME type of the debug payload.
# NOTE: the "Expected URI" line is compared verbatim by whoever consumes it.
SVG_MIME = "image/svg+xml"
