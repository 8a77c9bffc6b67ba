"""Configuration constants for mathfonts."""

import os

# Base path substituted for the template's ``fonts/`` prefix when the CLI is
# not given one. The default leaves the template unchanged.
# Override via MATHFONTS_BASE_PATH environment variable
DEFAULT_BASE_PATH = os.getenv("MATHFONTS_BASE_PATH", "fonts/")

# Name of the host-provided global the browser snippet reads the base path from
HREF_VAR = os.getenv("MATHFONTS_HREF_VAR", "contentHref")

# Output encoding for HTML and CSS files
ENCODING = "utf-8"
