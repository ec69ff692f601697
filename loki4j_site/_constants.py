"""Common literal values used across loki4j_site.

These constants keep filenames and token names centralized so templates,
builders, and tests can import the same values without drifting. Intended for
internal use within the loki4j_site package.

Examples
--------
>>> from loki4j_site import _constants
>>> "version: %version%".replace(_constants.VERSION_TOKEN, "1.6.0")
'version: 1.6.0'
>>> _constants.HOME_PAGE_FILENAME
'index.html'
"""

VERSION_TOKEN = "%version%"
DEFAULT_INDEX_DOC = "docs/index.md"
DEFAULT_OUTPUT_DIR = "public"
HOME_PAGE_FILENAME = "index.html"
HELP_PAGE_FILENAME = "help.html"
USERS_PAGE_FILENAME = "users.html"
