"""Shared constants for nodelinks files and directory names."""

NODELINKS_HOME_EXT = ".nodelinks"  # user-level state/config directory suffix

# Package name npm uses for the global install; a symlink with this name inside
# the shared node_modules means npm would manage our own files.
TOOL_PACKAGE_NAME = "nodelinks"

DEPS_DIRNAME = "node_modules"

SETTINGS_FILENAME = "settings.json"
CATALOG_FILENAME = "repos.json"
LOG_FILENAME = "nodelinks.log"

DEFAULT_MIRROR_TIMEOUT_MS = 5000

# Interactive mirror list page size
PAGE_SIZE = 10

MAX_REDIRECTS = 20
