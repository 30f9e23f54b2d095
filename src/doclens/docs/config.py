"""Documentation store layout.

Defines where the index and per-entry documentation files live inside a
doclens home directory (see ``DOCLENS_HOME``).
"""

# Name index: display names and qualified paths mapped to entry locations
INDEX_FILE_NAME = "index.json"

# Per-crate entry files, one JSON document per documented item
ENTRIES_DIR_NAME = "entries"

# Index schema version understood by this release
INDEX_FORMAT_VERSION = 1
