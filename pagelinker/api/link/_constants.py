"""Constants for link lists (private)."""

# Files that never show up in a link list, besides dot-files
SKIP_NAMES = frozenset({"Thumbs.db"})

# Appended to directory keys so 'foo/' does not collide with 'foo.md'
DIRECTORY_KEY_SUFFIX = "_"
