"""SQL issued against the index.

``{}`` marks the single value slot. The cli backend fills it with a quoted,
escaped literal; the sqlite backend fills it with ``?`` and binds the value.
"""

# Files a wikilink text points at
BACKLINKS_TO = (
    "SELECT DISTINCT f.path AS full_path FROM backlinks b "
    "JOIN files f ON b.backlink_id = f.id "
    "WHERE b.backlink={};"
)

# Files linking to any file whose path contains the value (LIKE pattern)
BACKLINKS_FROM = (
    "SELECT DISTINCT f.path AS full_path FROM backlinks b "
    "JOIN files f ON b.file_id = f.id "
    "JOIN files fp ON b.backlink_id = fp.id "
    "WHERE fp.path LIKE {};"
)

FILES_BY_TAG = (
    "SELECT f.path FROM files f "
    "JOIN file_tags ft ON f.id = ft.file_id "
    "JOIN tags t ON ft.tag_id = t.id "
    "WHERE t.tag={};"
)

ALL_TAGS = "SELECT DISTINCT tag FROM tags;"
