"""Constants for verstree."""

# Directory names
STORE_DIR_NAME = ".verstree"
HISTORY_DIR_NAME = "history"
CONFIG_FILENAME = "config.toml"
INDEX_FILENAME = "index.json"

# Snapshot files inside history/<key>/v<N>/
CONTENT_FILENAME = "content.txt"
META_FILENAME = "meta.json"

# Forward search window used to re-synchronize lines after a mismatch
LOOKAHEAD_WINDOW = 4

# Length of the hashed directory key for a file identity
IDENTITY_KEY_LENGTH = 16
