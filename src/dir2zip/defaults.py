"""Default settings shared by the library and the command-line interface."""

# Base names that never belong in a distributable plugin archive
DEFAULT_EXCLUDES = (
    ".git",
    ".gitignore",
    "node_modules",
    "package.json",
    "package-lock.json",
    "webpack.config.js",
)

ARCHIVE_EXTENSION = ".zip"

# Highest zlib level, used for every stored entry
COMPRESSION_LEVEL = 9

# UTC stamp appended to the default output name by --timestamp
TIMESTAMP_FORMAT = "%Y-%m-%d-%H%M"

# Setting this environment variable switches logging to DEBUG
DEBUG_ENV_VAR = "DIR2ZIP_DEBUG"
