"""Hardcoded toolchain-level constants that are not exposed as scanner configuration.

They are shared between the scanner facade and the CLI host,
changing them changes how every host recognizes response file references.
"""

# Leading character of an raw token that references response file (e.g `@args.rsp`)
RESPONSE_FILE_MARKER = "@"

# Suffix of an default response file that lives beside executable
# (e.g `/usr/bin/argscan` -> `/usr/bin/argscan.rsp`)
DEFAULT_RESPONSE_FILE_SUFFIX = ".rsp"

# Upper bound of response file expansions per single scan pass
# Response files may reference other response files, this stops self-referencing ones
DEFAULT_MAX_RESPONSE_FILES = 64
