"""Exit codes for the am2rlauncher CLI."""

EXIT_SUCCESS = 0
EXIT_TOOL_MISSING = 1
EXIT_INVALID_USAGE = 2
EXIT_TOOL_ERROR = 3
