"""
Exit codes for devtimer.

Informational outcomes such as "Timer is not running." are not errors and exit
with SUCCESS.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Unknown command or invalid arguments
ERROR_INVALID_ARGS = 2

# State file or directory cannot be created, opened or written
ERROR_PERMISSION_DENIED = 6


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_PERMISSION_DENIED: "ERROR_PERMISSION_DENIED",
    }
    return code_names.get(code, f"UNKNOWN({code})")
