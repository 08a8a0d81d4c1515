"""Exceptions raised by devtimer."""

from devtimer.utils.exit_codes import ERROR_GENERAL, ERROR_PERMISSION_DENIED


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


class StateStoreError(AppError):
    """The state file or its directory cannot be created, opened or written."""

    def __init__(self, message: str, exit_code: int = ERROR_PERMISSION_DENIED):
        super().__init__(message, exit_code)
