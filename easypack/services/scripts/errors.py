"""
Script generation errors.

Every failure raised while creating scripts derives from ScriptError so the
generator can wrap it into a single ScriptGenerationError for the caller.
"""

from pathlib import Path
from typing import Optional, Union


class ScriptError(Exception):
    """Base exception for script generation errors."""
    pass


class UnsupportedPlatformError(ScriptError, ValueError):
    """Raised when a platform name does not match any known platform."""

    def __init__(self, token: str, supported: str = ""):
        self.token = token
        message = f"Unsupported platform: '{token}'"
        if supported:
            message += f". Supported platforms: {supported}"
        super().__init__(message)


class ConfigurationError(ScriptError):
    """Raised for invalid configuration values or combinations."""
    pass


class UnsupportedOperationError(ConfigurationError):
    """Raised when a writer is asked to render for a platform it does not support."""
    pass


class ScriptIOError(ScriptError):
    """Raised when the output folder or a script file cannot be written."""

    def __init__(self, message: str, path: Union[str, Path], cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        detail = f"{message}: {self.path}"
        if cause is not None:
            detail += f" ({cause})"
        super().__init__(detail)


class ScriptGenerationError(ScriptError):
    """Single fatal failure reported for a whole generation run."""
    pass
