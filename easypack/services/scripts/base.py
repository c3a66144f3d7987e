"""
Abstract Base Script Writer

Defines the interface every script writer implements: one rendering method
per platform, plus the dispatch from a Platform value to that method.
Adding a platform means adding its method here and a branch in render().
"""

from abc import ABC, abstractmethod
from typing import FrozenSet

from .errors import UnsupportedOperationError
from .models import ScriptConfig
from .platform import Platform


class BaseScriptWriter(ABC):
    """
    Abstract base class for script writers.

    A writer owns the configuration for one generation run and renders the
    text of one kind of script (start, shutdown) for each platform it
    supports. Writers do not touch the filesystem for output.
    """

    #: Base file name of the generated script, without extension
    script_name: str = ""

    #: Platforms this writer can render for
    supported_platforms: FrozenSet[Platform] = frozenset(Platform)

    def __init__(self, config: ScriptConfig):
        self.config = config

    def supports(self, platform: Platform) -> bool:
        """Check if this writer can render a script for the platform."""
        return platform in self.supported_platforms

    def file_name(self, platform: Platform) -> str:
        """File name of the script for the platform, e.g. start.sh."""
        return f"{self.script_name}{platform.script_extension}"

    def render(self, platform: Platform) -> str:
        """
        Render the script content for a platform.

        Args:
            platform: Target platform

        Returns:
            Script content using the platform's line endings

        Raises:
            UnsupportedOperationError: If the writer does not support the platform
        """
        if not self.supports(platform):
            raise UnsupportedOperationError(
                f"{type(self).__name__} does not support platform '{platform.value}'"
            )

        if platform == Platform.LINUX:
            return self.render_linux()
        elif platform == Platform.WINDOWS:
            return self.render_windows()

        raise UnsupportedOperationError(f"Unknown platform: {platform!r}")

    @abstractmethod
    def render_linux(self) -> str:
        """Render the script as a POSIX shell script."""
        pass

    def render_windows(self) -> str:
        """Render the script as a Windows batch file."""
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not support platform 'windows'"
        )
