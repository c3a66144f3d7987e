"""
Platform Enumeration

Defines the operating system families scripts can be generated for, along
with the syntax each family's scripts use (extension, line endings, comments).
"""

from enum import Enum
from typing import FrozenSet, Iterable, List

from .errors import UnsupportedPlatformError

DEFAULT_PLATFORMS = "linux, windows"


class Platform(str, Enum):
    """
    Supported target platforms.

    Attributes:
        LINUX: POSIX shell scripts (.sh)
        WINDOWS: Batch files (.bat)
    """

    LINUX = "linux"
    WINDOWS = "windows"

    @classmethod
    def from_string(cls, value: str) -> "Platform":
        """
        Convert a single platform name to a Platform.

        Args:
            value: Platform name, case-insensitive ("linux" or "windows")

        Returns:
            Platform enum value

        Raises:
            UnsupportedPlatformError: If value is not a known platform
        """
        value_lower = value.lower().strip()
        for platform in cls:
            if platform.value == value_lower:
                return platform
        supported = ", ".join([p.value for p in cls])
        raise UnsupportedPlatformError(value.strip(), supported)

    @classmethod
    def parse(cls, raw: str) -> FrozenSet["Platform"]:
        """
        Parse a comma separated list of platform names.

        Duplicates collapse to one platform and empty tokens are ignored, so
        "" or " , " yields an empty set.

        Raises:
            UnsupportedPlatformError: If any token is not a known platform
        """
        if not raw:
            return frozenset()
        tokens = [token.strip() for token in raw.split(",")]
        return frozenset(cls.from_string(token) for token in tokens if token)

    @classmethod
    def ordered(cls, platforms: Iterable["Platform"]) -> List["Platform"]:
        """Return the given platforms in declaration order."""
        selected = set(platforms)
        return [platform for platform in cls if platform in selected]

    @property
    def script_extension(self) -> str:
        return ".sh" if self == Platform.LINUX else ".bat"

    @property
    def line_separator(self) -> str:
        return "\n" if self == Platform.LINUX else "\r\n"

    @property
    def comment_prefix(self) -> str:
        return "#" if self == Platform.LINUX else "REM"

    @property
    def executable(self) -> bool:
        """Whether generated files need the executable bit."""
        return self == Platform.LINUX

    def comment(self, text: str) -> str:
        return f"{self.comment_prefix} {text}"

    def join_lines(self, lines: Iterable[str]) -> str:
        """Join script lines with this platform's line separator, ending with one."""
        return self.line_separator.join(lines) + self.line_separator

    def __str__(self) -> str:
        return self.value
