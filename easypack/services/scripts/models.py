"""
Script configuration models.

ScriptConfig is built once by the caller (CLI or build tool adapter) and
handed to the writers, which treat it as read-only.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .errors import ConfigurationError
from .platform import DEFAULT_PLATFORMS, Platform


class EchoMode(str, Enum):
    """
    Which part of a start script echoes its commands when executed.

    Attributes:
        NONE: Nothing is echoed
        ALL: Every command of the script is echoed
        JAVA: Only the java launch line is echoed
    """

    NONE = ""
    ALL = "all"
    JAVA = "java"

    @classmethod
    def from_string(cls, value: Optional[str]) -> "EchoMode":
        """
        Convert a configured echo value to EchoMode.

        Raises:
            ConfigurationError: If value is not "", "all" or "java"
        """
        if value is None:
            return cls.NONE
        value_lower = value.lower().strip()
        for mode in cls:
            if mode.value == value_lower:
                return mode
        raise ConfigurationError(
            f"Invalid echo mode: '{value}'. Valid modes: '', 'all', 'java'"
        )


class PreStart(BaseModel):
    """
    Scripts to be merged into the start scripts before the java launch line.

    Relative names are resolved against `directory`. A name set to None
    disables the fragment for that platform.
    """
    linux: Optional[str] = Field(default="start-linux", description="Fragment merged into start.sh")
    windows: Optional[str] = Field(default="start-windows", description="Fragment merged into start.bat")
    directory: Path = Field(default=Path("bin"), description="Base directory for relative fragment names")

    class Config:
        frozen = True

    def name_for(self, platform: Platform) -> Optional[str]:
        if platform == Platform.LINUX:
            return self.linux
        return self.windows


class ScriptConfig(BaseModel):
    """Configuration for one script generation run."""
    process_name: str = Field(..., description="Application final name, used for the process lookup")
    jar_name: Optional[str] = Field(None, description="Jar base name, defaults to process_name")
    opts: str = Field(default="", description="JVM options, like -Xmx3G or -D properties")
    args: str = Field(default="", description="Arguments passed to the application main method")
    platforms: str = Field(default=DEFAULT_PLATFORMS, description="Comma separated platform names")
    echo: EchoMode = Field(default=EchoMode.NONE, description="Echo mode: '', 'all' or 'java'")
    shutdown: bool = Field(default=False, description="Also generate a shutdown script (linux only)")
    java_command: str = Field(default="java", description="Executable used to launch the jar")
    destination: Path = Field(..., description="Folder the scripts are written to")
    pre_start: PreStart = Field(default_factory=PreStart)

    class Config:
        frozen = True

    @field_validator('process_name')
    @classmethod
    def validate_process_name(cls, v):
        if not v or not v.strip():
            raise ConfigurationError('Process name cannot be empty')
        return v.strip()

    @field_validator('jar_name')
    @classmethod
    def validate_jar_name(cls, v):
        if v is None:
            return None
        v = v.strip()
        if v.endswith('.jar'):
            v = v[:-len('.jar')]
        return v or None

    @field_validator('opts', 'args', mode='before')
    @classmethod
    def validate_command_fragment(cls, v, info):
        if v is None:
            return ""
        if '\n' in v or '\r' in v:
            raise ConfigurationError(f'{info.field_name} must not contain newlines')
        return v.strip()

    @field_validator('platforms', mode='before')
    @classmethod
    def validate_platforms(cls, v):
        return v or ""

    @field_validator('echo', mode='before')
    @classmethod
    def validate_echo(cls, v):
        if isinstance(v, EchoMode):
            return v
        return EchoMode.from_string(v)

    @field_validator('java_command')
    @classmethod
    def validate_java_command(cls, v):
        if not v or not v.strip():
            raise ConfigurationError('Java command cannot be empty')
        return v.strip()

    @property
    def jar_file(self) -> str:
        """File name of the jar launched by the start script."""
        return f"{self.jar_name or self.process_name}.jar"
