"""
Script generation services.

Provides the platform registry, the start/shutdown script writers, the
platform dispatcher and the generator tying them together.

Usage:
    from easypack.services.scripts import ScriptConfig, generate_scripts

    config = ScriptConfig(process_name="app", destination=Path("target/bin"))
    generate_scripts(config)
"""

from .base import BaseScriptWriter
from .dispatcher import ScriptDispatcher
from .errors import (
    ConfigurationError,
    ScriptError,
    ScriptGenerationError,
    ScriptIOError,
    UnsupportedOperationError,
    UnsupportedPlatformError,
)
from .generator import ScriptGenerator, generate_scripts
from .models import EchoMode, PreStart, ScriptConfig
from .output import prepare, write_script
from .platform import DEFAULT_PLATFORMS, Platform
from .prestart import PreStartMerger
from .shutdown_writer import ShutdownScriptWriter
from .start_writer import StartScriptWriter

__all__ = [
    # Configuration
    "ScriptConfig",
    "PreStart",
    "EchoMode",
    "Platform",
    "DEFAULT_PLATFORMS",
    # Writers
    "BaseScriptWriter",
    "StartScriptWriter",
    "ShutdownScriptWriter",
    "PreStartMerger",
    # Pipeline
    "ScriptDispatcher",
    "ScriptGenerator",
    "generate_scripts",
    "prepare",
    "write_script",
    # Errors
    "ScriptError",
    "UnsupportedPlatformError",
    "ConfigurationError",
    "UnsupportedOperationError",
    "ScriptIOError",
    "ScriptGenerationError",
]
