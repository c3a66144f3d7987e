"""
Script Generator

Top level entry point of script generation. Resolves the platforms,
validates the configuration before touching the filesystem, prepares the
destination folder and dispatches the writers.

Any failure is reported as a single ScriptGenerationError.
"""

import logging
from pathlib import Path
from typing import FrozenSet, List

from .base import BaseScriptWriter
from .dispatcher import ScriptDispatcher
from .errors import ConfigurationError, ScriptGenerationError
from .models import ScriptConfig
from .output import prepare
from .platform import Platform
from .prestart import PreStartMerger
from .shutdown_writer import ShutdownScriptWriter
from .start_writer import StartScriptWriter

logger = logging.getLogger(__name__)


class ScriptGenerator:
    """Generates the start (and optionally shutdown) scripts for a configuration."""

    def __init__(self, config: ScriptConfig):
        self.config = config

    def get_writers(self) -> List[BaseScriptWriter]:
        """
        Get the script writers for this configuration.

        The start writer is always included; the shutdown writer only when
        shutdown is enabled.
        """
        writers: List[BaseScriptWriter] = [StartScriptWriter(self.config)]
        if self.config.shutdown:
            writers.append(ShutdownScriptWriter(self.config))
        return writers

    def validate(self, platforms: FrozenSet[Platform], writers: List[BaseScriptWriter]) -> None:
        """
        Check the configuration against the resolved platforms.

        Raises:
            ConfigurationError: If no platform is selected, a writer supports
                none of the selected platforms, or a pre-start fragment lives
                inside the destination folder
        """
        if not platforms:
            raise ConfigurationError(
                f"No platform selected (platforms='{self.config.platforms}')"
            )

        for writer in writers:
            if not any(writer.supports(platform) for platform in platforms):
                selected = ", ".join(p.value for p in Platform.ordered(platforms))
                supported = ", ".join(p.value for p in Platform.ordered(writer.supported_platforms))
                raise ConfigurationError(
                    f"{writer.script_name} script is only supported for: {supported} "
                    f"(selected: {selected})"
                )

        destination = self.config.destination.resolve()
        for platform in platforms:
            fragment = PreStartMerger.resolve(self.config.pre_start, platform)
            if fragment is None:
                continue
            fragment = fragment.resolve()
            if fragment == destination or destination in fragment.parents:
                raise ConfigurationError(
                    f"Pre-start fragment {fragment} is inside the output folder {destination}, "
                    "which is recreated on every run"
                )

    def generate(self) -> List[Path]:
        """
        Generate all scripts.

        Returns:
            Paths of the written scripts

        Raises:
            ScriptGenerationError: If anything fails; the original error is
                chained as __cause__
        """
        try:
            platforms = Platform.parse(self.config.platforms)
            writers = self.get_writers()
            self.validate(platforms, writers)

            folder = prepare(self.config.destination)
            written = ScriptDispatcher(folder).dispatch(platforms, writers)

        except Exception as e:
            logger.error(f"Exception while creating scripts: {e}")
            raise ScriptGenerationError(f"Exception while creating scripts: {e}") from e

        logger.info(f"Created {len(written)} script(s) in {self.config.destination}")
        return written


def generate_scripts(config: ScriptConfig) -> List[Path]:
    """
    Generate the scripts for a configuration.

    This is the main entry point for build tool adapters.

    Example:
        config = ScriptConfig(process_name="app", destination=Path("target/bin"))
        generate_scripts(config)
    """
    return ScriptGenerator(config).generate()
