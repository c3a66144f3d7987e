"""
Platform Dispatcher

Runs every writer against every selected platform and persists the result,
one file per (writer, platform) pair the writer supports.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from .base import BaseScriptWriter
from .output import write_script
from .platform import Platform

logger = logging.getLogger(__name__)


class ScriptDispatcher:
    """Dispatches script writers over platforms into a destination folder."""

    def __init__(self, folder: Union[str, Path]):
        self.folder = Path(folder)

    def dispatch(
        self,
        platforms: Iterable[Platform],
        writers: Sequence[BaseScriptWriter]
    ) -> List[Path]:
        """
        Render and write the scripts.

        Platforms are visited in declaration order and writers in the given
        order, so repeated runs write the same files in the same order.
        Writers that do not support a platform are skipped for it.

        Args:
            platforms: Selected platforms
            writers: Script writers to run

        Returns:
            Paths of the written scripts, in write order
        """
        written = []

        for platform in Platform.ordered(platforms):
            for writer in writers:
                if not writer.supports(platform):
                    logger.debug(
                        f"Skipping {type(writer).__name__} for {platform.value}: not supported"
                    )
                    continue

                content = writer.render(platform)
                written.append(write_script(
                    self.folder,
                    writer.file_name(platform),
                    content,
                    executable=platform.executable
                ))

        return written
