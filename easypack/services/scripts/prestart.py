"""
Pre-Start Fragment Merger

Resolves the optional, user authored script fragments (bin/start-linux,
bin/start-windows by default) and turns them into lines ready to be spliced
into a start script. A missing fragment is not an error.
"""

import logging
import re
from pathlib import Path
from typing import List, Optional

from .errors import ScriptIOError
from .models import PreStart
from .platform import Platform

logger = logging.getLogger(__name__)


class PreStartMerger:
    """Reads pre-start fragments for a platform."""

    @staticmethod
    def resolve(pre_start: PreStart, platform: Platform) -> Optional[Path]:
        """
        Get the path of the fragment configured for a platform.

        Args:
            pre_start: Pre-start configuration
            platform: Target platform

        Returns:
            Path to the fragment, or None when no name is configured. The path
            is returned whether or not the file exists.
        """
        name = pre_start.name_for(platform)
        if not name or not name.strip():
            return None

        path = Path(name.strip())
        if not path.is_absolute():
            path = pre_start.directory / path
        return path

    @staticmethod
    def read(pre_start: PreStart, platform: Platform) -> Optional[str]:
        """
        Read the fragment for a platform.

        Returns:
            Fragment content, or None if not configured or not present

        Raises:
            ScriptIOError: If the fragment exists but cannot be read
        """
        path = PreStartMerger.resolve(pre_start, platform)
        if path is None or not path.is_file():
            logger.debug(f"No pre-start fragment for {platform.value}")
            return None

        try:
            content = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise ScriptIOError("Failed to read pre-start fragment", path, e) from e

        logger.info(f"Merging pre-start fragment {path} into {platform.value} start script")
        return content

    @staticmethod
    def lines(content: Optional[str]) -> List[str]:
        """
        Split fragment content into lines.

        Line endings are dropped so the writer can re-join them with the
        platform separator. Trailing blank lines are removed.
        """
        if not content:
            return []

        lines = re.split(r"\r\n|\r|\n", content)
        while lines and not lines[-1].strip():
            lines.pop()
        return lines
