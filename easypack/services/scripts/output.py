"""
Output folder handling.

The destination folder is recreated from scratch on every run so no script
from a previous build is left behind.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Union

from .errors import ScriptIOError

logger = logging.getLogger(__name__)


def prepare(folder: Union[str, Path]) -> Path:
    """
    Remove the folder if it exists and create it empty.

    Args:
        folder: Destination folder

    Returns:
        The folder path

    Raises:
        ScriptIOError: If the folder cannot be removed or created
    """
    folder = Path(folder)

    try:
        if folder.is_dir() and not folder.is_symlink():
            shutil.rmtree(folder)
            logger.info(f"Removed existing output folder: {folder}")
        elif folder.exists() or folder.is_symlink():
            folder.unlink()
            logger.info(f"Removed file occupying output folder path: {folder}")
    except OSError as e:
        logger.error(f"Failed to remove output folder {folder}: {e}")
        raise ScriptIOError("Failed to remove output folder", folder, e) from e

    try:
        folder.mkdir(parents=True)
    except OSError as e:
        logger.error(f"Failed to create output folder {folder}: {e}")
        raise ScriptIOError("Failed to create output folder", folder, e) from e

    return folder


def write_script(folder: Union[str, Path], name: str, content: str, executable: bool = False) -> Path:
    """
    Write a script file in one go.

    Content is written as is (newline='') since it already carries the
    platform line endings.

    Returns:
        Path to the written script

    Raises:
        ScriptIOError: If the file cannot be written
    """
    script_path = Path(folder) / name

    try:
        with open(script_path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)

        if executable:
            os.chmod(script_path, 0o755)
    except OSError as e:
        logger.error(f"Failed to write script {script_path}: {e}")
        raise ScriptIOError("Failed to write script", script_path, e) from e

    logger.info(f"Generated script: {script_path}")
    return script_path
