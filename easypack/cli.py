#!/usr/bin/env python3
"""
Command line adapter for script generation.

Usage:
    easypack --name my-app --opts="-Xmx512m" --args="--port 8080" --shutdown

Scripts are written to <build_directory>/<bin_folder> (target/bin by
default) unless --output is given.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import get_settings
from .services.scripts import PreStart, ScriptConfig, ScriptGenerationError, generate_scripts
from .services.scripts.errors import ConfigurationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="easypack",
        description="Generate start and shutdown scripts for a packaged Java application",
    )
    parser.add_argument("--name", required=True, help="Application final name (process name)")
    parser.add_argument("--jar", default=None, help="Jar base name, defaults to --name")
    parser.add_argument(
        "--output",
        default=None,
        help=f"Destination folder for the scripts (default: {settings.output_folder})",
    )
    parser.add_argument("--opts", default="", help='JVM options, e.g. --opts="-Xmx3G -Dkey=value"')
    parser.add_argument("--args", default="", help="Arguments passed to the application main method")
    parser.add_argument(
        "--platforms",
        default=settings.default_platforms,
        help=f"Comma separated platforms (default: {settings.default_platforms})",
    )
    parser.add_argument(
        "--echo",
        default="",
        help="Echo mode: 'all' echoes the whole start script, 'java' only the java line",
    )
    parser.add_argument("--shutdown", action="store_true", help="Also generate shutdown.sh (linux only)")
    parser.add_argument(
        "--pre-start-dir",
        default="bin",
        help="Directory holding the pre-start fragments (default: bin)",
    )
    parser.add_argument("--pre-start-linux", default="start-linux", help="Linux pre-start fragment name")
    parser.add_argument("--pre-start-windows", default="start-windows", help="Windows pre-start fragment name")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    options = parser.parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, options.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = ScriptConfig(
            process_name=options.name,
            jar_name=options.jar,
            opts=options.opts,
            args=options.args,
            platforms=options.platforms,
            echo=options.echo,
            shutdown=options.shutdown,
            java_command=settings.java_command,
            destination=Path(options.output) if options.output else settings.output_folder,
            pre_start=PreStart(
                linux=options.pre_start_linux or None,
                windows=options.pre_start_windows or None,
                directory=Path(options.pre_start_dir),
            ),
        )
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        written = generate_scripts(config)
    except ScriptGenerationError as e:
        logger.error(str(e))
        return 1

    for path in written:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
