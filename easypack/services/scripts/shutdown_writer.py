"""
Shutdown Script Writer

Generates shutdown.sh, which finds the running application by the
`-jar <name>.jar` operand of its command line and sends it SIGTERM.
Only the linux platform is supported.
"""

import re
import shlex

from .base import BaseScriptWriter
from .platform import Platform

_ERE_SPECIAL_CHARS = re.compile(r'([.\[\]()*+?{}|^$\\])')


def escape_ere(text: str) -> str:
    """Escape text so a POSIX extended regex matches it literally."""
    return _ERE_SPECIAL_CHARS.sub(r'\\\1', text)


class ShutdownScriptWriter(BaseScriptWriter):
    """Writes shutdown.sh."""

    script_name = "shutdown"
    supported_platforms = frozenset({Platform.LINUX})

    def process_pattern(self) -> str:
        """
        Extended regex matching the command line started by start.sh.

        The jar must be the whole operand of -jar, so app.jar never matches
        myapp.jar or app.jar.log.
        """
        return f"-jar {escape_ere(self.config.jar_file)}( |$)"

    def render_linux(self) -> str:
        name = self.config.process_name
        lines = [
            "#!/bin/sh",
            Platform.LINUX.comment(f"Shutdown script for {name}, generated by easypack."),
            f"PIDS=$(pgrep -f -- {shlex.quote(self.process_pattern())})",
            'if [ -z "$PIDS" ]; then',
            f"    echo {shlex.quote(f'{name} is not running')}",
            "    exit 0",
            "fi",
            f"echo {shlex.quote(f'Stopping {name}')} \"($PIDS)\"",
            "kill -TERM $PIDS",
        ]
        return Platform.LINUX.join_lines(lines)
