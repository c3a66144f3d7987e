"""
Start Script Writer

Generates the start script launching the application jar:

    java <opts> -jar <name>.jar <args>

preceded by the platform preamble, the echo directives requested by the
echo mode and the pre-start fragment, if any.
"""

import shlex
from typing import List

from .base import BaseScriptWriter
from .models import EchoMode
from .platform import Platform
from .prestart import PreStartMerger


# Characters cmd.exe treats specially outside of double quotes
_BATCH_SPECIAL_CHARS = set(' \t&()[]{}^=;!\'+,`~<>|%')


def quote_batch(token: str) -> str:
    """Double-quote a token for cmd.exe when it contains special characters."""
    if token and not any(ch in _BATCH_SPECIAL_CHARS for ch in token):
        return token
    return f'"{token}"'


class StartScriptWriter(BaseScriptWriter):
    """Writes start.sh / start.bat."""

    script_name = "start"

    def launch_line(self, platform: Platform) -> str:
        """
        Build the java launch line.

        Empty opts or args are left out entirely so the line never carries
        doubled or trailing whitespace.
        """
        jar = self.config.jar_file
        jar = shlex.quote(jar) if platform == Platform.LINUX else quote_batch(jar)

        parts = [self.config.java_command]
        if self.config.opts:
            parts.append(self.config.opts)
        parts.extend(["-jar", jar])
        if self.config.args:
            parts.append(self.config.args)
        return " ".join(parts)

    def _body(self, platform: Platform, echo_line: str) -> List[str]:
        lines = []
        if self.config.echo == EchoMode.ALL and platform == Platform.LINUX:
            lines.append(echo_line)

        lines.extend(PreStartMerger.lines(PreStartMerger.read(self.config.pre_start, platform)))

        # "java" echoes the launch line only, never the pre-start fragment
        if self.config.echo == EchoMode.JAVA:
            lines.append(echo_line)
        lines.append(self.launch_line(platform))
        return lines

    def render_linux(self) -> str:
        lines = [
            "#!/bin/sh",
            Platform.LINUX.comment(f"Start script for {self.config.process_name}, generated by easypack."),
        ]
        lines.extend(self._body(Platform.LINUX, "set -x"))
        return Platform.LINUX.join_lines(lines)

    def render_windows(self) -> str:
        """
        Render start.bat.

        Batch files echo every command by default, so the header is
        "@echo off" unless the echo mode is "all". With no echo mode the
        script therefore still carries "@echo off", and never "@echo on".
        """
        header = "@echo on" if self.config.echo == EchoMode.ALL else "@echo off"
        lines = [
            header,
            Platform.WINDOWS.comment(f"Start script for {self.config.process_name}, generated by easypack."),
        ]
        lines.extend(self._body(Platform.WINDOWS, "@echo on"))
        return Platform.WINDOWS.join_lines(lines)
