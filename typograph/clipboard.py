"""System clipboard integration.

Responsibilities:
- Resolve a clipboard command for the current platform, in a fixed order.
- Hand text verbatim to the first command that succeeds.

Clipboard failures never raise: `ClipboardWriter.write` reports them through
its return value and a warning log line.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
import sys

from loguru import logger

_PLATFORM_COMMANDS: dict[str, tuple[tuple[str, ...], ...]] = {
    "darwin": (("pbcopy",),),
    "win32": (("clip",),),
}
_DEFAULT_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
)
_COMMAND_TIMEOUT_SECONDS = 5.0


def candidate_commands(platform: str | None = None) -> tuple[tuple[str, ...], ...]:
    """Return clipboard command lines to try for `platform`, in order."""

    resolved_platform = platform if platform is not None else sys.platform
    return _PLATFORM_COMMANDS.get(resolved_platform, _DEFAULT_COMMANDS)


class ClipboardWriter:
    """Write text to the system clipboard through an external command."""

    def __init__(self, command: str | None = None, platform: str | None = None) -> None:
        """Use an explicit command line, or autodetect one for `platform`.

        A command line that cannot be split leaves no candidates, so `write`
        reports failure instead of raising.
        """

        self._commands: tuple[tuple[str, ...], ...]
        if command is None:
            self._commands = candidate_commands(platform)
            return
        try:
            self._commands = (tuple(shlex.split(command)),)
        except ValueError as exc:
            logger.warning(f"[clipboard] invalid command line: {exc}")
            self._commands = ()

    def write(self, text: str) -> bool:
        """Copy `text` to the clipboard and return whether any command succeeded."""

        for command in self._commands:
            if not command:
                continue
            executable = shutil.which(command[0])
            if executable is None:
                continue
            # Only stdin is piped; wl-copy and xclip leave a forked owner process running.
            try:
                result = subprocess.run(
                    [executable, *command[1:]],
                    input=text.encode("utf-8", errors="surrogatepass"),
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    check=False,
                    timeout=_COMMAND_TIMEOUT_SECONDS,
                )
            except (OSError, subprocess.SubprocessError) as exc:
                logger.warning(f"[clipboard] command={command[0]} error={type(exc).__name__}")
                continue
            if result.returncode == 0:
                return True
            logger.warning(f"[clipboard] command={command[0]} exit_code={result.returncode}")

        logger.warning("[clipboard] no clipboard command succeeded")
        return False
