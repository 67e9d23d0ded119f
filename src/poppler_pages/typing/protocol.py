"""Process execution interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from poppler_pages.typing.models import ProcessResult


class ProcessRunner(Protocol):
    """Runs one external command with piped input and captured output."""

    async def run(self, executable: str, args: Sequence[str], input_data: bytes) -> ProcessResult:
        """Run `executable` with `args`, feeding `input_data` on stdin.

        Args:
            executable: Executable path or name.
            args: Command-line arguments.
            input_data: Bytes written to the process stdin before it is closed.

        Returns:
            ProcessResult: Captured stdout, stderr and exit status.
        """


class ExecutableResolver(Protocol):
    """Maps a tool name to the executable to spawn."""

    def __call__(self, tool: str) -> str:
        """Return the executable path for `tool`.

        Args:
            tool: Bare tool name, e.g. `pdftoppm`.

        Returns:
            str: Executable path or name.
        """
