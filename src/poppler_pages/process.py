"""External process invocation for poppler tools."""

from __future__ import annotations

import asyncio
import sys
from pathlib import PurePosixPath, PureWindowsPath
from typing import TYPE_CHECKING

from poppler_pages.exceptions import IoFailureError, SpawnFailureError
from poppler_pages.logging import get_logger
from poppler_pages.typing.models import ProcessResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from poppler_pages.typing.enums import PopplerTool
    from poppler_pages.typing.protocol import ExecutableResolver, ProcessRunner

logger = get_logger(__name__)

_PIPE_ERRORS = (BrokenPipeError, ConnectionResetError)


def make_executable_resolver(
    poppler_path: str | None = None,
    *,
    platform: str = sys.platform,
) -> ExecutableResolver:
    """Build a resolver mapping tool names to executables.

    Args:
        poppler_path: Directory holding the poppler executables. `None` leaves
            lookup to the `PATH` search of the OS.
        platform: Platform identifier deciding the executable suffix.

    Returns:
        ExecutableResolver: Resolver function.
    """
    suffix = ".exe" if platform.startswith("win") else ""

    def _resolve(tool: str) -> str:
        name = f"{tool}{suffix}"
        if not poppler_path:
            return name
        if platform.startswith("win"):
            return str(PureWindowsPath(poppler_path) / name)
        return str(PurePosixPath(poppler_path) / name)

    return _resolve


class SubprocessRunner:
    """`ProcessRunner` spawning real processes on the asyncio event loop."""

    async def run(self, executable: str, args: Sequence[str], input_data: bytes) -> ProcessResult:
        """Spawn `executable`, stream `input_data` to stdin and collect its output.

        A non-zero exit status is not an error here: the captured output is
        returned and left to the caller to interpret.

        Args:
            executable: Executable path or name.
            args: Command-line arguments.
            input_data: Bytes written to stdin before it is closed.

        Raises:
            SpawnFailureError: If the process cannot be started.
            IoFailureError: If writing to stdin or reading its output fails.

        Returns:
            ProcessResult: Captured output and exit status.
        """
        try:
            process = await asyncio.create_subprocess_exec(
                executable,
                *args,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise SpawnFailureError(executable=executable, exc=exc) from exc

        try:
            _, stdout, stderr = await asyncio.gather(
                self._feed_stdin(process, input_data),
                self._read_stream(process.stdout),
                self._read_stream(process.stderr),
            )
        except OSError as exc:
            await process.wait()
            raise IoFailureError(executable=executable, exc=exc) from exc

        returncode = await process.wait()
        if returncode != 0:
            logger.warning(
                "Process exited with non-zero status",
                extra={
                    "executable": executable,
                    "returncode": returncode,
                    "stderr": stderr.decode("utf-8", errors="replace").strip(),
                },
            )
        return ProcessResult(stdout=stdout, stderr=stderr, returncode=returncode)

    @staticmethod
    async def _feed_stdin(process: asyncio.subprocess.Process, input_data: bytes) -> None:
        stdin = process.stdin
        if stdin is None:
            raise BrokenPipeError("stdin pipe is not available")
        try:
            stdin.write(input_data)
            await stdin.drain()
        finally:
            stdin.close()
            try:
                await stdin.wait_closed()
            except _PIPE_ERRORS:
                logger.debug("stdin already closed by child process")

    @staticmethod
    async def _read_stream(stream: asyncio.StreamReader | None) -> bytes:
        if stream is None:
            return b""
        return await stream.read()


class ProcessInvoker:
    """Resolves poppler tools and runs them through a `ProcessRunner`."""

    def __init__(
        self,
        runner: ProcessRunner | None = None,
        resolver: ExecutableResolver | None = None,
    ) -> None:
        """Initialize the invoker.

        Args:
            runner: Process runner. Defaults to `SubprocessRunner`.
            resolver: Tool name resolver. Defaults to plain `PATH` lookup.
        """
        self._runner = runner or SubprocessRunner()
        self._resolver = resolver or make_executable_resolver()

    @property
    def resolver(self) -> ExecutableResolver:
        """Return the executable resolver."""
        return self._resolver

    async def invoke(self, tool: PopplerTool, args: Sequence[str], input_data: bytes) -> bytes:
        """Run `tool` with `args` over `input_data` and return its stdout.

        Args:
            tool: Poppler tool to run.
            args: Command-line arguments.
            input_data: Document bytes fed on stdin.

        Returns:
            bytes: Captured stdout, possibly empty when the tool failed.
        """
        executable = self._resolver(tool.value)
        logger.debug(
            "Spawning poppler process",
            extra={"executable": executable, "args": list(args), "input_bytes": len(input_data)},
        )
        result = await self._runner.run(executable, list(args), input_data)
        return result.stdout

