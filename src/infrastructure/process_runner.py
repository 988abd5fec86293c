"""Runner of external command line tools."""

import asyncio
import os
import shlex
import signal
from pathlib import Path

from loguru import logger

from domain.exceptions import BenchmarkRunError, BenchmarkTimeoutError


class ProcessRunner:
    """Runs a tool in a directory and captures its combined output."""

    async def run(
        self, tool: str, work_dir: Path, *args: str, timeout: float | None = None
    ) -> str:
        """
        Run tool and wait for it to finish.

        The tool runs in its own session. When it is still running after
        ``timeout`` seconds, its whole process group is killed, including
        children it started (such as a compiled test binary).

        Returns:
            Combined stdout and stderr

        Raises:
            BenchmarkRunError: If the tool can't be started or exits with an error
            BenchmarkTimeoutError: If the tool runs longer than timeout
        """
        command = shlex.join([tool, *args])
        logger.debug(f"Running '{command}' in {work_dir}")

        try:
            proc = await asyncio.create_subprocess_exec(
                tool,
                *args,
                cwd=work_dir,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
                start_new_session=True,
            )
        except OSError as e:
            raise BenchmarkRunError(command, str(e)) from e

        try:
            stdout_bytes, _ = await asyncio.wait_for(proc.communicate(), timeout=timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"'{command}' timed out after {timeout}s, killing group {proc.pid}")
            _kill_group(proc.pid)
            await proc.wait()
            raise BenchmarkTimeoutError(command, timeout) from e

        output = stdout_bytes.decode("utf-8", errors="replace")
        if proc.returncode != 0:
            raise BenchmarkRunError(command, f"exit status {proc.returncode}", output)
        return output


def _kill_group(pgid: int) -> None:
    try:
        os.killpg(pgid, signal.SIGKILL)
    except ProcessLookupError:
        pass
