# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description: Executors running rendered commands in a shell
"""

import os
import signal
import asyncio
import subprocess
from typing import Callable, Optional
from loguru import logger

from cmdbuilder.config import CommandConfig, DEFAULT_ENCODING, DEFAULT_TIMEOUT


def kill_process_group(process):
    """Kill the shell and every process it started, they share one session"""
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        # Already exited
        pass


class Executor:
    """Runs a command string and hands back its output"""

    def run_blocking(self, command: str) -> str:
        """
        Run the command and wait for it

        Args:
            command: The command to execute

        Returns:
            The command output
        """
        raise NotImplementedError

    def run_non_blocking(self, command: str, on_complete: Callable[[str], None]) -> "asyncio.Task":
        """
        Schedule the command on the running event loop

        Args:
            command: The command to execute
            on_complete: Called with the command output once it is available

        Returns:
            The scheduled task
        """
        raise NotImplementedError


class ShellExecutor(Executor):
    """Shell executor based on subprocess and asyncio subprocesses"""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, encoding: str = DEFAULT_ENCODING,
                 cwd: Optional[str] = None):
        self.timeout = timeout
        self.encoding = encoding
        self.cwd = cwd

    @classmethod
    def from_config(cls, config: CommandConfig) -> "ShellExecutor":
        return cls(timeout=config.timeout, encoding=config.encoding, cwd=config.cwd)

    def _decode(self, command: str, exit_code: int, stdout: bytes, stderr: bytes) -> str:
        stdout_text = stdout.decode(self.encoding, errors='replace')
        if exit_code != 0:
            stderr_text = stderr.decode(self.encoding, errors='replace')
            logger.warning(f"Command `{command}` exited with code {exit_code}: {stderr_text.strip()}")
        logger.debug(f"Command output: \n```{stdout_text}```")
        return stdout_text

    def run_blocking(self, command: str) -> str:
        logger.info(f"Executing command: `{command}`")
        try:
            process = subprocess.Popen(
                command,
                shell=True,
                cwd=self.cwd,
                start_new_session=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE
            )
        except OSError as e:
            logger.error(f"Error executing command: {str(e)}")
            return ""

        try:
            stdout, stderr = process.communicate(timeout=self.timeout)
        except subprocess.TimeoutExpired:
            kill_process_group(process)
            process.communicate()
            logger.error(f"Command execution timed out after {self.timeout} seconds: `{command}`")
            return ""
        return self._decode(command, process.returncode, stdout, stderr)

    async def _run(self, command: str) -> str:
        logger.info(f"Executing command in background: `{command}`")
        try:
            process = await asyncio.create_subprocess_shell(
                command,
                cwd=self.cwd,
                start_new_session=True,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE
            )
        except OSError as e:
            logger.error(f"Error executing command: {str(e)}")
            return ""

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            kill_process_group(process)
            await process.wait()
            logger.error(f"Command execution timed out after {self.timeout} seconds: `{command}`")
            return ""
        return self._decode(command, process.returncode, stdout, stderr)

    def run_non_blocking(self, command: str, on_complete: Callable[[str], None]) -> "asyncio.Task":
        async def run_and_notify():
            output = await self._run(command)
            on_complete(output)
            return output

        # Needs a running loop, like asyncio.create_task itself
        loop = asyncio.get_running_loop()
        return loop.create_task(run_and_notify())
