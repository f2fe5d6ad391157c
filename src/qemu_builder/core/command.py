"""External command execution."""

import asyncio
import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from ..exceptions import CommandError

logger = logging.getLogger(__name__)


def _merge_env(env: Optional[Mapping[str, str]]) -> Optional[dict[str, str]]:
    if not env:
        return None
    merged = dict(os.environ)
    merged.update({str(key): str(value) for key, value in env.items()})
    return merged


async def execute(
    *args: Union[str, Path],
    env: Optional[Mapping[str, str]] = None,
    cwd: Optional[Union[str, Path]] = None,
) -> None:
    """Run a command and wait for it to finish.

    Output is inherited from the current process.

    Args:
        *args: Command and its arguments
        env: Extra environment variables, merged over ``os.environ``
        cwd: Working directory for the command

    Raises:
        CommandError: If the command exits with a non-zero status
    """
    command = [str(arg) for arg in args]
    logger.info(f"$ {' '.join(command)}")

    process = await asyncio.create_subprocess_exec(
        *command, env=_merge_env(env), cwd=cwd
    )
    returncode = await process.wait()
    if returncode != 0:
        raise CommandError(command, returncode)


async def capture(
    *args: Union[str, Path],
    env: Optional[Mapping[str, str]] = None,
    cwd: Optional[Union[str, Path]] = None,
) -> str:
    """Run a command and return its standard output.

    Args:
        *args: Command and its arguments
        env: Extra environment variables, merged over ``os.environ``
        cwd: Working directory for the command

    Returns:
        Decoded standard output with surrounding whitespace stripped

    Raises:
        CommandError: If the command exits with a non-zero status
    """
    command = [str(arg) for arg in args]
    logger.debug(f"$ {' '.join(command)}")

    process = await asyncio.create_subprocess_exec(
        *command,
        env=_merge_env(env),
        cwd=cwd,
        stdout=asyncio.subprocess.PIPE,
    )
    stdout, _ = await process.communicate()
    if process.returncode != 0:
        raise CommandError(command, process.returncode)
    return stdout.decode("utf-8").strip()
