import errno
import logging
import os
import sys
from typing import NoReturn, Sequence

from .common import flush_loggers
from .errors import ExecError

logger = logging.getLogger(__name__)


def transfer(command: str, args: Sequence[str]) -> NoReturn:
    """
    Replace the current process image with `command`.

    `args` becomes the new argument vector (args[0] is conventionally the
    command itself) and the environment is inherited unchanged. `command` is
    searched in PATH when it contains no slash.

    On success this never returns and nothing else runs in this process:
    open files are not closed and buffers not flushed unless done here, so
    stdio and log handlers are flushed before the call.

    Raises:
        ExecError: If the command could not be executed.
    """
    logger.debug(f"exec {command} {list(args)}")
    flush_loggers("mocklinux")
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()

    try:
        os.execvp(command, list(args))
    except OSError as e:
        raise ExecError.from_os_error(e) from e
    except ValueError as e:
        # Empty or NUL-containing arguments never reach execve; an empty
        # command is reported the way execvp(3) reports it
        if not command:
            raise ExecError(os.strerror(errno.ENOENT)) from e
        raise ExecError(str(e)) from e
    # execvp never returns on success
    raise ExecError(f"{command} returned from exec")
