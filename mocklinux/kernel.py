"""
# Kernel capability

Everything mocklinux needs from the kernel goes through `Kernel`:

- `query_identity()` reads the identity uname reports to this process.
- `request_personality()` asks the kernel to report another identity to this
  process and its descendants.

`LinuxKernel` is the real implementation. It reads uname through `os.uname`
and sends the personality request with libc's `prctl` through `ctypes`.
"""

import ctypes
import ctypes.util
import errno
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .errors import QueryError, ToggleError
from .structure import Personality

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """
    Snapshot of the uname fields reported to the calling process.

    **Attributes**
    - `sysname` (`str`): System name, the field personalities change.
    - `nodename` (`str`): Node name.
    - `release` (`str`): Kernel release string.
    - `version` (`str`): Kernel version string.
    - `machine` (`str`): Machine architecture.
    """

    sysname: str
    nodename: str = ""
    release: str = ""
    version: str = ""
    machine: str = ""

    @classmethod
    def from_uname(cls, result) -> "Identity":
        return cls(
            sysname=result.sysname,
            nodename=result.nodename,
            release=result.release,
            version=result.version,
            machine=result.machine,
        )


class Kernel(ABC):
    @abstractmethod
    def query_identity(self) -> Identity:
        """
        Return the identity currently reported to this process.

        Raises:
            QueryError: If the kernel could not be queried.
        """

    @abstractmethod
    def request_personality(self, personality: Personality) -> None:
        """
        Ask the kernel to report `personality` from now on.

        Raises:
            ToggleError: If the kernel rejects or does not support the request.
        """


class LinuxKernel(Kernel):
    def __init__(self, libc_name=None):
        self.libc_name = libc_name
        self._prctl = None

    def query_identity(self) -> Identity:
        try:
            result = os.uname()
        except OSError as e:
            raise QueryError.from_os_error(e) from e
        identity = Identity.from_uname(result)
        logger.debug(f"uname reports sysname={identity.sysname!r} release={identity.release!r}")
        return identity

    def _load_prctl(self):
        if self._prctl is not None:
            return self._prctl

        name = self.libc_name or ctypes.util.find_library("c")
        try:
            libc = ctypes.CDLL(name, use_errno=True)
            prctl = libc.prctl
        except (OSError, AttributeError) as e:
            logger.debug(f"prctl unavailable from {name}: {e}")
            raise ToggleError(os.strerror(errno.ENOSYS)) from e

        # glibc declares prctl as variadic; every argument is passed as a word
        prctl.argtypes = [
            ctypes.c_int,
            ctypes.c_ulong,
            ctypes.c_ulong,
            ctypes.c_ulong,
            ctypes.c_ulong,
        ]
        prctl.restype = ctypes.c_int
        self._prctl = prctl
        return prctl

    def request_personality(self, personality: Personality) -> None:
        prctl = self._load_prctl()
        logger.debug(
            f"prctl({personality.option:#x}, {personality.subcommand}, {personality.enable})"
        )
        res = prctl(personality.option, personality.subcommand, personality.enable, 0, 0)
        if res < 0:
            raise ToggleError(os.strerror(ctypes.get_errno()))
