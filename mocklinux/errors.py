"""
Failures that abort mocklinux before the target command runs.

None of them is recoverable: the CLI reports the error once on stderr and
exits with status 1.
"""

from .defaults import program_name, usage


class MocklinuxError(Exception):
    """
    Base class for mocklinux failures.

    ``operation`` names the system call that failed and ``reason`` carries the
    system error text. ``str()`` renders the line printed on stderr.
    """

    operation = None

    def __init__(self, reason=None):
        super().__init__(reason)
        self.reason = reason

    @classmethod
    def from_os_error(cls, err: OSError):
        return cls(err.strerror or str(err))

    def __str__(self):
        return f"{program_name}: {self.operation}: error: {self.reason}"


class UsageError(MocklinuxError):
    """No command was given."""

    def __str__(self):
        return usage


class QueryError(MocklinuxError):
    """The kernel identity could not be queried."""

    operation = "uname"


class ToggleError(MocklinuxError):
    """The kernel rejected or does not support the personality request."""

    operation = "prctl"


class ExecError(MocklinuxError):
    """The target command could not be executed."""

    operation = "exec"
