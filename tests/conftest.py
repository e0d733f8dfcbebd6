import errno
import logging
import os

import pytest

from mocklinux.errors import QueryError, ToggleError
from mocklinux.kernel import Identity, Kernel


class FakeKernel(Kernel):
    """
    Kernel double: reports a configurable sysname and records requests.
    `query_errno` / `toggle_errno` make the matching operation fail.
    """

    def __init__(self, sysname="Maestro", query_errno=None, toggle_errno=None, events=None):
        self.sysname = sysname
        self.query_errno = query_errno
        self.toggle_errno = toggle_errno
        self.queries = 0
        self.requests = []
        self.events = events if events is not None else []

    def query_identity(self):
        self.queries += 1
        self.events.append("uname")
        if self.query_errno is not None:
            raise QueryError(os.strerror(self.query_errno))
        return Identity(sysname=self.sysname, release="0.1.0", machine="x86_64")

    def request_personality(self, personality):
        self.requests.append(personality)
        self.events.append("prctl")
        if self.toggle_errno is not None:
            raise ToggleError(os.strerror(self.toggle_errno))
        # A successful request changes what uname reports from now on
        self.sysname = personality.sysname


class Transferred(Exception):
    """Raised by the fake execvp in place of replacing the process."""

    def __init__(self, command, args):
        super().__init__(command, args)
        self.command = command
        self.args = args


class RecordingHandler(logging.Handler):
    def __init__(self, records):
        super().__init__()
        self.records = records

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def records():
    """Log records reaching the mocklinux package logger."""
    collected = []
    handler = RecordingHandler(collected)
    logger = logging.getLogger("mocklinux")
    logger.addHandler(handler)
    yield collected
    logger.removeHandler(handler)


@pytest.fixture
def events():
    return []


@pytest.fixture
def fake_execvp(monkeypatch, events):
    calls = []

    def execvp(command, args):
        calls.append((command, list(args)))
        events.append("exec")
        raise Transferred(command, list(args))

    monkeypatch.setattr(os, "execvp", execvp)
    return calls


@pytest.fixture
def failing_execvp(monkeypatch, events):
    calls = []

    def execvp(command, args):
        calls.append((command, list(args)))
        events.append("exec")
        raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), command)

    monkeypatch.setattr(os, "execvp", execvp)
    return calls


@pytest.fixture
def maestro(events):
    return FakeKernel("Maestro", events=events)


@pytest.fixture
def linux(events):
    return FakeKernel("Linux", events=events)
