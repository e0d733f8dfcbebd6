import logging
import os

from .kernel import Identity, Kernel
from .structure import Personality

logger = logging.getLogger(__name__)


def matches_label(sysname: str, label: str) -> bool:
    """
    Compare sysname against label over len(label) + 1 bytes, terminator
    included, so "Linux" only matches "Linux" and never "Linux2" or "Linu".
    """
    expected = os.fsencode(label) + b"\0"
    observed = os.fsencode(sysname) + b"\0"
    return observed[: len(expected)] == expected


def needs_toggle(sysname: str, label: str) -> bool:
    return not matches_label(sysname, label)


def ensure_identity(kernel: Kernel, current: Identity, personality: Personality) -> bool:
    """
    Make the kernel report `personality` unless `current` already matches it.

    The request is skipped when the identity already matches: the kernel may
    not support it at all, or the personality may already be active.

    Returns:
        bool: True if a request was issued, False if it was skipped.

    Raises:
        ToggleError: If the kernel rejected the request.
    """
    if not needs_toggle(current.sysname, personality.sysname):
        logger.debug(f"sysname is already {personality.sysname!r}, not toggling")
        return False

    logger.debug(f"sysname is {current.sysname!r}, requesting {personality.sysname!r}")
    kernel.request_personality(personality)
    return True
