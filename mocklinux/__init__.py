from os.path import dirname, join

from .common import getColoredLogger
from .errors import ExecError, MocklinuxError, QueryError, ToggleError, UsageError
from .kernel import Identity, Kernel, LinuxKernel
from .personality import ensure_identity, matches_label, needs_toggle
from .structure import DEFAULT_PERSONALITY, Personality
from .transfer import transfer

logger = getColoredLogger("mocklinux")

VERSION = open(join(dirname(__file__), "version.txt")).read().strip()

__all__ = [
    'DEFAULT_PERSONALITY',
    'ExecError',
    'Identity',
    'Kernel',
    'LinuxKernel',
    'MocklinuxError',
    'Personality',
    'QueryError',
    'ToggleError',
    'UsageError',

    'ensure_identity',
    'getColoredLogger',
    'matches_label',
    'needs_toggle',
    'transfer',
]
