"""
mocklinux CLI
=============

Executes a command, making the Maestro kernel pass as Linux.

Example usage
-------------

.. code-block:: bash

    mocklinux uname -s

Everything after the program name is forwarded verbatim to the command,
options and ``--`` included, so ``mocklinux ls --help`` runs ``ls --help``
and ``mocklinux -- ls`` tries to run a command named ``--``.
"""

import logging
from enum import Enum
from typing import NoReturn, Optional, Sequence

import click

from .errors import MocklinuxError, UsageError
from .kernel import Kernel, LinuxKernel
from .personality import ensure_identity
from .structure import DEFAULT_PERSONALITY, Personality
from .transfer import transfer

logger = logging.getLogger(__name__)


class Stage(Enum):
    START = "start"
    IDENTITY_KNOWN = "identity known"
    IDENTITY_TOGGLED = "identity toggled"
    IDENTITY_SKIPPED = "identity skipped"
    TRANSFERRED = "transferred"


def run(
    argv: Sequence[str],
    kernel: Kernel,
    personality: Optional[Personality] = None,
) -> NoReturn:
    """
    Probe the kernel identity, toggle the personality if needed, then exec
    argv[0] with argv as its argument vector. Never returns on success.
    """
    personality = personality or DEFAULT_PERSONALITY
    logger.debug(f"stage: {Stage.START.value}")
    if not argv:
        raise UsageError()

    identity = kernel.query_identity()
    logger.debug(f"stage: {Stage.IDENTITY_KNOWN.value}")

    if ensure_identity(kernel, identity, personality):
        logger.debug(f"stage: {Stage.IDENTITY_TOGGLED.value}")
    else:
        logger.debug(f"stage: {Stage.IDENTITY_SKIPPED.value}")

    logger.debug(f"stage: {Stage.TRANSFERRED.value}")
    transfer(argv[0], argv)


class PassthroughCommand(click.Command):
    """
    Command taking its whole argument list verbatim, ``--`` and options
    included: nothing is interpreted before the target command.
    """

    def parse_args(self, ctx, args):
        ctx.params["argv"] = tuple(args)
        return []


@click.command(cls=PassthroughCommand, context_settings=dict(help_option_names=[]))
@click.pass_context
def main(ctx, argv):
    """
    Run a command with the kernel reporting itself as Linux.
    """
    obj = ctx.obj or {}
    kernel = obj.get("kernel") or LinuxKernel()
    personality = obj.get("personality")

    try:
        run(list(argv), kernel, personality)
    except MocklinuxError as e:
        click.echo(str(e), err=True)
        ctx.exit(1)


if __name__ == "__main__":
    main()
