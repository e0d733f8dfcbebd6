# Default values for the personality mocklinux asks the kernel for.
# The prctl channel and subcommand are Maestro-specific.

program_name = "mocklinux"

usage = f"usage: {program_name} <cmd> [args...]"

# prctl option: Maestro-specific subcommands ("MSTR")
PR_MAESTRO = 0x4D535452
# PR_MAESTRO subcommand: pretend to be Linux
PR_MAESTRO_LINUX = 0

# Label uname must report once the personality is active
DEFAULT_SYSNAME = "Linux"

# Activation parameter passed along with PR_MAESTRO_LINUX
DEFAULT_ENABLE = 1
