from typing import Annotated

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .defaults import DEFAULT_ENABLE, DEFAULT_SYSNAME, PR_MAESTRO, PR_MAESTRO_LINUX


class Personality(BaseModel):
    """Kernel personality the wrapped command should observe"""

    model_config = ConfigDict(title="Target personality", extra="forbid", frozen=True)

    sysname: Annotated[
        str,
        Field(
            title="System name",
            description="Value uname reports as sysname once the personality is active.",
            min_length=1,
            examples=["Linux"],
        ),
    ] = DEFAULT_SYSNAME
    option: Annotated[
        int,
        Field(
            title="prctl option",
            description="Vendor-specific prctl option selecting the personality control channel.",
            ge=0,
            examples=[PR_MAESTRO],
        ),
    ] = PR_MAESTRO
    subcommand: Annotated[
        int,
        Field(
            title="prctl subcommand",
            description="Subcommand of the control channel meaning 'adopt this identity'.",
            ge=0,
        ),
    ] = PR_MAESTRO_LINUX
    enable: Annotated[
        int,
        Field(title="Activation parameter", ge=0, examples=[1]),
    ] = DEFAULT_ENABLE


DEFAULT_PERSONALITY = Personality()
