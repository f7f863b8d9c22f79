"""
Stack output helpers.

Writes resolved stack outputs to a dotenv file so local tooling can reach
the deployed endpoints without querying the Pulumi state.
"""

import re
from pathlib import Path
from typing import Any

import pulumi

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def env_key(output_name: str) -> str:
    """
    Convert a stack output name to an environment variable name.

    Args:
        output_name: camelCase or snake_case output name

    Returns:
        UPPER_SNAKE_CASE variable name
    """
    return _CAMEL_BOUNDARY.sub("_", output_name).upper()


def format_env(values: dict[str, Any]) -> str:
    """Render resolved outputs as dotenv lines."""
    return "".join(f"{env_key(key)}={value}\n" for key, value in values.items())


def write_outputs_to_env(
    outputs: dict[str, pulumi.Input[Any]],
    filename: str,
) -> pulumi.Output[str | None]:
    """
    Write stack outputs to a dotenv file once they resolve.

    Nothing is written during preview, where outputs are not yet known.

    Args:
        outputs: Output name to value mapping, as exported from the stack
        filename: Destination file path

    Returns:
        Output resolving to the written path, or None during preview
    """
    if pulumi.runtime.is_dry_run():
        return pulumi.Output.from_input(None)

    def _write(values: dict[str, Any]) -> str:
        path = Path(filename)
        path.write_text(format_env(values))
        pulumi.log.info(f"Wrote {len(values)} stack outputs to {path}")
        return str(path)

    return pulumi.Output.all(**outputs).apply(_write)
