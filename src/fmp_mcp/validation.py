"""Tool argument validation and normalization."""

from typing import Any

import jsonschema

from fmp_mcp.errors import ValidationError
from fmp_mcp.logging import get_logger
from fmp_mcp.tools.base import ToolDefinition

logger = get_logger(__name__)


def validate_tool_arguments(tool: ToolDefinition, arguments: dict[str, Any] | None) -> dict[str, Any]:
    """Validate arguments against the tool's JSON schema and normalize them.

    Args:
        tool: Definition of the tool being called
        arguments: Raw arguments as received from the host; keys the tool
            does not declare are ignored

    Returns:
        One entry per declared argument: the supplied value, or the declared
        default (None when there is none), upper-cased where declared

    Raises:
        ValidationError: If a required argument is missing or a value has
            the wrong type or is outside its enum
    """
    arguments = {} if arguments is None else arguments
    try:
        jsonschema.validate(
            instance=arguments,
            schema=tool.input_schema(),
            cls=jsonschema.Draft202012Validator,
        )
    except jsonschema.ValidationError as e:
        logger.warning("tool_arguments_invalid", reason=e.message)
        raise ValidationError(f"Invalid arguments: {e.message}") from e

    validated: dict[str, Any] = {}
    for arg in tool.arguments:
        value = arguments.get(arg.name, arg.default)
        if arg.type == "integer" and value is not None:
            # 2020-12 accepts 5.0 as an integer; FMP wants "5"
            value = int(value)
        if arg.uppercase and isinstance(value, str):
            value = value.upper()
        validated[arg.name] = value
    return validated
