"""Declarative building blocks for FMP tool definitions.

A tool is pure data: its arguments, the endpoint they are sent to, and a
shape callable that reduces the raw JSON to the tool's output schema. The
dispatcher is the only code that acts on these definitions.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import mcp.types as types

from fmp_mcp.errors import ShapingError

# Each field is (output_key, source_key); they differ only where FMP's key is renamed.
FieldMap = tuple[tuple[str, str], ...]

SYMBOL_HELP = "Stock ticker symbol (e.g., AAPL, MSFT, GOOGL)"


def fields(*names: str, **renamed: str) -> FieldMap:
    """Build a field allow-list; keyword arguments map output key to source key."""
    pairs = [(name, name) for name in names]
    pairs.extend(renamed.items())
    return tuple(pairs)


@dataclass(frozen=True)
class Argument:
    """One declared tool argument."""

    name: str
    type: str
    description: str
    required: bool = False
    default: Any = None
    enum: tuple[str, ...] | None = None
    # Upper-case ticker-like values before use
    uppercase: bool = False
    # Substituted into the endpoint path instead of being sent as a query parameter
    in_path: bool = False

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.default is not None:
            schema["default"] = self.default
        return schema


def symbol_arg(description: str = SYMBOL_HELP, uppercase: bool = True) -> Argument:
    return Argument("symbol", "string", description, required=True, uppercase=uppercase)


def _records(raw: Any) -> list[Any]:
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict):
        return [raw]
    raise ShapingError(f"Unexpected payload type: {type(raw).__name__}")


def _project(record: Any, field_map: FieldMap) -> dict[str, Any]:
    if not isinstance(record, dict):
        raise ShapingError(f"Unexpected record type: {type(record).__name__}")
    return {out: record.get(src) for out, src in field_map}


@dataclass(frozen=True)
class Single:
    """First record, projected onto an allow-list of fields."""

    field_map: FieldMap

    def __call__(self, raw: Any) -> dict[str, Any] | None:
        records = _records(raw)
        return _project(records[0], self.field_map) if records else None


@dataclass(frozen=True)
class Collection:
    """Every record (up to ``max_items``, in provider order), projected."""

    field_map: FieldMap
    max_items: int | None = None

    def __call__(self, raw: Any) -> list[dict[str, Any]]:
        records = _records(raw)
        if self.max_items is not None:
            records = records[: self.max_items]
        return [_project(record, self.field_map) for record in records]


@dataclass(frozen=True)
class FirstRecord:
    """First record exactly as FMP returned it."""

    def __call__(self, raw: Any) -> Any:
        records = _records(raw)
        return records[0] if records else None


@dataclass(frozen=True)
class AllRecords:
    """The whole payload exactly as FMP returned it."""

    def __call__(self, raw: Any) -> Any:
        _records(raw)
        return raw


@dataclass(frozen=True)
class ToolDefinition:
    """Immutable description of one MCP tool backed by one FMP endpoint."""

    name: str
    description: str
    endpoint: str
    arguments: tuple[Argument, ...]
    shape: Callable[[Any], Any]
    # What the tool fetches, e.g. "company profile"
    label: str
    # Informational text for an empty result; formatted with the raw arguments
    empty_message: str
    # Failure prefix when it is not "Error fetching <label>"
    operation: str = ""
    restricted_message: str = ""

    @property
    def failure_prefix(self) -> str:
        return self.operation or f"Error fetching {self.label}"

    def input_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {arg.name: arg.json_schema() for arg in self.arguments},
            "required": [arg.name for arg in self.arguments if arg.required],
        }

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )

    def endpoint_path(self, args: dict[str, Any]) -> str:
        path_args = {arg.name: args[arg.name] for arg in self.arguments if arg.in_path}
        return self.endpoint.format(**path_args)

    def build_params(self, args: dict[str, Any]) -> dict[str, Any]:
        """Map validated arguments (defaults already applied) to query parameters.

        Required arguments are always sent. An optional argument is sent only
        when it has a non-empty value, so a declared default always travels
        upstream and an omitted date bound never does.
        """
        params: dict[str, Any] = {}
        for arg in self.arguments:
            if arg.in_path:
                continue
            value = args.get(arg.name)
            if not arg.required and (value is None or value == ""):
                continue
            params[arg.name] = value
        return params

    def empty_text(self, raw_args: dict[str, Any]) -> str:
        return self.empty_message.format(**raw_args)

    def restricted_text(self) -> str:
        if self.restricted_message:
            return self.restricted_message
        return f"{self.label[:1].upper()}{self.label[1:]} data requires a paid FMP subscription."
