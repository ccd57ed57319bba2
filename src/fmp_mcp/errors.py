"""Error taxonomy for tool calls.

Every error is caught at the dispatcher and turned into an error-flagged
tool result; none of them is allowed to reach the host transport.
"""


class FMPError(Exception):
    """Base class for errors raised while serving a tool call."""


class ConfigError(FMPError):
    """Required configuration (the API key) is missing."""


class ValidationError(FMPError):
    """Tool arguments do not match the tool's argument schema."""


class UpstreamError(FMPError):
    """The FMP API answered with a non-2xx status."""

    def __init__(self, status: int, status_text: str, body: str = ""):
        self.status = status
        self.status_text = status_text
        self.body = body
        super().__init__(f"FMP API error: {status} {status_text}")


class ShapingError(FMPError):
    """A 2xx payload did not have the shape the tool expects."""
