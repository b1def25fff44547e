"""MCP models: JSON-RPC 2.0 messages and tool definitions.

Implements the message format used by the Model Context Protocol for
tool discovery (``tools/list``) and execution (``tools/call``) over HTTP.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message."""

    jsonrpc: str = "2.0"
    method: str
    id: int = 1
    params: dict[str, Any] | None = None

    def to_wire(self) -> dict[str, Any]:
        """Serialise for the HTTP body; ``params`` is omitted when unset."""
        return self.model_dump(exclude_none=True)


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object.

    Servers are loose here: codes may be strings and messages may be
    missing, so both are accepted as sent.
    """

    code: int | str | None = None
    message: str | None = None
    data: Any = None

    @field_validator("message", mode="before")
    @classmethod
    def _coerce_message(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: Any) -> Any:
        if value is None or isinstance(value, (int, str)):
            return value
        return str(value)


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message.

    ``error`` wins whenever it is present; otherwise ``result`` must have
    been supplied.  ``result`` may legitimately be ``null``, so presence is
    judged from the fields that were actually sent rather than their values.
    """

    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: Any = None
    error: JsonRpcError | None = None

    @field_validator("error", mode="before")
    @classmethod
    def _wrap_bare_error(cls, value: Any) -> Any:
        if value is None or isinstance(value, (dict, JsonRpcError)):
            return value
        # e.g. "error": "Unauthorized"
        return {"message": value if isinstance(value, str) else None, "data": value}

    @model_validator(mode="after")
    def _has_outcome(self) -> JsonRpcResponse:
        if self.error is None and "result" not in self.model_fields_set:
            msg = "response carries neither 'result' nor 'error'"
            raise ValueError(msg)
        return self


# ---------------------------------------------------------------------------
# Tool descriptors
# ---------------------------------------------------------------------------


class ToolProperty(BaseModel):
    """One entry of a tool's ``inputSchema.properties`` mapping.

    Only the declared ``type`` matters to the matcher; any other schema
    keywords (``description``, ``enum``...) are kept as extras.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    type: Any = None

    @property
    def kind(self) -> Literal["string", "other"]:
        return "string" if self.type == "string" else "other"


class ToolInputSchema(BaseModel):
    """The argument schema advertised for a tool.

    ``properties`` keeps declaration order; the matcher relies on it.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = "object"
    properties: dict[str, ToolProperty] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)

    @field_validator("properties", mode="before")
    @classmethod
    def _coerce_properties(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return {}
        return {k: v if isinstance(v, dict) else {} for k, v in value.items()}

    @field_validator("required", mode="before")
    @classmethod
    def _coerce_required(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return []
        return [name for name in value if isinstance(name, str)]

    def string_properties(self) -> list[str]:
        """Names of string-typed properties, in declaration order."""
        return [name for name, prop in self.properties.items() if prop.kind == "string"]


class ToolDescriptor(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    description: str = ""
    input_schema: ToolInputSchema = Field(default_factory=ToolInputSchema, alias="inputSchema")

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("input_schema", mode="before")
    @classmethod
    def _coerce_input_schema(cls, value: Any) -> Any:
        if isinstance(value, (dict, ToolInputSchema)):
            return value
        return {}

    @property
    def spaced_name(self) -> str:
        """The name as a user would type it: underscores become spaces."""
        return self.name.replace("_", " ").lower()

    @property
    def required(self) -> list[str]:
        return list(self.input_schema.required)


# ---------------------------------------------------------------------------
# Tool call results
# ---------------------------------------------------------------------------


class ToolContent(BaseModel):
    """A single content fragment of a ``tools/call`` result."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: str = "text"
    text: str | None = None
    data: str | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")

    @property
    def display_text(self) -> str:
        """Text for rendering; binary payloads become a placeholder, never decoded."""
        if self.text:
            return self.text
        if self.data:
            return f"[Binary data: {self.mime_type}]"
        return ""


class ToolCallResult(BaseModel):
    """The ``result`` payload of a ``tools/call`` response."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    content: list[ToolContent] = Field(default_factory=list)
    is_error: bool = Field(default=False, alias="isError")

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_content(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("is_error", mode="before")
    @classmethod
    def _coerce_is_error(cls, value: Any) -> Any:
        return bool(value)

    @property
    def text(self) -> str:
        """Concatenate non-empty fragments with newlines."""
        return "\n".join(part.display_text for part in self.content if part.display_text)

    @property
    def first_text(self) -> str:
        """Text of the first fragment, used as the error detail."""
        if not self.content:
            return ""
        return self.content[0].text or ""
