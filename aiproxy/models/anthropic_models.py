"""
Anthropic /v1/messages bodies.

Only the commonly used fields are typed; anything else the API returns is kept
on the model (extra="allow") so new content block types don't break decoding.
See https://docs.anthropic.com/en/api/messages
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class AnthropicInputMessage(BaseModel):
    role: Literal["user", "assistant"]
    # Plain text, or a list of content blocks (text, image, tool_result, ...)
    content: str | list[dict[str, Any]]


class AnthropicMessageRequestBody(BaseModel):
    """Request body for a message request"""

    model: str
    max_tokens: int = Field(gt=0)
    messages: list[AnthropicInputMessage]
    system: str | None = None
    metadata: dict[str, Any] | None = None
    stop_sequences: list[str] | None = None
    stream: bool | None = None
    temperature: float | None = Field(default=None, ge=0, le=1)
    top_k: int | None = None
    top_p: float | None = None
    tools: list[dict[str, Any]] | None = None
    tool_choice: dict[str, Any] | None = None


class AnthropicContentBlock(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str
    text: str | None = None
    id: str | None = None
    name: str | None = None
    input: dict[str, Any] | None = None


class AnthropicUsage(BaseModel):
    model_config = ConfigDict(extra="allow")

    input_tokens: int
    output_tokens: int


class AnthropicMessageResponseBody(BaseModel):
    """Non-streaming message response"""

    model_config = ConfigDict(extra="allow")

    id: str
    type: str = "message"
    role: str = "assistant"
    model: str
    content: list[AnthropicContentBlock]
    stop_reason: str | None = None
    stop_sequence: str | None = None
    usage: AnthropicUsage

    @property
    def text(self) -> str:
        """Concatenated text of all text blocks"""
        return "".join(block.text or "" for block in self.content if block.type == "text")
