from typing import List, Optional, Union, Literal

from pydantic import BaseModel, ConfigDict, Field

# Only user turns are sent; there is no conversation memory
Role = Literal["user"]

# ------------------------------------------------------------------
# Request envelope
# ------------------------------------------------------------------
class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str

class ChatRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    model: str
    messages: List[Message] = Field(min_length=1)
    max_tokens: int = Field(gt=0)

# ------------------------------------------------------------------
# Response envelopes
# ------------------------------------------------------------------
class ContentBlock(BaseModel):
    text: str

class ChatResponse(BaseModel):
    """Successful reply. Fields other than ``content`` are ignored."""
    content: List[ContentBlock]

class ErrorDetail(BaseModel):
    type: str
    message: str

class ErrorResponse(BaseModel):
    type: str
    error: ErrorDetail

# ------------------------------------------------------------------
# Turn outcomes
# ------------------------------------------------------------------
class Reply(BaseModel):
    kind: Literal["reply"] = "reply"
    text: Optional[str] = None

class ApiError(BaseModel):
    kind: Literal["api_error"] = "api_error"
    message: str

class ParseFailure(BaseModel):
    kind: Literal["parse_failure"] = "parse_failure"
    error: str
    raw: str

class TransportFailure(BaseModel):
    kind: Literal["transport_failure"] = "transport_failure"
    error: str

DecodeResult = Union[Reply, ApiError, ParseFailure]
TurnOutcome = Union[Reply, ApiError, ParseFailure, TransportFailure]
