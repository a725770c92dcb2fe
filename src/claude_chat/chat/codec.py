"""
Envelope codec for the Anthropic Messages API.

Requests are always a single user message. Responses are classified by
shape alone: the error envelope is tried first, then the success envelope,
and a body matching neither is reported verbatim.
"""

import logging
from typing import Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from claude_chat.chat.models import (
    ApiError,
    ChatRequest,
    ChatResponse,
    DecodeResult,
    ErrorResponse,
    Message,
    ParseFailure,
    Reply,
)

logger = logging.getLogger("codec")

MODEL = "claude-3-sonnet-20240229"
MAX_TOKENS = 1024

M = TypeVar("M", bound=BaseModel)


def build_request(text: str) -> ChatRequest:
    """Wrap one line of user input in a fresh request. Any string is accepted, including ''."""
    return ChatRequest(
        model=MODEL,
        messages=[Message(role="user", content=text)],
        max_tokens=MAX_TOKENS,
    )


def encode_request(request: ChatRequest) -> bytes:
    return request.model_dump_json().encode("utf-8")


def _try_parse(model: Type[M], body: str) -> Tuple[Optional[M], Optional[ValidationError]]:
    """Parse ``body`` as ``model``, returning either the instance or the validation error."""
    try:
        return model.model_validate_json(body), None
    except ValidationError as exc:
        return None, exc


def _first_error(exc: ValidationError) -> str:
    """One-line summary of the first validation error, without the docs URL."""
    errors = exc.errors(include_url=False)
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first["loc"])
    return f"{first['msg']} at {loc}" if loc else first["msg"]


def decode_response(body: str) -> DecodeResult:
    """
    Classify a response body.

    :param body: raw response text, whatever the HTTP status was
    :returns: ApiError if the body is an error envelope, otherwise Reply if it
        is a success envelope, otherwise ParseFailure carrying the body as-is
    """
    error_response, _ = _try_parse(ErrorResponse, body)
    if error_response is not None:
        return ApiError(message=error_response.error.message)

    chat_response, exc = _try_parse(ChatResponse, body)
    if chat_response is not None:
        if not chat_response.content:
            logger.debug("Response carried no content blocks")
            return Reply(text=None)
        return Reply(text=chat_response.content[0].text)

    logger.warning("Response matched neither envelope (%d bytes)", len(body))
    return ParseFailure(error=_first_error(exc), raw=body)
