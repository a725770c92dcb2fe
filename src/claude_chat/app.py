import asyncio
import logging
import sys

from pydantic import ValidationError

from claude_chat.config import get_settings
from claude_chat.chat.session import ChatSession
from claude_chat.chat.transport import AnthropicTransport

logger = logging.getLogger("app")

MISSING_KEY_MESSAGE = "ANTHROPIC_API_KEY environment variable must be set"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _missing_api_key(exc: ValidationError) -> bool:
    return any(
        error["type"] == "missing" and error["loc"] == ("anthropic_api_key",)
        for error in exc.errors()
    )


async def chat(api_key: str) -> None:
    async with AnthropicTransport(api_key) as transport:
        await ChatSession(transport).run()


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        if not _missing_api_key(exc):
            raise
        print(MISSING_KEY_MESSAGE, file=sys.stderr)
        return 1

    configure_logging(settings.log_level)
    logger.info("Starting chat session")
    asyncio.run(chat(settings.api_key))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
