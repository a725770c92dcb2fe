import logging
from typing import Callable

from claude_chat.chat.codec import build_request, decode_response, encode_request
from claude_chat.chat.models import (
    ApiError,
    ParseFailure,
    Reply,
    TransportFailure,
    TurnOutcome,
)
from claude_chat.chat.transport import AnthropicTransport, TransportError

logger = logging.getLogger("session")

BANNER = "Chat with Claude (type 'exit' to quit)"
PROMPT = "> "
EXIT_COMMAND = "exit"


def is_exit(line: str) -> bool:
    return line.strip().lower() == EXIT_COMMAND


class ChatSession:
    """
    Console read loop: one line in, one request out, one rendered result.

    Only transport, API and parse errors are handled here. Console I/O errors
    propagate to the caller.
    """

    def __init__(
        self,
        transport: AnthropicTransport,
        read_line: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.transport = transport
        self.read_line = read_line
        self.write = write

    def banner(self) -> None:
        self.write(BANNER)
        self.write("-" * len(BANNER))

    async def turn(self, text: str) -> TurnOutcome:
        """Send ``text`` as a single user message and classify what came back."""
        body = encode_request(build_request(text))
        try:
            response_text = await self.transport.send(body)
        except TransportError as exc:
            return TransportFailure(error=str(exc))
        return decode_response(response_text)

    def render(self, outcome: TurnOutcome) -> None:
        if isinstance(outcome, Reply):
            # empty content list: nothing to show
            if outcome.text is not None:
                self.write(f"\nClaude: {outcome.text}\n")
        elif isinstance(outcome, ApiError):
            self.write(f"\nAPI Error: {outcome.message}\n")
        elif isinstance(outcome, ParseFailure):
            self.write(f"\nError parsing response: {outcome.error}")
            self.write(f"Raw response: {outcome.raw}")
        elif isinstance(outcome, TransportFailure):
            self.write(f"\nError sending request: {outcome.error}")

    async def run(self) -> None:
        self.banner()
        while True:
            try:
                line = self.read_line(PROMPT)
            except EOFError:
                logger.info("End of input, leaving chat")
                break

            text = line.strip()
            if is_exit(text):
                break

            outcome = await self.turn(text)
            logger.debug("Turn finished with %s", outcome.kind)
            self.render(outcome)
