"""Producer/consumer token delivery over a background thread.

The pull-based generator from csslex.lex() is the simplest way to consume
tokens. TokenChannel is for consumers that want the lexer running on its
own thread: tokens are handed over one at a time through a queue of size
one, so the producer waits whenever the consumer has not taken the
previous token yet.

Example:
    from csslex.stream import lex_channel

    with lex_channel("a{b:1}") as channel:
        for token in channel:
            print(token)

Thread Safety:
    One producer thread and one consuming thread per channel. Tokens are
    immutable once handed over.

Cancellation:
    close() (or leaving the ``with`` block) tells the producer to stop.
    Both sides re-check it while waiting on the queue, so a channel closed
    from any thread never leaves the producer or the consumer blocked.

"""

from __future__ import annotations

import queue
import threading
from types import TracebackType
from typing import cast

from csslex.config import LexConfig
from csslex.lexer import Lexer
from csslex.tokens import Token
from csslex.utils.logger import get_logger

logger = get_logger(__name__)

# End-of-stream marker put after the last token
_DONE = object()


class TokenChannel:
    """Iterator over tokens produced by a Lexer on a background thread."""

    __slots__ = ("_queue", "_closed", "_exhausted", "_error", "_poll_interval", "_thread")

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
        config: LexConfig | None = None,
        *,
        poll_interval: float = 0.05,
    ) -> None:
        """Start lexing source on a daemon thread.

        Args:
            source: CSS source text
            source_file: Optional source file path for token locations
            config: Lexing options (the caller's context config if None)
            poll_interval: Seconds between checks for close() while waiting
        """
        self._queue: queue.Queue[object] = queue.Queue(maxsize=1)
        self._closed = threading.Event()
        self._exhausted = False
        self._error: Exception | None = None
        self._poll_interval = poll_interval

        # Built here so the caller's ContextVar config applies
        lexer = Lexer(source, source_file, config)
        self._thread = threading.Thread(
            target=self._produce,
            args=(lexer,),
            name="csslex-producer",
            daemon=True,
        )
        self._thread.start()

    # ------------------------------------------------------------------
    # Producer side
    # ------------------------------------------------------------------

    def _produce(self, lexer: Lexer) -> None:
        logger.debug("producer started")
        try:
            for token in lexer.tokenize():
                if not self._put(token):
                    logger.debug("channel closed by consumer, producer exiting")
                    return
        except Exception as e:
            # Re-raised on the consumer side
            self._error = e
        self._put(_DONE)
        logger.debug("producer finished")

    def _put(self, item: object) -> bool:
        """Hand item to the consumer. Returns False once the channel is closed."""
        while not self._closed.is_set():
            try:
                self._queue.put(item, timeout=self._poll_interval)
            except queue.Full:
                continue
            return True
        return False

    # ------------------------------------------------------------------
    # Consumer side
    # ------------------------------------------------------------------

    def __iter__(self) -> TokenChannel:
        return self

    def __next__(self) -> Token:
        while True:
            if self._exhausted or self._closed.is_set():
                raise StopIteration
            try:
                item = self._queue.get(timeout=self._poll_interval)
            except queue.Empty:
                # Re-check close() from another thread
                continue
            if item is _DONE:
                self._exhausted = True
                if self._error is not None:
                    raise self._error
                raise StopIteration
            return cast(Token, item)

    def close(self) -> None:
        """Stop the producer. Further iteration yields nothing."""
        self._closed.set()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the producer thread. Returns True if it has exited."""
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def __enter__(self) -> TokenChannel:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def lex_channel(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> TokenChannel:
    """Lex source on a background thread and return the token channel."""
    return TokenChannel(source, source_file, config)
