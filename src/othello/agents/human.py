"""
Human player reading moves from the console.
"""
import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Callable, Optional

from ..game.board import SIZE, row_col_to_index
from .base import MoveCallback, PASS
from .external import ExternalAgent

logger = logging.getLogger(__name__)

COLUMNS = "abcdefgh"


def parse_move(text: str) -> Optional[int]:
    """
    Parse a typed move.

    Accepts algebraic notation (``d3``), a raw index (``19``) or ``pass``.
    Returns None when the text is not understood.
    """
    text = text.strip().lower()
    if text in ("pass", "-1"):
        return PASS
    if text.isdigit():
        index = int(text)
        return index if 0 <= index < SIZE * SIZE else None
    if len(text) == 2 and text[0] in COLUMNS and text[1].isdigit():
        row = int(text[1]) - 1
        if 0 <= row < SIZE:
            return row_col_to_index(row, COLUMNS.index(text[0]))
    return None


def format_move(index: int) -> str:
    if index == PASS:
        return "pass"
    row, col = divmod(index, SIZE)
    return f"{COLUMNS[col]}{row + 1}"


class ConsoleAgent(ExternalAgent):
    """
    Prompts on stdin until a legal move is typed.

    Lines are read by one daemon thread at a time. A read that is still
    blocked when a request times out is kept and awaited again by the next
    request, so the next line typed always reaches the current turn.
    """

    name = "human"

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output_fn: Callable[[str], None] = print):
        super().__init__()
        self.input_fn = input_fn
        self.output_fn = output_fn
        self._task: Optional[asyncio.Task] = None
        self._reading: Optional[Future] = None

    def request_move(self, on_chosen: MoveCallback) -> None:
        super().request_move(on_chosen)
        self._task = asyncio.get_running_loop().create_task(self._prompt())

    def cancel_request(self) -> None:
        super().cancel_request()
        if self._task is not None:
            self._task.cancel()
            self._task = None

    def teardown(self) -> None:
        self.cancel_request()
        super().teardown()

    def _read_line(self, prompt: str) -> Future:
        """Start a background read unless one is already in flight."""
        if self._reading is not None:
            return self._reading

        future: Future = Future()
        # A running future cannot be cancelled by an awaiting task
        future.set_running_or_notify_cancel()

        def read():
            try:
                future.set_result(self.input_fn(prompt))
            except Exception as exc:
                future.set_exception(exc)

        threading.Thread(target=read, name="console-input", daemon=True).start()
        self._reading = future
        return future

    async def _prompt(self) -> None:
        legal = ", ".join(format_move(i) for i in self.view.legal_indices(self.player))
        self.output_fn(str(self.view))
        self.output_fn(f"Player {self.player} legal moves: {legal or 'none'}")

        while self.awaiting_move:
            reading = self._read_line(f"Player {self.player} move: ")
            try:
                text = await asyncio.wrap_future(reading)
            except EOFError:
                logger.warning("Input closed while waiting for player %s", self.player)
                return
            finally:
                if reading.done():
                    self._reading = None
            index = parse_move(text)
            if index is None or not self.submit(index):
                self.output_fn(f"Not a legal move: {text.strip()!r}")
