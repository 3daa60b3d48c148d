# Sources the Oracle draws its secret codes from
import random
from collections import deque

from .color_space import ColorSpace
from .secret_code import CodeSequence, as_peg


class QueuedCodeSource:
    """
    Hands out pre-supplied codes in the order they were given, oldest first.
    Raw values are only turned into a CodeSequence when they are taken.
    """

    def __init__(self, codes):
        self._pending = deque(tuple(as_peg(v) for v in code) for code in codes)

    def __len__(self):
        return len(self._pending)

    def is_empty(self) -> bool:
        return not self._pending

    def next_code(self) -> CodeSequence:
        """
        Remove the front code from the queue.

        Returns:
            CodeSequence: The next queued code.

        Raises:
            IndexError: If the queue is empty.
        """
        if not self._pending:
            raise IndexError("No queued codes left.")
        return CodeSequence(self._pending.popleft())


class RandomCodeSource:
    """
    Produces a fresh code of a fixed length on every call, each peg drawn
    independently and uniformly from the color space.
    """

    def __init__(self, colors: ColorSpace, length: int, rng=None):
        self.colors = colors
        self.length = length
        self.rng = rng or random

    def next_code(self) -> CodeSequence:
        return CodeSequence(self.rng.choices(range(self.colors.length()), k=self.length))
