import operator

import numpy as np

from .feedback import Feedback


def as_peg(value) -> int:
    """
    Return a peg value as an int.

    Args:
        value: An int or integer-like object (e.g. numpy.int64).
    Returns:
        int: The peg value.
    Raises:
        ValueError: If the value is not an integer; floats are never
        truncated.
    """

    if isinstance(value, bool):
        raise ValueError(f"Peg value must be an integer, got {value!r}.")
    try:
        return operator.index(value)
    except TypeError:
        raise ValueError(f"Peg value must be an integer, got {value!r}.") from None


class CodeSequence:
    """
        An immutable sequence of peg values for the Mastermind game.
    Attributes:
        sequence (tuple[int, ...]): The peg values, in position order.

    Values are expected to lie in the range of the game's ColorSpace; the
    sequence does not check this itself."""

    def __init__(self, sequence):
        """
        Initialize a CodeSequence instance.

        Args:
            sequence (Iterable[int]): The peg values representing the code.

        Raises:
            ValueError: If a value is not an integer.
        """

        self._sequence = tuple(as_peg(v) for v in sequence)

    @property
    def sequence(self) -> tuple[int, ...]:
        return self._sequence

    def get_feedback_for(self, guess) -> Feedback:
        """
        Compare this code with a guess and compute Mastermind-style
        feedback.

        Args:
            guess (CodeSequence | Sequence[int]): The guess to score. Must
            have the same length as this code.

        Returns:
            Feedback: exact matches and color matches.

        Raises:
            ValueError: If the guess length differs from the code length.

        Notes:
            Positions counted as exact are excluded from color-counting to
            avoid double-counting. Any integers are accepted, in or out of
            the color range.
        """

        other = guess.sequence if isinstance(guess, CodeSequence) else CodeSequence(guess).sequence
        if len(other) != len(self._sequence):
            raise ValueError(
                f"Guess length must be {len(self._sequence)}, "
                f"but got {len(other)}."
            )

        black = 0
        remaining_code = []
        remaining_guess = []

        # Count the color and position.
        for code_peg, guess_peg in zip(self._sequence, other):
            if code_peg == guess_peg:
                black += 1
            else:
                remaining_code.append(code_peg)
                remaining_guess.append(guess_peg)

        if not remaining_code:
            return Feedback(black, 0)

        # Count the color. Values are mapped to dense indices first so the
        # tables only hold colors that actually occur.
        colors, index = np.unique(
            np.array(remaining_code + remaining_guess, dtype=object),
            return_inverse=True,
        )
        index = index.ravel()
        split = len(remaining_code)
        code_freq = np.bincount(index[:split], minlength=len(colors))
        guess_freq = np.bincount(index[split:], minlength=len(colors))
        white = int(np.minimum(code_freq, guess_freq).sum())

        return Feedback(black, white)

    def as_string(self):
        """
        Return a string representation of the code (e.g. '0 3 2 5').
        Returns:
            str: The code as a string.
        """
        return " ".join(str(v) for v in self._sequence) if self._sequence else "EMPTY"

    def __len__(self):
        return len(self._sequence)

    def __iter__(self):
        return iter(self._sequence)

    def __getitem__(self, index):
        return self._sequence[index]

    def __eq__(self, other):
        """
        Check equality between this code and another object.

        Args:
            other (CodeSequence, list or tuple): Object to compare against.

        Returns:
            bool: True if the sequences are equal, False otherwise.
        """

        if isinstance(other, CodeSequence):
            return self._sequence == other._sequence
        if isinstance(other, (list, tuple)):
            return list(self._sequence) == list(other)
        return False

    def __repr__(self):
        return f"{type(self).__name__}({list(self._sequence)})"

    def __str__(self):
        return self.as_string()
