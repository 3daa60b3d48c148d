import re

from .color_space import ColorSpace
from .feedback import Feedback
from .ruleset import DEFAULT_RULES
from .secret_code import CodeSequence, as_peg


class Guess:
    """
        Represents a single player guess in the Mastermind game.
    Attributes:
        sequence (list[int]): The guessed peg values.
        rules (dict): The ruleset for validation.
        feedback (Feedback | None): Score of the guess once evaluated.
        is_valid (bool): Whether the guess is valid according to the rules."""

    def __init__(self, sequence: list[int] | str | None, rules=None):
        """
        Initialize a Guess instance.
        Args:
            sequence (list[int] | str | None): The guessed sequence. A string
            is either space/comma separated numbers ("0 3 2 5") or packed
            single digits ("0325").
            rules (dict, optional): The ruleset for validation. Defaults to DEFAULT_RULES.
        """

        # --- Attribute setup ---
        self.rules = rules or DEFAULT_RULES
        self.feedback = None
        self.is_valid = False
        self._error = None

        # --- Input normalization ---
        if isinstance(sequence, str):
            text = sequence.strip()
            tokens = re.split(r"[\s,]+", text) if re.search(r"[\s,]", text) else list(text)
        elif sequence is None:
            tokens = []
        else:
            tokens = list(sequence)
        self.sequence = []
        for token in tokens:
            try:
                self.sequence.append(int(token) if isinstance(token, str) else as_peg(token))
            except (TypeError, ValueError):
                self._error = f"Invalid peg '{token}', expected a number."
                self.sequence = []
                break

        # --- Validation ---
        if self.sequence:
            self.is_valid = self.validate(strict=False)

    def validate(self, strict: bool = True):
        """
        Check if the guess follows the rules (length, valid colors).

        Args:
            strict (bool): If True, raise ValueError on invalid guess.
        Returns:
            bool: True if valid, False otherwise.
        """

        def fail(msg: str) -> bool:
            """
            Handle failure depending on strict mode.
            Args:
                msg (str): The error message.
            Returns:
                bool: Always False.
            """
            if strict:
                raise ValueError(msg)
            return False

        if self._error:
            return fail(self._error)

        # Length check
        if len(self.sequence) != self.rules["code_length"]:
            return fail(
                f"Code length must be {self.rules['code_length']}, "
                f"but got {len(self.sequence)}."
            )

        # Color check
        colors = ColorSpace(self.rules["num_colors"])
        for color in self.sequence:
            if color not in colors:
                return fail(
                    f"Invalid color '{color}'. Allowed: 0 to {colors.length() - 1}."
                )

        return True

    def as_code(self) -> CodeSequence:
        """
        Return the guess as a CodeSequence, ready to be scored.
        Raises:
            ValueError: If the guess is not valid."""
        self.validate(strict=True)
        return CodeSequence(self.sequence)

    def apply_feedback(self, feedback: Feedback):
        """
        Store the feedback after evaluation by the Oracle.
        Args:
            feedback (Feedback): exact and color matches.
        """
        self.feedback = feedback

    def get_feedback(self):
        """
        Return the stored feedback as a tuple (exact, color).
        Returns:
            tuple[int, int] | None: The feedback tuple.
        """
        return tuple(self.feedback) if self.feedback is not None else None

    def get_guess(self):
        return self.sequence

    def as_string(self):
        """
        Return a string representation of the guess (e.g. '0 3 2 5').
        Returns:
            str: The guess as a string."""
        return " ".join(str(c) for c in self.sequence) if self.sequence else "EMPTY"

    def __str__(self):
        return self.as_string()
