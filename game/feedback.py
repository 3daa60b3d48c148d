from dataclasses import dataclass


@dataclass(frozen=True)
class Feedback:
    """
        Result of scoring a guess against a secret code.
    Attributes:
        exact_matches (int): Pegs with correct color in the correct position.
        color_matches (int): Pegs with correct color but in the wrong
        position, not counting positions already matched exactly."""

    exact_matches: int
    color_matches: int

    def is_win(self, length: int) -> bool:
        """Return True if every one of the length pegs matched exactly."""
        return self.exact_matches == length

    def __iter__(self):
        # Allows `black, white = feedback`
        yield self.exact_matches
        yield self.color_matches

    def __str__(self):
        return f"{self.exact_matches} exact, {self.color_matches} color"
