from .code_source import QueuedCodeSource, RandomCodeSource
from .color_space import ColorSpace
from .feedback import Feedback
from .ruleset import DEFAULT_RULES
from .secret_code import CodeSequence


def _check_peg_count(peg_count) -> int:
    if isinstance(peg_count, bool) or not isinstance(peg_count, int):
        raise ValueError(f"Peg count must be an integer, got {peg_count!r}.")
    if peg_count <= 0:
        raise ValueError(f"Peg count must be positive, but got {peg_count}.")
    return peg_count


class Oracle:
    """
        The codemaker: holds the secret code and scores guesses against it.

    Secrets are taken from a queue of pre-supplied codes while it lasts and
    are generated randomly afterwards. Once the queue runs out the oracle
    stays in random mode for the rest of the session.

    Attributes:
        peg_colors (ColorSpace): Colors a peg can take.
        nr_pegs (int): Length of every code in the session.
        secret_code (CodeSequence): The code of the current round.
        num_codes_left (int): Counter behind has_code_to_use_from_file().
    """

    def __init__(
        self,
        peg_count: int = DEFAULT_RULES["code_length"],
        color_count: int = DEFAULT_RULES["num_colors"],
        codes=None,
        *,
        rng=None,
    ):
        """
        Create an oracle and arm the secret for the first round.

        Args:
            peg_count (int): Number of pegs per code.
            color_count (int): Number of peg colors.
            codes (Iterable[Sequence[int]], optional): Codes to use as
            secrets first, in order. Without it every secret is random.
            rng (random.Random, optional): Source of randomness for
            generated codes.

        Raises:
            ValueError: If a count is not a positive integer or a queued
            code does not have peg_count values.
        """

        self.nr_pegs = _check_peg_count(peg_count)
        self.peg_colors = ColorSpace(color_count)
        self._random = RandomCodeSource(self.peg_colors, self.nr_pegs, rng=rng)

        if codes is None:
            self._queued = QueuedCodeSource([])
            self.secret_code: CodeSequence = self._random.next_code()
            self.num_codes_left = 0
            return

        codes = [list(code) for code in codes]
        for index, code in enumerate(codes):
            if len(code) != self.nr_pegs:
                raise ValueError(
                    f"Code {index + 1} must have {self.nr_pegs} pegs, "
                    f"but got {len(code)}."
                )

        self._queued = QueuedCodeSource(codes)
        # One extra for the secret generated right below
        self.num_codes_left = len(codes) + 1
        self.generate_next_code()

    @classmethod
    def from_codes(cls, codes, peg_count: int, color_count: int, *, rng=None):
        """Create an oracle that plays the given codes first, in order."""
        return cls(peg_count, color_count, codes=codes, rng=rng)

    def generate_next_code(self) -> CodeSequence:
        """
        Replace the secret with the next queued code, or a random one once
        the queue is empty.

        Returns:
            CodeSequence: The new secret code.
        """

        self.num_codes_left -= 1
        if not self._queued.is_empty():
            self.secret_code = self._queued.next_code()
        else:
            self.secret_code = self._random.next_code()
        return self.secret_code

    def get_feedback_for(self, guess) -> Feedback:
        """
        Score a guess against the current secret. Does not advance the round.

        Raises:
            ValueError: If the guess length differs from the peg count.
        """
        return self.secret_code.get_feedback_for(guess)

    def has_code_to_use_from_file(self) -> bool:
        """
        Return True while the counter is positive.

        The counter starts one above the queue size and is decremented
        before each code is taken, so this holds exactly while the current
        secret came from the queue.
        """
        return self.num_codes_left > 0

    def is_file_driven(self) -> bool:
        """Return True while queued codes remain for the following rounds."""
        return not self._queued.is_empty()

    def get_num_pegs(self) -> int:
        return self.nr_pegs

    def get_num_peg_colors(self) -> int:
        return self.peg_colors.length()

    def reveal_code(self) -> str:
        """Return the current secret as a string (used at the end of a round)."""
        return self.secret_code.as_string()
