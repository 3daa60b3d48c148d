from .feedback import Feedback
from .guess import Guess
from .oracle import Oracle
from .ruleset import DEFAULT_RULES


class Board:
    """Game board: plays rounds against an Oracle and keeps the guesses of the current round."""

    def __init__(self, oracle: Oracle = None, rules=None):
        """Initialize the board with an oracle and a ruleset."""
        self.rules = dict(rules or DEFAULT_RULES)
        self.oracle = oracle or Oracle(
            self.rules["code_length"], self.rules["num_colors"]
        )
        # The oracle decides the code shape
        self.rules["code_length"] = self.oracle.get_num_pegs()
        self.rules["num_colors"] = self.oracle.get_num_peg_colors()
        self.max_attempts = self.rules.get("max_attempts", 10)
        self.round = 1
        self.guesses = []
        self.current_attempt = 0
        self.is_over = False
        self.is_won = False

    def make_guess(self, guess_input) -> Feedback | None:
        """
        Create a Guess from user input, score it and update the round state.

        Returns:
            Feedback | None: The feedback, or None if the round is already
            over.

        Raises:
            ValueError: If the input is not a valid guess.
        """

        if self.is_over:
            return None

        new_guess = Guess(guess_input, rules=self.rules)
        feedback = self.oracle.get_feedback_for(new_guess.as_code())
        new_guess.apply_feedback(feedback)

        self.guesses.append(new_guess)
        self.current_attempt += 1
        self.check_game_over()
        return feedback

    def get_feedback_history(self):
        """Return the guesses and feedback of the current round."""
        return [(guess.get_guess(), guess.get_feedback()) for guess in self.guesses]

    def check_game_over(self):
        """Check if the round is finished (win or all attempts used)."""
        last_guess = self.guesses[-1]
        if last_guess.feedback.is_win(self.rules["code_length"]):
            self.is_over = True
            self.is_won = True
            return

        if self.remaining_attempts() <= 0:
            self.is_over = True

    def next_round(self):
        """Ask the oracle for a new secret and reset the round state."""
        self.oracle.generate_next_code()
        self.round += 1
        self.guesses = []
        self.current_attempt = 0
        self.is_over = False
        self.is_won = False

    def reveal_code(self):
        """Return the secret code (used at the end of the round)."""
        return self.oracle.reveal_code()

    def remaining_attempts(self):
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self.current_attempt)

    def render(self):
        """Return a text-based representation of the round (for CLI)."""

        pegs = self.rules["code_length"]
        symbols = self.rules["display"]["feedback_map"]
        cell = max(len(str(self.rules["num_colors"] - 1)), 2)
        line = ("+" + "-" * (cell + 2)) * pegs * 2 + "+"

        rows = [line, f"| Round {self.round}", line]
        for guess in self.guesses:
            attempt_line = ""
            for c in guess.get_guess():
                attempt_line += "| " + str(c).rjust(cell) + " "
            black, white = guess.get_feedback()
            marks = [symbols["BK"]] * black + [symbols["W"]] * white
            marks += [""] * max(0, pegs - black - white)
            for mark in marks:
                attempt_line += "| " + mark.ljust(cell) + " "
            rows.append(attempt_line + "|")
            rows.append(line)
        return "\n".join(rows)
