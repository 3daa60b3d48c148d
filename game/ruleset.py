# Configuration: code length, colors, attempts per round, display symbols.
DEFAULT_RULES = {
    "name": "classic",  # Identifier for this ruleset
    "code_length": 4,  # Number of pegs in the code
    "num_colors": 6,  # Peg colors are the integers 0 .. num_colors - 1
    "max_attempts": 10,  # Number of guesses per round
    "display": {
        "feedback_map": {  # For CLI rendering
            "BK": "⚫",  # exact match
            "W": "⚪",  # color match
        }
    },
}


def make_rules(code_length=None, num_colors=None, max_attempts=None):
    """
    Return a copy of DEFAULT_RULES with the given values replaced.

    Args:
        code_length (int, optional): Number of pegs.
        num_colors (int, optional): Number of colors.
        max_attempts (int, optional): Guesses per round.

    Returns:
        dict: The new ruleset.
    """
    rules = dict(DEFAULT_RULES)
    if code_length is not None:
        rules["code_length"] = code_length
    if num_colors is not None:
        rules["num_colors"] = num_colors
    if max_attempts is not None:
        rules["max_attempts"] = max_attempts
    return rules
