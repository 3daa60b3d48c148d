import random

import pytest

from game.feedback import Feedback
from game.oracle import Oracle
from game.code_source import RandomCodeSource
from game.color_space import ColorSpace


def test_random_oracle() -> None:
    oracle = Oracle(5, 3)
    assert oracle.get_num_pegs() == 5
    assert oracle.get_num_peg_colors() == 3
    assert not oracle.has_code_to_use_from_file()
    assert not oracle.is_file_driven()
    for _ in range(50):
        code = oracle.generate_next_code()
        assert len(code) == 5
        assert all(0 <= value < 3 for value in code)
        assert not oracle.has_code_to_use_from_file()


def test_default_oracle() -> None:
    oracle = Oracle()
    assert oracle.get_num_pegs() == 4
    assert oracle.get_num_peg_colors() == 6


@pytest.mark.parametrize("pegs, colors", [(0, 6), (4, 0), (-1, 6), (4, -2)])
def test_invalid_counts(pegs, colors) -> None:
    with pytest.raises(ValueError):
        Oracle(pegs, colors)
    with pytest.raises(ValueError):
        Oracle.from_codes([], pegs, colors)


def test_queued_code_with_wrong_length() -> None:
    with pytest.raises(ValueError):
        Oracle.from_codes([[0, 1, 2, 3], [0, 1]], 4, 6)


def test_queued_codes_then_random() -> None:
    oracle = Oracle.from_codes([[0, 1, 2, 3], [3, 2, 1, 0]], 4, 6, rng=random.Random(5))
    expected = RandomCodeSource(ColorSpace(6), 4, rng=random.Random(5))

    # the first queued code is armed on construction
    assert oracle.secret_code == [0, 1, 2, 3]
    assert oracle.num_codes_left == 2
    assert oracle.has_code_to_use_from_file()
    assert oracle.is_file_driven()

    assert oracle.generate_next_code() == [3, 2, 1, 0]
    assert oracle.num_codes_left == 1
    assert oracle.has_code_to_use_from_file()
    assert not oracle.is_file_driven()

    assert oracle.generate_next_code() == expected.next_code()
    assert oracle.num_codes_left == 0
    assert not oracle.has_code_to_use_from_file()

    assert oracle.generate_next_code() == expected.next_code()
    assert oracle.num_codes_left == -1
    assert not oracle.has_code_to_use_from_file()


def test_empty_queue_starts_random() -> None:
    oracle = Oracle.from_codes([], 4, 6)
    assert len(oracle.secret_code) == 4
    assert all(0 <= value < 6 for value in oracle.secret_code)
    assert not oracle.has_code_to_use_from_file()


def test_queue_is_copied() -> None:
    codes = [[0, 1, 2, 3], [1, 1, 1, 1]]
    oracle = Oracle.from_codes(codes, 4, 6)
    codes[1][0] = 5
    assert oracle.generate_next_code() == [1, 1, 1, 1]


def test_feedback_does_not_advance() -> None:
    oracle = Oracle.from_codes([[0, 0, 1, 2]], 4, 3)
    assert oracle.get_feedback_for([0, 0, 0, 0]) == Feedback(2, 0)
    assert oracle.get_feedback_for([0, 0, 0, 0]) == Feedback(2, 0)
    assert oracle.get_feedback_for([0, 0, 1, 2]) == Feedback(4, 0)
    assert oracle.reveal_code() == "0 0 1 2"
    with pytest.raises(ValueError):
        oracle.get_feedback_for([0, 0])


def test_seeded_oracles_agree() -> None:
    first = Oracle(4, 6, rng=random.Random(42))
    second = Oracle(4, 6, rng=random.Random(42))
    for _ in range(5):
        assert first.secret_code == second.secret_code
        first.generate_next_code()
        second.generate_next_code()


def test_feedback_for_unchecked_values() -> None:
    oracle = Oracle.from_codes([[0, 1, 2, 3]], 4, 6)
    assert oracle.get_feedback_for([-1, 1, 2, 3]) == Feedback(3, 0)
    assert oracle.get_feedback_for([2**40, 3, 2**70, 0]) == Feedback(0, 2)
