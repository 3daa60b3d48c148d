import random

import pytest

from game.code_source import QueuedCodeSource, RandomCodeSource
from game.color_space import ColorSpace
from game.secret_code import CodeSequence


def test_random_codes() -> None:
    colors = ColorSpace(3)
    for length in (1, 4, 8):
        source = RandomCodeSource(colors, length)
        for _ in range(20):
            code = source.next_code()
            assert type(code) is CodeSequence
            assert len(code) == length
            assert all(value in colors for value in code)


def test_seeded_random_codes_agree() -> None:
    first = RandomCodeSource(ColorSpace(6), 5, rng=random.Random(1))
    second = RandomCodeSource(ColorSpace(6), 5, rng=random.Random(1))
    for _ in range(5):
        assert first.next_code() == second.next_code()


def test_queue_order() -> None:
    source = QueuedCodeSource([[0, 1], [1, 0]])
    assert len(source) == 2
    assert source.next_code() == [0, 1]
    assert source.next_code() == [1, 0]
    assert source.is_empty()
    with pytest.raises(IndexError):
        source.next_code()


def test_queue_rejects_floats() -> None:
    with pytest.raises(ValueError):
        QueuedCodeSource([[0, 1.5]])
