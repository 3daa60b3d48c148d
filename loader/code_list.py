# loader/code_list.py
from dataclasses import dataclass, field
from pathlib import Path


class CodeListError(ValueError):
    """Raised when a code list cannot be read or is malformed."""


@dataclass(frozen=True)
class CodeList:
    """Contents of a code-list file: the code shape and the codes in file order."""

    color_count: int
    peg_count: int
    codes: list[list[int]] = field(default_factory=list)


def _to_int(token: str, line_no: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise CodeListError(
            f"Line {line_no}: expected an integer, but read '{token}'."
        ) from None


def parse_code_list(text: str) -> CodeList:
    """
    Parse a code list held in memory.

    The first two integers are the color count and the peg count; the rest
    of the line holding the peg count is ignored. Every following non-blank
    line is one code of peg_count integers.

    Args:
        text (str): The code list.
    Returns:
        CodeList: The parsed code list.
    Raises:
        CodeListError: If the header or a code is malformed.
    """

    lines = text.splitlines()
    header = []
    line_no = 0
    while len(header) < 2 and line_no < len(lines):
        for token in lines[line_no].split():
            header.append(_to_int(token, line_no + 1))
            if len(header) == 2:
                break
        line_no += 1

    if len(header) < 2:
        raise CodeListError("Missing header: expected color count and peg count.")
    color_count, peg_count = header
    if color_count <= 0:
        raise CodeListError(f"Color count must be positive, but got {color_count}.")
    if peg_count <= 0:
        raise CodeListError(f"Peg count must be positive, but got {peg_count}.")

    codes = []
    for offset, raw in enumerate(lines[line_no:], start=line_no + 1):
        tokens = raw.split()
        if not tokens:
            continue
        code = [_to_int(token, offset) for token in tokens]
        if len(code) != peg_count:
            raise CodeListError(
                f"Line {offset}: code must have {peg_count} pegs, "
                f"but got {len(code)}."
            )
        for value in code:
            if not 0 <= value < color_count:
                raise CodeListError(
                    f"Line {offset}: color {value} outside 0 to {color_count - 1}."
                )
        codes.append(code)

    return CodeList(color_count=color_count, peg_count=peg_count, codes=codes)


def load_code_list(path: str) -> CodeList:
    """
    Load a code list from disk.
    Args:
        path (str): The file path of the code list.
    Returns:
        CodeList: The parsed code list.
    Raises:
        CodeListError: If the file cannot be read or is malformed."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise CodeListError(f'Cannot open file "{path}": {e.strerror}') from e
    return parse_code_list(text)
