"""
Numbered repository menu and selection parsing.
"""

import re
from typing import List, Sequence

from .error_handling import InvalidSelectionError, SelectionOutOfRangeError
from .models import RepositoryRef

_DIGITS = re.compile(r"[0-9]+")


def render_menu(repositories: Sequence[RepositoryRef]) -> List[str]:
    """Menu lines numbered from 1, e.g. ``"  1) alice/a"``."""
    return [f"{index:3d}) {repo.full_name}" for index, repo in enumerate(repositories, start=1)]


def parse_selection(raw: str, count: int) -> int:
    """
    Validate a menu reply and convert it to a 0-based index.

    Surrounding whitespace is ignored, the way a shell `read` trims it;
    any other character that is not an ASCII digit makes the reply invalid.

    Args:
        raw: Text typed by the user
        count: Number of menu entries

    Returns:
        0-based index into the menu

    Raises:
        InvalidSelectionError: If the reply is not a number
        SelectionOutOfRangeError: If the number is outside ``[1, count]``
    """
    selection = raw.strip()
    if not _DIGITS.fullmatch(selection):
        raise InvalidSelectionError(selection)

    number = int(selection)
    if not 1 <= number <= count:
        raise SelectionOutOfRangeError(number, count)

    return number - 1


def choose(repositories: Sequence[RepositoryRef], raw: str) -> RepositoryRef:
    """Repository picked by a menu reply."""
    return repositories[parse_selection(raw, len(repositories))]
