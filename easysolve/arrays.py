"""Solutions to short puzzles over lists of numbers."""

from itertools import groupby
from typing import Iterable, Sequence

_FACES = {
    "Tetrahedron": 4,
    "Cube": 6,
    "Octahedron": 8,
    "Dodecahedron": 12,
    "Icosahedron": 20,
}


def is_easy(opinions: Iterable[int]) -> bool:
    """Return True when nobody answered 1 ("hard")."""
    return 1 not in opinions


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Return the smallest tram capacity, given (exiting, entering) counts per stop."""
    capacity = 0
    passengers = 0
    for exits, enters in stops:
        passengers += enters - exits
        capacity = max(capacity, passengers)
    return capacity


def gift_givers(receivers: Sequence[int]) -> list[int]:
    """Invert a gift permutation: friend i+1 gave to receivers[i]; return who gave to each."""
    givers = [0] * len(receivers)
    for giver, receiver in enumerate(receivers, start=1):
        if not 1 <= receiver <= len(receivers):
            raise ValueError(f"receiver {receiver} is out of range")
        givers[receiver - 1] = giver
    return givers


def swaps_to_line_up(heights: Sequence[int]) -> int:
    """Return the neighbour swaps that put the tallest first and the shortest last."""
    if not heights:
        raise ValueError("at least one soldier is required")
    count = len(heights)
    max_pos = heights.index(max(heights))
    min_pos = count - 1 - list(reversed(heights)).index(min(heights))
    swaps = max_pos + count - min_pos - 1
    if min_pos < max_pos:
        swaps -= 1
    return swaps


def advancers(scores: Sequence[int], k: int) -> int:
    """Count participants with a positive score at least that of the k-th place."""
    if not 1 <= k <= len(scores):
        raise ValueError("k must name a place among the scores")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score >= threshold and score > 0)


def horseshoes_to_buy(colors: Sequence[int]) -> int:
    """Return how many horseshoes must be replaced so that every colour differs."""
    return len(colors) - len(set(colors))


def problems_solved(opinions: Iterable[Sequence[int]]) -> int:
    """Count the problems that at least two of the three friends are sure about."""
    return sum(1 for votes in opinions if sum(vote == 1 for vote in votes) >= 2)


def matrix_moves(matrix: Sequence[Sequence[int]]) -> int:
    """Return the row and column swaps that bring the single 1 to the centre."""
    position = None
    for row_index, row in enumerate(matrix):
        if 1 in row:
            position = (row_index, list(row).index(1))
    if position is None:
        raise ValueError("the matrix holds no 1")
    row_index, column_index = position
    centre_row = len(matrix) // 2
    centre_column = len(matrix[row_index]) // 2
    return abs(centre_row - row_index) + abs(centre_column - column_index)


def count_groups(magnets: Iterable[int]) -> int:
    """Count groups of magnets, each written as 10 or 01 (read as 1)."""
    return sum(1 for _ in groupby(magnet % 10 for magnet in magnets))


def free_rooms(rooms: Iterable[tuple[int, int]]) -> int:
    """Count rooms, given as (occupants, capacity), with space for two more people."""
    return sum(1 for occupants, capacity in rooms if capacity - occupants >= 2)


def can_pass_all(n: int, x_levels: Iterable[int], y_levels: Iterable[int]) -> bool:
    """Return True when the two players together can pass levels 1..n."""
    known = set(x_levels) | set(y_levels)
    return all(level in known for level in range(1, n + 1))


def fence_width(heights: Iterable[int], limit: int) -> int:
    """Return the road width: one for those within the fence height, two for taller ones."""
    return sum(1 if height <= limit else 2 for height in heights)


def total_faces(names: Iterable[str]) -> int:
    """Sum the faces of the named polyhedrons; unknown names count as none."""
    return sum(_FACES.get(name, 0) for name in names)