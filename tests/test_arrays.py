import pytest

from easysolve.arrays import (
    advancers,
    can_pass_all,
    count_groups,
    fence_width,
    free_rooms,
    gift_givers,
    horseshoes_to_buy,
    is_easy,
    matrix_moves,
    problems_solved,
    swaps_to_line_up,
    tram_capacity,
    total_faces,
)


def test_is_easy_hard_when_anyone_says_one():
    assert is_easy([0, 0, 1]) is False


def test_is_easy_when_all_zero():
    assert is_easy([0, 0, 0]) is True


def test_tram_capacity_empty_is_zero():
    assert tram_capacity([]) == 0


def test_tram_capacity_only_entering_is_total():
    stops = [(0, 3), (0, 4), (0, 5)]
    assert tram_capacity(stops) == 3 + 4 + 5


def test_tram_capacity_at_least_final_load():
    stops = [(0, 3), (2, 5), (4, 2), (4, 0)]
    final = sum(enter - exit_ for exit_, enter in stops)
    assert tram_capacity(stops) >= final
    assert tram_capacity(stops) >= 3


def test_gift_givers_identity():
    assert gift_givers([1, 2, 3, 4]) == [1, 2, 3, 4]


def test_gift_givers_inverse_round_trip():
    perm = [2, 3, 4, 1]
    assert gift_givers(gift_givers(perm)) == perm
    inverse = gift_givers(perm)
    assert [inverse[r - 1] for r in perm] == [1, 2, 3, 4]


def test_gift_givers_rejects_out_of_range():
    with pytest.raises(ValueError):
        gift_givers([1, 5])


def test_swaps_already_ordered():
    assert swaps_to_line_up([9, 7, 5, 3]) == 0


def test_swaps_sample():
    assert swaps_to_line_up([33, 44, 11, 22]) == 2


def test_swaps_empty_raises():
    with pytest.raises(ValueError):
        swaps_to_line_up([])


def test_advancers_all_zero():
    assert advancers([0, 0, 0, 0], 2) == 0


def test_advancers_equal_scores_all_pass():
    scores = [5, 5, 5]
    assert advancers(scores, 2) == len(scores)


def test_advancers_bad_k():
    with pytest.raises(ValueError):
        advancers([1, 2], 3)


def test_horseshoes_all_distinct():
    assert horseshoes_to_buy([1, 7, 3, 9]) == 0


def test_horseshoes_all_same():
    colors = [7, 7, 7, 7]
    assert horseshoes_to_buy(colors) == len(colors) - 1


def test_problems_solved_counts_rows():
    opinions = [[1, 1, 0], [1, 1, 1], [1, 0, 0]]
    assert problems_solved(opinions) == 2


def test_problems_solved_none():
    assert problems_solved([[0, 0, 1], [0, 0, 0]]) == 0


def _matrix_with_one(row, column):
    matrix = [[0] * 5 for _ in range(5)]
    matrix[row][column] = 1
    return matrix


def test_matrix_moves_centre_is_zero():
    assert matrix_moves(_matrix_with_one(2, 2)) == 0


def test_matrix_moves_corners_symmetric():
    corners = {matrix_moves(_matrix_with_one(r, c)) for r in (0, 4) for c in (0, 4)}
    assert len(corners) == 1
    assert corners.pop() > matrix_moves(_matrix_with_one(2, 3))


def test_matrix_moves_without_one_raises():
    with pytest.raises(ValueError):
        matrix_moves([[0] * 5 for _ in range(5)])


def test_count_groups_same_orientation():
    assert count_groups([10, 10, 10]) == 1


def test_count_groups_alternating():
    magnets = [10, 1, 10, 1]
    assert count_groups(magnets) == len(magnets)


def test_count_groups_empty():
    assert count_groups([]) == 0


def test_free_rooms():
    rooms = [(1, 10), (0, 10), (10, 10), (1, 2)]
    assert free_rooms(rooms) == sum(1 for p, q in rooms[:2])


def test_can_pass_all_together():
    assert can_pass_all(4, [1, 2, 3], [2, 4]) is True


def test_can_pass_all_missing_level():
    assert can_pass_all(4, [1, 2, 3], [2, 3]) is False


def test_fence_width_all_low():
    heights = [1, 2, 3]
    assert fence_width(heights, 3) == len(heights)


def test_fence_width_all_tall():
    heights = [5, 6, 7]
    assert fence_width(heights, 4) == 2 * len(heights)


def test_total_faces_known_shapes():
    names = ["Tetrahedron", "Cube", "Octahedron", "Dodecahedron", "Icosahedron"]
    assert total_faces(names) == 4 + 6 + 8 + 12 + 20


def test_total_faces_unknown_counts_zero():
    assert total_faces(["Sphere", "Cube"]) == 6