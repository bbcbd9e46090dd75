import itertools

import pytest

from cpsolutions import sequences


def test_problem_difficulty_hard_when_any_one():
    assert sequences.problem_difficulty([0, 0, 1]) == "HARD"
    assert sequences.problem_difficulty([1]) == "HARD"


def test_problem_difficulty_easy_when_no_one():
    assert sequences.problem_difficulty([0, 0]) == "EASY"


@pytest.mark.parametrize("a,b,c", [(1, 2, 3), (4, 4, 4), (2, 7, 100)])
def test_restore_three_recovers_any_order(a, b, c):
    numbers = [a + b, a + c, b + c, a + b + c]
    for order in itertools.permutations(numbers):
        assert sequences.restore_three(order) == (a, b, c)


def test_restore_three_needs_four_numbers():
    with pytest.raises(ValueError):
        sequences.restore_three([1, 2, 3])


def test_tram_capacity_single_stop():
    assert sequences.tram_capacity([(0, 7)]) == 7


def test_tram_capacity_only_entering_is_total():
    enters = [3, 5, 2]
    stops = [(0, e) for e in enters]
    assert sequences.tram_capacity(stops) == sum(enters)


def test_tram_capacity_bounds_first_stop_and_is_non_negative():
    stops = [(0, 3), (2, 5), (4, 2), (4, 0)]
    capacity = sequences.tram_capacity(stops)
    assert capacity >= stops[0][1]
    assert capacity >= 0


@pytest.mark.parametrize("perm", [[1], [2, 3, 4, 1], [4, 3, 2, 1], [1, 3, 2]])
def test_inverse_permutation_round_trip(perm):
    inverse = sequences.inverse_permutation(perm)
    assert sequences.inverse_permutation(inverse) == perm
    assert [perm[position - 1] for position in inverse] == list(range(1, len(perm) + 1))


def test_inverse_permutation_rejects_non_permutation():
    with pytest.raises(ValueError):
        sequences.inverse_permutation([1, 1, 3])


def test_can_reduce_to_one_consecutive_range():
    assert sequences.can_reduce_to_one([5, 3, 4, 6])


def test_can_reduce_to_one_gap():
    assert not sequences.can_reduce_to_one([1, 2, 4])


def test_can_reduce_to_one_is_order_independent():
    values = [5, 5, 5, 7, 6]
    assert sequences.can_reduce_to_one(values) == sequences.can_reduce_to_one(values[::-1])


def test_can_reduce_to_one_empty():
    with pytest.raises(ValueError):
        sequences.can_reduce_to_one([])


@pytest.mark.parametrize("position", range(5))
@pytest.mark.parametrize("odd", [1, 20])
def test_spy_index_finds_odd_one(position, odd):
    values = [11] * 5
    values[position] = odd
    assert sequences.spy_index(values) == position + 1


def test_spy_index_too_short():
    with pytest.raises(ValueError):
        sequences.spy_index([1, 2])


@pytest.mark.parametrize("index", range(4))
def test_arrival_of_general_moves_tallest_forward(index):
    heights = [5] * 4 + [1]
    heights[index] = 9
    assert sequences.arrival_of_general(heights) == index


@pytest.mark.parametrize("index", range(1, 5))
def test_arrival_of_general_moves_shortest_back(index):
    heights = [9] + [5] * 4
    heights[index] = 1
    assert sequences.arrival_of_general(heights) == len(heights) - 1 - index


def test_arrival_of_general_empty():
    with pytest.raises(ValueError):
        sequences.arrival_of_general([])


def test_amazing_performances_increasing_and_constant():
    increasing = [1, 4, 9, 16, 25]
    assert sequences.amazing_performances(increasing) == len(increasing) - 1
    assert sequences.amazing_performances([7, 7, 7]) == 0


def test_amazing_performances_mirror_symmetry():
    scores = [100, 50, 200, 150, 200, 0]
    mirrored = [-s for s in scores]
    assert sequences.amazing_performances(scores) == sequences.amazing_performances(mirrored)


def test_next_round_distinct_scores():
    scores = [9, 8, 7, 6, 5]
    for k in range(1, len(scores) + 1):
        assert sequences.next_round(scores, k) == k


def test_next_round_zero_scores_never_pass():
    assert sequences.next_round([0, 0, 0], 2) == 0


def test_next_round_bad_place():
    with pytest.raises(ValueError):
        sequences.next_round([1, 2], 3)


def test_runners_ahead_extremes():
    assert sequences.runners_ahead([10, 1, 2, 3]) == 0
    assert sequences.runners_ahead([0, 1, 2, 3]) == 3


def test_is_sum_of_others_any_order():
    for a, b, c in itertools.permutations((3, 4, 7)):
        assert sequences.is_sum_of_others(a, b, c)
    assert not sequences.is_sum_of_others(1, 2, 4)


def test_longest_blank_picks_longest_run():
    for first, second in [(0, 3), (4, 2), (1, 1)]:
        values = [1] + [0] * first + [1] + [0] * second
        assert sequences.longest_blank(values) == max(first, second)


def test_horseshoes_to_buy():
    assert sequences.horseshoes_to_buy([1, 2, 3, 4]) == 0
    assert sequences.horseshoes_to_buy([5, 5, 5, 5]) == 3


def test_uniform_clashes_disjoint_colours():
    assert sequences.uniform_clashes([(1, 2), (3, 4), (5, 6)]) == 0


def test_uniform_clashes_each_match_counts():
    teams = [(1, 2), (2, 1)]
    assert sequences.uniform_clashes(teams) == len(teams)


def test_count_magnet_groups():
    assert sequences.count_magnet_groups(["10", "10", "10"]) == 1
    alternating = ["10", "01"] * 3
    assert sequences.count_magnet_groups(alternating) == len(alternating)


def test_sereja_and_dima_conserves_points():
    cards = [4, 1, 2, 10, 7, 3]
    sereja, dima = sequences.sereja_and_dima(cards)
    assert sereja + dima == sum(cards)


def test_sereja_and_dima_single_card():
    assert sequences.sereja_and_dima([42]) == (42, 0)


def test_untreated_crimes():
    crimes = [-1, -1, -1]
    assert sequences.untreated_crimes(crimes) == len(crimes)
    assert sequences.untreated_crimes([2, -1, -1, 1, -1]) == 0


def test_rooms_with_space():
    rooms = [(1, 10), (0, 10), (10, 10), (9, 10)]
    assert sequences.rooms_with_space(rooms) == 2


def test_can_pass_all():
    assert sequences.can_pass_all(4, [1, 2], [3, 4])
    assert not sequences.can_pass_all(4, [1, 2], [2, 3])


def test_road_width_bounds():
    people = [1, 2, 3]
    assert sequences.road_width(10, people) == len(people)
    assert sequences.road_width(0, people) == 2 * len(people)


def test_holiday_spending_equalises():
    welfare = [0, 1, 2, 3, 4]
    spent = sequences.holiday_spending(welfare)
    assert sequences.holiday_spending([max(welfare)] * len(welfare)) == 0
    assert spent + sum(welfare) == max(welfare) * len(welfare)


def test_holiday_spending_empty():
    with pytest.raises(ValueError):
        sequences.holiday_spending([])