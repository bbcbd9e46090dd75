"""Solutions to contest problems over sequences of numbers."""

from collections import deque
from itertools import accumulate, groupby, product


def problem_difficulty(responses):
    """``HARD`` if anyone found the problem hard (answered 1), else ``EASY``."""
    for response in responses:
        if response == 1:
            return "HARD"
    return "EASY"


def restore_three(numbers):
    """Recover ``a <= b <= c`` from the four numbers a+b, a+c, b+c, a+b+c in any order."""
    values = sorted(numbers)
    if len(values) != 4:
        raise ValueError("exactly four numbers are needed")
    total = values[-1]
    return total - values[2], total - values[1], total - values[0]


def tram_capacity(stops):
    """Smallest capacity for a tram whose stops are ``(leaving, entering)`` pairs."""
    return max(accumulate((enter - leave for leave, enter in stops), initial=0))


def inverse_permutation(permutation):
    """For a 1-based permutation, the position at which each value stands."""
    permutation = list(permutation)
    size = len(permutation)
    if sorted(permutation) != list(range(1, size + 1)):
        raise ValueError("not a permutation of 1..n")
    inverse = [0] * size
    for position, value in enumerate(permutation, start=1):
        inverse[value - 1] = position
    return inverse


def can_reduce_to_one(numbers):
    """Whether repeatedly removing the smaller of two close numbers leaves one."""
    values = sorted(numbers)
    if not values:
        raise ValueError("at least one number is needed")
    return all(high - low <= 1 for low, high in zip(values, values[1:]))


def spy_index(numbers):
    """1-based position of the single number that differs from all others."""
    values = list(numbers)
    if len(values) < 3:
        raise ValueError("at least three numbers are needed")
    ordered = sorted(values)
    odd = ordered[-1] if ordered[0] == ordered[1] else ordered[0]
    return values.index(odd) + 1


def arrival_of_general(heights):
    """Adjacent swaps to bring the tallest soldier first and the shortest last."""
    heights = list(heights)
    if not heights:
        raise ValueError("at least one soldier is needed")
    last = len(heights) - 1
    first_tallest = heights.index(max(heights))
    last_shortest = last - heights[::-1].index(min(heights))
    moves = first_tallest + (last - last_shortest)
    return moves - 1 if last_shortest < first_tallest else moves


def amazing_performances(scores):
    """Scores that beat every earlier best or fall below every earlier worst."""
    scores = iter(scores)
    first = next(scores, None)
    if first is None:
        return 0
    best = worst = first
    count = 0
    for score in scores:
        if score > best:
            count += 1
            best = score
        elif score < worst:
            count += 1
            worst = score
    return count


def next_round(scores, k):
    """Participants with a positive score at least that of the ``k``-th place."""
    scores = list(scores)
    if not 1 <= k <= len(scores):
        raise ValueError(f"place {k} is out of range")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score >= threshold and score > 0)


def runners_ahead(distances):
    """Runners who covered more distance than the first one listed."""
    if not distances:
        raise ValueError("at least one distance is needed")
    first, *others = distances
    return sum(1 for distance in others if distance > first)


def is_sum_of_others(a, b, c):
    """Whether one of the three numbers is the sum of the other two."""
    largest, middle, smallest = sorted((a, b, c), reverse=True)
    return largest == middle + smallest


def longest_blank(values):
    """Length of the longest run of zeros."""
    return max((sum(1 for _ in run) for key, run in groupby(values) if key == 0), default=0)


def horseshoes_to_buy(colors):
    """Horseshoes to replace so that all colours differ."""
    colors = list(colors)
    return len(colors) - len(set(colors))


def uniform_clashes(teams):
    """Games in which the host wears its guest uniform, teams given as ``(home, away)``."""
    teams = list(teams)
    return sum(1 for (home, _), (_, away) in product(teams, repeat=2) if home == away)


def count_magnet_groups(magnets):
    """Number of groups formed by a row of magnets; equal neighbours join a group."""
    return sum(1 for _ in groupby(magnets))


def sereja_and_dima(cards):
    """Points of Sereja and Dima when each greedily takes the larger end card."""
    remaining = deque(cards)
    totals = [0, 0]
    turn = 0
    while remaining:
        card = remaining.pop() if remaining[0] < remaining[-1] else remaining.popleft()
        totals[turn] += card
        turn ^= 1
    return totals[0], totals[1]


def untreated_crimes(events):
    """Crimes left untreated; positive events hire officers, negative ones are crimes."""
    police = 0
    crimes = 0
    for event in events:
        if event >= 0:
            police += event
        elif police >= -event:
            police += event
        else:
            crimes -= event
    return crimes


def rooms_with_space(rooms):
    """Rooms, given as ``(living, capacity)``, with space for two more people."""
    return sum(1 for living, capacity in rooms if capacity - living >= 2)


def can_pass_all(levels, first, second):
    """Whether the two players together can pass every level from 1 to ``levels``."""
    covered = set(first) | set(second)
    return all(level in covered for level in range(1, levels + 1))


def road_width(height, people):
    """Road width needed; anyone taller than the fence takes two units."""
    return sum(2 if person > height else 1 for person in people)


def holiday_spending(welfare):
    """Money needed to raise everyone's welfare to the highest one."""
    welfare = list(welfare)
    if not welfare:
        raise ValueError("at least one citizen is needed")
    return max(welfare) * len(welfare) - sum(welfare)