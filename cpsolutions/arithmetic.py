"""Solutions to arithmetic and number-theory contest problems."""

import math
from functools import reduce
from itertools import combinations

_BILLS = (100, 20, 10, 5, 1)
_PARTY_DEADLINE = 240


def _ceil_div(numerator, denominator):
    return -(-numerator // denominator)


def is_nearly_lucky(number):
    """Whether the count of digits 4 and 7 in ``number`` is itself 4 or 7."""
    count = sum(1 for digit in str(number) if digit in "47") if number > 0 else 0
    return count in (4, 7)


def moves_to_divisible(a, b):
    """Increments of ``a`` needed until it is divisible by ``b``."""
    return -a % b


def candy_distributions(n):
    """Ways to split ``n`` candies into two positive parts with the first larger."""
    return max((n - 1) // 2, 0)


def round_summands(n):
    """Round numbers (one nonzero digit) adding up to ``n``, largest first."""
    digits = str(n)
    width = len(digits)
    return [
        int(digit) * 10 ** (width - pos - 1)
        for pos, digit in enumerate(digits)
        if digit != "0"
    ] if n > 0 else []


def moves_to_target(a, b):
    """Moves of at most 10 each needed to turn ``a`` into ``b``."""
    return (abs(a - b) + 9) // 10


def lcm(*args):
    """Least common multiple of one or more integers."""
    if not args:
        raise ValueError("lcm needs at least one argument")
    return reduce(math.lcm, args)


def damaged_dragons(k, l, m, n, d):
    """Dragons among 1..d whose number is divisible by any of k, l, m, n."""
    divisors = (k, l, m, n)
    total = 0
    for size in range(1, len(divisors) + 1):
        sign = 1 if size % 2 else -1
        for group in combinations(divisors, size):
            total += sign * (d // lcm(*group))
    return total


def soft_drinking(n, k, l, c, d, p, nl, np):
    """Toasts each of ``n`` friends can make with the drink, limes and salt."""
    return min(k * l // nl, c * d, p // np) // n


def division(rating):
    """Contest division for a given rating."""
    if rating <= 1399:
        return "Division 4"
    if rating <= 1599:
        return "Division 3"
    if rating <= 1899:
        return "Division 2"
    return "Division 1"


def is_lucky_ticket(ticket):
    """Whether the last three digits of a six-digit ticket sum to the first three's sum."""
    rest, low = divmod(int(ticket), 1000)
    high = rest % 1000

    def digit_sum(value):
        return sum(int(digit) for digit in f"{value:03d}")

    return digit_sum(low) == digit_sum(high)


def min_upload_time(n, k):
    """Seconds to upload ``n`` GB when any ``k`` consecutive seconds carry at most 1 GB."""
    return n * k - (k - 1)


def min_animals(legs):
    """Fewest chickens and cows having ``legs`` legs in total."""
    return _ceil_div(legs, 4)


def count_triplets(n, x):
    """Ordered positive triplets with ab + ac + bc <= n and a + b + c <= x."""
    count = 0
    for a in range(1, x + 1):
        for b in range(1, min(x - a, n // a) + 1):
            max_c = min((n - a * b) // (a + b), x - a - b)
            if max_c >= 1:
                count += max_c
    return count


def theatre_square(n, m, a):
    """Flagstones of side ``a`` needed to cover an ``n`` by ``m`` square."""
    return _ceil_div(n, a) * _ceil_div(m, a)


def next_distinct_year(year):
    """The first year after ``year`` whose four digits are all different."""
    while True:
        year += 1
        digits = {year // 1000, year // 100 % 10, year // 10 % 10, year % 10}
        if len(digits) == 4:
            return year


def alternating_sum(n):
    """Value of -1 + 2 - 3 + ... +/- n."""
    return n // 2 if n % 2 == 0 else -(n + 1) // 2


def max_dominoes(m, n):
    """Dominoes of size 2x1 fitting on an ``m`` by ``n`` board."""
    return m * n // 2


def banana_debt(k, n, w):
    """Money to borrow to buy ``w`` bananas, the i-th costing ``i * k``, having ``n``."""
    total = k * w * (w + 1) // 2
    return max(total - n, 0)


def hipster_days(a, b):
    """Days wearing different socks, then days wearing same-coloured pairs."""
    different = min(a, b)
    return different, (max(a, b) - different) // 2


def elephant_steps(x):
    """Fewest steps of length 1 to 5 needed to cover distance ``x``."""
    return max(_ceil_div(x, 5), 0)


def last_two_digits_power_of_five(n):
    """Last two digits of 5 to the power ``n``, for ``n`` at least 2."""
    if n < 2:
        raise ValueError("exponent must be at least 2")
    return f"{pow(5, n, 100):02d}"


def min_total_distance(a, b, c):
    """Total distance three friends on a line travel to meet."""
    return max(a, b, c) - min(a, b, c)


def min_shovels(k, r):
    """Fewest shovels costing ``k`` payable with tens and one ``r`` coin, without change."""
    count = 1
    while (count * k) % 10 not in (r, 0):
        count += 1
    return count


def solved_before_party(problems, minutes):
    """Problems solvable, the i-th taking 5*i minutes, leaving ``minutes`` to travel."""
    available = _PARTY_DEADLINE - minutes
    spent = 0
    solved = 0
    for index in range(1, problems + 1):
        spent += 5 * index
        if spent > available:
            break
        solved += 1
    return solved


def years_until_heavier(limak, bob):
    """Years until Limak, tripling each year, outweighs Bob, doubling each year."""
    years = 0
    while limak <= bob:
        years += 1
        limak *= 3
        bob *= 2
    return years


def wrong_subtraction(n, k):
    """Result of subtracting one ``k`` times the way Tanya does it."""
    for _ in range(k):
        n = n // 10 if n % 10 == 0 else n - 1
    return n


def min_bills(n):
    """Fewest bills of 1, 5, 10, 20 and 100 adding up to ``n``."""
    count = 0
    for bill in _BILLS:
        used, n = divmod(n, bill)
        count += used
    return count


def orange_fraction(percents):
    """Percentage of orange juice in a cocktail of equal parts of each drink."""
    percents = list(percents)
    if not percents:
        raise ValueError("at least one drink is needed")
    return sum(percents) / (100 * len(percents)) * 100