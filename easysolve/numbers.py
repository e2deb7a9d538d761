"""Solutions to short arithmetic puzzles."""

from typing import Sequence

_BILLS = (100, 20, 10, 5, 1)


def is_nearly_lucky(n: int) -> bool:
    """Return True when the count of lucky digits (4 and 7) is itself 4 or 7."""
    lucky = sum(digit in "47" for digit in str(n)) if n > 0 else 0
    return lucky in (4, 7)


def moves_to_divisible(a: int, b: int) -> int:
    """Return how many increments make ``a`` divisible by ``b``."""
    return (-a) % b


def damaged_dragons(k: int, l: int, m: int, n: int, d: int) -> int:
    """Count dragons numbered 1..d hit by any of the four periodic attacks."""
    periods = (k, l, m, n)
    if 1 in periods:
        return d
    return sum(
        1 for dragon in range(1, d + 1) if any(dragon % period == 0 for period in periods)
    )


def orange_fraction(percentages: Sequence[float]) -> float:
    """Return the share of orange juice in a mix of equal amounts of drinks."""
    if not percentages:
        raise ValueError("at least one drink is required")
    return sum(percentages) / len(percentages)


def _has_distinct_digits(year: int) -> bool:
    digits = str(year)
    return len(set(digits)) == len(digits)


def next_beautiful_year(year: int) -> int:
    """Return the first year after ``year`` whose digits are all different."""
    year += 1
    while not _has_distinct_digits(year):
        year += 1
    return year


def alternating_sum(n: int) -> int:
    """Return -1 + 2 - 3 + ... + (-1)^n * n."""
    if n % 2 == 0:
        return n // 2
    return -((n + 1) // 2)


def can_split_watermelon(weight: int) -> bool:
    """Return True when the weight splits into two positive even parts."""
    return weight != 2 and weight % 2 == 0


def max_dominoes(m: int, n: int) -> int:
    """Return how many 2x1 dominoes fit on an m by n board."""
    return m * n // 2


def banana_loan(k: int, n: int, w: int) -> int:
    """Return how much must be borrowed to buy ``w`` bananas costing k, 2k, ... with ``n`` in hand."""
    cost = k * w * (w + 1) // 2
    return max(0, cost - n)


def elephant_steps(distance: int) -> int:
    """Return the fewest moves of 1 to 5 cells that cover the distance."""
    if distance == 0:
        return 0
    if distance < 0:
        return 1
    full, rest = divmod(distance, 5)
    return full + (rest != 0)


def years_until_heavier(a: int, b: int) -> int:
    """Return the years until weight ``a`` (tripling yearly) exceeds ``b`` (doubling yearly)."""
    if a <= 0:
        raise ValueError("the younger brother's weight must be positive")
    years = 0
    while a <= b:
        years += 1
        a *= 3
        b *= 2
    return years


def wrong_subtract(n: int, k: int) -> int:
    """Subtract one ``k`` times, dropping a trailing zero instead of subtracting from it."""
    for _ in range(k):
        n = n // 10 if n % 10 == 0 else n - 1
    return n


def min_bills(amount: int) -> int:
    """Return the fewest bills of 1, 5, 10, 20 and 100 that add up to ``amount``."""
    count = 0
    for bill in _BILLS:
        taken, amount = divmod(amount, bill)
        count += taken
    return count