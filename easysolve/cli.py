"""Command-line front end that reads a puzzle's input and prints its answer."""

import argparse
import sys
from pathlib import Path
from typing import Callable, Iterator, Sequence

from easysolve import arrays, numbers, strings

_Solver = Callable[[str], str]
_SOLVERS: dict[str, _Solver] = {}

_YES = "YES"
_NO = "NO"


class _Reader:
    """Hands out whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("input ended early") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def words(self, count: int) -> list[str]:
        return [self.word() for _ in range(count)]

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.integer(), self.integer()) for _ in range(count)]


def _register(code: str) -> Callable[[_Solver], _Solver]:
    def decorate(solver: _Solver) -> _Solver:
        _SOLVERS[code] = solver
        return solver

    return decorate


@_register("4A")
def _watermelon(text: str) -> str:
    weight = _Reader(text).integer()
    return _YES if numbers.can_split_watermelon(weight) else _NO


@_register("41A")
def _translation(text: str) -> str:
    reader = _Reader(text)
    original, candidate = reader.word(), reader.word()
    return _YES if strings.is_translation(original, candidate) else _NO


@_register("50A")
def _domino(text: str) -> str:
    reader = _Reader(text)
    return str(numbers.max_dominoes(reader.integer(), reader.integer()))


@_register("59A")
def _word(text: str) -> str:
    return strings.fix_word_case(_Reader(text).word())


@_register("61A")
def _ultra_fast(text: str) -> str:
    reader = _Reader(text)
    return strings.xor_digits(reader.word(), reader.word())


@_register("71A")
def _way_too_long(text: str) -> str:
    reader = _Reader(text)
    words = reader.words(reader.integer())
    return "\n".join(strings.abbreviate(word) for word in words)


@_register("96A")
def _football(text: str) -> str:
    position = _Reader(text).word()
    return _YES if strings.is_dangerous(position) else _NO


@_register("110A")
def _nearly_lucky(text: str) -> str:
    value = _Reader(text).integer()
    return _YES if numbers.is_nearly_lucky(value) else _NO


@_register("112A")
def _petya(text: str) -> str:
    reader = _Reader(text)
    return str(strings.compare_ignore_case(reader.word(), reader.word()))


@_register("116A")
def _tram(text: str) -> str:
    reader = _Reader(text)
    return str(arrays.tram_capacity(reader.pairs(reader.integer())))


@_register("136A")
def _presents(text: str) -> str:
    reader = _Reader(text)
    givers = arrays.gift_givers(reader.integers(reader.integer()))
    return " ".join(map(str, givers))


@_register("144A")
def _general(text: str) -> str:
    reader = _Reader(text)
    return str(arrays.swaps_to_line_up(reader.integers(reader.integer())))


@_register("148A")
def _insomnia(text: str) -> str:
    return str(numbers.damaged_dragons(*_Reader(text).integers(5)))


@_register("158A")
def _next_round(text: str) -> str:
    reader = _Reader(text)
    count, k = reader.integer(), reader.integer()
    return str(arrays.advancers(reader.integers(count), k))


@_register("200B")
def _drinks(text: str) -> str:
    reader = _Reader(text)
    return f"{numbers.orange_fraction(reader.integers(reader.integer())):g}"


@_register("228A")
def _horseshoe(text: str) -> str:
    return str(arrays.horseshoes_to_buy(_Reader(text).integers(4)))


@_register("231A")
def _team(text: str) -> str:
    reader = _Reader(text)
    opinions = [reader.integers(3) for _ in range(reader.integer())]
    return str(arrays.problems_solved(opinions))


@_register("236A")
def _boy_or_girl(text: str) -> str:
    username = _Reader(text).word()
    if strings.is_girl(username):
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


@_register("263A")
def _beautiful_matrix(text: str) -> str:
    reader = _Reader(text)
    return str(arrays.matrix_moves([reader.integers(5) for _ in range(5)]))


@_register("266A")
def _stones(text: str) -> str:
    reader = _Reader(text)
    reader.integer()
    return str(strings.stones_to_remove(reader.word()))


@_register("266B")
def _queue(text: str) -> str:
    reader = _Reader(text)
    reader.integer()
    seconds = reader.integer()
    return strings.queue_after(reader.word(), seconds)


@_register("271A")
def _beautiful_year(text: str) -> str:
    return str(numbers.next_beautiful_year(_Reader(text).integer()))


@_register("281A")
def _capitalization(text: str) -> str:
    return strings.capitalize_word(_Reader(text).word())


@_register("282A")
def _bitplusplus(text: str) -> str:
    reader = _Reader(text)
    return str(strings.bitplusplus(reader.words(reader.integer())))


@_register("339A")
def _helpful_maths(text: str) -> str:
    return strings.helpful_maths(_Reader(text).word())


@_register("344A")
def _magnets(text: str) -> str:
    reader = _Reader(text)
    return str(arrays.count_groups(reader.integers(reader.integer())))


@_register("443A")
def _anton_letters(text: str) -> str:
    first_line = text.splitlines()[0] if text else ""
    return str(strings.count_distinct_letters(first_line))


@_register("467A")
def _accommodation(text: str) -> str:
    reader = _Reader(text)
    return str(arrays.free_rooms(reader.pairs(reader.integer())))


@_register("469A")
def _wanna_be_the_guy(text: str) -> str:
    reader = _Reader(text)
    n = reader.integer()
    x_levels = reader.integers(reader.integer())
    y_levels = reader.integers(reader.integer())
    if arrays.can_pass_all(n, x_levels, y_levels):
        return "I become the guy."
    return "Oh, my keyboard!"


@_register("486A")
def _calculating(text: str) -> str:
    return str(numbers.alternating_sum(_Reader(text).integer()))


@_register("520A")
def _pangram(text: str) -> str:
    reader = _Reader(text)
    reader.integer()
    word = reader.word()
    return _YES if strings.is_pangram(word) else _NO


@_register("546A")
def _bananas(text: str) -> str:
    return str(numbers.banana_loan(*_Reader(text).integers(3)))


@_register("617A")
def _elephant(text: str) -> str:
    return str(numbers.elephant_steps(_Reader(text).integer()))


@_register("677A")
def _fence(text: str) -> str:
    reader = _Reader(text)
    count, limit = reader.integer(), reader.integer()
    return str(arrays.fence_width(reader.integers(count), limit))


@_register("705A")
def _hulk(text: str) -> str:
    return strings.hulk_feelings(_Reader(text).integer())


@_register("734A")
def _anton_danik(text: str) -> str:
    reader = _Reader(text)
    reader.integer()
    return strings.match_winner(reader.word())


@_register("785A")
def _polyhedrons(text: str) -> str:
    reader = _Reader(text)
    return str(arrays.total_faces(reader.words(reader.integer())))


@_register("791A")
def _bear(text: str) -> str:
    reader = _Reader(text)
    return str(numbers.years_until_heavier(reader.integer(), reader.integer()))


@_register("977A")
def _wrong_subtraction(text: str) -> str:
    reader = _Reader(text)
    return str(numbers.wrong_subtract(reader.integer(), reader.integer()))


@_register("996A")
def _lottery(text: str) -> str:
    return str(numbers.min_bills(_Reader(text).integer()))


@_register("1030A")
def _easy_problem(text: str) -> str:
    reader = _Reader(text)
    return "EASY" if arrays.is_easy(reader.integers(reader.integer())) else "HARD"


@_register("1328A")
def _divisibility(text: str) -> str:
    reader = _Reader(text)
    cases = reader.pairs(reader.integer())
    return "\n".join(str(numbers.moves_to_divisible(a, b)) for a, b in cases)


def solve(problem: str, text: str) -> str:
    """Solve the named problem (such as ``4A``) for the given input text."""
    try:
        solver = _SOLVERS[problem.strip().upper()]
    except KeyError:
        known = ", ".join(sorted(_SOLVERS, key=lambda code: (len(code), code)))
        raise ValueError(f"unknown problem {problem!r}; known problems: {known}") from None
    return solver(text)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="easysolve", description="Print the answer to a short puzzle."
    )
    parser.add_argument("problem", help="problem code, for example 4A")
    parser.add_argument(
        "input", nargs="?", default="-", help="input file; '-' or omitted reads stdin"
    )
    args = parser.parse_args(argv)

    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.input).read_text()
        answer = solve(args.problem, text)
    except (OSError, ValueError) as exc:
        print(f"easysolve: {exc}", file=sys.stderr)
        return 1

    print(answer)
    return 0