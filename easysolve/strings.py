"""Solutions to short string puzzles."""

from collections import Counter
from itertools import cycle, groupby, islice, pairwise
from typing import Iterable

_FEELINGS = ("I hate", "I love")


def compare_ignore_case(a: str, b: str) -> int:
    """Compare two strings case-insensitively, returning -1, 0 or 1.

    A shorter string always compares as smaller.
    """
    if len(a) < len(b):
        return -1
    if len(b) < len(a):
        return 1
    left, right = a.lower(), b.lower()
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def is_girl(username: str) -> bool:
    """Return True when the user name has an even number of distinct characters."""
    return len(set(username)) % 2 == 0


def stones_to_remove(stones: str) -> int:
    """Count the stones to take away so that no two neighbours share a colour."""
    return sum(left == right for left, right in pairwise(stones))


def queue_after(queue: str, seconds: int) -> str:
    """Return the queue after each boy lets the girl behind him pass, once per second."""
    for _ in range(seconds):
        queue = queue.replace("BG", "GB")
    return queue


def capitalize_word(word: str) -> str:
    """Upper-case the first letter of the word and leave the rest untouched."""
    return word[:1].upper() + word[1:]


def bitplusplus(statements: Iterable[str]) -> int:
    """Run a sequence of ``X++``/``++X``/``X--``/``--X`` statements starting from zero."""
    return sum(1 if statement[1] == "+" else -1 for statement in statements)


def helpful_maths(expression: str) -> str:
    """Rearrange the summands of a sum of single digits into non-decreasing order."""
    if not expression:
        raise ValueError("expression must not be empty")
    ordered = sorted(expression, reverse=True)
    taken = ordered[: len(expression) // 2 + 1]
    return "+".join(reversed(taken))


def is_translation(original: str, candidate: str) -> bool:
    """Return True when the candidate is the original word written backwards."""
    return candidate == original[::-1]


def count_distinct_letters(text: str) -> int:
    """Count the distinct lower-case Latin letters in the text."""
    return len({char for char in text if "a" <= char <= "z"})


def is_pangram(word: str) -> bool:
    """Return True when the word holds every letter of the alphabet, in any case."""
    if len(word) < 26:
        return False
    return len({char.lower() for char in word}) == 26


def fix_word_case(word: str) -> str:
    """Change the word to whichever case needs fewer letters changed, preferring lower."""
    lowercase = sum("a" <= char <= "z" for char in word)
    if lowercase < len(word) - lowercase:
        return word.upper()
    return word.lower()


def xor_digits(a: str, b: str) -> str:
    """Combine two equally long binary strings digit by digit with exclusive or."""
    try:
        return "".join("1" if x != y else "0" for x, y in zip(a, b, strict=True))
    except ValueError as exc:
        raise ValueError("numbers must have the same length") from exc


def hulk_feelings(layers: int) -> str:
    """Describe Hulk's feelings with the given number of alternating layers."""
    if layers < 1:
        raise ValueError("layers must be at least 1")
    return " that ".join(islice(cycle(_FEELINGS), layers)) + " it"


def abbreviate(word: str) -> str:
    """Shorten words longer than ten letters to first letter, count and last letter."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def match_winner(results: str) -> str:
    """Name who won more games, given one ``A`` or ``D`` per game."""
    tally = Counter("A" if game == "A" else "D" for game in results)
    if tally["A"] > tally["D"]:
        return "Anton"
    if tally["A"] < tally["D"]:
        return "Danik"
    return "Friendship"


def is_dangerous(position: str) -> bool:
    """Return True when at least seven players of one team stand in a row."""
    return any(sum(1 for _ in run) >= 7 for _, run in groupby(position))