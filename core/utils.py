import math
from typing import Iterable, List, Set


PREVIEW_LENGTH = 100


def tokenize(text: str) -> List[str]:
    """
    Split text into lowercase whitespace-separated tokens.

    Args:
        text: Any string, possibly empty

    Returns:
        Tokens in order of appearance, duplicates kept
    """
    return text.lower().split()


def word_set(text: str) -> Set[str]:
    return set(tokenize(text))


def jaccard_similarity(text1: str, text2: str) -> float:
    """
    Jaccard index of the word sets of two texts.

    Two texts without any words have an empty union and score 0.
    """
    words1 = word_set(text1)
    words2 = word_set(text2)

    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def as_percent(fraction: float) -> int:
    """Convert a 0-1 fraction to a whole percentage, rounding halves up."""
    return round_half_up(fraction * 100)


def mean(values: Iterable[float]) -> float:
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def preview(content: str, length: int = PREVIEW_LENGTH) -> str:
    return content[:length] + "..."
