"""String problems: tokens, similarity, edit distance and subsequences."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator
from itertools import groupby


def num_different_integers(word: str) -> int:
    """Count distinct integers formed by the digit runs of ``word``.

    Characters below ``'a'`` form the runs; leading zeros are ignored.
    """
    return len(
        {
            "".join(run).lstrip("0")
            for is_digit, run in groupby(word, key=lambda ch: ch < "a")
            if is_digit
        }
    )


def _words(sentence: str) -> list[str]:
    words = sentence.split(" ")
    if words[-1] == "":
        words.pop()
    return words


def are_sentences_similar(sentence1: str, sentence2: str) -> bool:
    """Tell whether one sentence becomes the other by inserting one run of words."""
    longer, shorter = _words(sentence1), _words(sentence2)
    if len(shorter) > len(longer):
        longer, shorter = shorter, longer
    prefix = next(
        (index for index, (a, b) in enumerate(zip(longer, shorter)) if a != b),
        len(shorter),
    )
    if prefix == len(shorter):
        return True
    skip = len(longer) - len(shorter)
    return longer[prefix + skip :] == shorter[prefix:]


def digit_count(num: str) -> bool:
    """Tell whether digit i occurs exactly ``num[i]`` times for every index i."""
    counts = Counter(ord(ch) - ord("0") for ch in num)
    return all(ch == chr(ord("0") + counts[index]) for index, ch in enumerate(num))


def min_distance(word1: str, word2: str) -> int:
    """Return the edit distance between two words."""
    if not word1 or not word2:
        return len(word1) + len(word2)
    previous = list(range(len(word2) + 1))
    for i, ch1 in enumerate(word1, start=1):
        current = [i]
        for j, ch2 in enumerate(word2, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ch1 != ch2),
                )
            )
        previous = current
    return previous[-1]


def custom_sort_string(order: str, s: str) -> str:
    """Rearrange ``s`` so its characters follow ``order``; the rest go last, sorted."""
    counts = Counter(s)
    parts = [ch * counts.pop(ch) for ch in order if ch in counts]
    parts.extend(ch * counts[ch] for ch in sorted(counts))
    return "".join(parts)


def num_matching_subseq(s: str, words: Iterable[str]) -> int:
    """Count the words that are subsequences of ``s``."""
    waiting: defaultdict[str, list[Iterator[str]]] = defaultdict(list)
    matched = 0
    for word in words:
        letters = iter(word)
        first = next(letters, None)
        if first is None:
            matched += 1
        else:
            waiting[first].append(letters)
    for ch in s:
        for letters in waiting.pop(ch, []):
            following = next(letters, None)
            if following is None:
                matched += 1
            else:
                waiting[following].append(letters)
    return matched