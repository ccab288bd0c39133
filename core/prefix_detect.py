"""
prefix_detect.py - Prefix Detection Module

Responsibilities:
- Longest common prefix of a filename group
- Majority prefix fallback that tolerates a few outliers
- Separator-aware trimming so a prefix never ends mid-word
"""

from typing import Dict, Iterable, List, Optional, Sequence
import math
import os

from .models_fs import DEFAULT_SEPARATORS, MatchKind, PrefixMatch, PrefixOptions
from .text_match import utf8_len


def trim_to_separator(candidate: str, separators: Iterable[str] = DEFAULT_SEPARATORS) -> str:
    """
    Cut a candidate prefix right after its last boundary character

    The candidate is returned unchanged when it holds no boundary character
    or already ends with one.

    Args:
        candidate: Raw prefix
        separators: Boundary characters

    Returns:
        Trimmed prefix
    """
    for i in range(len(candidate) - 1, -1, -1):
        if candidate[i] in separators:
            cut = i + 1
            if cut < len(candidate):
                return candidate[:cut]
            break
    return candidate


def is_usable_prefix(prefix: str, options: Optional[PrefixOptions] = None) -> bool:
    """Whether a prefix is long enough to strip"""
    if options is None:
        options = PrefixOptions()
    return utf8_len(prefix.strip()) >= options.min_length


def majority_threshold(count: int, options: Optional[PrefixOptions] = None) -> int:
    """Number of files a majority prefix has to cover"""
    if options is None:
        options = PrefixOptions()
    # epsilon keeps e.g. 0.7 * 10 from flooring to 6
    return max(options.majority_floor, math.floor(count * options.majority_ratio + 1e-9))


def count_matches(filenames: Sequence[str], prefix: str) -> int:
    """Number of filenames starting with prefix"""
    return sum(1 for name in filenames if name.startswith(prefix))


def common_prefix(filenames: Iterable[str], options: Optional[PrefixOptions] = None) -> str:
    """
    Longest prefix shared by every filename, trimmed to a separator

    Args:
        filenames: Filenames without path components
        options: Detection options

    Returns:
        Prefix, or "" for fewer than 2 filenames or no shared start
    """
    if options is None:
        options = PrefixOptions()

    names = list(filenames)
    if len(names) < 2:
        return ""

    raw = os.path.commonprefix(names)
    if not raw:
        return ""

    return trim_to_separator(raw, options.separators)


def majority_prefix(filenames: Iterable[str], options: Optional[PrefixOptions] = None) -> str:
    """
    Prefix shared by a super-majority of filenames

    Every leading substring of every filename, longest first, is a
    candidate. Candidates reaching the threshold are trimmed to a separator
    and scored by how many filenames start with the trimmed form. The
    highest score wins; on a tie the first candidate evaluated is kept, so
    the result depends on input order when scores are equal.

    Worst case is O(n^2 * L) for n filenames of length L, which is fine for
    the size of a single directory.

    Args:
        filenames: Filenames without path components
        options: Detection options

    Returns:
        Prefix, or "" if no candidate reaches the threshold
    """
    if options is None:
        options = PrefixOptions()

    names: List[str] = list(filenames)
    if len(names) < 2:
        return ""

    threshold = majority_threshold(len(names), options)
    counts: Dict[str, int] = {}

    def matches(prefix: str) -> int:
        if prefix not in counts:
            counts[prefix] = count_matches(names, prefix)
        return counts[prefix]

    best = ""
    best_count = 0

    for name in names:
        for length in range(len(name), 0, -1):
            candidate = name[:length]
            if utf8_len(candidate) < options.min_length:
                break
            if matches(candidate) < threshold:
                continue

            trimmed = trim_to_separator(candidate, options.separators)
            if not is_usable_prefix(trimmed, options):
                continue

            score = matches(trimmed)
            if score > best_count:
                best = trimmed
                best_count = score

    return best


def detect_prefix(filenames: Iterable[str], options: Optional[PrefixOptions] = None) -> Optional[PrefixMatch]:
    """
    Find the prefix to strip from a group of filenames

    Tries the common prefix first and falls back to the majority prefix.

    Args:
        filenames: Filenames without path components
        options: Detection options

    Returns:
        PrefixMatch, or None if the group has no usable prefix
    """
    if options is None:
        options = PrefixOptions()

    names = list(filenames)
    if len(names) < 2:
        return None

    prefix = common_prefix(names, options)
    if is_usable_prefix(prefix, options):
        return PrefixMatch(prefix, MatchKind.COMMON, len(names), len(names))

    prefix = majority_prefix(names, options)
    if is_usable_prefix(prefix, options):
        return PrefixMatch(prefix, MatchKind.MAJORITY, count_matches(names, prefix), len(names))

    return None
