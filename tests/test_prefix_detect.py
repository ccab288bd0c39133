import pytest

from core.models_fs import MatchKind, PrefixOptions
from core.prefix_detect import (
    common_prefix,
    detect_prefix,
    is_usable_prefix,
    majority_prefix,
    majority_threshold,
    trim_to_separator,
)


@pytest.mark.parametrize(
    "names, expected",
    [
        (["prefix-file1.txt", "prefix-file2.txt", "prefix-file3.txt"], "prefix-"),
        (["【歌单】song1.mp3", "【歌单】song2.mp3", "【歌单】song3.mp3"], "【歌单】"),
        (["abc.txt", "def.txt", "ghi.txt"], ""),
        (["file.txt"], ""),
        ([], ""),
        (["Common Prefix file1.mp3", "Common Prefix file2.mp3"], "Common Prefix "),
        (
            [
                "【Music Collection】Taylor Swift Greatest Hits p01 Shake It Off.m4a",
                "【Music Collection】Taylor Swift Greatest Hits p02 Blank Space.m4a",
                "【Music Collection】Taylor Swift Greatest Hits p03 Love Story.m4a",
            ],
            "【Music Collection】Taylor Swift Greatest Hits ",
        ),
        (
            [
                "01-【Playlist】Song Name 1.mp3",
                "02-【Playlist】Song Name 2.mp3",
                "03-【Playlist】Song Name 3.mp3",
            ],
            "0",
        ),
        (["a1.txt", "a2.txt", "a3.txt"], "a"),
    ],
)
def test_common_prefix(names, expected):
    assert common_prefix(names) == expected


def test_common_prefix_without_separator_keeps_raw_candidate():
    assert common_prefix(["Song1.mp3", "Song2.mp3"]) == "Song"


def test_common_prefix_already_ending_on_separator():
    assert common_prefix(["(Live) a", "(Live) b"]) == "(Live) "


def test_common_prefix_accepts_generator():
    assert common_prefix(n for n in ["x_y_1", "x_y_2"]) == "x_y_"


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("Artist-Song", "Artist-"),
        ("Artist-", "Artist-"),
        ("Artist", "Artist"),
        ("[Live] Track", "[Live] "),
        ("(2020)Album", "(2020)"),
        ("Music】Song", "Music】"),
        ("-abc", "-"),
        ("", ""),
    ],
)
def test_trim_to_separator(candidate, expected):
    assert trim_to_separator(candidate) == expected


def test_trim_to_separator_custom_set():
    assert trim_to_separator("Album.Disc1.Track", separators={"."}) == "Album.Disc1."
    assert trim_to_separator("Album-Track", separators={"."}) == "Album-Track"


@pytest.mark.parametrize(
    "prefix, usable",
    [
        ("", False),
        ("ab", False),
        ("  ab  ", False),
        ("abc", True),
        ("a-", False),
        ("歌", True),  # three UTF-8 bytes
    ],
)
def test_is_usable_prefix(prefix, usable):
    assert is_usable_prefix(prefix) is usable


def test_is_usable_prefix_custom_minimum():
    assert is_usable_prefix("abc", PrefixOptions(min_length=4)) is False


@pytest.mark.parametrize(
    "count, expected",
    [(0, 2), (2, 2), (3, 2), (7, 4), (10, 7), (20, 14), (100, 70)],
)
def test_majority_threshold(count, expected):
    assert majority_threshold(count) == expected


def test_majority_prefix_with_outliers():
    names = [
        "Artist-Song1.mp3",
        "Artist-Song2.mp3",
        "Artist-Song3.mp3",
        "Artist-Song4.mp3",
        "Artist-Song5.mp3",
        "OtherArtist&Artist-Collab1.mp3",
        "AnotherArtist&Artist-Collab2.mp3",
    ]
    assert majority_prefix(names) == "Artist-"


def test_majority_prefix_seventy_percent():
    names = [f"[Playlist] Song{i}.mp3" for i in range(1, 8)]
    names += ["Other-Song8.mp3", "Other-Song9.mp3", "Other-Song10.mp3"]
    assert majority_prefix(names) == "[Playlist] "


def test_majority_prefix_below_threshold():
    names = [f"[Playlist] Song{i}.mp3" for i in range(1, 7)]
    names += [f"Other-Song{i}.mp3" for i in range(7, 11)]
    # 6 of 10 share "[Playlist] ", threshold is 7
    assert majority_prefix(names) == ""


def test_majority_prefix_no_majority():
    assert majority_prefix(["A-file1.txt", "B-file2.txt", "C-file3.txt"]) == ""


def test_majority_prefix_small_inputs():
    assert majority_prefix([]) == ""
    assert majority_prefix(["Artist-Song1.mp3"]) == ""


def test_majority_prefix_tie_goes_to_first_evaluated():
    names = ["Alpha-1.mp3", "Alpha-2.mp3", "Beta-1.mp3", "Beta-2.mp3"]
    # threshold is 2, both prefixes reach it with the same score
    assert majority_prefix(names) == "Alpha-"
    assert majority_prefix(list(reversed(names))) == "Beta-"


def test_detect_prefix_prefers_common():
    match = detect_prefix(["Band - One.mp3", "Band - Two.mp3"])
    assert match is not None
    assert match.prefix == "Band - "
    assert match.kind is MatchKind.COMMON
    assert (match.match_count, match.total) == (2, 2)


def test_detect_prefix_falls_back_to_majority():
    names = ["Artist-Song1.mp3", "Artist-Song2.mp3", "Artist-Song3.mp3", "Intro.mp3"]
    match = detect_prefix(names)
    assert match is not None
    assert match.prefix == "Artist-"
    assert match.kind is MatchKind.MAJORITY
    assert (match.match_count, match.total) == (3, 4)


def test_detect_prefix_rejects_short_prefix():
    assert detect_prefix(["a1.txt", "a2.txt", "a3.txt"]) is None


def test_detect_prefix_single_file():
    assert detect_prefix(["Artist-Song1.mp3"]) is None


def test_second_pass_finds_nothing_to_strip():
    first = ["Artist-Song1.mp3", "Artist-Song2.mp3", "Artist-Track3.mp3"]
    prefix = common_prefix(first)
    stripped = [name[len(prefix):] for name in first]

    second = common_prefix(stripped)
    assert not is_usable_prefix(second) or second != prefix
