import logging
from pathlib import Path

from core.models_fs import MatchKind
from core.plan_rename import build_directory_plan, find_collisions, plan_prefix_removal
from core.text_match import display_name, strip_prefix

MUSIC = Path("/music/album")


def paths(*names):
    return [MUSIC / name for name in names]


def test_plan_strips_prefix_and_whitespace():
    files = paths("Band - One.mp3", "Band - Two.mp3")
    plan = plan_prefix_removal(MUSIC, files, "Band -")

    assert [(op.old_name, op.new_name) for op in plan.ops] == [
        ("Band - One.mp3", "One.mp3"),
        ("Band - Two.mp3", "Two.mp3"),
    ]
    assert plan.ops[0].src == MUSIC / "Band - One.mp3"
    assert plan.ops[0].dst == MUSIC / "One.mp3"
    assert plan.file_count == 2
    assert plan.example_name == "Band - One.mp3"
    assert plan.warnings == []


def test_plan_skips_files_without_prefix():
    files = paths("Artist-Song1.mp3", "Artist-Song2.mp3", "Other&Artist-Collab.mp3")
    plan = plan_prefix_removal(MUSIC, files, "Artist-")

    assert [op.old_name for op in plan.ops] == ["Artist-Song1.mp3", "Artist-Song2.mp3"]


def test_plan_warns_on_empty_name(caplog):
    files = paths("Artist-", "Artist-Song1.mp3", "Artist-Song2.mp3")

    with caplog.at_level(logging.WARNING):
        plan = plan_prefix_removal(MUSIC, files, "Artist-")

    assert [op.new_name for op in plan.ops] == ["Song1.mp3", "Song2.mp3"]
    assert plan.warnings == ["filename empty after removing prefix, skipping: Artist-"]
    assert "filename empty after removing prefix, skipping: Artist-" in caplog.text


def test_plan_skips_whitespace_only_remainder(caplog):
    files = paths("Live -   ", "Live - a.mp3")

    with caplog.at_level(logging.WARNING):
        plan = plan_prefix_removal(MUSIC, files, "Live -")

    assert [op.new_name for op in plan.ops] == ["a.mp3"]
    assert len(plan.warnings) == 1


def test_plan_empty_prefix_renames_nothing():
    plan = plan_prefix_removal(MUSIC, paths("a.mp3", "b.mp3"), "")
    assert plan.ops == []


def test_plan_reports_duplicate_destinations(caplog):
    files = paths("CD1 - Intro.mp3", "CD1 -Intro.mp3")

    with caplog.at_level(logging.WARNING):
        plan = plan_prefix_removal(MUSIC, files, "CD1 -")

    # Both are planned, the collision is only reported
    assert [op.new_name for op in plan.ops] == ["Intro.mp3", "Intro.mp3"]
    assert len(plan.warnings) == 1
    assert "multiple files would be renamed to Intro.mp3" in plan.warnings[0]


def test_find_collisions_with_file_that_stays():
    files = paths("Artist-Song1.mp3", "Song1.mp3")
    plan = plan_prefix_removal(MUSIC, files, "Artist-")

    warnings = find_collisions(plan, files, case_insensitive=False)
    assert warnings == ["Artist-Song1.mp3 -> Song1.mp3 collides with existing file Song1.mp3"]


def test_find_collisions_case_insensitive():
    files = paths("Artist-song.mp3", "Artist-SONG.mp3")
    plan = plan_prefix_removal(MUSIC, files, "Artist-")

    assert find_collisions(plan, files, case_insensitive=False) == []
    assert len(find_collisions(plan, files, case_insensitive=True)) == 1


def test_build_directory_plan_common():
    files = paths("【Music】01 Intro.mp3", "【Music】02 Outro.mp3")
    plan = build_directory_plan(MUSIC, files)

    assert plan is not None
    assert plan.prefix == "【Music】"
    assert plan.match.kind is MatchKind.COMMON
    assert [op.new_name for op in plan.ops] == ["01 Intro.mp3", "02 Outro.mp3"]


def test_build_directory_plan_majority():
    files = paths(
        "Artist-Song1.mp3",
        "Artist-Song2.mp3",
        "Artist-Song3.mp3",
        "Artist-Song4.mp3",
        "Artist-Song5.mp3",
        "OtherArtist&Artist-Collab1.mp3",
        "AnotherArtist&Artist-Collab2.mp3",
    )
    plan = build_directory_plan(MUSIC, files)

    assert plan is not None
    assert plan.match.kind is MatchKind.MAJORITY
    assert plan.match.match_count == 5
    assert plan.total_count == 5


def test_build_directory_plan_small_or_unrelated_groups():
    assert build_directory_plan(MUSIC, paths("Artist-Song1.mp3")) is None
    assert build_directory_plan(MUSIC, paths("abc.txt", "def.txt", "ghi.txt")) is None


def test_round_trip_is_lossy_on_whitespace():
    old = "Band -   Song.mp3"
    new = strip_prefix(old, "Band -")
    assert new == "Song.mp3"
    assert "Band -" + new != old


def test_display_name_replaces_undecodable_bytes():
    assert display_name("Artist-\udcff1.mp3") == "Artist-�1.mp3"
    assert display_name("【歌单】song1.mp3") == "【歌单】song1.mp3"


def test_plan_warning_shows_undecodable_name(caplog):
    files = paths("x-\udcff.mp3", "x-\udcff.MP3", "\udcff.mp3")
    with caplog.at_level(logging.WARNING):
        plan = plan_prefix_removal(MUSIC, files, "x-")

    assert len(plan.ops) == 2
    assert any("collides with existing file �.mp3" in w for w in plan.warnings)
    assert all("\udcff" not in w for w in plan.warnings)
