"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Strip a detected prefix from every file in a directory group
- Skip files left unchanged or emptied by the strip
- Report (not resolve) destination collisions
- Output RenamePlan
"""

from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .log_setup import get_logger
from .models_fs import (
    PrefixMatch, PrefixOptions, RenamePlan,
    is_case_insensitive_fs, normalize_for_comparison
)
from .prefix_detect import detect_prefix
from .text_match import display_name, strip_prefix

logger = get_logger(__name__)


def plan_prefix_removal(
    directory: Path,
    files: Sequence[Path],
    prefix: str,
    match: Optional[PrefixMatch] = None
) -> RenamePlan:
    """
    Generate prefix removal rename plan

    Args:
        directory: Directory holding the files
        files: Absolute file paths (all inside directory)
        prefix: Prefix to strip
        match: Detection result the prefix came from

    Returns:
        Rename plan
    """
    directory = Path(directory)
    plan = RenamePlan(
        directory=directory,
        prefix=prefix,
        match=match,
        file_count=len(files),
        example_name=Path(files[0]).name if files else "",
    )

    for file in files:
        file = Path(file)
        old_name = file.name
        new_name = strip_prefix(old_name, prefix)

        # Does not start with the prefix (majority outlier)
        if new_name is None:
            continue

        if not new_name:
            msg = f"filename empty after removing prefix, skipping: {display_name(old_name)}"
            logger.warning(msg)
            plan.add_warning(msg)
            continue

        if new_name == old_name:
            continue

        plan.add_op(file, directory / new_name)

    for msg in find_collisions(plan, files):
        logger.warning(msg)
        plan.add_warning(msg)

    return plan


def find_collisions(plan: RenamePlan, files: Sequence[Path], case_insensitive: Optional[bool] = None) -> List[str]:
    """
    Find destinations shared by several operations or taken by a file that stays

    Args:
        plan: Rename plan
        files: All files of the group
        case_insensitive: Compare names case-insensitively (defaults to the platform)

    Returns:
        Warning messages
    """
    if case_insensitive is None:
        case_insensitive = is_case_insensitive_fs()

    def key(name: str) -> str:
        return normalize_for_comparison(name, case_insensitive)

    by_dst: Dict[str, List[str]] = defaultdict(list)
    for op in plan.ops:
        by_dst[key(op.new_name)].append(op.old_name)

    sources = {key(op.old_name) for op in plan.ops}
    staying = {key(Path(f).name): Path(f).name for f in files if key(Path(f).name) not in sources}

    warnings = []
    for op in plan.ops:
        dst_key = key(op.new_name)
        olds = by_dst.get(dst_key)
        if olds and len(olds) > 1 and olds[0] == op.old_name:
            names = ", ".join(display_name(n) for n in olds)
            warnings.append(f"multiple files would be renamed to {display_name(op.new_name)}: {names}")
        if dst_key in staying:
            warnings.append(
                f"{display_name(op.old_name)} -> {display_name(op.new_name)} "
                f"collides with existing file {display_name(staying[dst_key])}"
            )
    return warnings


def build_directory_plan(
    directory: Path,
    files: Sequence[Path],
    options: Optional[PrefixOptions] = None
) -> Optional[RenamePlan]:
    """
    Detect the prefix of a directory group and plan its removal

    Args:
        directory: Directory holding the files
        files: Absolute file paths
        options: Detection options

    Returns:
        Rename plan, or None for groups under 2 files or without a usable prefix
    """
    if len(files) < 2:
        return None

    match = detect_prefix([Path(f).name for f in files], options)
    if match is None:
        return None

    logger.debug("Prefix %r (%s) found in %s", match.prefix, match.kind.value, directory)
    return plan_prefix_removal(directory, files, match.prefix, match)
