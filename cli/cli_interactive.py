"""
cli_interactive.py - Confirmation and Execution Driver

Walks the tree, handles one directory group at a time:
detect prefix, plan, preview, ask, rename, report
"""

from pathlib import Path
from typing import Iterable, Optional, Sequence

from core import (
    AppConfig, MatchKind, RenamePlan, RenameResult,
    build_directory_plan, collect_files, display_name, execute_rename,
    get_logger, group_by_directory,
)

logger = get_logger(__name__)


def confirm(prompt: str) -> bool:
    """
    Ask a yes/no question on stdin

    Only "y" and "yes" (any case) count as yes; anything else,
    including an empty line, is a no. EOFError propagates.
    """
    response = input(prompt)
    return response.strip().lower() in ("y", "yes")


def print_plan_header(plan: RenamePlan) -> None:
    """Print the directory block header"""
    print(f"\nDirectory: {display_name(str(plan.directory))}")
    match = plan.match
    if match.kind is MatchKind.MAJORITY:
        print(f"Majority prefix found: {display_name(plan.prefix)} "
              f"(length: {match.byte_length} bytes, shared by {match.match_count}/{match.total} files)")
    else:
        print(f"Common prefix found: {display_name(plan.prefix)} (length: {match.byte_length} bytes)")
    print(f"File count: {plan.file_count}")
    print(f"Example filename: {display_name(plan.example_name)}\n")


def print_preview(plan: RenamePlan, preview_count: int = 5) -> None:
    """Print the first operations of a plan"""
    print(f"Rename preview (showing first {preview_count}):")
    for op in plan.ops[:preview_count]:
        print(f"  {display_name(op.old_name)}\n  -> {display_name(op.new_name)}\n")
    if len(plan.ops) > preview_count:
        print(f"  ... and {len(plan.ops) - preview_count} more files\n")


def process_directory(
    directory: Path,
    files: Sequence[Path],
    dry_run: bool = False,
    auto_yes: bool = False,
    config: Optional[AppConfig] = None
) -> Optional[RenameResult]:
    """
    Process the files of a single directory

    Args:
        directory: Directory
        files: Files directly inside directory
        dry_run: Preview only
        auto_yes: Treat the group as confirmed without asking
        config: Application configuration

    Returns:
        Execution result, or None if nothing was renamed
    """
    if config is None:
        config = AppConfig()

    plan = build_directory_plan(directory, files, config.prefix)
    if plan is None:
        return None

    print_plan_header(plan)

    if not plan.ops:
        return None

    print_preview(plan, config.preview_count)

    if dry_run:
        print("[Preview Mode] No actual renaming performed")
        return None

    if not auto_yes and not confirm(f"Proceed to rename these {plan.total_count} files? (y/n): "):
        print("Skipped this directory")
        return None

    result = execute_rename(plan)
    print(f"Successfully renamed {result.success_count}/{plan.total_count} files")
    return result


def run_remove_prefix(
    root: Path,
    dry_run: bool = False,
    auto_yes: bool = False,
    exclude_dirs: Iterable[str] = (),
    extensions: Iterable[str] = (),
    config: Optional[AppConfig] = None
) -> int:
    """
    Remove common prefixes from filenames under root

    Args:
        root: Absolute root directory
        dry_run: Preview only
        auto_yes: Skip confirmation prompts
        exclude_dirs: Directory basenames to prune
        extensions: Extensions to keep (empty means all)
        config: Application configuration

    Returns:
        Exit code
    """
    if config is None:
        config = AppConfig()

    print(f"Processing directory: {display_name(str(root))}")
    if dry_run:
        print("Mode: Preview mode (files will not be modified)")
    print()

    try:
        files = collect_files(root, exclude_dirs=exclude_dirs, extensions=extensions)
    except (OSError, ValueError) as e:
        logger.error("failed to collect files: %s", e)
        return 1

    if not files:
        print("No files found")
        return 0

    print(f"Found {len(files)} files in total")

    groups = group_by_directory(files)
    print(f"Involving {len(groups)} directories")

    total = RenameResult()
    for directory, dir_files in groups.items():
        try:
            result = process_directory(directory, dir_files, dry_run, auto_yes, config)
        except (OSError, EOFError, UnicodeError) as e:
            logger.error("failed to process directory %s: %s", display_name(str(directory)), e)
            continue
        if result is not None:
            total.merge(result)

    if total.total_count:
        print(f"\nRenamed {total.success_count}/{total.total_count} files in total")
    print("\nProcessing complete!")
    return 0
