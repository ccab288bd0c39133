"""
safety_checks.py - Safety Check Module

Checks run right before each rename
"""

from pathlib import Path
from typing import Optional, Tuple
import os

from .text_match import display_name, is_valid_filename


def _same_file(a: Path, b: Path) -> bool:
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False


def check_rename_op(src: Path, dst: Path) -> Tuple[bool, Optional[str]]:
    """
    Check if a single rename operation is safe

    A destination that already exists is refused unless it is the source
    itself (case-only rename on a case-insensitive filesystem).

    Args:
        src: Source path
        dst: Destination path

    Returns:
        (is_safe, error_reason)
    """
    if not src.exists():
        return False, f"Source file does not exist: {display_name(str(src))}"

    if not src.is_file():
        return False, f"Source path is not a file: {display_name(str(src))}"

    valid, error = is_valid_filename(dst.name)
    if not valid:
        return False, error

    if os.path.lexists(dst) and not _same_file(src, dst):
        return False, f"Destination already exists: {display_name(dst.name)}"

    if not os.access(src.parent, os.W_OK):
        return False, f"Directory is not writable: {display_name(str(src.parent))}"

    return True, None
