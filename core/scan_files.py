"""
scan_files.py - File Scanning Module

Provides recursive file collection with directory exclusion and
extension filtering, and grouping of the results by directory
"""

from collections import defaultdict
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Set
import os

from .log_setup import get_logger

logger = get_logger(__name__)


def parse_list(text: Optional[str]) -> List[str]:
    """
    Split a comma-separated option value

    Args:
        text: Raw value (e.g. "@eaDir, .git")

    Returns:
        Trimmed, non-empty items
    """
    if not text:
        return []
    return [item.strip() for item in text.split(",") if item.strip()]


def normalize_extensions(values: Iterable[str]) -> Set[str]:
    """
    Normalize extensions to lowercase with a leading dot

    Args:
        values: Extensions such as "mp3", ".M4A"

    Returns:
        Extension set (e.g. {".mp3", ".m4a"})
    """
    result = set()
    for value in values:
        value = value.strip().lower()
        if not value:
            continue
        if not value.startswith('.'):
            value = '.' + value
        result.add(value)
    return result


def _raise_walk_error(error: OSError) -> None:
    raise error


def collect_files(
    root: Path,
    exclude_dirs: Iterable[str] = (),
    extensions: Iterable[str] = (),
    progress_callback: Optional[Callable[[str], None]] = None
) -> List[Path]:
    """
    Recursively collect files under root

    Args:
        root: Root directory
        exclude_dirs: Directory basenames to prune (their contents are never visited)
        extensions: Extensions to keep (empty means all files)
        progress_callback: Progress callback function

    Returns:
        Absolute file paths in traversal order

    Raises:
        ValueError: root is not a directory
        OSError: any error while walking the tree
    """
    root = Path(root).resolve()
    if not root.is_dir():
        raise ValueError(f"Directory does not exist: {root}")

    excluded = set(exclude_dirs)
    wanted = normalize_extensions(extensions)

    results: List[Path] = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        current_dir = Path(dirpath)

        # Modifying dirnames in place prevents os.walk from entering excluded directories
        pruned = [d for d in dirnames if d in excluded]
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for d in pruned:
            logger.debug("Skipping excluded directory %s", current_dir / d)

        for filename in sorted(filenames):
            filepath = current_dir / filename

            if wanted and filepath.suffix.lower() not in wanted:
                continue

            if progress_callback:
                progress_callback(str(filepath))

            results.append(filepath)

    return results


def group_by_directory(files: Iterable[Path]) -> Dict[Path, List[Path]]:
    """
    Group files by their parent directory

    Args:
        files: File paths

    Returns:
        Mapping of directory to its files, in first-seen order
    """
    groups: Dict[Path, List[Path]] = defaultdict(list)
    for f in files:
        f = Path(f)
        groups[f.parent].append(f)
    return dict(groups)
