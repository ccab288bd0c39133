"""
models_fs.py - Core Data Structure Definitions

Contains:
- PrefixOptions: Prefix detection tuning
- AppConfig: Application-wide configuration passed into entry points
- PrefixMatch: Detected prefix of a directory group
- RenameOp: Single rename operation
- RenamePlan: Rename plan for one directory
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple
import platform


# Boundary characters a prefix may end on (fullwidth right bracket included)
DEFAULT_SEPARATORS: FrozenSet[str] = frozenset("-_ )]】")


class MatchKind(Enum):
    """How a prefix was found"""
    COMMON = "common"        # Shared by every file in the group
    MAJORITY = "majority"    # Shared by a super-majority of the group


@dataclass(frozen=True)
class PrefixOptions:
    """Prefix detection options"""
    separators: FrozenSet[str] = DEFAULT_SEPARATORS
    min_length: int = 3             # Minimum stripped prefix length (UTF-8 bytes)
    majority_ratio: float = 0.7     # Fraction of files a majority prefix must cover
    majority_floor: int = 2         # Absolute minimum number of matching files


@dataclass(frozen=True)
class AppConfig:
    """Application configuration"""
    prog: str = "audiotool"
    title: str = "Audio Tool"
    version: str = "1.0.0"
    default_dir: str = "."
    default_exclude_dirs: Tuple[str, ...] = ("@eaDir",)
    default_extensions: Tuple[str, ...] = ()
    preview_count: int = 5
    prefix: PrefixOptions = field(default_factory=PrefixOptions)


@dataclass(frozen=True)
class PrefixMatch:
    """Prefix detected for a group of filenames"""
    prefix: str
    kind: MatchKind
    match_count: int                # Files starting with the prefix
    total: int                      # Files in the group

    @property
    def byte_length(self) -> int:
        return len(self.prefix.encode("utf-8", "surrogateescape"))


@dataclass
class RenameOp:
    """Single rename operation"""
    src: Path                       # Source path
    dst: Path                       # Destination path

    @property
    def old_name(self) -> str:
        return self.src.name

    @property
    def new_name(self) -> str:
        return self.dst.name


@dataclass
class RenamePlan:
    """Prefix removal plan for one directory"""
    directory: Path
    prefix: str
    match: Optional[PrefixMatch] = None
    file_count: int = 0
    example_name: str = ""
    ops: List[RenameOp] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def total_count(self) -> int:
        """Total number of operations"""
        return len(self.ops)

    def add_op(self, src: Path, dst: Path) -> None:
        """Add operation"""
        self.ops.append(RenameOp(src=src, dst=dst))

    def add_warning(self, msg: str) -> None:
        """Add warning"""
        self.warnings.append(msg)


def is_case_insensitive_fs() -> bool:
    """Detect if current filesystem is case-insensitive"""
    return platform.system() in ("Windows", "Darwin")


def normalize_for_comparison(name: str, case_insensitive: bool) -> str:
    """Normalize filename for comparison"""
    if case_insensitive:
        return name.casefold()
    return name
