"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Rename path by path
- A failed entry is reported and counted, the rest still run
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
import os

from .log_setup import get_logger
from .models_fs import RenameOp, RenamePlan
from .safety_checks import check_rename_op
from .text_match import display_name

logger = get_logger(__name__)


@dataclass
class RenameResult:
    """Rename execution result"""
    success: List[RenameOp] = field(default_factory=list)
    failed: List[Tuple[RenameOp, str]] = field(default_factory=list)  # (op, error_msg)

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def total_count(self) -> int:
        return self.success_count + self.failed_count

    def merge(self, other: "RenameResult") -> None:
        """Add another result's entries to this one"""
        self.success.extend(other.success)
        self.failed.extend(other.failed)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            "Execution Result:",
            f"  - Success: {self.success_count}",
            f"  - Failed: {self.failed_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            for op, error in self.failed[:10]:  # Show at most 10
                lines.append(f"  - {display_name(op.old_name)} -> {display_name(op.new_name)}: {error}")
            if len(self.failed) > 10:
                lines.append(f"  ... and {len(self.failed) - 10} more failures")
        return "\n".join(lines)


def execute_rename(
    plan: RenamePlan,
    progress_callback: Optional[Callable[[int, int, str], None]] = None
) -> RenameResult:
    """
    Execute rename plan

    Args:
        plan: Rename plan
        progress_callback: Progress callback (current, total, message)

    Returns:
        Execution result
    """
    result = RenameResult()
    total = len(plan.ops)

    for i, op in enumerate(plan.ops):
        if progress_callback:
            progress_callback(i + 1, total, f"{display_name(op.old_name)} -> {display_name(op.new_name)}")

        ok, reason = check_rename_op(op.src, op.dst)
        if not ok:
            logger.error("failed to rename %s: %s", display_name(op.old_name), reason)
            result.failed.append((op, reason))
            continue

        try:
            os.rename(op.src, op.dst)
        except OSError as e:
            logger.error("failed to rename %s: %s", display_name(op.old_name), e)
            result.failed.append((op, str(e)))
            continue

        result.success.append(op)

    return result
