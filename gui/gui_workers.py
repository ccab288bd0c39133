"""
gui_workers.py - GUI Worker Threads

Provides background execution of long tasks to avoid blocking UI
"""

from pathlib import Path
from typing import Iterable, List, Optional

from PySide6.QtCore import QThread, Signal, QObject

from core import (
    PrefixOptions, RenamePlan, RenameResult,
    build_directory_plan, collect_files, display_name, execute_rename,
    get_logger, group_by_directory,
)

logger = get_logger(__name__)


class ScanWorker(QThread):
    """Collect files, detect prefixes and plan renames per directory"""

    # Signals
    progress = Signal(str)          # Progress message
    finished = Signal(list)         # Complete, returns list of RenamePlan
    error = Signal(str)             # Error message

    def __init__(
        self,
        directory: Path,
        exclude_dirs: Iterable[str] = (),
        extensions: Iterable[str] = (),
        options: Optional[PrefixOptions] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.directory = directory
        self.exclude_dirs = list(exclude_dirs)
        self.extensions = list(extensions)
        self.options = options or PrefixOptions()
        self._cancelled = False

    def cancel(self):
        """Cancel scan"""
        self._cancelled = True

    def run(self):
        try:
            def progress_callback(msg: str):
                if self._cancelled:
                    raise InterruptedError("Scan cancelled")
                self.progress.emit(display_name(msg))

            files = collect_files(
                self.directory,
                exclude_dirs=self.exclude_dirs,
                extensions=self.extensions,
                progress_callback=progress_callback,
            )

            plans: List[RenamePlan] = []
            for directory, dir_files in group_by_directory(files).items():
                if self._cancelled:
                    raise InterruptedError("Scan cancelled")
                self.progress.emit(f"Analyzing {display_name(str(directory))}")
                plan = build_directory_plan(directory, dir_files, self.options)
                if plan is not None and (plan.ops or plan.warnings):
                    plans.append(plan)

            self.finished.emit(plans)
        except InterruptedError:
            self.finished.emit([])
        except (OSError, ValueError) as e:
            logger.error("Scan of %s failed: %s", self.directory, e)
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # RenameResult
    error = Signal(str)                 # Error message

    def __init__(
        self,
        plans: List[RenamePlan],
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)
        self.plans = plans

    def run(self):
        total = sum(plan.total_count for plan in self.plans)
        done = 0
        result = RenameResult()

        try:
            for plan in self.plans:
                def progress_callback(current: int, _total: int, msg: str, offset=done):
                    self.progress.emit(offset + current, total, msg)

                result.merge(execute_rename(plan, progress_callback=progress_callback))
                done += plan.total_count

            self.finished.emit(result)
        except OSError as e:
            self.error.emit(str(e))
