"""
gui_mainwindow.py - GUI Main Window

One panel: pick a directory, scan it, review the detected prefix
of each folder and rename the checked folders.
"""

from pathlib import Path
from typing import List, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QTreeWidget, QTreeWidgetItem,
    QProgressBar, QFileDialog, QMessageBox, QHeaderView, QGroupBox
)
from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QColor

from core import (
    AppConfig, MatchKind, RenamePlan, RenameResult,
    display_name, normalize_extensions, parse_list
)
from .gui_workers import ScanWorker, RenameWorker


class PrefixRemovalPanel(QWidget):
    """Prefix removal panel"""

    def __init__(self, config: Optional[AppConfig] = None, parent=None):
        super().__init__(parent)
        self.config = config or AppConfig()
        self.plans: List[RenamePlan] = []
        self.scan_worker: Optional[ScanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Scan settings group
        scan_group = QGroupBox("Scan Settings")
        scan_layout = QGridLayout(scan_group)

        scan_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select music directory...")
        scan_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        scan_layout.addWidget(self.browse_btn, 0, 2)

        scan_layout.addWidget(QLabel("Exclude Dirs:"), 1, 0)
        self.exclude_edit = QLineEdit(",".join(self.config.default_exclude_dirs))
        self.exclude_edit.setPlaceholderText("Comma-separated directory names")
        scan_layout.addWidget(self.exclude_edit, 1, 1, 1, 2)

        scan_layout.addWidget(QLabel("Extensions:"), 2, 0)
        self.exts_edit = QLineEdit(",".join(self.config.default_extensions))
        self.exts_edit.setPlaceholderText("e.g. mp3,m4a,flac (leave empty for all files)")
        scan_layout.addWidget(self.exts_edit, 2, 1, 1, 2)

        self.scan_btn = QPushButton("Scan")
        self.scan_btn.clicked.connect(self._do_scan)
        scan_layout.addWidget(self.scan_btn, 3, 0, 1, 3)

        layout.addWidget(scan_group)

        # Results tree: one checkable row per directory, children are renames
        self.tree = QTreeWidget()
        self.tree.setColumnCount(3)
        self.tree.setHeaderLabels(["Directory / Original Name", "New Name", "Prefix"])
        self.tree.header().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.tree.header().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.tree.header().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        layout.addWidget(self.tree, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Remove Prefixes")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _set_busy(self, busy: bool):
        self.scan_btn.setEnabled(not busy)
        self.browse_btn.setEnabled(not busy)
        self.execute_btn.setEnabled(not busy and any(p.ops for p in self.plans))
        self.progress_bar.setVisible(busy)

    def _do_scan(self):
        """Scan directory and plan renames"""
        directory = self.dir_edit.text().strip()
        if not directory:
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return

        path = Path(directory).expanduser()
        if not path.is_dir():
            QMessageBox.warning(self, "Warning", f"Directory does not exist: {directory}")
            return

        self.plans = []
        self.tree.clear()
        self._set_busy(True)
        self.scan_btn.setText("Scanning...")
        self.progress_bar.setRange(0, 0)  # Indeterminate progress

        self.scan_worker = ScanWorker(
            path.resolve(),
            exclude_dirs=parse_list(self.exclude_edit.text()),
            extensions=normalize_extensions(parse_list(self.exts_edit.text())),
            options=self.config.prefix,
        )
        self.scan_worker.progress.connect(self._on_scan_progress)
        self.scan_worker.finished.connect(self._on_scan_finished)
        self.scan_worker.error.connect(self._on_scan_error)
        self.scan_worker.start()

    @Slot(str)
    def _on_scan_progress(self, msg: str):
        self.status_label.setText(msg[-80:] if len(msg) > 80 else msg)

    @Slot(list)
    def _on_scan_finished(self, plans: List[RenamePlan]):
        self.plans = plans
        self.scan_btn.setText("Scan")
        self._set_busy(False)
        self._populate_tree()

        op_count = sum(p.total_count for p in plans)
        warnings = [w for p in plans for w in p.warnings]
        if op_count:
            text = f"{op_count} files in {sum(1 for p in plans if p.ops)} directories can be renamed"
        else:
            text = "No common prefixes found"
        if warnings:
            text += "\nWarnings:\n" + "\n".join(warnings[:5])
            if len(warnings) > 5:
                text += f"\n... and {len(warnings) - 5} more warnings"
        self.status_label.setText(text)

    @Slot(str)
    def _on_scan_error(self, error: str):
        self.scan_btn.setText("Scan")
        self._set_busy(False)
        QMessageBox.critical(self, "Error", f"Scan failed: {error}")

    def _populate_tree(self):
        """Fill the tree with one row per directory plan"""
        self.tree.clear()
        base_dir = Path(self.dir_edit.text()).expanduser().resolve()

        for index, plan in enumerate(self.plans):
            try:
                label = display_name(str(plan.directory.relative_to(base_dir))) or "."
            except ValueError:
                label = display_name(str(plan.directory))

            how = "majority" if plan.match and plan.match.kind is MatchKind.MAJORITY else "common"
            group_item = QTreeWidgetItem([f"{label}  ({plan.total_count} files)", "", f"{plan.prefix!r} [{how}]"])
            group_item.setData(0, Qt.ItemDataRole.UserRole, index)
            if plan.ops:
                group_item.setFlags(group_item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
                group_item.setCheckState(0, Qt.CheckState.Checked)
            else:
                group_item.setForeground(0, QColor(150, 150, 150))

            for op in plan.ops:
                child = QTreeWidgetItem([display_name(op.old_name), display_name(op.new_name), ""])
                child.setForeground(1, QColor(0, 150, 0))
                group_item.addChild(child)

            self.tree.addTopLevelItem(group_item)
            group_item.setExpanded(len(self.plans) == 1)

    def _checked_plans(self) -> List[RenamePlan]:
        checked = []
        for i in range(self.tree.topLevelItemCount()):
            item = self.tree.topLevelItem(i)
            if item.checkState(0) == Qt.CheckState.Checked:
                checked.append(self.plans[item.data(0, Qt.ItemDataRole.UserRole)])
        return checked

    def _do_execute(self):
        """Rename files of the checked directories"""
        plans = [p for p in self._checked_plans() if p.ops]
        if not plans:
            QMessageBox.information(self, "Nothing to do", "No directories selected")
            return

        total = sum(p.total_count for p in plans)
        reply = QMessageBox.question(
            self, "Confirm",
            f"Rename {total} files in {len(plans)} directories?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self._set_busy(True)
        self.execute_btn.setEnabled(False)
        self.progress_bar.setRange(0, total)

        self.rename_worker = RenameWorker(plans)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        self.progress_bar.setValue(current)
        self.status_label.setText(msg)

    @Slot(object)
    def _on_rename_finished(self, result: RenameResult):
        self.plans = []
        self.tree.clear()
        self._set_busy(False)

        msg = f"Successfully renamed {result.success_count}/{result.total_count} files"
        if result.failed_count > 0:
            msg += "\n\n" + result.summary()

        QMessageBox.information(self, "Complete", msg)
        self.status_label.setText("Complete")

    @Slot(str)
    def _on_rename_error(self, error: str):
        self._set_busy(False)
        QMessageBox.critical(self, "Error", f"Execution failed: {error}")

    def shutdown(self):
        """Stop a running scan and let a running rename finish"""
        if self.scan_worker is not None and self.scan_worker.isRunning():
            self.scan_worker.cancel()
            self.scan_worker.wait()
        if self.rename_worker is not None and self.rename_worker.isRunning():
            self.rename_worker.wait()


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self, config: Optional[AppConfig] = None):
        super().__init__()
        self.config = config or AppConfig()
        self.setWindowTitle(f"{self.config.title} - Remove Prefix")
        self.setMinimumSize(800, 600)

        self.panel = PrefixRemovalPanel(self.config)
        self.setCentralWidget(self.panel)

        self.statusBar().showMessage(f"v{self.config.version}")

    def closeEvent(self, event):
        self.panel.shutdown()
        super().closeEvent(event)
