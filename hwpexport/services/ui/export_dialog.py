from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
)

from hwpexport.domain.models import ExportParameters, ExportTarget, SingleTarget
from hwpexport.services.target_resolver import default_output_name
from hwpexport.utils.constants import HWP_EXTENSION

FolderPickerFn = Callable[[], "Future[str | None]"]


class _PickRelay(QObject):
    """Hands a picker result back to the dialog on the GUI thread."""

    picked = pyqtSignal(object)


class ExportDialog(QDialog):
    """
    Collects export parameters for one target.

    Single documents get a file name field (with a fixed .hwp suffix); folders
    only get the output folder. Both get a Browse… button that asks the engine
    for a native folder dialog, and the paragraph indent toggle.
    """

    def __init__(
        self,
        target: ExportTarget,
        default_path: str,
        pick_folder: FolderPickerFn | None = None,
        parent=None,
    ):
        super().__init__(parent)
        self.setModal(True)
        self._target = target
        self._pick_folder = pick_folder
        self._closed = False
        self._relay = _PickRelay(self)
        self._relay.picked.connect(self._apply_picked)

        self.is_single = isinstance(target, SingleTarget)

        # Widgets
        self.name_edit: QLineEdit | None = None
        if self.is_single:
            self.setWindowTitle("Export to HWP")
            self.name_edit = QLineEdit(default_output_name(target))
        else:
            self.setWindowTitle(f"Export Folder: {target.display_name}")

        self.path_edit = QLineEdit(default_path)
        self.browse_btn = QPushButton("Browse…")
        self.browse_btn.setToolTip("Choose folder")
        self.browse_btn.setEnabled(pick_folder is not None)

        self.indent_check = QCheckBox("Indent paragraphs")
        self.indent_check.setToolTip("Add one space at the start of each paragraph.")
        self.indent_check.setChecked(False)

        self.export_btn = QPushButton("Export" if self.is_single else "Export All")
        self.export_btn.setDefault(True)
        self.cancel_btn = QPushButton("Cancel")

        # Layout
        form = QGridLayout()
        row = 0
        if self.name_edit is not None:
            form.addWidget(QLabel("File name:"), row, 0)
            form.addWidget(self.name_edit, row, 1, 1, 2)
            form.addWidget(QLabel(HWP_EXTENSION), row, 3)
            row += 1
        form.addWidget(QLabel("Save to:"), row, 0)
        form.addWidget(self.path_edit, row, 1, 1, 2)
        form.addWidget(self.browse_btn, row, 3)
        row += 1
        form.addWidget(self.indent_check, row, 0, 1, 4)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        buttons.addWidget(self.cancel_btn)
        buttons.addWidget(self.export_btn)

        root = QVBoxLayout(self)
        if not self.is_single:
            root.addWidget(QLabel("Every Markdown file in this folder will be converted."))
        root.addLayout(form)
        root.addLayout(buttons)

        # Signals
        self.browse_btn.clicked.connect(self._browse)
        self.export_btn.clicked.connect(self.accept)
        self.cancel_btn.clicked.connect(self.reject)

    def done(self, result: int) -> None:
        self._closed = True
        super().done(result)

    def parameters(self) -> ExportParameters:
        name = self.name_edit.text().strip() if self.name_edit is not None else None
        return ExportParameters(
            output_name=name,
            output_directory=self.path_edit.text(),
            space_indent=self.indent_check.isChecked(),
        )

    def _browse(self) -> None:
        if self._pick_folder is None:
            return
        self.browse_btn.setEnabled(False)
        self._pick_folder().add_done_callback(self._relay_picked)

    def _relay_picked(self, picked: Future[str | None]) -> None:
        # The picker can outlive the dialog; a closed dialog takes no result.
        if self._closed:
            return
        self._relay.picked.emit(picked.result())

    def _apply_picked(self, picked: str | None) -> None:
        self.browse_btn.setEnabled(True)
        if picked:
            self.path_edit.setText(picked)
