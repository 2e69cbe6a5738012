import logging
import os
import sys
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QFileDialog,
    QListWidget,
    QListWidgetItem,
    QPlainTextEdit,
    QSplitter,
    QMessageBox,
    QCheckBox,
)

from foldergen.config import APP_NAME, APP_VERSION, DEFAULT_PLACEHOLDER_NAME, settings_path
from foldergen.core.catalog import iter_catalog
from foldergen.core.planner import build_scaffold_plan
from foldergen.core.scaffold import scaffold
from foldergen.core.settings import (
    ScaffoldSettings,
    SettingsError,
    default_settings,
    load_settings_or_default,
    save_settings,
    settings_for,
)
from foldergen.models import NO_CATEGORIES

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings_file=None, show_dialogs=True):
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} (v{APP_VERSION})")
        self.setMinimumSize(760, 520)

        self._settings_file = Path(settings_file) if settings_file else settings_path()
        self._show_dialogs = show_dialogs
        self._last_result = None

        root = QWidget()
        self.setCentralWidget(root)

        main_layout = QVBoxLayout(root)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(10)

        # -------------------------
        # Base + root folder
        # -------------------------
        self.base_edit = QLineEdit()
        self.base_edit.setPlaceholderText("Select base asset folder (e.g. MyGame/Assets)...")

        btn_base = QPushButton("Browse...")
        btn_base.clicked.connect(self.pick_base_folder)

        base_row = QHBoxLayout()
        base_row.addWidget(QLabel("Assets:"))
        base_row.addWidget(self.base_edit, 1)
        base_row.addWidget(btn_base)

        self.root_edit = QLineEdit()
        self.root_edit.setPlaceholderText("Project root folder (empty for none)")

        root_row = QHBoxLayout()
        root_row.addWidget(QLabel("Project root folder:"))
        root_row.addWidget(self.root_edit, 1)

        main_layout.addLayout(base_row)
        main_layout.addLayout(root_row)

        # -------------------------
        # Categories
        # -------------------------
        self.category_boxes = {}
        grid = QGridLayout()
        for idx, entry in enumerate(iter_catalog()):
            cb = QCheckBox(entry.folder)
            cb.setObjectName(f"cb_{entry.folder}")
            self.category_boxes[entry.category] = cb
            grid.addWidget(cb, idx // 4, idx % 4)

        sel_row = QHBoxLayout()
        sel_row.addWidget(QLabel("Options"))
        sel_row.addStretch(1)
        self.btn_all = QPushButton("All")
        self.btn_all.clicked.connect(lambda: self._set_all_categories(True))
        self.btn_none = QPushButton("None")
        self.btn_none.clicked.connect(lambda: self._set_all_categories(False))
        sel_row.addWidget(self.btn_all)
        sel_row.addWidget(self.btn_none)

        main_layout.addLayout(sel_row)
        main_layout.addLayout(grid)

        # -------------------------
        # Placeholder
        # -------------------------
        self.cb_placeholder = QCheckBox("Cvs support (placeholder file)")
        self.cb_placeholder.toggled.connect(self.on_placeholder_toggled)

        self.placeholder_edit = QLineEdit()
        self.placeholder_edit.setPlaceholderText(DEFAULT_PLACEHOLDER_NAME)

        ph_row = QHBoxLayout()
        ph_row.addWidget(self.cb_placeholder)
        ph_row.addWidget(QLabel("Filename:"))
        ph_row.addWidget(self.placeholder_edit, 1)
        main_layout.addLayout(ph_row)

        # -------------------------
        # Buttons
        # -------------------------
        btn_row = QHBoxLayout()
        btn_row.addStretch(1)

        self.btn_reset = QPushButton("Reset settings")
        self.btn_reset.clicked.connect(self.on_reset_clicked)

        self.btn_save = QPushButton("Save settings")
        self.btn_save.clicked.connect(self.on_save_settings_clicked)

        self.btn_preview = QPushButton("Preview")
        self.btn_preview.clicked.connect(self.on_preview_clicked)

        self.btn_generate = QPushButton("Generate")
        self.btn_generate.clicked.connect(self.on_generate_clicked)

        btn_row.addWidget(self.btn_reset)
        btn_row.addWidget(self.btn_save)
        btn_row.addWidget(self.btn_preview)
        btn_row.addWidget(self.btn_generate)
        main_layout.addLayout(btn_row)

        # -------------------------
        # Results + Logs
        # -------------------------
        splitter = QSplitter(Qt.Horizontal)

        results_panel = QWidget()
        results_layout = QVBoxLayout(results_panel)
        results_layout.setContentsMargins(0, 0, 0, 0)
        results_layout.addWidget(QLabel("Results"))
        self.results_list = QListWidget()
        results_layout.addWidget(self.results_list, 1)

        logs_panel = QWidget()
        logs_layout = QVBoxLayout(logs_panel)
        logs_layout.setContentsMargins(0, 0, 0, 0)
        logs_layout.addWidget(QLabel("Log"))
        self.log_box = QPlainTextEdit()
        self.log_box.setReadOnly(True)
        self.log_box.setPlaceholderText("Logs will appear here...")
        logs_layout.addWidget(self.log_box, 1)

        splitter.addWidget(results_panel)
        splitter.addWidget(logs_panel)
        splitter.setSizes([420, 340])
        main_layout.addWidget(splitter, 1)

        # Stable IDs for UI tests
        self.base_edit.setObjectName("base_edit")
        self.root_edit.setObjectName("root_edit")
        self.cb_placeholder.setObjectName("cb_placeholder")
        self.placeholder_edit.setObjectName("placeholder_edit")
        self.btn_reset.setObjectName("btn_reset")
        self.btn_preview.setObjectName("btn_preview")
        self.btn_generate.setObjectName("btn_generate")
        self.results_list.setObjectName("results_list")
        self.log_box.setObjectName("log_box")

        try:
            initial = load_settings_or_default(self._settings_file)
        except SettingsError as e:
            logger.warning("%s", e)
            self.log(f"WARNING: {e}")
            initial = default_settings()
        self._apply_settings(initial)

        self.log("Ready. Choose the assets folder, then Generate.")

    # -------------------------
    # UI Helpers
    # -------------------------
    def log(self, msg: str):
        self.log_box.appendPlainText(msg)

    def add_result(self, level: str, message: str):
        item = QListWidgetItem(f"[{level}] {message}")

        lvl = level.upper().strip()
        if lvl == "ERROR":
            item.setForeground(Qt.red)
        elif lvl == "WARNING":
            item.setForeground(Qt.darkYellow)
        else:
            item.setForeground(Qt.darkGreen)

        self.results_list.addItem(item)

    def _message(self, kind: str, text: str):
        if not self._show_dialogs:
            return
        if kind == "error":
            QMessageBox.critical(self, APP_NAME, text)
        else:
            QMessageBox.information(self, APP_NAME, text)

    def pick_base_folder(self):
        folder = QFileDialog.getExistingDirectory(self, "Select Assets Folder")
        if folder:
            self.base_edit.setText(os.path.normpath(folder))
            self.log(f"Assets folder set: {folder}")

    def _set_all_categories(self, checked: bool):
        for cb in self.category_boxes.values():
            cb.setChecked(checked)

    def _selected_categories(self):
        selected = NO_CATEGORIES
        for cat, cb in self.category_boxes.items():
            if cb.isChecked():
                selected |= cat
        return selected

    def _apply_settings(self, s: ScaffoldSettings):
        self.root_edit.setText(s.root_folder)
        selected = s.selected
        for cat, cb in self.category_boxes.items():
            cb.setChecked(bool(cat & selected))

        # Set the toggle without firing the filename reset.
        self.cb_placeholder.blockSignals(True)
        self.cb_placeholder.setChecked(s.placeholder_enabled)
        self.cb_placeholder.blockSignals(False)
        self.placeholder_edit.setText(s.placeholder_name)
        self.placeholder_edit.setEnabled(s.placeholder_enabled)

    def _read_settings(self) -> ScaffoldSettings:
        return settings_for(
            root_folder=self.root_edit.text().strip(),
            categories=self._selected_categories(),
            placeholder_enabled=self.cb_placeholder.isChecked(),
            placeholder_name=self.placeholder_edit.text().strip(),
        )

    def _require_base(self):
        base = self.base_edit.text().strip()
        if not base or not os.path.isdir(base):
            self.add_result("ERROR", "Please choose a valid assets folder.")
            self._message("error", "Please choose a valid assets folder.")
            return None
        return base

    # -------------------------
    # Actions
    # -------------------------
    def on_placeholder_toggled(self, checked: bool):
        self.placeholder_edit.setText(DEFAULT_PLACEHOLDER_NAME)
        self.placeholder_edit.setEnabled(checked)

    def on_reset_clicked(self):
        self._apply_settings(default_settings())
        self.log("Settings reset to defaults.")

    def on_save_settings_clicked(self):
        s = self._read_settings()
        try:
            path = save_settings(s, self._settings_file)
        except OSError as e:
            self.add_result("ERROR", f"Settings not saved: {e}")
            self._message("error", str(e))
            return
        self.add_result("INFO", f"Settings saved: {path}")
        self.log(f"Settings saved: {path}")

    def on_preview_clicked(self):
        self.results_list.clear()
        base = self._require_base()
        if not base:
            return

        s = self._read_settings()
        plan = build_scaffold_plan(base, s.root_folder, s.selected, s.effective_placeholder)
        if not plan:
            self.add_result("WARNING", "Nothing selected.")
            return

        self.add_result("INFO", f"Plan: {len(plan)} action(s)")
        for item in plan:
            self.add_result("INFO", f"{item.kind}: {item.path}")
        self.log(f"Preview plan contains {len(plan)} item(s).")

    def on_generate_clicked(self):
        self.results_list.clear()
        base = self._require_base()
        if not base:
            return

        s = self._read_settings()
        if s.placeholder_enabled and not s.effective_placeholder:
            # Empty filename turns placeholder support off.
            self.cb_placeholder.setChecked(False)
            s = self._read_settings()

        self.log("---- GENERATE START ----")
        self.log(f"Assets: {base} | Root: {s.root_folder or '(none)'}")

        result = scaffold(base, s.root_folder, s.selected, s.effective_placeholder)
        self._last_result = result

        if result.ok:
            level = "INFO" if result.status == "success" else "WARNING"
            self.add_result(level, result.describe())
            self.add_result(
                "INFO",
                f"Created {len(result.created_dirs)} folder(s), {len(result.created_files)} placeholder(s)",
            )
            self._message("info", result.describe())
        else:
            self.add_result("ERROR", result.describe())
            self._message("error", result.describe())

        self.log("---- GENERATE DONE ----")


def run_app() -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    window = MainWindow()
    window.show()
    return app.exec()
