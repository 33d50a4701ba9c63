import sys
import os
import logging
from PySide6.QtWidgets import (QApplication, QMainWindow, QWidget, QVBoxLayout,
                               QHBoxLayout, QLabel, QFrame, QComboBox, QLineEdit,
                               QSlider, QScrollArea)
from PySide6.QtCore import Qt

from styles import STYLESHEET, background_stylesheet, preview_stylesheet
from color_state import ColorKind
from color_store import ColorStore
from icon_gen import create_app_icon
from widgets import ColorSelector, CopyLabel, Swatch

logger = logging.getLogger(__name__)

# --- Constants ---
FONT_FAMILIES = ["serif", "sans-serif", "monospace", "cursive", "fantasy", "system-ui"]
FONT_WEIGHTS = ["normal", "bold"]
FONT_SIZE_RANGE = (6, 200)

DEFAULT_TEXT_SETTINGS = {
    "text": "This is sample text.",
    "font_size": 80,
    "font_family": FONT_FAMILIES[1],
    "font_weight": FONT_WEIGHTS[1],
}

LOG_LEVEL_ENV = "COLOR_VIEWER_LOG_LEVEL"


class KindBox(QFrame):
    """
    Editor for one slot: heading with the color codes plus RGB and HSL selectors.
    """
    def __init__(self, kind, title, parent=None):
        super().__init__(parent)
        self.kind = kind
        self.setObjectName("KindBox")

        layout = QVBoxLayout(self)
        layout.setSpacing(6)

        heading = QHBoxLayout()
        heading.setSpacing(8)
        self.swatch = Swatch()
        heading.addWidget(self.swatch)
        title_lbl = QLabel(title)
        title_lbl.setObjectName("SectionTitle")
        heading.addWidget(title_lbl)

        self.hex_label = CopyLabel()
        self.rgb_label = CopyLabel()
        self.hsl_label = CopyLabel()
        for lbl in (self.hex_label, self.rgb_label, self.hsl_label):
            heading.addWidget(QLabel("-"))
            heading.addWidget(lbl)
        heading.addStretch()
        layout.addLayout(heading)

        self.rgb_selector = ColorSelector.rgb(kind)
        self.hsl_selector = ColorSelector.hsl(kind)
        layout.addWidget(self.rgb_selector)
        layout.addWidget(self.hsl_selector)

    def show_slot(self, slot):
        color = slot.rgb_color()
        self.swatch.set_color(color.hex_code())
        self.hex_label.setText(color.hex_code())
        self.rgb_label.setText(color.css_rgb())
        self.hsl_label.setText(color.css_hsl())
        self.rgb_selector.set_slot(slot)
        self.hsl_selector.set_slot(slot)


class ColorViewerWindow(QMainWindow):
    def __init__(self, store=None):
        super().__init__()
        self.setWindowTitle("Color Viewer")
        self.setWindowIcon(create_app_icon())
        self.resize(900, 760)

        self.store = store or ColorStore(parent=self)
        self.text_settings = dict(DEFAULT_TEXT_SETTINGS)
        self.kind_boxes = {}

        self.setup_ui()

        for kind, box in self.kind_boxes.items():
            box.rgb_selector.value_edited.connect(self.store.dispatch)
            box.hsl_selector.value_edited.connect(self.store.dispatch)
            box.show_slot(self.store.slot(kind))

        self.store.slot_changed.connect(self.on_slot_changed)
        self.store.background_changed.connect(self.apply_background)

        self.apply_background(self.store.color(ColorKind.BACKGROUND).hex_code())
        self.update_preview()

    def setup_ui(self):
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        self.setCentralWidget(scroll)

        self.central = QWidget()
        self.central.setObjectName("CentralWidget")
        self.central.setAttribute(Qt.WA_StyledBackground, True)
        scroll.setWidget(self.central)

        main_layout = QVBoxLayout(self.central)
        main_layout.setSpacing(10)
        main_layout.setContentsMargins(16, 16, 16, 16)

        title = QLabel("Color Viewer")
        title.setObjectName("WindowTitle")
        main_layout.addWidget(title)

        fg_box = KindBox(ColorKind.FOREGROUND, "Foreground (Text)")
        fg_box.layout().addLayout(self.create_text_settings())
        main_layout.addWidget(fg_box)
        self.kind_boxes[ColorKind.FOREGROUND] = fg_box

        bg_box = KindBox(ColorKind.BACKGROUND, "Background")
        main_layout.addWidget(bg_box)
        self.kind_boxes[ColorKind.BACKGROUND] = bg_box

        self.preview_lbl = QLabel()
        self.preview_lbl.setObjectName("PreviewText")
        self.preview_lbl.setWordWrap(True)
        main_layout.addWidget(self.preview_lbl)
        main_layout.addStretch()

    def create_text_settings(self):
        row = QHBoxLayout()
        row.setSpacing(8)

        row.addWidget(QLabel("Text:"))
        self.text_edit = QLineEdit(self.text_settings["text"])
        self.text_edit.textChanged.connect(lambda t: self.set_text_setting("text", t))
        row.addWidget(self.text_edit, 1)

        row.addWidget(QLabel("Size:"))
        self.size_slider = QSlider(Qt.Horizontal)
        self.size_slider.setRange(*FONT_SIZE_RANGE)
        self.size_slider.setValue(self.text_settings["font_size"])
        self.size_slider.valueChanged.connect(lambda v: self.set_text_setting("font_size", v))
        row.addWidget(self.size_slider)
        self.size_lbl = QLabel(f"{self.text_settings['font_size']}px")
        row.addWidget(self.size_lbl)

        row.addWidget(QLabel("Font:"))
        self.family_combo = QComboBox()
        self.family_combo.addItems(FONT_FAMILIES)
        self.family_combo.setCurrentText(self.text_settings["font_family"])
        self.family_combo.currentTextChanged.connect(lambda t: self.set_text_setting("font_family", t))
        row.addWidget(self.family_combo)

        row.addWidget(QLabel("Weight:"))
        self.weight_combo = QComboBox()
        self.weight_combo.addItems(FONT_WEIGHTS)
        self.weight_combo.setCurrentText(self.text_settings["font_weight"])
        self.weight_combo.currentTextChanged.connect(lambda t: self.set_text_setting("font_weight", t))
        row.addWidget(self.weight_combo)

        return row

    def set_text_setting(self, key, value):
        self.text_settings[key] = value
        if key == "font_size":
            self.size_lbl.setText(f"{value}px")
        self.update_preview()

    def on_slot_changed(self, kind, slot):
        self.kind_boxes[kind].show_slot(slot)
        if kind == ColorKind.FOREGROUND:
            self.update_preview()

    def apply_background(self, bg_hex):
        self.central.setStyleSheet(background_stylesheet(bg_hex))

    def update_preview(self):
        s = self.text_settings
        fg_hex = self.store.color(ColorKind.FOREGROUND).hex_code()
        self.preview_lbl.setText(s["text"])
        self.preview_lbl.setStyleSheet(
            preview_stylesheet(fg_hex, s["font_family"], s["font_size"], s["font_weight"]))


def main(argv=None):
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    os.environ.setdefault("QT_AUTO_SCREEN_SCALE_FACTOR", "1")

    app = QApplication(sys.argv if argv is None else argv)
    app.setStyleSheet(STYLESHEET)

    window = ColorViewerWindow()
    window.show()
    logger.info("Color Viewer started")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
