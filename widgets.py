from PySide6.QtWidgets import (QWidget, QLabel, QFrame, QVBoxLayout, QHBoxLayout,
                               QSlider, QLineEdit, QApplication)
from PySide6.QtCore import Qt, Signal, QTimer, Property

from color_state import ColorElement, ELEMENT_MAXIMUMS, RGB_ELEMENTS, HSL_ELEMENTS


class CopyLabel(QLabel):
    """
    A label that copies its text to clipboard on click.
    Uses dynamic property to handle flash styling without resetting font styles.
    """
    def __init__(self, text="", parent=None):
        super().__init__(text, parent)
        self.setObjectName("CodeLabel")
        self.setCursor(Qt.PointingHandCursor)

        self._flashing = False

        self.flash_timer = QTimer(self)
        self.flash_timer.timeout.connect(self.reset_style)
        self.flash_timer.setSingleShot(True)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            QApplication.clipboard().setText(self.text())
            self.flash_effect()

    def get_flashing(self):
        return self._flashing

    def set_flashing(self, val):
        self._flashing = val
        self.style().unpolish(self)
        self.style().polish(self)

    flashing = Property(bool, get_flashing, set_flashing)

    def flash_effect(self):
        self.set_flashing(True)
        self.flash_timer.start(150)

    def reset_style(self):
        self.set_flashing(False)


class Swatch(QFrame):
    def __init__(self, color_hex="#000000", parent=None):
        super().__init__(parent)
        self.setObjectName("Swatch")
        self.setFixedSize(28, 28)
        self.set_color(color_hex)

    def set_color(self, color_hex):
        self.color_hex = color_hex
        self.setStyleSheet(f"background-color: {color_hex};")


class ColorElementSelector(QWidget):
    """
    Slider + 3-character text box + percentage readout for one color element.

    Both inputs forward the raw text through value_edited; set_value() is for
    programmatic updates and does not emit.
    """
    value_edited = Signal(object, object, str)  # ColorKind, ColorElement, text

    def __init__(self, kind, element, parent=None):
        super().__init__(parent)
        self.kind = kind
        self.element = ColorElement(element)
        self.maximum = ELEMENT_MAXIMUMS[self.element]

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        self.label = QLabel(f"{self.element.value[0]}:")
        self.label.setObjectName("ElementLabel")
        layout.addWidget(self.label)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(0, self.maximum)
        self.slider.valueChanged.connect(self._on_slider_moved)
        layout.addWidget(self.slider, 1)

        self.line_edit = QLineEdit()
        self.line_edit.setMaxLength(3)
        self.line_edit.setFixedWidth(48)
        self.line_edit.textEdited.connect(self._on_text_edited)
        layout.addWidget(self.line_edit)

        self.percent_label = QLabel()
        self.percent_label.setObjectName("PercentLabel")
        self.percent_label.setFixedWidth(56)
        layout.addWidget(self.percent_label)

    def set_value(self, field):
        """
        Show a FieldValue. Invalid numbers leave the slider where it is.
        """
        if self.line_edit.text() != field.raw:
            self.line_edit.setText(field.raw)

        if field.is_valid:
            self.slider.blockSignals(True)
            self.slider.setValue(int(round(max(0, min(self.maximum, field.number)))))
            self.slider.blockSignals(False)
            self.percent_label.setText(f"({round(field.number / self.maximum * 100)}%)")
        else:
            self.percent_label.setText("(--%)")

    def _on_slider_moved(self, value):
        self.value_edited.emit(self.kind, self.element, str(value))

    def _on_text_edited(self, text):
        self.value_edited.emit(self.kind, self.element, text)


class ColorSelector(QWidget):
    """
    The three element selectors of one triple (RGB or HSL) for one slot.
    """
    value_edited = Signal(object, object, str)

    def __init__(self, kind, elements, parent=None):
        super().__init__(parent)
        self.kind = kind
        self.selectors = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        for element in elements:
            selector = ColorElementSelector(kind, element)
            selector.value_edited.connect(self.value_edited)
            layout.addWidget(selector)
            self.selectors[element] = selector

    @classmethod
    def rgb(cls, kind, parent=None):
        return cls(kind, RGB_ELEMENTS, parent)

    @classmethod
    def hsl(cls, kind, parent=None):
        return cls(kind, HSL_ELEMENTS, parent)

    def set_slot(self, slot):
        for element, selector in self.selectors.items():
            selector.set_value(slot.field(element))
