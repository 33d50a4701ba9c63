from PySide6.QtGui import QIcon, QPixmap, QPainter, QColor, QFont
from PySide6.QtCore import Qt, QRect

from color_logic import ColorValue
from color_state import ColorKind, DEFAULT_COLORS


def create_app_icon(fg_hex=None, bg_hex=None):
    """
    Generates the application icon: a letter in the foreground color
    on a rounded square in the background color.
    """
    fg_hex = fg_hex or ColorValue.from_rgb(*DEFAULT_COLORS[ColorKind.FOREGROUND]).hex_code()
    bg_hex = bg_hex or ColorValue.from_rgb(*DEFAULT_COLORS[ColorKind.BACKGROUND]).hex_code()

    size = 64
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.Antialiasing)

    painter.setBrush(QColor(bg_hex))
    painter.setPen(Qt.NoPen)
    painter.drawRoundedRect(4, 4, 56, 56, 12, 12)

    font = QFont()
    font.setBold(True)
    font.setPixelSize(40)
    painter.setFont(font)
    painter.setPen(QColor(fg_hex))
    painter.drawText(QRect(0, 0, size, size), Qt.AlignCenter, "A")

    painter.end()

    return QIcon(pixmap)
