STYLESHEET = """
QMainWindow {
    background-color: #121212;
    color: #e0e0e0;
}

QWidget {
    font-family: 'Roboto', 'Inter', 'Segoe UI', monospace;
    font-size: 14px;
    color: #e0e0e0;
}

QLabel {
    color: #e0e0e0;
    background-color: transparent;
}

QLabel#WindowTitle {
    font-weight: bold;
    font-size: 22px;
    color: #ffffff;
}

QLabel#SectionTitle {
    font-weight: bold;
    font-size: 15px;
    margin-top: 8px;
    margin-bottom: 4px;
    color: #ffffff;
}

QLabel#ElementLabel {
    font-weight: bold;
    min-width: 1.5em;
}

QLabel#PercentLabel {
    font-family: monospace;
    font-size: 12px;
    color: #aaaaaa;
}

/* Slot editor boxes */
QFrame#KindBox {
    border: 1px solid #333333;
    border-radius: 8px;
    padding: 8px;
    margin-bottom: 8px;
    background-color: #1e1e1e;
}

QFrame#Swatch {
    border-radius: 6px;
    border: 1px solid #333333;
}

QLabel#CodeLabel {
    font-family: monospace;
    font-size: 13px;
    color: #aaaaaa;
}
QLabel#CodeLabel:hover {
    color: #ffffff;
}
QLabel#CodeLabel[flashing="true"] {
    color: #4CAF50;
}

/* Inputs */
QLineEdit {
    background-color: #121212;
    border: 1px solid #333333;
    border-radius: 6px;
    padding: 3px 5px;
    color: #e0e0e0;
}
QLineEdit:focus {
    border-color: #666666;
}

QSlider::groove:horizontal {
    height: 6px;
    background: #333333;
    border-radius: 3px;
}
QSlider::handle:horizontal {
    background: #e0e0e0;
    width: 14px;
    margin: -5px 0;
    border-radius: 7px;
}
QSlider::handle:horizontal:hover {
    background: #ffffff;
}

QComboBox {
    background-color: #1e1e1e;
    border: 1px solid #333333;
    border-radius: 6px;
    padding: 5px;
    color: #e0e0e0;
    min-width: 6em;
}

QComboBox:hover {
    border-color: #555555;
}

QComboBox QAbstractItemView {
    background-color: #1e1e1e;
    color: #e0e0e0;
    selection-background-color: #333333;
    selection-color: #ffffff;
    border: 1px solid #333333;
    outline: none;
}
"""


def background_stylesheet(bg_hex):
    """
    Central widget background. Child boxes keep their own colors.
    """
    return f"QWidget#CentralWidget {{ background-color: {bg_hex}; }}"


def preview_stylesheet(fg_hex, font_family, font_size, font_weight):
    return (
        f"color: {fg_hex}; "
        f"font-family: {font_family}; "
        f"font-size: {int(font_size)}px; "
        f"font-weight: {font_weight}; "
        "background-color: transparent;"
    )
