import logging

from PySide6.QtCore import QObject, Signal

from color_state import ColorKind, Edit, apply_edit, initial_state

logger = logging.getLogger(__name__)


class ColorStore(QObject):
    """
    Holds the current slot state and applies edits one at a time.
    Widgets dispatch edits here and re-render from the emitted signals.
    Applying the background to a window is left to whoever listens to
    background_changed.
    """
    state_changed = Signal(object)     # dict ColorKind -> ColorSlot
    slot_changed = Signal(object, object)  # ColorKind, ColorSlot
    background_changed = Signal(str)       # hex code

    def __init__(self, state=None, parent=None):
        super().__init__(parent)
        self._state = dict(state) if state is not None else initial_state()
        self._background_hex = self.color(ColorKind.BACKGROUND).hex_code()

    @property
    def state(self):
        return self._state

    def slot(self, kind):
        return self._state[ColorKind(kind)]

    def color(self, kind):
        """
        ColorValue for display, rebuilt from the slot's RGB fields.
        """
        return self.slot(kind).rgb_color()

    def dispatch(self, kind, element, value):
        edit = Edit(ColorKind(kind), element, value)
        self._state = apply_edit(self._state, edit)

        self.slot_changed.emit(edit.kind, self._state[edit.kind])
        self.state_changed.emit(self._state)

        background_hex = self.color(ColorKind.BACKGROUND).hex_code()
        if background_hex != self._background_hex:
            logger.debug("Background now %s", background_hex)
            self._background_hex = background_hex
            self.background_changed.emit(background_hex)
