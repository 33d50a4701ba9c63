import enum
import logging
import math
from dataclasses import dataclass, replace
from typing import Dict, Optional

from color_logic import ColorValue

logger = logging.getLogger(__name__)


class ColorKind(str, enum.Enum):
    FOREGROUND = "Foreground"
    BACKGROUND = "Background"


class ColorElement(str, enum.Enum):
    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    HUE = "Hue"
    SATURATION = "Saturation"
    LIGHTNESS = "Lightness"


RGB_ELEMENTS = (ColorElement.RED, ColorElement.GREEN, ColorElement.BLUE)
HSL_ELEMENTS = (ColorElement.HUE, ColorElement.SATURATION, ColorElement.LIGHTNESS)

# Slider upper bounds; all elements start at 0.
ELEMENT_MAXIMUMS = {
    ColorElement.RED: 255,
    ColorElement.GREEN: 255,
    ColorElement.BLUE: 255,
    ColorElement.HUE: 360,
    ColorElement.SATURATION: 100,
    ColorElement.LIGHTNESS: 100,
}


@dataclass(frozen=True)
class FieldValue:
    """
    One editable field: the text as typed plus its parsed number.
    number is None when the text is not a finite number.
    """
    raw: str
    number: Optional[float]

    @classmethod
    def parse(cls, text):
        text = "" if text is None else str(text)
        try:
            number = float(text.strip())
        except ValueError:
            logger.debug("Unparseable field text %r", text)
            return cls(text, None)
        if not math.isfinite(number):
            logger.debug("Non-finite field text %r", text)
            return cls(text, None)
        return cls(text, number)

    @classmethod
    def from_int(cls, value):
        return cls(str(value), float(value))

    @property
    def is_valid(self):
        return self.number is not None

    def as_number(self):
        return 0.0 if self.number is None else self.number


_FIELD_NAMES = {
    ColorElement.RED: "red",
    ColorElement.GREEN: "green",
    ColorElement.BLUE: "blue",
    ColorElement.HUE: "hue",
    ColorElement.SATURATION: "saturation",
    ColorElement.LIGHTNESS: "lightness",
}


@dataclass(frozen=True)
class ColorSlot:
    red: FieldValue
    green: FieldValue
    blue: FieldValue
    hue: FieldValue
    saturation: FieldValue
    lightness: FieldValue

    @classmethod
    def from_color(cls, color):
        r, g, b = color.rgb
        h, s, l = color.hsl
        return cls(
            red=FieldValue.from_int(r),
            green=FieldValue.from_int(g),
            blue=FieldValue.from_int(b),
            hue=FieldValue.from_int(h),
            saturation=FieldValue.from_int(s),
            lightness=FieldValue.from_int(l),
        )

    def field(self, element):
        return getattr(self, _FIELD_NAMES[ColorElement(element)])

    def with_field(self, element, value):
        return replace(self, **{_FIELD_NAMES[ColorElement(element)]: value})

    def rgb_color(self):
        return ColorValue.from_rgb(
            self.red.as_number(), self.green.as_number(), self.blue.as_number())

    def hsl_color(self):
        return ColorValue.from_hsl(
            self.hue.as_number(), self.saturation.as_number(), self.lightness.as_number())

    def as_text(self):
        return {element: self.field(element).raw for element in ColorElement}


@dataclass(frozen=True)
class Edit:
    kind: ColorKind
    element: ColorElement
    value: str


State = Dict[ColorKind, ColorSlot]

DEFAULT_COLORS = {
    ColorKind.FOREGROUND: (180, 230, 230),
    ColorKind.BACKGROUND: (60, 160, 160),
}

_BLACK_SLOT = ColorSlot.from_color(ColorValue())


def initial_state() -> State:
    return {kind: ColorSlot.from_color(ColorValue.from_rgb(*rgb))
            for kind, rgb in DEFAULT_COLORS.items()}


def apply_edit(state: State, edit: Edit) -> State:
    """
    Apply a single field edit and return the new state.

    The edited field keeps the text as typed. If it belongs to the RGB triple
    the HSL fields are recomputed from RGB, otherwise RGB is recomputed from
    HSL. Derived fields are written as rounded integers. Every other slot is
    carried over as the same object.
    """
    kind = ColorKind(edit.kind)
    element = ColorElement(edit.element)

    slot = state.get(kind, _BLACK_SLOT)
    slot = slot.with_field(element, FieldValue.parse(edit.value))

    if element in RGB_ELEMENTS:
        h, s, l = slot.rgb_color().hsl
        slot = replace(
            slot,
            hue=FieldValue.from_int(h),
            saturation=FieldValue.from_int(s),
            lightness=FieldValue.from_int(l),
        )
    else:
        r, g, b = slot.hsl_color().rgb
        slot = replace(
            slot,
            red=FieldValue.from_int(r),
            green=FieldValue.from_int(g),
            blue=FieldValue.from_int(b),
        )

    logger.debug("%s %s=%r -> %s", kind.value, element.value, edit.value,
                 slot.rgb_color().hex_code())

    new_state = dict(state)
    new_state[kind] = slot
    return new_state
