import enum
import logging
import math

logger = logging.getLogger(__name__)


class ColorMode(str, enum.Enum):
    RGB = "RGB"
    HSL = "HSL"


def clamp(value, lo, hi):
    """
    Restrict value to [lo, hi]. NaN collapses to lo.
    """
    if math.isnan(value) or value < lo:
        return lo
    if value > hi:
        return hi
    return value


def round_half_up(value):
    return int(math.floor(value + 0.5))


def double_hex(value):
    """
    Two uppercase hex digits for a channel (0-255), e.g. 10 -> '0A'.
    """
    return f"{round_half_up(clamp(value, 0, 255)):02X}"


def rgb_to_hex(r, g, b):
    return f"#{double_hex(r)}{double_hex(g)}{double_hex(b)}"


def rgb_from_hsl(h, s, l):
    """
    Convert HSL (H 0-360 deg, S/L 0-100) to RGB (0-255).
    Fractional parts are kept and the result is not clamped.
    """
    # fmod keeps the sign, so negative hues clamp to 0 instead of wrapping.
    h = math.fmod(h, 360) if math.isfinite(h) else math.nan
    h = clamp(h, 0, 360)
    s = clamp(s, 0, 100)
    l = clamp(l, 0, 100)

    # Breakpoint is 49, not 50.
    if l < 49:
        max_c = 2.55 * (l + l * (s / 100))
        min_c = 2.55 * (l - l * (s / 100))
    else:
        max_c = 2.55 * (l + (100 - l) * (s / 100))
        min_c = 2.55 * (l - (100 - l) * (s / 100))

    span = max_c - min_c
    if h < 60:
        return max_c, min_c + span * h / 60, min_c
    if h < 120:
        return min_c + span * (120 - h) / 60, max_c, min_c
    if h < 180:
        return min_c, max_c, min_c + span * (h - 120) / 60
    if h < 240:
        return min_c, min_c + span * (240 - h) / 60, max_c
    if h < 300:
        return min_c + span * (h - 240) / 60, min_c, max_c
    return max_c, min_c, min_c + span * (360 - h) / 60


def hsl_from_rgb(r, g, b):
    """
    Convert RGB (0-255) to HSL (H 0-360 deg, S/L 0-100).

    Hue is derived from whichever channel is the minimum, and saturation
    splits at a midpoint of 127 on the 0-255 scale. Fractional parts are kept.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    h = 0
    if max_c == min_c:
        h = 0
    elif min_c == b:
        h = 60 * (g - r) / (max_c - min_c) + 60
    elif min_c == r:
        h = 60 * (b - g) / (max_c - min_c) + 180
    elif min_c == g:
        h = 60 * (r - b) / (max_c - min_c) + 300

    if h < 0:
        h += 360

    mid = (max_c + min_c) / 2
    l = mid / 255 * 100

    if mid <= 127:
        if max_c == 0 and min_c == 0:
            s = 0
        else:
            s = (max_c - min_c) / (max_c + min_c) * 100
    else:
        if max_c == 255 and min_c == 255:
            s = 100
        else:
            s = (max_c - min_c) / (510 - max_c - min_c) * 100

    return h, s, l


class ColorValue:
    """
    A single color. RGB is stored as clamped floats; HSL is always derived.
    Treat instances as read-only: build a new one for every change.
    """

    __slots__ = ("_r", "_g", "_b")

    def __init__(self, a=0, b=0, c=0, mode=ColorMode.RGB):
        if mode is None or mode == ColorMode.RGB:
            r, g, bl = a, b, c
        elif mode == ColorMode.HSL:
            r, g, bl = rgb_from_hsl(a, b, c)
        else:
            logger.warning("Unknown color mode %r, using black", mode)
            r, g, bl = 0, 0, 0

        self._r = clamp(float(r), 0, 255)
        self._g = clamp(float(g), 0, 255)
        self._b = clamp(float(bl), 0, 255)

    @classmethod
    def create(cls, a, b, c, mode=ColorMode.RGB):
        return cls(a, b, c, mode)

    @classmethod
    def from_rgb(cls, r, g, b):
        return cls(r, g, b, ColorMode.RGB)

    @classmethod
    def from_hsl(cls, h, s, l):
        return cls(h, s, l, ColorMode.HSL)

    @property
    def red(self):
        return round_half_up(self._r)

    @property
    def green(self):
        return round_half_up(self._g)

    @property
    def blue(self):
        return round_half_up(self._b)

    @property
    def rgb(self):
        return self.red, self.green, self.blue

    @property
    def hsl(self):
        """
        Rounded (H 0-359, S 0-100, L 0-100), recomputed on every access.
        """
        h, s, l = hsl_from_rgb(self._r, self._g, self._b)
        return round_half_up(h) % 360, round_half_up(s), round_half_up(l)

    def rgb_string(self):
        return f"R:{self._r:g} G:{self._g:g} B:{self._b:g}"

    def hex_code(self):
        return rgb_to_hex(self._r, self._g, self._b)

    def css_rgb(self):
        return f"rgb({self.red}, {self.green}, {self.blue})"

    def css_hsl(self):
        h, s, l = self.hsl
        return f"hsl({h}, {s}%, {l}%)"

    def __eq__(self, other):
        if not isinstance(other, ColorValue):
            return NotImplemented
        return self.rgb == other.rgb

    def __hash__(self):
        return hash(self.rgb)

    def __repr__(self):
        return f"ColorValue({self.red}, {self.green}, {self.blue})"
