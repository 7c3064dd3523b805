"""RGBA colours with 8-bit channels and a table of named colours."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar

ALPHA_OPAQUE = 255
ALPHA_TRANSPARENT = 0

_CHANNEL_MAX = 255
_INTEGER_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class Color:
    """An RGBA colour whose channels are integers in the range 0..255."""

    ALPHA_OPAQUE: ClassVar[int] = ALPHA_OPAQUE
    ALPHA_TRANSPARENT: ClassVar[int] = ALPHA_TRANSPARENT

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = ALPHA_OPAQUE

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{field.name} must be an integer, got {value!r}")
            if not 0 <= value <= _CHANNEL_MAX:
                raise ValueError(f"{field.name} must be in 0..255, got {value}")

    @classmethod
    def from_integer(cls, value: int) -> Color:
        """Build a colour from a 32-bit 0xRRGGBBAA integer."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be an integer, got {value!r}")
        if not 0 <= value <= _INTEGER_MAX:
            raise ValueError(f"value must fit in 32 bits, got {value:#x}")
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    def to_integer(self) -> int:
        """Return the colour packed as a 32-bit 0xRRGGBBAA integer."""
        return (self.red << 24) | (self.green << 16) | (self.blue << 8) | self.alpha

    def is_opaque(self) -> bool:
        return self.alpha == ALPHA_OPAQUE

    def is_transparent(self) -> bool:
        return self.alpha == ALPHA_TRANSPARENT

    def _channels(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(
            *(min(a + b, _CHANNEL_MAX) for a, b in zip(self._channels(), other._channels()))
        )

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(max(a - b, 0) for a, b in zip(self._channels(), other._channels())))

    def __mul__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(
            *(a * b // _CHANNEL_MAX for a, b in zip(self._channels(), other._channels()))
        )

    def __str__(self) -> str:
        return f"color({self.red}, {self.green}, {self.blue}, {self.alpha})"


ALICE_BLUE = Color.from_integer(0xFFF8F0FF)
ANTIQUE_WHITE = Color.from_integer(0xD7EBFAFF)
AQUA = Color.from_integer(0xFFFF00FF)
AQUA_MARINE = Color.from_integer(0xD4FF7FFF)
AZURE = Color.from_integer(0xFFFFF0FF)
BEIGE = Color.from_integer(0xDCF5F5FF)
BISQUE = Color.from_integer(0xC4E4FFFF)
BLACK = Color.from_integer(0x000000FF)
BLANCHE_DALMOND = Color.from_integer(0xCDEBFFFF)
BLUE = Color.from_integer(0xFF0000FF)
BLUE_VIOLET = Color.from_integer(0xE22B8AFF)
BROWN = Color.from_integer(0x2A2AA5FF)
BURLY_WOOD = Color.from_integer(0x87B8DEFF)
CADET_BLUE = Color.from_integer(0xA09E5FFF)
CHARTREUSE = Color.from_integer(0x00FF7FFF)
CHOCOLATE = Color.from_integer(0x1E69D2FF)
CORAL = Color.from_integer(0x507FFFFF)
CORN_FLOWER_BLUE = Color.from_integer(0xED9564FF)
CORN_SILK = Color.from_integer(0xDCF8FFFF)
CRIMSON = Color.from_integer(0x3C14DCFF)
CYAN = Color.from_integer(0xFFFF00FF)
DARK_BLUE = Color.from_integer(0x8B0000FF)
DARK_CYAN = Color.from_integer(0x8B8B00FF)
DARK_GOLDEN_ROD = Color.from_integer(0x0B86B8FF)
DARK_GRAY = Color.from_integer(0xA9A9A9FF)
DARK_GREEN = Color.from_integer(0x006400FF)
DARK_KHAKI = Color.from_integer(0x6BB7BDFF)
DARK_MAGENTA = Color.from_integer(0x8B008BFF)
DARK_OLIVE_GREEN = Color.from_integer(0x2F6B55FF)
DARK_ORANGE = Color.from_integer(0x008CFFFF)
DARK_ORCHID = Color.from_integer(0xCC3299FF)
DARK_RED = Color.from_integer(0x00008BFF)
DARK_SALMON = Color.from_integer(0x7A96E9FF)
DARK_SEA_GREEN = Color.from_integer(0x8FBC8FFF)
DARK_SLATE_BLUE = Color.from_integer(0x8B3D48FF)
DARK_SLATE_GRAY = Color.from_integer(0x4F4F2FFF)
DARK_TURQUOISE = Color.from_integer(0xD1CE00FF)
DARK_VIOLET = Color.from_integer(0xD30094FF)
DEEP_PINK = Color.from_integer(0x9314FFFF)
DEEP_SKY_BLUE = Color.from_integer(0xFFBF00FF)
DIM_GRAY = Color.from_integer(0x696969FF)
DODGER_BLUE = Color.from_integer(0xFF901EFF)
FIRE_BRICK = Color.from_integer(0x2222B2FF)
FLORAL_WHITE = Color.from_integer(0xF0FAFFFF)
FOREST_GREEN = Color.from_integer(0x228B22FF)
FUCHSIA = Color.from_integer(0xFF00FFFF)
GAINS_BORO = Color.from_integer(0xDCDCDCFF)
GHOST_WHITE = Color.from_integer(0xFFF8F8FF)
GOLD = Color.from_integer(0x00D7FFFF)
GOLDEN_ROD = Color.from_integer(0x20A5DAFF)
GRAY = Color.from_integer(0x808080FF)
GREEN = Color.from_integer(0x008000FF)
GREEN_YELLOW = Color.from_integer(0x2FFFADFF)
HONEY_DEW = Color.from_integer(0xF0FFF0FF)
HOT_PINK = Color.from_integer(0xB469FFFF)
INDIAN_RED = Color.from_integer(0x5C5CCDFF)
INDIGO = Color.from_integer(0x82004BFF)
IVORY = Color.from_integer(0xF0FFFFFF)
KHAKI = Color.from_integer(0x8CE6F0FF)
LAVENDER = Color.from_integer(0xFAE6E6FF)
LAVENDER_BLUSH = Color.from_integer(0xF5F0FFFF)
LAWN_GREEN = Color.from_integer(0x00FC7CFF)
LEMON_CHIFFON = Color.from_integer(0xCDFAFFFF)
LIGHT_BLUE = Color.from_integer(0xE6D8ADFF)
LIGHT_CORAL = Color.from_integer(0x8080F0FF)
LIGHT_CYAN = Color.from_integer(0xFFFFE0FF)
LIGHT_GOLDEN_ROD_YELLOW = Color.from_integer(0xD2FAFAFF)
LIGHT_GRAY = Color.from_integer(0xD3D3D3FF)
LIGHT_GREEN = Color.from_integer(0x90EE90FF)
LIGHT_PINK = Color.from_integer(0xC1B6FFFF)
LIGHT_SALMON = Color.from_integer(0x7AA0FFFF)
LIGHT_SEA_GREEN = Color.from_integer(0xAAB220FF)
LIGHT_SKY_BLUE = Color.from_integer(0xFACE87FF)
LIGHT_SLATE_GRAY = Color.from_integer(0x998877FF)
LIGHT_STEEL_BLUE = Color.from_integer(0xDEC4B0FF)
LIGHT_YELLOW = Color.from_integer(0xE0FFFFFF)
LIME = Color.from_integer(0x00FF00FF)
LIME_GREEN = Color.from_integer(0x32CD32FF)
LINEN = Color.from_integer(0xE6F0FAFF)
MAGENTA = Color.from_integer(0xFF00FFFF)
MAROON = Color.from_integer(0x000080FF)
MEDIUM_AQUA_MARINE = Color.from_integer(0xAACD66FF)
MEDIUM_BLUE = Color.from_integer(0xCD0000FF)
MEDIUM_ORCHID = Color.from_integer(0xD355BAFF)
MEDIUM_PURPLE = Color.from_integer(0xDB7093FF)
MEDIUM_SEA_GREEN = Color.from_integer(0x71B33CFF)
MEDIUM_SLATE_BLUE = Color.from_integer(0xEE687BFF)
MEDIUM_SPRING_GREEN = Color.from_integer(0x9AFA00FF)
MEDIUM_TURQUOISE = Color.from_integer(0xCCD148FF)
MEDIUM_VIOLET_RED = Color.from_integer(0x8515C7FF)
MIDNIGHT_BLUE = Color.from_integer(0x701919FF)
MINT_CREAM = Color.from_integer(0xFAFFF5FF)
MISTY_ROSE = Color.from_integer(0xE1E4FFFF)
MOCCASIN = Color.from_integer(0xB5E4FFFF)
NAVAJO_WHITE = Color.from_integer(0xADDEFFFF)
NAVY = Color.from_integer(0x800000FF)
OLD_LACE = Color.from_integer(0xE6F5FDFF)
OLIVE = Color.from_integer(0x008080FF)
OLIVE_DRAB = Color.from_integer(0x238E6BFF)
ORANGE = Color.from_integer(0x00A5FFFF)
ORANGE_RED = Color.from_integer(0x0045FFFF)
ORCHID = Color.from_integer(0xD670DAFF)
PALE_GOLDEN_ROD = Color.from_integer(0xAAE8EEFF)
PALE_GREEN = Color.from_integer(0x98FB98FF)
PALE_TURQUOISE = Color.from_integer(0xEEEEAFFF)
PALE_VIOLET_RED = Color.from_integer(0x9370DBFF)
PAPAYA_WHIP = Color.from_integer(0xD5EFFFFF)
PEACH_PUFF = Color.from_integer(0xB9DAFFFF)
PERU = Color.from_integer(0x3F85CDFF)
PINK = Color.from_integer(0xCBC0FFFF)
PLUM = Color.from_integer(0xDDA0DDFF)
POWDER_BLUE = Color.from_integer(0xE6E0B0FF)
PURPLE = Color.from_integer(0x800080FF)
REBECCA_PURPLE = Color.from_integer(0x993366FF)
RED = Color.from_integer(0x0000FFFF)
ROSY_BROWN = Color.from_integer(0x8F8FBCFF)
ROYAL_BLUE = Color.from_integer(0xE16941FF)
SADDLE_BROWN = Color.from_integer(0x13458BFF)
SALMON = Color.from_integer(0x7280FAFF)
SANDY_BROWN = Color.from_integer(0x60A4F4FF)
SEA_GREEN = Color.from_integer(0x578B2EFF)
SEA_SHELL = Color.from_integer(0xEEF5FFFF)
SIENNA = Color.from_integer(0x2D52A0FF)
SILVER = Color.from_integer(0xC0C0C0FF)
SKY_BLUE = Color.from_integer(0xEBCE87FF)
SLATE_BLUE = Color.from_integer(0xCD5A6AFF)
SLATE_GRAY = Color.from_integer(0x908070FF)
SNOW = Color.from_integer(0xFAFAFFFF)
SPRING_GREEN = Color.from_integer(0x7FFF00FF)
STEEL_BLUE = Color.from_integer(0xB48246FF)
TAN = Color.from_integer(0x8CB4D2FF)
TEAL = Color.from_integer(0x808000FF)
THISTLE = Color.from_integer(0xD8BFD8FF)
TOMATO = Color.from_integer(0x4763FFFF)
TRANSPARENT = Color.from_integer(0x00000000)
TURQUOISE = Color.from_integer(0xD0E040FF)
VIOLET = Color.from_integer(0xEE82EEFF)
WHEAT = Color.from_integer(0xB3DEF5FF)
WHITE = Color.from_integer(0xFFFFFFFF)
WHITE_SMOKE = Color.from_integer(0xF5F5F5FF)
YELLOW = Color.from_integer(0x00FFFFFF)
YELLOW_GREEN = Color.from_integer(0x32CD9AFF)