"""
Static style presets offered by the "scan" screen and home quick tags.

There is no image recognition: picking a preset simply supplies its tags
as the reference tags for scoring.
"""

from dataclasses import dataclass

from stylematch.utils.exceptions import InvalidInputError


@dataclass(frozen=True)
class StylePreset:
    """A named reference style."""

    name: str
    tags: tuple[str, ...]
    icon: str = ""

    def reference_tags(self) -> frozenset[str]:
        """Return the preset's tags lower-cased, ready for scoring."""
        return frozenset(tag.lower() for tag in self.tags)


STYLE_PRESETS: tuple[StylePreset, ...] = (
    StylePreset("Black Oversized Hoodie", ("hoodie", "black", "oversized", "streetwear", "unisex"), "hoodie"),
    StylePreset("White Relaxed Tee", ("tshirt", "white", "relaxed", "casual", "unisex"), "tshirt"),
    StylePreset("Green Summer Shirt", ("shirt", "green", "summer", "casual"), "shirt"),
    StylePreset("Blue Denim Jacket", ("jacket", "blue", "denim", "streetwear"), "jacket"),
)

QUICK_TAGS: tuple[str, ...] = (
    "hoodie", "oversized", "black", "streetwear", "tshirt",
    "white", "casual", "summer", "denim", "unisex",
)


def get_preset(name: str) -> StylePreset:
    """Look up a preset by name (case-insensitive).

    Raises:
        InvalidInputError: If no preset has that name.
    """
    for preset in STYLE_PRESETS:
        if preset.name.lower() == name.strip().lower():
            return preset
    raise InvalidInputError("Unknown style preset", field="name", value=name)
