"""Thread colour palette.

Patterns are stitched in a single colour picked from a small fixed set of
embroidery floss shades. Codes follow the DMC catalogue.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ThreadColor(BaseModel):
    """A single floss colour.

    Attributes:
        label: Human readable colour name
        code: Catalogue number, without the leading '#'
        hex_value: Display colour as #RRGGBB
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(min_length=1)
    code: str = Field(min_length=1)
    hex_value: str = Field(pattern=r"^#[0-9a-fA-F]{6}$")

    @field_validator("code")
    @classmethod
    def _strip_hash(cls, value: str) -> str:
        return value.lstrip("#")

    @field_validator("hex_value")
    @classmethod
    def _upper_hex(cls, value: str) -> str:
        return value.upper()

    @property
    def rgb(self) -> tuple[int, int, int]:
        """Return the display colour as an (r, g, b) tuple."""
        value = self.hex_value.lstrip("#")
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


THREAD_PALETTE: tuple[ThreadColor, ...] = (
    ThreadColor(label="Red", code="321", hex_value="#DE313A"),
    ThreadColor(label="Bright Orange", code="608", hex_value="#FF6C00"),
    ThreadColor(label="Dark Lemon", code="444", hex_value="#FFBF00"),
    ThreadColor(label="Green", code="699", hex_value="#008848"),
    ThreadColor(label="Dark Delft Blue", code="798", hex_value="#40548B"),
    ThreadColor(label="Black", code="310", hex_value="#000000"),
)

DEFAULT_THREAD_COLOR = THREAD_PALETTE[5]


def find_thread_color(code: str) -> ThreadColor | None:
    """Look up a palette entry by catalogue code.

    Args:
        code: Catalogue code, with or without a leading '#'

    Returns:
        The matching colour, or None if the code is not in the palette
    """
    wanted = code.strip().lstrip("#")
    for color in THREAD_PALETTE:
        if color.code == wanted:
            return color
    return None


def resolve_thread_color(code: str | None) -> ThreadColor:
    """Look up a palette entry, falling back to black for unknown codes."""
    if code is None:
        return DEFAULT_THREAD_COLOR
    return find_thread_color(code) or DEFAULT_THREAD_COLOR
