"""Tests for configuration models and the thread palette."""

import pytest
from pydantic import ValidationError

from stitchpattern.config import (
    DEFAULT_THREAD_COLOR,
    THREAD_PALETTE,
    FillShape,
    RenderConfig,
    ResampleFilter,
    StyleParameters,
    ThreadColor,
    find_thread_color,
    get_default_settings,
    resolve_thread_color,
)


class TestStyleParameters:
    """Tests for StyleParameters."""

    def test_defaults(self):
        """Test the default editor state."""
        style = StyleParameters()
        assert style.stitch_count_width == 32
        assert style.threshold == 128
        assert style.fill_shape == FillShape.CIRCLE
        assert style.outline_offset == 0
        assert style.color.code == "310"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("stitch_count_width", 0),
            ("threshold", -1),
            ("threshold", 256),
            ("outline_offset", -0.5),
            ("fill_shape", "triangle"),
        ],
    )
    def test_invalid_values(self, field, value):
        """Test that out-of-range values are rejected."""
        with pytest.raises(ValidationError):
            StyleParameters(**{field: value})

    def test_value_equality(self):
        """Test snapshots compare by value."""
        assert StyleParameters(threshold=90) == StyleParameters(threshold=90)
        assert StyleParameters(threshold=90) != StyleParameters(threshold=91)

    def test_frozen(self):
        """Test snapshots cannot be mutated."""
        style = StyleParameters()
        with pytest.raises(ValidationError):
            style.threshold = 10  # type: ignore

    def test_with_changes(self):
        """Test partial updates return a validated copy."""
        style = StyleParameters()
        changed = style.with_changes(fill_shape="square", threshold=60)
        assert changed.fill_shape == FillShape.SQUARE
        assert changed.threshold == 60
        assert changed.color == style.color
        assert style.threshold == 128

    def test_with_changes_validates(self):
        """Test partial updates are validated."""
        with pytest.raises(ValidationError):
            StyleParameters().with_changes(threshold=300)


class TestThreadPalette:
    """Tests for the thread palette."""

    def test_palette_contents(self):
        """Test the fixed palette codes."""
        assert [c.code for c in THREAD_PALETTE] == ["321", "608", "444", "699", "798", "310"]
        assert DEFAULT_THREAD_COLOR.label == "Black"

    def test_find_accepts_hash_prefix(self):
        """Test lookup with and without the catalogue '#'."""
        assert find_thread_color("#608") == find_thread_color("608")
        assert find_thread_color("608").label == "Bright Orange"

    def test_find_unknown(self):
        """Test lookup of codes outside the palette."""
        assert find_thread_color("9999") is None

    def test_resolve_falls_back_to_black(self):
        """Test resolve never fails."""
        assert resolve_thread_color("9999") == DEFAULT_THREAD_COLOR
        assert resolve_thread_color(None) == DEFAULT_THREAD_COLOR

    def test_hex_normalized(self):
        """Test hex values are stored upper-case and parsed to RGB."""
        color = ThreadColor(label="Test", code="#1", hex_value="#de313a")
        assert color.hex_value == "#DE313A"
        assert color.code == "1"
        assert color.rgb == (0xDE, 0x31, 0x3A)

    def test_bad_hex(self):
        """Test malformed hex values are rejected."""
        with pytest.raises(ValidationError):
            ThreadColor(label="Bad", code="1", hex_value="red")


class TestSettings:
    """Tests for application settings."""

    def test_render_defaults(self):
        """Test render configuration defaults."""
        config = RenderConfig()
        assert config.svg_base_unit == 10
        assert config.miter_limit == 4
        assert config.resample == ResampleFilter.LANCZOS

    def test_no_nearest_filter(self):
        """Test nearest-neighbour resampling cannot be selected."""
        with pytest.raises(ValidationError):
            RenderConfig(resample="nearest")

    def test_default_settings(self):
        """Test default settings bundle."""
        settings = get_default_settings()
        assert settings.style == StyleParameters()
        assert settings.logging.log_file is None
