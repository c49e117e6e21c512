"""Unit tests for the block and theme catalogs."""

import re

import pytest

from src.schemas.block_config import BLOCK_CONFIG_SCHEMAS
from src.schemas.layout import BlockType
from src.services.layout_catalog import (
    BLOCK_DEFINITIONS,
    THEME_PRESETS,
    generate_block_id,
    get_block_definition,
    get_default_blocks,
    get_default_theme,
    get_theme_preset,
)
from src.services.layout_validator import COLOR_FIELDS, is_valid_color


class TestBlockCatalog:
    """Tests for the block definition catalog."""

    def test_covers_every_block_type(self) -> None:
        """Test that each block type has exactly one definition."""
        types = [definition.type for definition in BLOCK_DEFINITIONS]

        assert sorted(types) == sorted(BlockType)

    @pytest.mark.parametrize("definition", BLOCK_DEFINITIONS, ids=lambda d: d.type.value)
    def test_default_variant_exists(self, definition) -> None:
        """Test that every default variant is one of the type's variants."""
        assert definition.get_variant(definition.default_variant) is not None

    @pytest.mark.parametrize("definition", BLOCK_DEFINITIONS, ids=lambda d: d.type.value)
    def test_variant_defaults_match_schema(self, definition) -> None:
        """Test that catalog default configs pass their type's schema."""
        schema = BLOCK_CONFIG_SCHEMAS[definition.type]
        for variant in definition.variants:
            schema.model_validate(variant.config)

    def test_lookup(self) -> None:
        """Test that definitions are found by type name."""
        assert get_block_definition("games").default_variant == "coverLarge"
        assert get_block_definition("spotify-tracks") is None

    def test_serializes_default_variant_camel_case(self) -> None:
        """Test that the catalog uses the editor's field name."""
        data = get_block_definition("header").model_dump(by_alias=True)

        assert data["defaultVariant"] == "default"


class TestThemePresets:
    """Tests for the theme preset catalog."""

    def test_preset_ids_unique(self) -> None:
        """Test that no two presets share an id."""
        ids = [preset.id for preset in THEME_PRESETS]

        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("preset", THEME_PRESETS, ids=lambda p: p.id)
    def test_preset_colors_valid(self, preset) -> None:
        """Test that every preset color is a valid hex color."""
        for name, _ in COLOR_FIELDS:
            value = getattr(preset.colors, name)
            values = value if name == "bg_gradient" else (value,)
            assert all(is_valid_color(color) for color in values)

    def test_lookup(self) -> None:
        """Test that presets are found by id."""
        assert get_theme_preset("midnight").name == "Midnight"
        assert get_theme_preset("vaporwave") is None

    def test_default_theme(self) -> None:
        """Test that the default theme is neonBlue."""
        theme = get_default_theme()

        assert theme.name == "neonBlue"
        assert theme.colors.accent == "#3b82f6"

    def test_default_theme_falls_back(self) -> None:
        """Test that an unknown preset falls back to the first preset."""
        assert get_default_theme("vaporwave").name == THEME_PRESETS[0].id

    def test_colors_serialize_camel_case(self) -> None:
        """Test that theme colors use the editor's field names."""
        data = get_default_theme().model_dump(mode="json", by_alias=True)

        assert data["colors"]["bgGradient"] == ["#0f172a", "#1e293b"]
        assert "cardBorder" in data["colors"]


class TestDefaults:
    """Tests for default blocks and block ids."""

    def test_default_blocks(self) -> None:
        """Test the blocks a new layout starts with."""
        blocks = get_default_blocks()

        assert [block.id for block in blocks] == ["header", "friends", "games", "achievements", "accounts"]
        assert blocks[2].variant == "coverLarge"

    def test_default_blocks_are_fresh(self) -> None:
        """Test that each call returns new block objects."""
        assert get_default_blocks() is not get_default_blocks()

    def test_generated_block_id_format(self) -> None:
        """Test that generated ids are block_<ms>_<suffix>."""
        block_id = generate_block_id()

        assert re.fullmatch(r"block_\d{13}_[a-z0-9]{9}", block_id)

    def test_generated_block_ids_differ(self) -> None:
        """Test that generated ids do not repeat."""
        assert len({generate_block_id() for _ in range(50)}) == 50
