"""Profile layout validation and resolution.

Pure functions over layout documents: nothing here touches the database.
Every failure is raised as a LayoutValidationError naming the offending
field and value so the editor can point at it.
"""

import copy
import re
from collections import Counter
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from src.schemas.block_config import BLOCK_CONFIG_SCHEMAS
from src.schemas.layout import (
    BlockDefinition,
    BlockType,
    ProfileBlock,
    ProfileLayout,
    ProfileTheme,
    ThemeColors,
    ThemePreset,
)
from src.services.layout_catalog import (
    BLOCK_DEFINITIONS,
    THEME_PRESETS,
    generate_block_id,
    get_block_definition,
    get_default_theme,
    get_theme_preset,
)

# #RGB, #RGBA, #RRGGBB or #RRGGBBAA
HEX_COLOR_PATTERN = re.compile(r"#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")

# (attribute name, wire name) of every required theme color
COLOR_FIELDS: tuple[tuple[str, str], ...] = (
    ("bg_gradient", "bgGradient"),
    ("accent", "accent"),
    ("accent_secondary", "accentSecondary"),
    ("text", "text"),
    ("text_secondary", "textSecondary"),
    ("card_bg", "cardBg"),
    ("card_border", "cardBorder"),
)

CUSTOM_THEME_NAME = "custom"


class LayoutErrorKind(str, Enum):
    """Layout validation error kinds."""

    MISSING_FIELD = "missing_field"
    DUPLICATE_BLOCK_ID = "duplicate_block_id"
    UNKNOWN_BLOCK_TYPE = "unknown_block_type"
    UNKNOWN_VARIANT = "unknown_variant"
    UNKNOWN_THEME_PRESET = "unknown_theme_preset"
    UNKNOWN_BLOCK_ID = "unknown_block_id"
    INVALID_COLOR = "invalid_color"
    INVALID_PERMUTATION = "invalid_permutation"
    INVALID_CONFIG = "invalid_config"


class LayoutValidationError(Exception):
    """A layout document, block or theme failed validation.

    The kind indicates which rule was broken; field and value locate the
    problem inside the document (for example ``blocks.b1.type``).
    """

    def __init__(
        self,
        kind: LayoutErrorKind,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize layout validation error.

        Args:
            kind: The rule that was broken.
            message: Human-readable error description.
            field: Dotted path of the offending field.
            value: The offending value, if any.
        """
        self.kind = kind
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)

    def to_detail(self) -> dict[str, Any]:
        """Format as an error detail entry for API responses."""
        return {
            "loc": self.field.split(".") if self.field else None,
            "msg": self.message,
            "type": self.kind.value,
        }


def is_valid_color(value: Any) -> bool:
    """Check whether a value is a hex color string."""
    return isinstance(value, str) and HEX_COLOR_PATTERN.fullmatch(value) is not None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _parse_colors(colors: Any) -> ThemeColors:
    """Validate a colors mapping that uses wire or attribute names."""
    if not isinstance(colors, Mapping):
        raise LayoutValidationError(
            LayoutErrorKind.MISSING_FIELD,
            "Theme must define colors",
            field="theme.colors",
        )

    values: dict[str, Any] = {}
    for name, alias in COLOR_FIELDS:
        field = f"theme.colors.{alias}"
        if alias in colors:
            value = colors[alias]
        elif name in colors:
            value = colors[name]
        else:
            raise LayoutValidationError(
                LayoutErrorKind.MISSING_FIELD,
                f"Theme color '{alias}' is required",
                field=field,
            )

        if name == "bg_gradient":
            if not _is_sequence(value) or len(value) != 2:
                raise LayoutValidationError(
                    LayoutErrorKind.INVALID_COLOR,
                    "Background gradient must be a [from, to] pair of colors",
                    field=field,
                    value=value,
                )
            for color in value:
                if not is_valid_color(color):
                    raise LayoutValidationError(
                        LayoutErrorKind.INVALID_COLOR,
                        f"Invalid color '{color}' in background gradient",
                        field=field,
                        value=color,
                    )
            value = (value[0], value[1])
        elif not is_valid_color(value):
            raise LayoutValidationError(
                LayoutErrorKind.INVALID_COLOR,
                f"Invalid color '{value}' for '{alias}'",
                field=field,
                value=value,
            )

        values[name] = value

    return ThemeColors(**values)


def resolve_theme(
    theme_ref: str | ProfileTheme | Mapping[str, Any],
    presets: Iterable[ThemePreset] = THEME_PRESETS,
) -> ProfileTheme:
    """Resolve a theme reference to concrete colors.

    Args:
        theme_ref: A preset id, a concrete ProfileTheme, or a theme mapping.
        presets: Theme preset catalog.

    Returns:
        ProfileTheme: The preset's colors under the preset id, or the
            concrete theme with its colors checked.

    Raises:
        LayoutValidationError: UNKNOWN_THEME_PRESET for an id with no
            preset; MISSING_FIELD or INVALID_COLOR for a malformed theme.
    """
    if isinstance(theme_ref, ProfileTheme):
        # ThemeColors accepts any string, so instances are checked too
        colors = _parse_colors(theme_ref.colors.model_dump(by_alias=True))
        return ProfileTheme(name=theme_ref.name, colors=colors)

    if isinstance(theme_ref, str):
        preset = get_theme_preset(theme_ref, tuple(presets))
        if preset is None:
            raise LayoutValidationError(
                LayoutErrorKind.UNKNOWN_THEME_PRESET,
                f"Unknown theme preset '{theme_ref}'",
                field="theme",
                value=theme_ref,
            )
        return ProfileTheme(name=preset.id, colors=preset.colors)

    if isinstance(theme_ref, Mapping):
        colors = _parse_colors(theme_ref.get("colors"))
        name = theme_ref.get("name") or CUSTOM_THEME_NAME
        return ProfileTheme(name=str(name), colors=colors)

    raise LayoutValidationError(
        LayoutErrorKind.MISSING_FIELD,
        "Theme is required",
        field="theme",
    )


def create_custom_theme(
    colors: Mapping[str, Any],
    base: ProfileTheme | None = None,
) -> ProfileTheme:
    """Build a custom theme from partial colors.

    Args:
        colors: Colors to override, by wire or attribute name.
        base: Theme whose colors fill the gaps (default theme when omitted).

    Returns:
        ProfileTheme: Theme named 'custom'.

    Raises:
        LayoutValidationError: INVALID_COLOR if an override is not a color
            or names no theme color.
    """
    known = {name for field in COLOR_FIELDS for name in field}
    for key in colors:
        if key not in known:
            raise LayoutValidationError(
                LayoutErrorKind.INVALID_COLOR,
                f"Unknown theme color '{key}'",
                field=f"theme.colors.{key}",
                value=colors[key],
            )

    base = base or get_default_theme()
    merged = base.colors.model_dump(by_alias=True)
    for name, alias in COLOR_FIELDS:
        if alias in colors:
            merged[alias] = colors[alias]
        elif name in colors:
            merged[alias] = colors[name]

    return resolve_theme({"name": CUSTOM_THEME_NAME, "colors": merged})


def _parse_block(
    index: int,
    raw: Any,
    catalog: tuple[BlockDefinition, ...],
) -> ProfileBlock:
    if isinstance(raw, ProfileBlock):
        raw = raw.model_dump()

    if not isinstance(raw, Mapping):
        raise LayoutValidationError(
            LayoutErrorKind.MISSING_FIELD,
            f"Block at position {index} must be an object",
            field=f"blocks.{index}",
        )

    block_id = raw.get("id")
    if not block_id or not isinstance(block_id, str):
        raise LayoutValidationError(
            LayoutErrorKind.MISSING_FIELD,
            f"Block at position {index} has no id",
            field=f"blocks.{index}.id",
        )

    raw_type = raw.get("type")
    if not raw_type:
        raise LayoutValidationError(
            LayoutErrorKind.MISSING_FIELD,
            f"Block '{block_id}' has no type",
            field=f"blocks.{block_id}.type",
        )

    try:
        block_type = BlockType(raw_type)
    except ValueError:
        raise LayoutValidationError(
            LayoutErrorKind.UNKNOWN_BLOCK_TYPE,
            f"Block '{block_id}' has unknown type '{raw_type}'",
            field=f"blocks.{block_id}.type",
            value=raw_type,
        ) from None

    variant = raw.get("variant")
    if variant is not None:
        definition = get_block_definition(block_type.value, catalog)
        if definition is None or definition.get_variant(variant) is None:
            raise LayoutValidationError(
                LayoutErrorKind.UNKNOWN_VARIANT,
                f"Block '{block_id}' uses unknown {block_type.value} variant '{variant}'",
                field=f"blocks.{block_id}.variant",
                value=variant,
            )

    config = raw.get("config")
    if config is None:
        config = {}
    elif not isinstance(config, Mapping):
        raise LayoutValidationError(
            LayoutErrorKind.INVALID_CONFIG,
            f"Block '{block_id}' config must be an object",
            field=f"blocks.{block_id}.config",
            value=config,
        )

    return ProfileBlock(id=block_id, type=block_type, variant=variant, config=dict(config))


def validate_layout(
    candidate: ProfileLayout | Mapping[str, Any],
    catalog: Iterable[BlockDefinition] = BLOCK_DEFINITIONS,
    presets: Iterable[ThemePreset] = THEME_PRESETS,
) -> ProfileLayout:
    """Validate a layout document.

    Accepts a stored row, an editor draft or an existing ProfileLayout.
    A theme given as a preset id is resolved to concrete colors. Block
    order is kept as given.

    Args:
        candidate: The layout document.
        catalog: Block definition catalog.
        presets: Theme preset catalog.

    Returns:
        ProfileLayout: The validated layout.

    Raises:
        LayoutValidationError: MISSING_FIELD, UNKNOWN_BLOCK_TYPE,
            DUPLICATE_BLOCK_ID, UNKNOWN_VARIANT, INVALID_CONFIG,
            UNKNOWN_THEME_PRESET or INVALID_COLOR.
    """
    catalog = tuple(catalog)
    presets = tuple(presets)

    if isinstance(candidate, ProfileLayout):
        candidate = candidate.model_dump(by_alias=True)

    if not isinstance(candidate, Mapping):
        raise LayoutValidationError(
            LayoutErrorKind.MISSING_FIELD,
            "Layout must be an object",
            field="layout",
        )

    profile_id = candidate.get("profile_id")
    if profile_id is None or profile_id == "":
        raise LayoutValidationError(
            LayoutErrorKind.MISSING_FIELD,
            "Layout has no profile_id",
            field="profile_id",
        )

    raw_blocks = candidate.get("blocks")
    if not _is_sequence(raw_blocks):
        raise LayoutValidationError(
            LayoutErrorKind.MISSING_FIELD,
            "Layout blocks must be a list",
            field="blocks",
        )

    blocks: list[ProfileBlock] = []
    seen: set[str] = set()
    for index, raw in enumerate(raw_blocks):
        block = _parse_block(index, raw, catalog)
        if block.id in seen:
            raise LayoutValidationError(
                LayoutErrorKind.DUPLICATE_BLOCK_ID,
                f"Block id '{block.id}' is used more than once",
                field=f"blocks.{block.id}.id",
                value=block.id,
            )
        seen.add(block.id)
        blocks.append(block)

    theme = candidate.get("theme")
    if theme is None:
        raise LayoutValidationError(
            LayoutErrorKind.MISSING_FIELD,
            "Layout has no theme",
            field="theme",
        )

    return ProfileLayout(
        profile_id=str(profile_id),
        blocks=blocks,
        theme=resolve_theme(theme, presets),
        updated_at=candidate.get("updated_at"),
    )


def resolve_block_defaults(
    block: ProfileBlock,
    catalog: Iterable[BlockDefinition] = BLOCK_DEFINITIONS,
) -> ProfileBlock:
    """Fill a block's variant and configuration from the catalog.

    The variant's default configuration is merged under the block's own
    configuration, so keys set on the block always win. A block without a
    variant gets its type's default variant. Applying this twice gives the
    same block as applying it once.

    Args:
        block: The block to resolve.
        catalog: Block definition catalog.

    Returns:
        ProfileBlock: A copy with variant and config filled in.

    Raises:
        LayoutValidationError: UNKNOWN_VARIANT if the variant (or the
            catalog's default variant) is not defined for the type;
            INVALID_CONFIG if the merged config fails the type's schema.
    """
    definition = get_block_definition(block.type.value, tuple(catalog))
    if definition is None:
        raise LayoutValidationError(
            LayoutErrorKind.UNKNOWN_VARIANT,
            f"No catalog entry for block type '{block.type.value}'",
            field=f"blocks.{block.id}.variant",
            value=block.variant,
        )

    variant_id = block.variant or definition.default_variant
    variant = definition.get_variant(variant_id)
    if variant is None:
        if block.variant is None:
            message = f"Default variant '{variant_id}' of block type '{block.type.value}' is not in the catalog"
        else:
            message = f"Block '{block.id}' uses unknown {block.type.value} variant '{variant_id}'"
        raise LayoutValidationError(
            LayoutErrorKind.UNKNOWN_VARIANT,
            message,
            field=f"blocks.{block.id}.variant",
            value=variant_id,
        )

    config = {**copy.deepcopy(variant.config), **copy.deepcopy(block.config)}
    _check_config(block.id, block.type, config)

    return block.model_copy(update={"variant": variant_id, "config": config})


def _check_config(block_id: str, block_type: BlockType, config: dict[str, Any]) -> None:
    schema = BLOCK_CONFIG_SCHEMAS.get(block_type)
    if schema is None:
        return

    try:
        schema.model_validate(config)
    except PydanticValidationError as e:
        error = e.errors()[0]
        location = ".".join(str(part) for part in error["loc"])
        raise LayoutValidationError(
            LayoutErrorKind.INVALID_CONFIG,
            f"Block '{block_id}' config: {error['msg']}",
            field=f"blocks.{block_id}.config.{location}" if location else f"blocks.{block_id}.config",
            value=error.get("input"),
        ) from e


def resolve_layout(
    layout: ProfileLayout | Mapping[str, Any],
    catalog: Iterable[BlockDefinition] = BLOCK_DEFINITIONS,
    presets: Iterable[ThemePreset] = THEME_PRESETS,
) -> ProfileLayout:
    """Produce the render-ready form of a layout.

    Every block has its variant and defaults filled in and the theme is
    concrete.

    Raises:
        LayoutValidationError: Any error from validate_layout or
            resolve_block_defaults.
    """
    catalog = tuple(catalog)
    presets = tuple(presets)
    if not isinstance(layout, ProfileLayout):
        layout = validate_layout(layout, catalog, presets)

    return layout.model_copy(
        update={
            "blocks": [resolve_block_defaults(block, catalog) for block in layout.blocks],
            "theme": resolve_theme(layout.theme, presets),
        }
    )


def reorder_blocks(layout: ProfileLayout, new_order: Iterable[str]) -> ProfileLayout:
    """Return a copy of the layout with blocks in a new order.

    Args:
        layout: The current layout.
        new_order: Every current block id, each exactly once.

    Returns:
        ProfileLayout: Same blocks, new order.

    Raises:
        LayoutValidationError: INVALID_PERMUTATION if an id is missing,
            unknown or repeated.
    """
    new_order = list(new_order)
    current = layout.block_ids

    duplicates = sorted(block_id for block_id, count in Counter(new_order).items() if count > 1)
    if duplicates:
        raise LayoutValidationError(
            LayoutErrorKind.INVALID_PERMUTATION,
            f"Block order repeats ids: {', '.join(duplicates)}",
            field="block_ids",
            value=duplicates,
        )

    missing = [block_id for block_id in current if block_id not in new_order]
    if missing:
        raise LayoutValidationError(
            LayoutErrorKind.INVALID_PERMUTATION,
            f"Block order is missing ids: {', '.join(missing)}",
            field="block_ids",
            value=missing,
        )

    extra = [block_id for block_id in new_order if block_id not in current]
    if extra:
        raise LayoutValidationError(
            LayoutErrorKind.INVALID_PERMUTATION,
            f"Block order has unknown ids: {', '.join(extra)}",
            field="block_ids",
            value=extra,
        )

    by_id = {block.id: block for block in layout.blocks}
    return layout.model_copy(update={"blocks": [by_id[block_id] for block_id in new_order]})


def add_block(
    layout: ProfileLayout,
    block_type: str,
    variant: str | None = None,
    config: Mapping[str, Any] | None = None,
    block_id: str | None = None,
    catalog: Iterable[BlockDefinition] = BLOCK_DEFINITIONS,
) -> ProfileLayout:
    """Append a new block to the end of a layout.

    The block is stored as given (unresolved) but must resolve cleanly.

    Raises:
        LayoutValidationError: UNKNOWN_BLOCK_TYPE, UNKNOWN_VARIANT,
            DUPLICATE_BLOCK_ID or INVALID_CONFIG.
    """
    catalog = tuple(catalog)
    block_id = block_id or generate_block_id()
    if block_id in layout.block_ids:
        raise LayoutValidationError(
            LayoutErrorKind.DUPLICATE_BLOCK_ID,
            f"Block id '{block_id}' is used more than once",
            field=f"blocks.{block_id}.id",
            value=block_id,
        )

    raw = {"id": block_id, "type": block_type, "variant": variant, "config": dict(config or {})}
    block = _parse_block(len(layout.blocks), raw, catalog)
    resolve_block_defaults(block, catalog)

    return layout.model_copy(update={"blocks": [*layout.blocks, block]})


def remove_block(layout: ProfileLayout, block_id: str) -> ProfileLayout:
    """Return a copy of the layout without the given block.

    Raises:
        LayoutValidationError: UNKNOWN_BLOCK_ID if no block has that id.
    """
    if block_id not in layout.block_ids:
        raise LayoutValidationError(
            LayoutErrorKind.UNKNOWN_BLOCK_ID,
            f"Layout has no block '{block_id}'",
            field="block_id",
            value=block_id,
        )

    return layout.model_copy(
        update={"blocks": [block for block in layout.blocks if block.id != block_id]}
    )
