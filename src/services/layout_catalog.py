"""Static block and theme catalogs for profile layouts.

The catalogs are configuration data. Layout operations read them but never
mutate them.
"""

import secrets
import string
import time

from src.schemas.layout import (
    BlockDefinition,
    BlockType,
    BlockVariant,
    ProfileBlock,
    ProfileTheme,
    ThemeColors,
    ThemePreset,
)

BLOCK_DEFINITIONS: tuple[BlockDefinition, ...] = (
    BlockDefinition(
        type=BlockType.HEADER,
        name="Profile Header",
        description="Avatar, banner, name, and bio",
        icon="👤",
        variants=[
            BlockVariant(
                id="default",
                name="Standard",
                description="Classic header with banner overlay",
                config={"showBanner": True, "showBio": True},
            ),
        ],
        default_variant="default",
    ),
    BlockDefinition(
        type=BlockType.FRIENDS,
        name="Friends",
        description="Display friends list",
        icon="👥",
        variants=[
            BlockVariant(
                id="compactList",
                name="Compact List",
                description="Simple list with names and avatars",
                config={"maxItems": 10},
            ),
            BlockVariant(
                id="avatarGrid",
                name="Avatar Grid",
                description="Grid of friend avatars",
                config={"maxItems": 12, "columns": 4},
            ),
            BlockVariant(
                id="featuredFriends",
                name="Featured Friends",
                description="Highlight top friends with stats",
                config={"maxItems": 3, "showStats": True},
            ),
        ],
        default_variant="avatarGrid",
    ),
    BlockDefinition(
        type=BlockType.GAMES,
        name="Games I Play",
        description="Showcase your game collection",
        icon="🎮",
        variants=[
            BlockVariant(
                id="grid",
                name="Grid",
                description="Even grid of game covers with titles",
                config={"columns": 4, "maxItems": 12, "showTitles": True},
            ),
            BlockVariant(
                id="coverSmall",
                name="Small Grid",
                description="Compact grid of game covers",
                config={"columns": 6, "maxItems": 18, "showTitles": False},
            ),
            BlockVariant(
                id="coverLarge",
                name="Large Grid",
                description="Detailed grid with large covers",
                config={"columns": 3, "maxItems": 9, "showTitles": True},
            ),
            BlockVariant(
                id="carousel",
                name="Horizontal Scroll",
                description="Scrollable carousel of games",
                config={"maxItems": 20, "showTitles": True},
            ),
            BlockVariant(
                id="showcase",
                name="Showcase",
                description="Featured games with descriptions",
                config={"maxItems": 3, "showDescriptions": True},
            ),
        ],
        default_variant="coverLarge",
    ),
    BlockDefinition(
        type=BlockType.ACHIEVEMENTS,
        name="Achievements",
        description="Gaming achievements and trophies",
        icon="🏆",
        variants=[
            BlockVariant(
                id="grid",
                name="Achievement Grid",
                description="Grid of achievement badges",
                config={"maxItems": 12},
            ),
            BlockVariant(
                id="featured",
                name="Featured",
                description="Highlight recent achievements",
                config={"maxItems": 3},
            ),
            BlockVariant(
                id="stats",
                name="Stats Overview",
                description="Achievement statistics",
            ),
        ],
        default_variant="grid",
    ),
    BlockDefinition(
        type=BlockType.ACCOUNTS,
        name="Connected Accounts",
        description="Social media and gaming platforms",
        icon="🔗",
        variants=[
            BlockVariant(
                id="grid",
                name="Icon Grid",
                description="Grid of platform icons",
                config={"showHandles": False},
            ),
            BlockVariant(
                id="list",
                name="Detailed List",
                description="List with platform names",
                config={"showHandles": True},
            ),
            BlockVariant(
                id="cards",
                name="Platform Cards",
                description="Card-based layout with stats",
                config={"showHandles": True},
            ),
        ],
        default_variant="grid",
    ),
    BlockDefinition(
        type=BlockType.CUSTOM,
        name="Custom Block",
        description="Free-form title and text",
        icon="✏️",
        variants=[
            BlockVariant(
                id="default",
                name="Text Card",
                description="Card with a title and body text",
                config={"title": "", "content": ""},
            ),
        ],
        default_variant="default",
    ),
    BlockDefinition(
        type=BlockType.ABOUT,
        name="About Me",
        description="Personal bio and background information",
        icon="📝",
        variants=[
            BlockVariant(
                id="richText",
                name="Rich Text",
                description="Markdown-formatted paragraph with rich text support",
                config={"text": ""},
            ),
            BlockVariant(
                id="qa",
                name="Q&A Cards",
                description="Question and answer format with card layout",
                config={"qa": []},
            ),
        ],
        default_variant="richText",
    ),
    BlockDefinition(
        type=BlockType.STREAM,
        name="Latest Stream",
        description="Twitch/YouTube stream integration",
        icon="🎥",
        variants=[
            BlockVariant(
                id="player",
                name="Large Player",
                description="Full-size embedded stream player with title and channel link",
                config={"autoplay": False},
            ),
            BlockVariant(
                id="thumbnail",
                name="Thumbnail",
                description="Compact view with thumbnail and watch button",
            ),
        ],
        default_variant="player",
    ),
    BlockDefinition(
        type=BlockType.ROSTER,
        name="Team Roster",
        description="E-sports team members and roles",
        icon="⚔️",
        variants=[
            BlockVariant(
                id="grid",
                name="Avatar Grid",
                description="5-player avatar grid with roles and hover effects",
                config={"maxMembers": 5},
            ),
            BlockVariant(
                id="list",
                name="Detailed List",
                description="Scrollable list with join dates and social links",
                config={"maxMembers": 20, "showJoinDates": True},
            ),
        ],
        default_variant="grid",
    ),
    BlockDefinition(
        type=BlockType.GALLERY,
        name="Media Gallery",
        description="Photos and screenshots showcase",
        icon="🖼️",
        variants=[
            BlockVariant(
                id="masonry",
                name="Masonry Grid",
                description="Masonry layout with lightbox",
                config={"columns": 3, "maxItems": 12},
            ),
            BlockVariant(
                id="carousel",
                name="3-Image Carousel",
                description="Carousel with navigation and pagination",
                config={"maxItems": 9},
            ),
        ],
        default_variant="masonry",
    ),
)

THEME_PRESETS: tuple[ThemePreset, ...] = (
    ThemePreset(
        id="neonBlue",
        name="Neon Blue",
        description="Electric blue with dark gradients",
        colors=ThemeColors(
            bg_gradient=("#0f172a", "#1e293b"),
            accent="#3b82f6",
            accent_secondary="#1d4ed8",
            text="#ffffff",
            text_secondary="#94a3b8",
            card_bg="#1e293b80",
            card_border="#37415150",
        ),
    ),
    ThemePreset(
        id="neonGreen",
        name="Neon Green",
        description="Matrix-style green on black",
        colors=ThemeColors(
            bg_gradient=("#0c0c0c", "#1a1a1a"),
            accent="#39ff14",
            accent_secondary="#00ff00",
            text="#ffffff",
            text_secondary="#a3a3a3",
            card_bg="#1a1a1a80",
            card_border="#39ff1430",
        ),
    ),
    ThemePreset(
        id="cyberPurple",
        name="Cyber Purple",
        description="Futuristic purple and pink",
        colors=ThemeColors(
            bg_gradient=("#1a0033", "#2d1b4e"),
            accent="#a855f7",
            accent_secondary="#ec4899",
            text="#ffffff",
            text_secondary="#c4b5fd",
            card_bg="#2d1b4e80",
            card_border="#a855f730",
        ),
    ),
    ThemePreset(
        id="retroPink",
        name="Retro Pink",
        description="Synthwave pink and orange",
        colors=ThemeColors(
            bg_gradient=("#1a0d1a", "#330a2e"),
            accent="#ff1493",
            accent_secondary="#ff6b35",
            text="#ffffff",
            text_secondary="#ffb3d9",
            card_bg="#330a2e80",
            card_border="#ff149330",
        ),
    ),
    ThemePreset(
        id="neonOrange",
        name="Neon Orange",
        description="Vibrant orange energy",
        colors=ThemeColors(
            bg_gradient=("#1a0f00", "#331a00"),
            accent="#ff6600",
            accent_secondary="#ff4500",
            text="#ffffff",
            text_secondary="#ffcc99",
            card_bg="#331a0080",
            card_border="#ff660030",
        ),
    ),
    ThemePreset(
        id="iceBlue",
        name="Ice Blue",
        description="Cool arctic blues",
        colors=ThemeColors(
            bg_gradient=("#0a0e1a", "#1a2233"),
            accent="#00bfff",
            accent_secondary="#1e90ff",
            text="#ffffff",
            text_secondary="#b3e5ff",
            card_bg="#1a223380",
            card_border="#00bfff30",
        ),
    ),
    ThemePreset(
        id="midnight",
        name="Midnight",
        description="Deep navy with silver highlights",
        colors=ThemeColors(
            bg_gradient=("#020617", "#0f172a"),
            accent="#6366f1",
            accent_secondary="#818cf8",
            text="#e2e8f0",
            text_secondary="#94a3b8",
            card_bg="#0f172acc",
            card_border="#33415580",
        ),
    ),
)

DEFAULT_THEME_PRESET_ID = "neonBlue"

_BLOCK_ID_ALPHABET = string.ascii_lowercase + string.digits


def get_block_definition(
    block_type: str,
    catalog: tuple[BlockDefinition, ...] = BLOCK_DEFINITIONS,
) -> BlockDefinition | None:
    """Find the catalog entry for a block type."""
    for definition in catalog:
        if definition.type.value == block_type:
            return definition
    return None


def get_theme_preset(
    preset_id: str,
    presets: tuple[ThemePreset, ...] = THEME_PRESETS,
) -> ThemePreset | None:
    """Find a theme preset by id."""
    for preset in presets:
        if preset.id == preset_id:
            return preset
    return None


def get_default_theme(preset_id: str = DEFAULT_THEME_PRESET_ID) -> ProfileTheme:
    """Build the theme given to new layouts.

    Falls back to the first preset when ``preset_id`` is not in the catalog.
    """
    preset = get_theme_preset(preset_id) or THEME_PRESETS[0]
    return ProfileTheme(name=preset.id, colors=preset.colors)


def get_default_blocks() -> list[ProfileBlock]:
    """Blocks a freshly created layout starts with."""
    return [
        ProfileBlock(id="header", type=BlockType.HEADER),
        ProfileBlock(id="friends", type=BlockType.FRIENDS, variant="avatarGrid"),
        ProfileBlock(id="games", type=BlockType.GAMES, variant="coverLarge"),
        ProfileBlock(id="achievements", type=BlockType.ACHIEVEMENTS, variant="grid"),
        ProfileBlock(id="accounts", type=BlockType.ACCOUNTS, variant="grid"),
    ]


def generate_block_id() -> str:
    """Generate an id for a block added in the editor.

    Format: ``block_<epoch milliseconds>_<9 lowercase alphanumerics>``.
    """
    suffix = "".join(secrets.choice(_BLOCK_ID_ALPHABET) for _ in range(9))
    return f"block_{int(time.time() * 1000)}_{suffix}"
