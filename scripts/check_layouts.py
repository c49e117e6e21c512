#!/usr/bin/env python3
"""Check the layout catalogs and the stored profile layouts.

Verifies that every block type's default variant exists, that every catalog
default config passes its type's schema, and that every preset color is a
valid hex color. With --skip-db the stored layouts are not scanned;
otherwise every row of profile_layout is resolved and failures are listed.

Exits with status 1 when anything is broken, so it can gate a deploy.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path to import from src
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from src.schemas.block_config import BLOCK_CONFIG_SCHEMAS
from src.services.layout_catalog import BLOCK_DEFINITIONS, THEME_PRESETS
from src.services.layout_service import LAYOUT_TABLE
from src.services.layout_validator import COLOR_FIELDS, LayoutValidationError, is_valid_color, resolve_layout


def check_catalogs() -> list[str]:
    """Return a problem description for each malformed catalog entry."""
    problems = []

    for definition in BLOCK_DEFINITIONS:
        block_type = definition.type.value
        if definition.get_variant(definition.default_variant) is None:
            problems.append(f"{block_type}: default variant '{definition.default_variant}' is not defined")

        schema = BLOCK_CONFIG_SCHEMAS.get(definition.type)
        for variant in definition.variants:
            if schema is None:
                continue
            try:
                schema.model_validate(variant.config)
            except ValidationError as e:
                problems.append(f"{block_type}/{variant.id}: default config invalid: {e.errors()[0]['msg']}")

    for preset in THEME_PRESETS:
        for name, alias in COLOR_FIELDS:
            value = getattr(preset.colors, name)
            colors = value if name == "bg_gradient" else (value,)
            for color in colors:
                if not is_valid_color(color):
                    problems.append(f"theme {preset.id}: {alias} '{color}' is not a hex color")

    return problems


def check_stored_layouts() -> tuple[int, list[str]]:
    """Resolve every stored layout.

    Returns:
        tuple: Number of rows checked and a description of each failure.
    """
    from src.core.supabase import get_supabase_client

    client = get_supabase_client()
    rows = client.table(LAYOUT_TABLE).select("*").execute().data or []

    problems = []
    for row in rows:
        try:
            resolve_layout(row)
        except LayoutValidationError as e:
            problems.append(f"profile {row.get('profile_id')}: {e.kind.value} at {e.field}: {e.message}")

    return len(rows), problems


def main() -> None:
    """Main execution function."""
    parser = argparse.ArgumentParser(description="Check layout catalogs and stored layouts")
    parser.add_argument("--skip-db", action="store_true", help="Only check the static catalogs")
    args = parser.parse_args()

    print("🔍 Checking block and theme catalogs...\n")
    catalog_problems = check_catalogs()
    if catalog_problems:
        for problem in catalog_problems:
            print(f"   ❌ {problem}")
    else:
        print(f"✓ {len(BLOCK_DEFINITIONS)} block types and {len(THEME_PRESETS)} theme presets are valid")

    layout_problems: list[str] = []
    if not args.skip_db:
        print("\n📋 Checking stored layouts...")
        try:
            checked, layout_problems = check_stored_layouts()
        except Exception as e:
            print(f"❌ Error: Failed to fetch layouts: {e}")
            sys.exit(1)

        for problem in layout_problems:
            print(f"   ❌ {problem}")
        print(f"✓ Checked {checked} layouts, {len(layout_problems)} invalid")

    if catalog_problems or layout_problems:
        print("\n⚠️  Problems found")
        sys.exit(1)

    print("\n✅ All layouts valid!")


if __name__ == "__main__":
    main()
