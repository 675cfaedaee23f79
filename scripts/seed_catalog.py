#!/usr/bin/env python3
"""
Catalog Seeding Script

Creates the default products and their price tiers. Runs only against an
empty products table, so it is safe to run on every deploy.

Usage:
    python scripts/seed_catalog.py
    python scripts/seed_catalog.py --dry-run
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import List, Tuple

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from domain.enums import Brand
from repositories.client import get_supabase
from repositories.rows import PRICE_RULES_TABLE, PRODUCTS_TABLE, execute

RULES_EFFECTIVE_FROM = date(2020, 1, 1)

# (price, units_per_sale); sort_order follows list position starting at 1.
Tier = Tuple[str, int]

_TOTEM_TIERS: List[Tier] = [
    ("30", 1), ("35", 1), ("40", 1), ("70", 2), ("80", 2), ("105", 3), ("120", 3),
]

CATALOG: List[Tuple[str, Brand, List[Tier]]] = [
    ("Бандани", Brand.TOTEM, _TOTEM_TIERS),
    ("Ръкавици", Brand.TOTEM, _TOTEM_TIERS),
    ("Свещ", Brand.CANDLES, [("19", 1), ("29", 1), ("38", 2), ("57", 3)]),
    ("Кибрит", Brand.CANDLES, [("7", 1), ("14", 2), ("21", 3), ("28", 4)]),
    ("Торби", Brand.CANDLES, [("2", 1), ("4", 2), ("6", 3), ("8", 4)]),
    ("Керамика", Brand.CERAMICS, []),
]


def build_price_rule_rows(product_id: int, tiers: List[Tier]) -> List[dict]:
    """Insert payloads for one product's tiers."""
    return [
        {
            "product_id": product_id,
            "price": str(Decimal(price)),
            "units_per_sale": units,
            "sort_order": sort_order,
            "effective_from": RULES_EFFECTIVE_FROM.isoformat(),
            "effective_to": None,
        }
        for sort_order, (price, units) in enumerate(tiers, start=1)
    ]


def seed_catalog(client, dry_run: bool = False) -> dict[str, int]:
    """
    Insert CATALOG unless any product already exists.

    Returns:
        Dictionary with statistics: {'products_created': int, 'price_rules_created': int}
    """
    stats = {'products_created': 0, 'price_rules_created': 0}

    existing = execute(client.table(PRODUCTS_TABLE).select("product_id").limit(1), "check products")
    if existing:
        print("Products already exist; skipping seed.")
        return stats

    for name, brand, tiers in CATALOG:
        print(f"  {name} ({brand.name}): {len(tiers)} price tiers")
        if dry_run:
            stats['products_created'] += 1
            stats['price_rules_created'] += len(tiers)
            continue

        rows = execute(
            client.table(PRODUCTS_TABLE).insert(
                {"name": name, "brand": int(brand), "is_active": True}
            ),
            f"insert product {name}",
        )
        product_id = int(rows[0]["product_id"])
        stats['products_created'] += 1

        rule_rows = build_price_rule_rows(product_id, tiers)
        if rule_rows:
            execute(client.table(PRICE_RULES_TABLE).insert(rule_rows), f"insert price rules for {name}")
            stats['price_rules_created'] += len(rule_rows)

    return stats


def main() -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Seed the default product catalog")
    parser.add_argument("--dry-run", action="store_true", help="Print what would be created")
    args = parser.parse_args()

    try:
        stats = seed_catalog(get_supabase(), dry_run=args.dry_run)
    except Exception as e:
        print(f"ERROR: {e}")
        return 1

    print()
    print("=" * 60)
    print(f"Products Created:     {stats['products_created']}")
    print(f"Price Rules Created:  {stats['price_rules_created']}")
    if args.dry_run:
        print("** DRY RUN - No records were inserted **")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
