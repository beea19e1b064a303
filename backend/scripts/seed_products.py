#!/usr/bin/env python3
"""
Seed products from a JSON file (a list of product objects in API shape).
Each entry goes through the create command, so it is validated exactly like
a POST /api/products body.

Usage:
    python scripts/seed_products.py --file products.json
    python scripts/seed_products.py --demo
"""
import argparse
import json
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pydantic import ValidationError

from catalog.db import SessionLocal, init_db
from catalog.db.seed import DEMO_PRODUCTS, seed_products


def _load_entries(path):
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    # accept either a bare list or {"products": [...]}
    if isinstance(data, dict):
        data = data.get("products") or data.get("items") or []
    return data


def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed the product catalog.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", help="JSON file with product entries")
    source.add_argument("--demo", action="store_true", help="insert the demo products")
    parser.add_argument("--reset", action="store_true", help="drop and recreate tables first")
    args = parser.parse_args(argv)

    init_db(reset=args.reset, seed=False)
    entries = DEMO_PRODUCTS if args.demo else _load_entries(args.file)

    with SessionLocal() as db:
        try:
            created = seed_products(db, entries)
        except ValidationError as e:
            print(f"Invalid product entry, nothing was seeded: {e}")
            return 1
    print(f"Seeded {created} products.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
