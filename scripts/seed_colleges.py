#!/usr/bin/env python3
"""
Seed Colleges Script

Loads the college catalog from a JSON file into the database.
Existing colleges (matched by name) are refreshed in place.

Usage:
    python -m scripts.seed_colleges [path/to/colleges.json]
"""

import argparse
import asyncio
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError as PydanticValidationError

from collegematch.infrastructure.db.database import (
    close_db,
    get_db_manager,
    get_session_context,
    init_db,
)
from collegematch.infrastructure.db.models.college import CollegeCreate
from collegematch.infrastructure.db.repositories.college_repository import CollegeRepository

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


DEFAULT_CATALOG = Path(__file__).parent / "data" / "colleges.json"


def load_catalog(path: Path) -> List[CollegeCreate]:
    """Read and validate catalog entries; invalid entries are skipped."""
    with path.open(encoding="utf-8") as f:
        raw = json.load(f)

    colleges = []
    for index, entry in enumerate(raw):
        try:
            colleges.append(CollegeCreate.model_validate(entry))
        except PydanticValidationError as e:
            logger.warning(f"Skipping entry {index} ({entry.get('name', '?')}): {e}")
    return colleges


async def seed_database(path: Path, create_tables: bool = False) -> dict:
    """
    Upsert every catalog entry from `path`.

    Returns:
        Dict with seeding statistics
    """
    stats = {
        "started_at": datetime.now(timezone.utc).isoformat(),
        "loaded": 0,
        "seeded": 0,
    }

    colleges = load_catalog(path)
    stats["loaded"] = len(colleges)
    logger.info(f"Seeding {len(colleges)} colleges from {path}...")

    try:
        await init_db()
        if create_tables:
            # Local databases only; deployed schemas are managed by Alembic
            await get_db_manager().create_tables()

        async with get_session_context() as session:
            repo = CollegeRepository(session)
            for college in colleges:
                await repo.upsert_by_name(college)
                stats["seeded"] += 1
                logger.info(f"  ✓ {college.name}")
            stats["catalog_size"] = await repo.count()
    finally:
        await close_db()

    stats["completed_at"] = datetime.now(timezone.utc).isoformat()
    logger.info(f"Seeding complete: {stats}")
    return stats


def main():
    parser = argparse.ArgumentParser(description="Seed the college catalog")
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=DEFAULT_CATALOG,
        help="JSON file with a list of colleges",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before seeding (local databases)",
    )
    args = parser.parse_args()

    stats = asyncio.run(seed_database(args.path, create_tables=args.create_tables))
    print(
        f"\nSeeded {stats['seeded']} of {stats['loaded']} colleges "
        f"(catalog now holds {stats['catalog_size']})"
    )


if __name__ == "__main__":
    main()
