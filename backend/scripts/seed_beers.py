import argparse
import asyncio
import sys
from pathlib import Path

"""
Seed a small beer catalogue.

Beers whose name is already registered are left untouched, so the script can
be re-run safely.

Run from the backend directory:
  python scripts/seed_beers.py --dry-run
"""

# Allow running from repo root by ensuring `backend/` is on sys.path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from db.beer import BeerType  # noqa: E402
from db.beer_store import BeerStore, SqlAlchemyBeerStore  # noqa: E402
from db.database import async_session_maker, create_db_and_tables  # noqa: E402
from schemas.beers import BeerCreate  # noqa: E402
from services.beer_service import BeerService  # noqa: E402

SAMPLE_BEERS = [
    {"name": "Brahma", "brand": "Ambev", "category": "Pilsen", "max": 50, "quantity": 10, "type": BeerType.LAGER},
    {"name": "Colorado Appia", "brand": "Colorado", "category": "Honey", "max": 30, "quantity": 5, "type": BeerType.WITBIER},
    {"name": "Eisenbahn Weizenbier", "brand": "Eisenbahn", "category": "Wheat", "max": 40, "quantity": 12, "type": BeerType.WEISS},
    {"name": "Baden Baden Stout", "brand": "Baden Baden", "category": "Dark", "max": 20, "quantity": 4, "type": BeerType.STOUT},
    {"name": "Way Amburana Lager", "brand": "Way Beer", "category": "Barrel aged", "max": 25, "quantity": 8, "type": BeerType.LAGER},
    {"name": "Tupiniquim IPA", "brand": "Tupiniquim", "category": "Hoppy", "max": 60, "quantity": 20, "type": BeerType.IPA},
]


async def seed_beers(store: BeerStore, dry_run: bool = False) -> int:
    service = BeerService(store)
    created = 0
    for data in SAMPLE_BEERS:
        if await store.find_by_name(data["name"]) is not None:
            continue
        if not dry_run:
            await service.create_beer(BeerCreate(**data))
        created += 1
    return created


async def _run(dry_run: bool):
    await create_db_and_tables()
    async with async_session_maker() as session:
        created = await seed_beers(SqlAlchemyBeerStore(session), dry_run=dry_run)

    if dry_run:
        print(f"[seed_beers] DRY RUN: would create {created} beers")
    else:
        print(f"[seed_beers] Created {created} beers")


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--dry-run", action="store_true", help="Do not insert, just print what would change")
    args = p.parse_args()

    asyncio.run(_run(dry_run=args.dry_run))


if __name__ == "__main__":
    main()
