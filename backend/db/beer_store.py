"""
Beer persistence.

``BeerStore`` is the capability set the stock service relies on. The
relational store backs the API; the in-memory store keeps the same semantics
for tests and local tooling.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import DuplicateNameError
from .beer import Beer


class BeerStore(ABC):

    @abstractmethod
    async def find_by_id(self, beer_id: int, for_update: bool = False) -> Optional[Beer]:
        """Return the beer with this id, or None.

        ``for_update`` asks the store to hold the record for a
        read-modify-write that ends with ``save``.
        """

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Beer]:
        """Return the beer with this exact name, or None."""

    @abstractmethod
    async def find_all(self) -> List[Beer]:
        """Return every stored beer in store iteration order."""

    @abstractmethod
    async def save(self, beer: Beer) -> Beer:
        """Insert or update a beer; assigns ``id`` on insert."""

    @abstractmethod
    async def delete_by_id(self, beer_id: int) -> None:
        """Remove the beer with this id."""


class SqlAlchemyBeerStore(BeerStore):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, beer_id: int, for_update: bool = False) -> Optional[Beer]:
        stmt = select(Beer).where(Beer.id == beer_id)
        if for_update:
            # Row lock is held until save() commits
            stmt = stmt.with_for_update()
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_name(self, name: str) -> Optional[Beer]:
        result = await self.db.execute(select(Beer).where(Beer.name == name))
        return result.scalar_one_or_none()

    async def find_all(self) -> List[Beer]:
        result = await self.db.execute(select(Beer).order_by(Beer.id))
        return list(result.scalars().all())

    async def save(self, beer: Beer) -> Beer:
        self.db.add(beer)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            # Another request inserted the same name between check and insert
            if await self.find_by_name(beer.name) is not None:
                raise DuplicateNameError(beer.name)
            raise
        await self.db.refresh(beer)
        return beer

    async def delete_by_id(self, beer_id: int) -> None:
        await self.db.execute(delete(Beer).where(Beer.id == beer_id))
        await self.db.commit()


def _copy(beer: Beer) -> Beer:
    return Beer(
        id=beer.id,
        name=beer.name,
        brand=beer.brand,
        category=beer.category,
        max=beer.max,
        quantity=beer.quantity,
        type=beer.type,
    )


class InMemoryBeerStore(BeerStore):
    """Dict-backed store; ids start at 1 and iteration follows insertion order."""

    def __init__(self):
        self._beers: Dict[int, Beer] = {}
        self._next_id = 1

    async def find_by_id(self, beer_id: int, for_update: bool = False) -> Optional[Beer]:
        beer = self._beers.get(beer_id)
        return _copy(beer) if beer is not None else None

    async def find_by_name(self, name: str) -> Optional[Beer]:
        for beer in self._beers.values():
            if beer.name == name:
                return _copy(beer)
        return None

    async def find_all(self) -> List[Beer]:
        return [_copy(b) for b in self._beers.values()]

    async def save(self, beer: Beer) -> Beer:
        if beer.id is None:
            if any(b.name == beer.name for b in self._beers.values()):
                raise DuplicateNameError(beer.name)
            beer.id = self._next_id
            self._next_id += 1
        self._beers[beer.id] = _copy(beer)
        return beer

    async def delete_by_id(self, beer_id: int) -> None:
        self._beers.pop(beer_id, None)
