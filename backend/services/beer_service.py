import logging
from typing import List

from core.converters import model_to_schema, schema_to_model
from core.exceptions import CapacityExceededError, DuplicateNameError, NotFoundError
from db.beer import Beer
from db.beer_store import BeerStore
from schemas.beers import BeerCreate, BeerRead

logger = logging.getLogger(__name__)


class BeerService:
    """Stock rules for beers: unique names, existence checks and bounded adjustments."""

    def __init__(self, store: BeerStore):
        self.store = store

    async def create_beer(self, payload: BeerCreate) -> BeerRead:
        if await self.store.find_by_name(payload.name) is not None:
            logger.warning("Rejected create: beer %r already registered", payload.name)
            raise DuplicateNameError(payload.name)

        saved = await self.store.save(schema_to_model(payload))
        logger.info("Created beer id=%s name=%r quantity=%s/%s", saved.id, saved.name, saved.quantity, saved.max)
        return model_to_schema(saved)

    async def find_by_name(self, name: str) -> BeerRead:
        beer = await self.store.find_by_name(name)
        if beer is None:
            logger.warning("Beer with name %r not found", name)
            raise NotFoundError("name", name)
        return model_to_schema(beer)

    async def find_by_id(self, beer_id: int) -> BeerRead:
        return model_to_schema(await self._verify_if_exists(beer_id))

    async def list_all(self) -> List[BeerRead]:
        return [model_to_schema(beer) for beer in await self.store.find_all()]

    async def delete_by_id(self, beer_id: int) -> None:
        await self._verify_if_exists(beer_id)
        await self.store.delete_by_id(beer_id)
        logger.info("Deleted beer id=%s", beer_id)

    async def increment(self, beer_id: int, quantity_to_increment: int) -> BeerRead:
        # Amount is applied as given; a negative value still has to respect the zero floor
        return await self._adjust(beer_id, quantity_to_increment, quantity_to_increment)

    async def decrement(self, beer_id: int, quantity_to_decrement: int) -> BeerRead:
        return await self._adjust(beer_id, -abs(quantity_to_decrement), quantity_to_decrement)

    async def _adjust(self, beer_id: int, delta: int, requested: int) -> BeerRead:
        beer = await self._verify_if_exists(beer_id, for_update=True)
        new_quantity = beer.quantity + delta
        if new_quantity < 0 or new_quantity > beer.max:
            logger.warning(
                "Rejected stock adjustment for beer id=%s: %s%+d outside [0, %s]",
                beer_id, beer.quantity, delta, beer.max,
            )
            raise CapacityExceededError(beer_id, requested, beer.quantity, beer.max)

        previous = beer.quantity
        beer.quantity = new_quantity
        saved = await self.store.save(beer)
        logger.info("Adjusted beer id=%s stock %s -> %s (max %s)", beer_id, previous, saved.quantity, saved.max)
        return model_to_schema(saved)

    async def _verify_if_exists(self, beer_id: int, for_update: bool = False) -> Beer:
        beer = await self.store.find_by_id(beer_id, for_update=for_update)
        if beer is None:
            logger.warning("Beer with id %s not found", beer_id)
            raise NotFoundError("id", beer_id)
        return beer
