import pytest
from sqlalchemy.dialects import postgresql

from core.converters import schema_to_model
from core.exceptions import CapacityExceededError, DuplicateNameError, NotFoundError
from db.beer import Beer, BeerType
from db.beer_store import SqlAlchemyBeerStore
from services.beer_service import BeerService
from factories import make_beer


async def test_sql_store_assigns_ids_and_finds_by_name(sql_store):
    brahma = await sql_store.save(schema_to_model(make_beer()))
    skol = await sql_store.save(schema_to_model(make_beer(name="Skol")))

    assert brahma.id is not None
    assert skol.id != brahma.id
    assert (await sql_store.find_by_name("Skol")).id == skol.id
    assert await sql_store.find_by_name("Bohemia") is None
    assert [b.name for b in await sql_store.find_all()] == ["Brahma", "Skol"]


async def test_sql_store_delete(sql_store):
    beer = await sql_store.save(schema_to_model(make_beer()))

    await sql_store.delete_by_id(beer.id)

    assert await sql_store.find_by_id(beer.id) is None
    assert await sql_store.find_all() == []


async def test_sql_store_rejects_duplicate_name_on_insert(sql_store):
    await sql_store.save(schema_to_model(make_beer()))

    with pytest.raises(DuplicateNameError):
        await sql_store.save(schema_to_model(make_beer(brand="Other")))

    assert len(await sql_store.find_all()) == 1


async def test_service_adjusts_stock_on_sql_store(sql_store):
    service = BeerService(sql_store)
    created = await service.create_beer(make_beer(quantity=10, max=50))

    assert (await service.increment(created.id, 40)).quantity == 50
    with pytest.raises(CapacityExceededError):
        await service.increment(created.id, 1)
    assert (await service.decrement(created.id, 50)).quantity == 0

    stored = await sql_store.find_by_id(created.id, for_update=True)
    assert stored.quantity == 0
    assert stored.type == BeerType.LAGER


async def test_in_memory_store_returns_copies(store):
    saved = await store.save(schema_to_model(make_beer()))

    found = await store.find_by_id(saved.id)
    found.quantity = 0

    assert (await store.find_by_id(saved.id)).quantity == 10


async def test_in_memory_store_ids_are_not_reused(store):
    first = await store.save(schema_to_model(make_beer()))
    await store.delete_by_id(first.id)

    second = await store.save(Beer(name="Skol", brand="Ambev", max=10, quantity=1, type=BeerType.ALE))

    assert second.id == first.id + 1


class _EmptyResult:
    def scalar_one_or_none(self):
        return None


class RecordingSession:
    """Stands in for AsyncSession and keeps every statement it is asked to run."""

    def __init__(self):
        self.statements = []

    async def execute(self, stmt):
        self.statements.append(stmt)
        return _EmptyResult()


def _postgres_sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


async def test_find_by_id_for_update_locks_the_row():
    session = RecordingSession()

    await SqlAlchemyBeerStore(session).find_by_id(1, for_update=True)

    assert "FOR UPDATE" in _postgres_sql(session.statements[0])


async def test_plain_find_by_id_does_not_lock():
    session = RecordingSession()

    await SqlAlchemyBeerStore(session).find_by_id(1)

    assert "FOR UPDATE" not in _postgres_sql(session.statements[0])


@pytest.mark.parametrize("adjust", ["increment", "decrement"])
async def test_stock_adjustments_read_with_row_lock(adjust):
    session = RecordingSession()
    service = BeerService(SqlAlchemyBeerStore(session))

    with pytest.raises(NotFoundError):
        await getattr(service, adjust)(1, 5)

    assert "FOR UPDATE" in _postgres_sql(session.statements[0])
