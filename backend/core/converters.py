from typing import Dict
from db.beer import Beer
from schemas.beers import BeerCreate, BeerRead


def model_to_schema(beer_model: Beer) -> BeerRead:
    """Convert SQLAlchemy model to Pydantic read schema"""
    return BeerRead(
        id=beer_model.id,
        name=beer_model.name,
        brand=beer_model.brand,
        category=beer_model.category,
        max=beer_model.max,
        quantity=beer_model.quantity,
        type=beer_model.type,
    )


def schema_to_model_data(beer_schema: BeerCreate) -> Dict:
    """Convert Pydantic schema to dict for model creation"""
    return {
        "name": beer_schema.name,
        "brand": beer_schema.brand,
        "category": beer_schema.category,
        "max": beer_schema.max,
        "quantity": beer_schema.quantity,
        "type": beer_schema.type,
    }


def schema_to_model(beer_schema: BeerCreate) -> Beer:
    return Beer(**schema_to_model_data(beer_schema))
