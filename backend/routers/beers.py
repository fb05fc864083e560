from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from db.beer_store import BeerStore, SqlAlchemyBeerStore
from db.database import get_async_session
from schemas.beers import BeerCreate, BeerRead, QuantityRequest
from services.beer_service import BeerService

router = APIRouter()


async def get_beer_store(db: AsyncSession = Depends(get_async_session)) -> BeerStore:
    return SqlAlchemyBeerStore(db)


async def get_beer_service(store: BeerStore = Depends(get_beer_store)) -> BeerService:
    return BeerService(store)


@router.post("", response_model=BeerRead, status_code=status.HTTP_201_CREATED)
async def create_beer(payload: BeerCreate, service: BeerService = Depends(get_beer_service)):
    """Register a new beer"""
    return await service.create_beer(payload)


@router.get("/{name}", response_model=BeerRead)
async def get_beer(name: str, service: BeerService = Depends(get_beer_service)):
    """Get a beer by its name"""
    return await service.find_by_name(name)


@router.get("", response_model=List[BeerRead])
async def list_beers(service: BeerService = Depends(get_beer_service)):
    """Get all beers"""
    return await service.list_all()


@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_beer(beer_id: int, service: BeerService = Depends(get_beer_service)):
    """Delete a beer by id"""
    await service.delete_by_id(beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{beer_id}/increment", response_model=BeerRead)
async def increment_stock(beer_id: int, payload: QuantityRequest, service: BeerService = Depends(get_beer_service)):
    """Add stock, rejected if it would exceed the beer's max"""
    return await service.increment(beer_id, payload.quantity)


@router.patch("/{beer_id}/decrement", response_model=BeerRead)
async def decrement_stock(beer_id: int, payload: QuantityRequest, service: BeerService = Depends(get_beer_service)):
    """Remove stock, rejected if it would go below zero"""
    return await service.decrement(beer_id, payload.quantity)
