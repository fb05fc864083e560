import enum

from sqlalchemy import CheckConstraint, Column, Enum, Integer, String

from .database import Base


class BeerType(str, enum.Enum):
    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"


class Beer(Base):
    """Beer model - one trackable product with a bounded stock quantity"""
    __tablename__ = "beers"
    __table_args__ = (
        CheckConstraint("quantity >= 0 AND quantity <= max", name="ck_beers_quantity_within_max"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, unique=True, index=True)
    brand = Column(String(200), nullable=False)
    category = Column(String(200), nullable=True)
    max = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False, default=0)
    type = Column(Enum(BeerType, name="beer_type", native_enum=False), nullable=False)

    def __repr__(self):
        return f"<Beer id={self.id} name={self.name!r} quantity={self.quantity}/{self.max}>"
