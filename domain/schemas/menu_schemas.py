from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime, timezone
from uuid import UUID
from decimal import Decimal


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; either is accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MenuItemCreate(CamelModel):
    """Body of POST /api/menuitem. Business rules are checked by the service."""

    name: str
    description: Optional[str] = ""
    price: Decimal
    category: str
    dietary_tags: Optional[List[str]] = Field(default_factory=list)
    ingredients: Optional[List[str]] = Field(default_factory=list)

    @field_validator("dietary_tags", "ingredients", mode="after")
    @classmethod
    def none_as_empty(cls, v):
        return v if v is not None else []


class MenuItemUpdate(MenuItemCreate):
    """Body of PUT /api/menuitem/{id}; ``id`` must match the path."""

    id: Optional[UUID] = None


class MenuItemResponse(CamelModel):
    id: UUID
    name: str
    description: str
    price: Decimal
    category: str
    dietary_tags: List[str]
    ingredients: List[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    @field_validator("created_at", "updated_at", mode="after")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored in UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @field_serializer("price")
    def serialize_price(self, price: Decimal) -> float:
        return float(price)
