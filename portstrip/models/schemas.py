"""Software-only simulation / demo - no real systems will be contacted or modified."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..utils.address_tools import AddressShape


class BaseSchema(BaseModel):
    """Base schema with attribute extraction enabled."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class StrippedAddress(BaseSchema):
    original: str
    host: str
    port: Optional[str] = None
    shape: AddressShape
