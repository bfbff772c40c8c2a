"""Account profile record."""

from typing import Optional

from pydantic import Field

from ..core.models import EversendModel


class Account(EversendModel):
    id: int
    name: str
    email: str
    phone: str
    address: str
    town: str
    country: str
    logo: Optional[str] = None
    website: str
    is_verified: bool = Field(alias='isVerified')
