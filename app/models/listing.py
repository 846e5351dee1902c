# app/models/listing.py
"""
Modèles Pydantic pour les annonces de location
"""

from pydantic import BaseModel, Field
from typing import Any, List, Optional, Union
from enum import Enum

from app.core.tiers import TierId
from app.models.validation import ValidationFailure, validate_model


class PropertyType(str, Enum):
    house = "house"
    apartment = "apartment"
    villa = "villa"
    studio = "studio"
    commercial = "commercial"


class Period(str, Enum):
    month = "month"
    year = "year"


class ListingInput(BaseModel):
    """Données d'une nouvelle annonce (les champs inconnus sont ignorés)"""
    title: str = Field(..., min_length=1, max_length=200)
    price: float = Field(..., gt=0, strict=True, allow_inf_nan=False)
    quartier: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    property_type: PropertyType
    period: Optional[Period] = None
    bedrooms: Optional[float] = Field(None, ge=0, strict=True, allow_inf_nan=False)
    bathrooms: Optional[float] = Field(None, ge=0, strict=True, allow_inf_nan=False)
    area: Optional[float] = Field(None, gt=0, strict=True, allow_inf_nan=False)
    parking_spaces: Optional[float] = Field(None, ge=0, strict=True, allow_inf_nan=False)
    tier_id: Optional[TierId] = None
    description: Optional[str] = None
    amenities: Optional[List[str]] = None
    # Identifiants (no_animaux...), convertis en libellés avant stockage
    interdictions: Optional[List[str]] = None


class ListingPhoto(BaseModel):
    """Photo déjà téléversée, rattachée à l'annonce"""
    url: str = Field(..., min_length=1)
    width: Optional[int] = Field(None, gt=0)
    height: Optional[int] = Field(None, gt=0)


class ListingSubmission(BaseModel):
    """Enveloppe de soumission : propriétaire et photos de l'annonce"""
    agent_id: str = Field(..., min_length=1)
    photos: List[ListingPhoto] = Field(default_factory=list)


def validate_listing(raw: Any) -> Union[ListingInput, ValidationFailure]:
    """Valide les données d'une annonce (toutes les erreurs sont collectées)"""
    return validate_model(ListingInput, raw)
