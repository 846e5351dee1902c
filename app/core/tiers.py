"""
Formules d'annonce (essentiel, standard, premium)

Chaque formule fixe le nombre de photos, de slots actifs, de visites
groupées (open house), l'inclusion de la vidéo, le tarif d'activation
(en XOF) et l'affichage du badge de confiance.

Les limites de photos, de slots et les tarifs croissent strictement
d'une formule à la suivante : la formule standard autorise donc 10 photos
(et non 8 comme essentiel).
"""
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field


class TierId(str, Enum):
    essentiel = "essentiel"
    standard = "standard"
    premium = "premium"


class Tier(BaseModel):
    """Formule immuable"""
    model_config = ConfigDict(frozen=True)

    id: TierId
    photo_limit: int = Field(..., gt=0)
    slot_limit: int = Field(..., gt=0)
    video_included: bool
    open_house_limit: int = Field(..., ge=0)
    base_fee: int = Field(..., gt=0)
    has_badge: bool


TIERS_CONFIG: Mapping[TierId, Tier] = MappingProxyType({
    TierId.essentiel: Tier(
        id=TierId.essentiel,
        photo_limit=8,
        slot_limit=25,
        video_included=False,
        open_house_limit=1,
        base_fee=15000,
        has_badge=False,
    ),
    TierId.standard: Tier(
        id=TierId.standard,
        photo_limit=10,
        slot_limit=50,
        video_included=True,
        open_house_limit=2,
        base_fee=25000,
        has_badge=True,
    ),
    TierId.premium: Tier(
        id=TierId.premium,
        photo_limit=15,
        slot_limit=100,
        video_included=True,
        open_house_limit=5,
        base_fee=50000,
        has_badge=True,
    ),
})


def tier_config(tier_id: Union[TierId, str]) -> Tier:
    """
    Retourne la formule correspondant à l'identifiant.

    Raises:
        ValueError: si l'identifiant n'est pas une formule connue
    """
    return TIERS_CONFIG[TierId(tier_id)]


def list_tiers() -> List[Tier]:
    """Toutes les formules, de la moins chère à la plus chère"""
    return [TIERS_CONFIG[tier_id] for tier_id in TierId]


def allows_photos(tier_id: Union[TierId, str], count: int) -> bool:
    return 0 <= count <= tier_config(tier_id).photo_limit


def allows_video(tier_id: Union[TierId, str]) -> bool:
    return tier_config(tier_id).video_included


def allows_open_houses(tier_id: Union[TierId, str], count: int) -> bool:
    return 0 <= count <= tier_config(tier_id).open_house_limit
