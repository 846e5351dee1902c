"""
Routes API pour les formules d'annonce
"""
from fastapi import APIRouter, HTTPException, status
from typing import List
from app.core.tiers import Tier, TierId, list_tiers, tier_config

router = APIRouter()


@router.get("/", response_model=List[Tier])
def get_tiers():
    """Toutes les formules (comparatif)"""
    return list_tiers()


@router.get("/{tier_id}", response_model=Tier)
def get_tier(tier_id: str):
    try:
        return tier_config(TierId(tier_id))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Formule {tier_id} inconnue"
        )
