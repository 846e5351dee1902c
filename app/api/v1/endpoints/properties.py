"""
Routes API pour les annonces de location
"""
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from typing import Any, Dict, List, Optional
from supabase import Client
import logging
from app.api.v1.errors import prefixed, unprocessable
from app.core.constants import clamp_page_size
from app.core.tiers import TierId, allows_photos, tier_config
from app.db import get_supabase
from app.crud import get_property_crud
from app.models import (
    FieldError, ListingSubmission, ValidationFailure,
    validate_listing, validate_model
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_property(
    payload: Dict[str, Any] = Body(...),
    db: Client = Depends(get_supabase)
):
    """Créer une nouvelle annonce (statut en_attente)"""
    listing = validate_listing(payload.get("listing"))
    submission = validate_model(
        ListingSubmission,
        {key: payload[key] for key in ("agent_id", "photos") if key in payload}
    )
    
    errors: List[FieldError] = []
    if isinstance(listing, ValidationFailure):
        errors.extend(prefixed("listing", listing.errors))
    if isinstance(submission, ValidationFailure):
        errors.extend(submission.errors)
    
    if not errors:
        # Sans formule choisie, les limites de la formule essentiel s'appliquent
        tier_id = listing.tier_id or TierId.essentiel
        if not allows_photos(tier_id, len(submission.photos)):
            limit = tier_config(tier_id).photo_limit
            errors.append(FieldError(
                field="photos",
                reason=f"La formule {tier_id.value} autorise au plus {limit} photos"
            ))
    
    if errors:
        logger.warning(f"Annonce rejetée: {[error.field for error in errors]}")
        raise unprocessable(ValidationFailure(errors=errors))
    
    try:
        crud = get_property_crud(db)
        property_id = crud.create(listing, submission.agent_id, submission.photos)
        return {"success": True, "propertyId": property_id}
    except Exception as e:
        logger.error(f"Erreur lors de la création de l'annonce: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Erreur lors de la création de l'annonce"
        )


@router.get("/")
def list_properties(
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None),
    city: Optional[str] = None,
    property_type: Optional[str] = None,
    db: Client = Depends(get_supabase)
):
    """Liste paginée des annonces avec filtres optionnels"""
    size = clamp_page_size(page_size)
    try:
        crud = get_property_crud(db)
        items = crud.get_all(
            skip=(page - 1) * size, limit=size,
            city=city, property_type=property_type
        )
        return {"page": page, "page_size": size, "items": items}
    except Exception as e:
        logger.error(f"Erreur lors de la récupération des annonces: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Erreur lors de la récupération des annonces"
        )


@router.get("/{property_id}")
def get_property(
    property_id: str,
    db: Client = Depends(get_supabase)
):
    """Récupérer une annonce par son ID"""
    try:
        crud = get_property_crud(db)
        property_obj = crud.get_by_id(property_id)
        
        if not property_obj:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Annonce {property_id} non trouvée"
            )
        return property_obj
    
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Erreur lors de la récupération de l'annonce {property_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Erreur lors de la récupération de l'annonce"
        )
