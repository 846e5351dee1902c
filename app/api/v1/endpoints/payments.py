"""
Routes API pour les paiements mobile money (Orange Money, Moov Money)
"""
from fastapi import APIRouter, Body, Depends, HTTPException, status
from typing import Any, Dict
from supabase import Client
import logging
from app.api.v1.errors import unprocessable
from app.db import get_supabase
from app.crud import get_transaction_crud
from app.models import ValidationFailure, validate_payment_initiate

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/initiate")
def initiate_payment(
    payload: Dict[str, Any] = Body(...),
    db: Client = Depends(get_supabase)
):
    """Enregistre une demande de paiement en attente"""
    payment = validate_payment_initiate(payload)
    if isinstance(payment, ValidationFailure):
        logger.warning(f"Paiement rejeté: {payment.fields}")
        raise unprocessable(payment)
    
    try:
        transaction = get_transaction_crud(db).create_pending(payment)
    except Exception as e:
        logger.error(f"Erreur lors de l'initiation du paiement: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Erreur lors de l'initiation du paiement"
        )
    
    return {
        "success": True,
        "depositId": transaction["deposit_id"],
        "status": "PENDING",
    }
