"""
Opérations CRUD pour les transactions de paiement
"""
from typing import Any, Dict, Optional
from supabase import Client
from app.core.config import settings
from app.models import PaymentInitiateInput
import logging
import uuid

logger = logging.getLogger(__name__)


class TransactionCRUD:
    def __init__(self, db: Client):
        self.db = db
        self.table = "transactions"
    
    def create_pending(self, payment: PaymentInitiateInput, user_id: Optional[str] = None) -> Dict[str, Any]:
        """Enregistre un paiement en attente, retourne la ligne créée"""
        deposit_id = str(uuid.uuid4())
        data = {
            "deposit_id": deposit_id,
            "amount": payment.amount,
            "currency": settings.CURRENCY,
            "status": "pending",
            "type": payment.transaction_type.value,
            "provider": payment.provider_code,
            "payer_phone": payment.phone_number,
            "property_id": payment.property_id,
            "user_id": user_id,
            "description": payment.description or "Roogo Payment",
            "metadata": payment.metadata,
        }
        
        try:
            result = self.db.table(self.table).insert(data).execute()
        except Exception as e:
            logger.error(f"✗ Erreur création transaction: {e}")
            raise
        
        logger.info(f"✓ Transaction {deposit_id} en attente ({payment.provider_code})")
        return result.data[0] if result.data else data


def get_transaction_crud(db: Client) -> TransactionCRUD:
    return TransactionCRUD(db)
