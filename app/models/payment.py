# app/models/payment.py
"""
Modèles Pydantic pour l'initiation d'un paiement mobile money
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional, Union
from enum import Enum

from app.models.validation import ValidationFailure, validate_model

# Forme canonique 8-4-4-4-12
UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"


class PaymentProvider(str, Enum):
    ORANGE_MONEY = "ORANGE_MONEY"
    MOOV_MONEY = "MOOV_MONEY"


class PaymentTransactionType(str, Enum):
    """Ce que le paiement active"""
    listing = "listing"    # Publication d'une annonce
    boost = "boost"        # Mise en avant
    lock = "lock"          # Réservation d'un bien


# Codes opérateurs Burkina Faso
PROVIDER_CODES: Dict[PaymentProvider, str] = {
    PaymentProvider.ORANGE_MONEY: "ORANGE_MONEY_BFA",
    PaymentProvider.MOOV_MONEY: "MOOV_MONEY_BFA",
}


class PaymentInitiateInput(BaseModel):
    """Demande de paiement (champs camelCase côté client)"""
    model_config = ConfigDict(populate_by_name=True)

    amount: float = Field(..., gt=0, strict=True, allow_inf_nan=False)
    phone_number: str = Field(..., alias="phoneNumber", pattern=r"^[0-9]{8,12}$")
    provider: PaymentProvider
    transaction_type: PaymentTransactionType = Field(..., alias="transactionType")
    property_id: Optional[str] = Field(None, alias="propertyId", pattern=UUID_PATTERN)
    pre_authorisation_code: Optional[str] = Field(None, alias="preAuthorisationCode")
    description: Optional[str] = Field(None, max_length=100)
    metadata: Optional[Dict[str, Any]] = None

    @property
    def provider_code(self) -> str:
        return PROVIDER_CODES[self.provider]


def validate_payment_initiate(raw: Any) -> Union[PaymentInitiateInput, ValidationFailure]:
    """Valide une demande de paiement (toutes les erreurs sont collectées)"""
    return validate_model(PaymentInitiateInput, raw)
