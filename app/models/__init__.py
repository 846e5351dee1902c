# app/models/__init__.py
"""
Modèles Pydantic pour l'API Roogo

Modules implémentés:
- Validation : erreurs de champ renvoyées comme valeurs
- Listing : Annonces de location
- Payment : Initiation de paiement mobile money
"""

# ====================================
# VALIDATION
# ====================================
from .validation import (
    FieldError,
    ValidationFailure,
    validate_model
)

# ====================================
# LISTING MODELS
# ====================================
from .listing import (
    PropertyType,
    Period,
    ListingInput,
    ListingPhoto,
    ListingSubmission,
    validate_listing
)

# ====================================
# PAYMENT MODELS
# ====================================
from .payment import (
    PaymentProvider,
    PaymentTransactionType,
    PaymentInitiateInput,
    PROVIDER_CODES,
    validate_payment_initiate
)

# ====================================
# EXPORTS
# ====================================
__all__ = [
    # Validation
    "FieldError",
    "ValidationFailure",
    "validate_model",
    
    # Listing
    "PropertyType",
    "Period",
    "ListingInput",
    "ListingPhoto",
    "ListingSubmission",
    "validate_listing",
    
    # Payment
    "PaymentProvider",
    "PaymentTransactionType",
    "PaymentInitiateInput",
    "PROVIDER_CODES",
    "validate_payment_initiate",
]
