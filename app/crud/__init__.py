# app/crud/__init__.py
"""
Couche CRUD pour l'API Roogo

Modules CRUD:
- Property: Annonces de location
- Transaction: Paiements mobile money en attente
- Views: Agrégation des statistiques de vues
"""

from .property import PropertyCRUD, get_property_crud
from .transaction import TransactionCRUD, get_transaction_crud
from .views import ViewsCRUD, get_views_crud

__all__ = [
    # Property CRUD
    "PropertyCRUD",
    "get_property_crud",
    
    # Transaction CRUD
    "TransactionCRUD",
    "get_transaction_crud",
    
    # Views CRUD
    "ViewsCRUD",
    "get_views_crud",
]
