"""Router API principal v1"""
from fastapi import APIRouter
from app.api.v1.endpoints import properties, payments, tiers, cron

# Créer le router principal
api_router = APIRouter()

# ==================== PROPERTIES ====================
api_router.include_router(
    properties.router, 
    prefix="/properties", 
    tags=["Properties"]
)

# ==================== PAYMENTS ====================
api_router.include_router(
    payments.router, 
    prefix="/payments", 
    tags=["Payments"]
)

# ==================== TIERS ====================
api_router.include_router(
    tiers.router, 
    prefix="/tiers", 
    tags=["Tiers"]
)

# ==================== CRON ====================
api_router.include_router(
    cron.router, 
    prefix="/cron", 
    tags=["Cron"]
)
