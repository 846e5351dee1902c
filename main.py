"""Roogo - API de location immobilière (Ouagadougou)"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.api.v1.api import api_router
from app.db import get_supabase
import logging

logging.basicConfig(level=logging.DEBUG if settings.DEBUG else logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="API Roogo - Annonces de location, formules et paiements mobile money",
    version=settings.VERSION,
    debug=settings.DEBUG
)

# Seuls le front Roogo et l'app mobile appellent l'API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

@app.on_event("startup")
async def check_database():
    """Vérifie la configuration Supabase sans bloquer le démarrage"""
    try:
        get_supabase()
        logger.info("✓ Supabase configuré")
    except Exception as e:
        logger.warning(f"⚠ Supabase indisponible: {e}")

@app.get("/")
async def root():
    return {
        "app": settings.APP_NAME,
        "version": settings.VERSION,
        "tiers": "/api/v1/tiers"
    }

@app.get("/health")
async def health_check():
    return {"status": "healthy", "supabase": settings.supabase_configured}

app.include_router(api_router, prefix="/api/v1")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
