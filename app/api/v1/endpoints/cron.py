"""
Tâches planifiées (appelées par le cron avec le secret partagé)
"""
from fastapi import APIRouter, Depends, Header, HTTPException, status
from datetime import datetime, timezone
from typing import Optional
from supabase import Client
import logging
import secrets
from app.core.config import settings
from app.db import get_supabase
from app.crud import get_views_crud

router = APIRouter()
logger = logging.getLogger(__name__)


def verify_cron_secret(authorization: Optional[str] = Header(None)) -> None:
    """Refuse toute requête si CRON_SECRET n'est pas configuré"""
    expected = f"Bearer {settings.CRON_SECRET}"
    if not settings.CRON_SECRET or not authorization \
            or not secrets.compare_digest(authorization.encode(), expected.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )


@router.get("/aggregate-views", dependencies=[Depends(verify_cron_secret)])
def aggregate_views(db: Client = Depends(get_supabase)):
    """Agrège les vues anciennes (quotidien, 3h UTC)"""
    try:
        aggregated, deleted = get_views_crud(db).aggregate_old_views(
            settings.VIEWS_RETENTION_DAYS
        )
    except Exception as e:
        logger.error(f"Échec de l'agrégation: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Échec de l'agrégation des vues"
        )
    
    return {
        "success": True,
        "aggregated": aggregated,
        "deleted": deleted,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
