"""Connexion Supabase (clé service role, une instance par processus)"""
from supabase import create_client, Client
from functools import lru_cache
import logging

from app.core.config import settings

logger = logging.getLogger(__name__)


class SupabaseClient:
    _instance: Client = None
    
    @classmethod
    def get_client(cls) -> Client:
        """Crée le client au premier appel.
        
        Raises:
            RuntimeError: si SUPABASE_URL ou SUPABASE_KEY est absent
        """
        if cls._instance is None:
            if not settings.supabase_configured:
                raise RuntimeError("SUPABASE_URL et SUPABASE_KEY doivent être configurés")
            logger.info(f"🔌 Connexion Supabase: {settings.SUPABASE_URL}")
            cls._instance = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
        return cls._instance


@lru_cache()
def get_supabase_client() -> Client:
    return SupabaseClient.get_client()


def get_supabase() -> Client:
    """Dépendance FastAPI, remplacée dans les tests via dependency_overrides"""
    return get_supabase_client()


__all__ = [
    "SupabaseClient",
    "get_supabase_client",
    "get_supabase",
]
