"""
Agrégation des vues d'annonces (procédure stockée aggregate_old_views)
"""
from typing import Tuple
from supabase import Client
import logging

logger = logging.getLogger(__name__)


class ViewsCRUD:
    def __init__(self, db: Client):
        self.db = db
    
    def aggregate_old_views(self, days_threshold: int) -> Tuple[int, int]:
        """Agrège les vues plus anciennes que `days_threshold` jours.
        
        Returns:
            (nombre de lignes agrégées, nombre de lignes supprimées)
        """
        try:
            result = self.db.rpc(
                "aggregate_old_views",
                {"days_threshold": days_threshold}
            ).execute()
        except Exception as e:
            logger.error(f"✗ Échec de l'agrégation des vues: {e}")
            raise
        
        row = result.data[0] if result.data else {}
        aggregated = row.get("aggregated_count") or 0
        deleted = row.get("deleted_count") or 0
        logger.info(f"✓ Vues agrégées: {aggregated}, supprimées: {deleted}")
        return aggregated, deleted


def get_views_crud(db: Client) -> ViewsCRUD:
    return ViewsCRUD(db)
