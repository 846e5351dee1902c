"""
Opérations CRUD pour les annonces (table properties)
"""
from typing import Any, Dict, List, Optional
from supabase import Client
from app.core.interdictions import labels_of
from app.models import ListingInput, ListingPhoto
import logging

logger = logging.getLogger(__name__)

DEFAULT_PHOTO_WIDTH = 1024
DEFAULT_PHOTO_HEIGHT = 768


class PropertyCRUD:
    def __init__(self, db: Client):
        self.db = db
        self.table = "properties"
    
    def create(
        self,
        listing: ListingInput,
        agent_id: str,
        photos: Optional[List[ListingPhoto]] = None
    ) -> str:
        """Créer une annonce en attente de validation, retourne son ID"""
        data = listing.model_dump(mode="json", exclude={"amenities"})
        data.update({
            "agent_id": agent_id,
            "listing_type": "louer",
            "status": "en_attente",
            "period": data.get("period") or "month",
            "interdictions": labels_of(listing.interdictions),
        })
        
        try:
            result = self.db.table(self.table).insert(data).execute()
        except Exception as e:
            logger.error(f"✗ Erreur création propriété: {e}")
            raise
        
        if not result.data:
            raise RuntimeError("Aucune ligne retournée à la création de l'annonce")
        
        property_id = result.data[0]["id"]
        logger.info(f"✓ Propriété créée: {property_id}")
        
        if photos:
            self._add_images(property_id, photos)
        if listing.amenities:
            self._link_amenities(property_id, listing.amenities)
        
        return property_id
    
    def _add_images(self, property_id: str, photos: List[ListingPhoto]) -> None:
        """Les erreurs d'images n'annulent pas la création de l'annonce"""
        records = [
            {
                "property_id": property_id,
                "url": photo.url,
                "width": photo.width or DEFAULT_PHOTO_WIDTH,
                "height": photo.height or DEFAULT_PHOTO_HEIGHT,
                "is_primary": index == 0,
            }
            for index, photo in enumerate(photos)
        ]
        try:
            self.db.table("property_images").insert(records).execute()
        except Exception as e:
            logger.error(f"✗ Erreur création images {property_id}: {e}")
    
    def _link_amenities(self, property_id: str, names: List[str]) -> None:
        """Rattache les équipements connus (par nom) à l'annonce"""
        try:
            result = self.db.table("amenities")\
                .select("id, name")\
                .in_("name", names)\
                .execute()
            
            if not result.data:
                return
            
            links = [
                {"property_id": property_id, "amenity_id": amenity["id"]}
                for amenity in result.data
            ]
            self.db.table("property_amenities").insert(links).execute()
        except Exception as e:
            logger.error(f"✗ Erreur liaison équipements {property_id}: {e}")
    
    def get_by_id(self, property_id: str) -> Optional[Dict[str, Any]]:
        """Récupérer une annonce par ID"""
        result = self.db.table(self.table)\
            .select("*")\
            .eq("id", property_id)\
            .execute()
        
        if result.data:
            return result.data[0]
        return None
    
    def get_all(
        self,
        skip: int = 0,
        limit: int = 20,
        city: Optional[str] = None,
        property_type: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Liste des annonces avec filtres"""
        query = self.db.table(self.table).select("*")
        
        if city:
            query = query.eq("city", city)
        if property_type:
            query = query.eq("property_type", property_type)
        
        result = query\
            .order("created_at", desc=True)\
            .range(skip, skip + limit - 1)\
            .execute()
        
        return result.data or []


def get_property_crud(db: Client) -> PropertyCRUD:
    return PropertyCRUD(db)
