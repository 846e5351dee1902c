"""Configuration de l'application Roogo"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Paramètres de configuration"""
    
    # Application
    APP_NAME: str = "Roogo"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    
    # CORS - URLs autorisées
    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000,https://roogo.bf"
    
    # Supabase (clé service role)
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""
    
    # Cron (en-tête Authorization: Bearer <CRON_SECRET>)
    CRON_SECRET: str = ""
    VIEWS_RETENTION_DAYS: int = 30
    
    # Paiements mobile money
    CURRENCY: str = "XOF"
    COUNTRY: str = "BFA"
    
    @property
    def cors_origins_list(self) -> List[str]:
        """Transforme CORS_ORIGINS en liste"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]
    
    @property
    def supabase_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_KEY)
    
    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Instance globale
settings = Settings()
