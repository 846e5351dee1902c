"""
Constantes partagées (durées, pagination, limites de débit)
"""
from typing import NamedTuple, Optional


# ==================== DURÉES ====================
BOOST_DURATION_DAYS = 7
LOCK_DURATION_HOURS = 48
LOCK_EXTENSION_HOURS = 72
LOCK_EXPIRY_REMINDER_DAYS = 7


# ==================== PAGINATION ====================
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def clamp_page_size(page_size: Optional[int] = None) -> int:
    """Ramène une taille de page demandée dans [1, MAX_PAGE_SIZE]"""
    if page_size is None:
        return DEFAULT_PAGE_SIZE
    return max(1, min(page_size, MAX_PAGE_SIZE))


# ==================== RATE LIMITS ====================
_UNIT_SECONDS = {"s": 1, "m": 60, "h": 3600, "d": 86400}


class RateLimitPolicy(NamedTuple):
    """Nombre de requêtes autorisées par fenêtre glissante ("1 m", "5 m", "1 h")"""
    requests: int
    window: str

    @property
    def window_seconds(self) -> int:
        amount, unit = self.window.split()
        return int(amount) * _UNIT_SECONDS[unit]


PAYMENT_RATE_LIMIT = RateLimitPolicy(requests=5, window="1 m")
LISTING_RATE_LIMIT = RateLimitPolicy(requests=10, window="1 h")
AUTH_RATE_LIMIT = RateLimitPolicy(requests=5, window="5 m")
