"""
Interdictions d'une annonce (pas d'animaux, pas de fumeurs...)

Stockées et affichées sous forme de libellés ; un identifiant inconnu
est conservé tel quel.
"""
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional


INTERDICTION_LABELS: Mapping[str, str] = MappingProxyType({
    "no_animaux": "Pas d'animaux",
    "no_fumeurs": "Pas de fumeurs",
    "no_etudiants": "Pas d'étudiants",
    "no_colocation": "Pas de colocation",
})


def label_of(interdiction_id: str) -> str:
    """Libellé d'une interdiction, ou l'identifiant lui-même s'il est inconnu"""
    return INTERDICTION_LABELS.get(interdiction_id) or interdiction_id


def labels_of(interdiction_ids: Optional[Iterable[str]]) -> Optional[List[str]]:
    """Convertit une liste d'identifiants en libellés (None si vide ou absente)"""
    if not interdiction_ids:
        return None
    labels = [label_of(interdiction_id) for interdiction_id in interdiction_ids]
    return labels or None


def is_known_interdiction(interdiction_id: str) -> bool:
    return interdiction_id in INTERDICTION_LABELS
