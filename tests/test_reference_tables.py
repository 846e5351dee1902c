# tests/test_reference_tables.py
"""
Tests des tables de référence (formules, interdictions, constantes)
"""
import pytest
from pydantic import ValidationError

from app.core import constants
from app.core.interdictions import is_known_interdiction, label_of, labels_of
from app.core.tiers import (
    TIERS_CONFIG, TierId, allows_open_houses, allows_photos,
    allows_video, list_tiers, tier_config
)


# ==================== TIERS ====================

def test_exactly_three_tiers():
    assert [tier.id for tier in list_tiers()] == [
        TierId.essentiel, TierId.standard, TierId.premium
    ]
    assert len(TIERS_CONFIG) == 3


def test_tier_limits_strictly_increase():
    tiers = list_tiers()
    for lower, higher in zip(tiers, tiers[1:]):
        assert higher.photo_limit > lower.photo_limit
        assert higher.slot_limit > lower.slot_limit
        assert higher.base_fee > lower.base_fee


def test_tier_config_lookup():
    premium = tier_config("premium")
    assert premium is tier_config(TierId.premium)
    assert premium.base_fee == 50000
    assert tier_config("standard").photo_limit == 10
    assert premium.video_included and premium.has_badge
    essentiel = tier_config(TierId.essentiel)
    assert essentiel.base_fee == 15000
    assert not essentiel.video_included and not essentiel.has_badge


def test_tier_config_unknown_id():
    with pytest.raises(ValueError):
        tier_config("gold")


def test_tiers_are_immutable():
    with pytest.raises(ValidationError):
        tier_config("standard").photo_limit = 99
    with pytest.raises(TypeError):
        TIERS_CONFIG[TierId.standard] = tier_config("premium")


def test_tier_entitlements():
    assert allows_photos("essentiel", 8)
    assert not allows_photos("essentiel", 9)
    assert allows_photos("premium", 15)
    assert not allows_video("essentiel")
    assert allows_video("standard")
    assert allows_open_houses("standard", 2)
    assert not allows_open_houses("standard", 3)


# ==================== INTERDICTIONS ====================

def test_label_of():
    assert label_of("no_animaux") == "Pas d'animaux"
    assert label_of("no_etudiants") == "Pas d'étudiants"
    assert label_of("unknown_key") == "unknown_key"


def test_labels_of_absent_input():
    assert labels_of([]) is None
    assert labels_of(None) is None


def test_labels_of_preserves_order_and_duplicates():
    assert labels_of(["no_fumeurs", "no_animaux"]) == ["Pas de fumeurs", "Pas d'animaux"]
    assert labels_of(["no_colocation", "x", "no_colocation"]) == [
        "Pas de colocation", "x", "Pas de colocation"
    ]


def test_is_known_interdiction():
    assert is_known_interdiction("no_fumeurs")
    assert not is_known_interdiction("Pas de fumeurs")


# ==================== CONSTANTS ====================

def test_rate_limit_windows():
    assert constants.PAYMENT_RATE_LIMIT.requests == 5
    assert constants.PAYMENT_RATE_LIMIT.window_seconds == 60
    assert constants.LISTING_RATE_LIMIT.window_seconds == 3600
    assert constants.AUTH_RATE_LIMIT.window_seconds == 300


@pytest.mark.parametrize("requested,expected", [
    (None, 20), (0, 1), (-3, 1), (50, 50), (500, 100),
])
def test_clamp_page_size(requested, expected):
    assert constants.clamp_page_size(requested) == expected


def test_durations():
    assert constants.BOOST_DURATION_DAYS == 7
    assert constants.LOCK_DURATION_HOURS == 48
    assert constants.LOCK_EXTENSION_HOURS == 72
