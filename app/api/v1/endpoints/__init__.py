"""Endpoints API"""
from app.api.v1.endpoints import properties
from app.api.v1.endpoints import payments
from app.api.v1.endpoints import tiers
from app.api.v1.endpoints import cron

__all__ = ["properties", "payments", "tiers", "cron"]
