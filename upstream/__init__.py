"""Pingdom API access"""
from .client import PingdomClient, PingdomAPIError
from .models import Check, CheckStatus

__all__ = [
    'PingdomClient',
    'PingdomAPIError',
    'Check',
    'CheckStatus'
]
