"""Metric collectors"""
from .base import BaseCollector
from .pingdom import PingdomCollector

__all__ = [
    'BaseCollector',
    'PingdomCollector'
]
