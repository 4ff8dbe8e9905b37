"""
Configuration for seed point search.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
