"""
Statebound CLI

Command-line interface for region lookups against a configured store.
"""

from .cli import main
from .config import AppConfig, RegionConfig

__all__ = ["main", "AppConfig", "RegionConfig"]
