"""
Shared Pattern Infrastructure

This module contains the infrastructure the catalog itself is built on.
Currently includes:
- Singleton Pattern: For managing single instances of classes like the config manager
  and the pattern catalog
"""

from .singleton import Singleton, SingletonMeta, SingletonABCMeta

__all__ = ["Singleton", "SingletonMeta", "SingletonABCMeta"]
