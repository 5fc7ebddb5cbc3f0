"""
Pattern Catalog

Reference implementations of classic object-oriented design patterns:
- creational: factory, builder, singleton
- structural: adapter, bridge, decorator
- behavioral: observer, command, strategy
"""

__version__ = "1.0.0"
