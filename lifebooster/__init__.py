"""
LifeBooster - Core Package

A single-user personal life tracker: tasks, money, loans, long-term goals,
lessons learned and mood, all kept in one local JSON document.

DESIGN PRINCIPLES:
1. One document, owned by one store, replaced wholesale on every change
2. Reducers are pure - they never mutate the document they are given
3. Nothing is hard-deleted without passing through the trash
4. Bad input is refused, never half-applied
5. Storage backend is swappable
"""

__version__ = "1.0.0"
__author__ = "LifeBooster Team"
