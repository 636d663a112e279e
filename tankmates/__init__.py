"""
Tankmates Stocking Checker

A deterministic, offline compatibility checker for aquarium exhibits.
Given the animals meant to share one tank, derives the minimum viable
environment and reports every habitat and cohabitation rule they break.

Architecture: the species catalog is the source of truth. The rule model,
environment aggregator and violation checker are pure functions over it.
"""

__version__ = "0.1.0"
