"""
Spire - Turn-based card battle engine

A server-authoritative card battle: the player fights one enemy per level
with a small deck. The package provides:
- State management and turn resolution
- Weighted enemy intents shown a turn in advance
- In-memory game sessions
- A JSON API for the client
"""

__version__ = "0.1.0"
