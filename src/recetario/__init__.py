"""
Recetario family recipe manager.

The package stores recipes, the household pantry ("despensa"), meal plans and a
shopping list, and contains the engine that consolidates recipe ingredients into a
pantry-aware shopping list.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
