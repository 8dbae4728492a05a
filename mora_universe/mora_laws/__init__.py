"""
Mora Jai press rules.

Each tile color is bound to one pure rewrite rule over the 3×3 board:
- tile_rules.py: the ten rules, the color → rule table, apply_press()
- selectors.py: neighbor histograms and unique-majority selection (ORANGE)
"""

from .tile_rules import TILE_RULES, apply_press

__all__ = ["TILE_RULES", "apply_press"]
