"""
Reporting module for abstract-shapes.
"""

from .inventory import INVENTORY_COLUMNS, format_inventory, shapes_to_frame

__all__ = [
    "shapes_to_frame",
    "format_inventory",
    "INVENTORY_COLUMNS",
]
