"""
Inventory report for produced shapes.
"""

from typing import Sequence

import pandas as pd

from ..shapes.base import Shape

INVENTORY_COLUMNS = ["id", "variant", "role"]


def shapes_to_frame(shapes: Sequence[Shape]) -> pd.DataFrame:
    """
    Tabulate shapes in the order given.

    Args:
        shapes: Shapes to list

    Returns:
        DataFrame with one row per shape and columns id, variant, role
    """
    records = [
        {"id": shape.id, "variant": shape.variant_name, "role": shape.role}
        for shape in shapes
    ]
    return pd.DataFrame.from_records(records, columns=INVENTORY_COLUMNS)


def format_inventory(shapes: Sequence[Shape]) -> str:
    """Render the inventory table as plain text without the index."""
    return shapes_to_frame(shapes).to_string(index=False)
