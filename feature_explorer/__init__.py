"""feature_explorer — interactive map of learned SAE feature embeddings."""

from .bounds import AxisBounds, compute_bounds
from .categories import DEFAULT_CATALOG, Category, CategoryCatalog
from .config import ExplorerSettings, load_settings
from .io import (
    aload_points,
    export_points_csv,
    load_points,
    normalize_features,
    points_to_frame,
)
from .records import PointRecord
from .text import wrap_text
from .visualization import (
    Emphasis,
    EmphasisStyle,
    VisualAttributes,
    compute_visual_attributes,
    darken,
)
from .explorer import SelectionState, reduce

__all__ = [
    # records / catalog
    "PointRecord",
    "Category",
    "CategoryCatalog",
    "DEFAULT_CATALOG",
    # io
    "load_points",
    "aload_points",
    "normalize_features",
    "points_to_frame",
    "export_points_csv",
    # text / bounds
    "wrap_text",
    "AxisBounds",
    "compute_bounds",
    # visualization
    "Emphasis",
    "EmphasisStyle",
    "VisualAttributes",
    "compute_visual_attributes",
    "darken",
    # explorer
    "SelectionState",
    "reduce",
    # config
    "ExplorerSettings",
    "load_settings",
]
