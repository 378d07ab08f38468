from .engine import compute_columns, filter_items, normalize_keyword, paginate_into_rows
from .projections import (
    CardProps,
    CoverProps,
    RenderProps,
    SpineProps,
    project,
    project_card,
    project_cover,
    project_shelf,
    spine_height,
)

__all__ = [
    "CardProps",
    "CoverProps",
    "RenderProps",
    "SpineProps",
    "compute_columns",
    "filter_items",
    "normalize_keyword",
    "paginate_into_rows",
    "project",
    "project_card",
    "project_cover",
    "project_shelf",
    "spine_height",
]
