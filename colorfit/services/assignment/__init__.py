"""
ColorFit Assignment Module

Catalog metadata, templates, and the room and wardrobe auto-fill engines.
"""

from .items import Item, ItemMetadata, ItemRole, Tendency, normalize_weight
from .catalog import (
    CatalogKind,
    ROOM_CATALOG,
    WARDROBE_CATALOG,
    catalog_by_category,
    get_metadata,
    get_room_metadata,
    get_wardrobe_metadata,
)
from .templates import (
    OUTFIT_TEMPLATES,
    ROOM_TEMPLATES,
    instantiate_outfit_template,
    instantiate_room_template,
)
from .room import assigned_cohesion, auto_fill_room
from .wardrobe import auto_fill_wardrobe

__all__ = [
    "CatalogKind",
    "Item",
    "ItemMetadata",
    "ItemRole",
    "OUTFIT_TEMPLATES",
    "ROOM_CATALOG",
    "ROOM_TEMPLATES",
    "Tendency",
    "WARDROBE_CATALOG",
    "assigned_cohesion",
    "auto_fill_room",
    "auto_fill_wardrobe",
    "catalog_by_category",
    "get_metadata",
    "get_room_metadata",
    "get_wardrobe_metadata",
    "instantiate_outfit_template",
    "instantiate_room_template",
    "normalize_weight",
]
