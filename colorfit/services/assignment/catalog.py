"""
Item Catalogs

Static metadata for room items and wardrobe garment types. Every lookup
returns an `ItemMetadata` record, falling back to documented defaults when the
name is unknown, so the assignment engine never branches on missing data.

Visual weight is a continuous 1-10 scale approximating share of the visual field:
    10 = ~40%+ (floors, main walls)
     7 = ~15-25% (large furniture, accent walls)
     5 = ~8-15% (medium furniture, drapes)
     3 = ~3-8% (small furniture, doors)
     1 = ~1-3% (trim, hardware, small accents)
"""

from enum import Enum
from typing import Dict, List, Optional

from .items import ItemMetadata, ItemRole


class CatalogKind(str, Enum):
    """Which catalog an item belongs to."""
    ROOM = "room"
    WARDROBE = "wardrobe"


ROOM_DEFAULT_WEIGHT = 3.0
ROOM_DEFAULT_LIGHTNESS = (20.0, 90.0)
ROOM_DEFAULT_ROLE = ItemRole.ANCHOR

WARDROBE_DEFAULT_WEIGHT = 3.0
WARDROBE_DEFAULT_LIGHTNESS = (20.0, 80.0)
WARDROBE_DEFAULT_ROLE = ItemRole.CORE

ROOM_CATEGORY_LABELS = {
    "surfaces": "Surfaces",
    "furniture": "Furniture",
    "textiles": "Textiles",
    "fixtures": "Fixtures",
    "accents": "Accents",
}

WARDROBE_CATEGORY_LABELS = {
    "bottoms": "Bottoms",
    "tops": "Tops",
    "outerwear": "Outerwear",
    "dresses": "Dresses & Jumpsuits",
    "shoes": "Shoes",
    "accessories": "Accessories",
}


def _room(name, weight, category, lightness_range, role) -> ItemMetadata:
    return ItemMetadata(name, float(weight), tuple(float(v) for v in lightness_range), role, category)


def _garment(name, weight, category, lightness_range, role) -> ItemMetadata:
    return ItemMetadata(name, float(weight), tuple(float(v) for v in lightness_range), role, category)


BG, GROUND, ACCENT, ANCHOR, NEUTRAL = (
    ItemRole.BACKGROUND, ItemRole.GROUND, ItemRole.ACCENT, ItemRole.ANCHOR, ItemRole.NEUTRAL
)
FOUNDATION, CORE = ItemRole.FOUNDATION, ItemRole.CORE

ROOM_CATALOG: List[ItemMetadata] = [
    # Surfaces: the bones of the room
    _room("Floors",             10, "surfaces",  (20, 60), GROUND),
    _room("Main Wall",          10, "surfaces",  (75, 97), BG),
    _room("Accent Wall",         7, "surfaces",  (30, 75), ACCENT),
    _room("Ceiling",             8, "surfaces",  (85, 100), BG),
    _room("Backsplash",          3, "surfaces",  (40, 90), ACCENT),
    _room("Countertop",          4, "surfaces",  (30, 90), ANCHOR),
    _room("Fireplace Surround",  4, "surfaces",  (25, 85), ANCHOR),

    # Furniture: the big pieces
    _room("Couch",               7, "furniture", (30, 75), ANCHOR),
    _room("Sectional",           8, "furniture", (30, 75), ANCHOR),
    _room("Armchair",            4, "furniture", (25, 75), ACCENT),
    _room("Ottoman",             3, "furniture", (25, 75), ACCENT),
    _room("Coffee Table",        3, "furniture", (20, 60), ANCHOR),
    _room("Dining Table",        6, "furniture", (20, 60), ANCHOR),
    _room("Dining Chairs",       4, "furniture", (20, 70), ANCHOR),
    _room("Desk",                4, "furniture", (20, 70), ANCHOR),
    _room("Desk Chair",          3, "furniture", (20, 70), ACCENT),
    _room("Bed Frame",           6, "furniture", (20, 65), ANCHOR),
    _room("Headboard",           4, "furniture", (30, 80), ANCHOR),
    _room("Nightstand",          2, "furniture", (20, 70), ANCHOR),
    _room("Dresser",             4, "furniture", (20, 70), ANCHOR),
    _room("Built-in Bookshelf",  5, "furniture", (30, 85), ANCHOR),
    _room("TV Console",          3, "furniture", (15, 60), ANCHOR),
    _room("Bar Cart",            2, "furniture", (20, 70), ACCENT),
    _room("Side Table",          2, "furniture", (20, 70), ANCHOR),

    # Textiles: soft goods
    _room("Rug",                 6, "textiles",  (30, 70), GROUND),
    _room("Runner Rug",          3, "textiles",  (30, 70), GROUND),
    _room("Drapes",              5, "textiles",  (40, 85), ACCENT),
    _room("Sheers",              3, "textiles",  (80, 98), BG),
    _room("Duvet Cover",         7, "textiles",  (50, 92), ANCHOR),
    _room("Sheets",              5, "textiles",  (70, 97), BG),
    _room("Fitted Sheet",        4, "textiles",  (70, 97), BG),
    _room("Pillowcases",         2, "textiles",  (40, 90), ACCENT),
    _room("Throw Pillows",       2, "textiles",  (30, 80), ACCENT),
    _room("Throw Blanket",       2, "textiles",  (30, 80), ACCENT),
    _room("Table Runner",        1, "textiles",  (30, 85), ACCENT),
    _room("Upholstery",          4, "textiles",  (30, 80), ANCHOR),

    # Fixtures: built-in or structural
    _room("Doors",               3, "fixtures",  (50, 95), NEUTRAL),
    _room("Cabinet Doors",       4, "fixtures",  (30, 90), NEUTRAL),
    _room("Window Frames",       2, "fixtures",  (20, 95), NEUTRAL),
    _room("Railing",             2, "fixtures",  (10, 60), NEUTRAL),
    _room("Stair Treads",        3, "fixtures",  (20, 60), GROUND),
    _room("Baseboards",          1, "fixtures",  (70, 97), NEUTRAL),
    _room("Crown Molding",       1, "fixtures",  (80, 98), NEUTRAL),
    _room("Light Fixture",       2, "fixtures",  (15, 80), ACCENT),
    _room("Pendant Light",       2, "fixtures",  (15, 80), ACCENT),
    _room("Sconce",              1, "fixtures",  (15, 80), ACCENT),
    _room("Shelving",            3, "fixtures",  (20, 85), ANCHOR),

    # Accents: small decorative items
    _room("Artwork",             3, "accents",   (20, 85), ACCENT),
    _room("Mirror Frame",        2, "accents",   (15, 75), ACCENT),
    _room("Vase",                1, "accents",   (25, 85), ACCENT),
    _room("Candles",             1, "accents",   (60, 97), ACCENT),
    _room("Books (spines)",      1, "accents",   (20, 80), ACCENT),
    _room("Plant Pot",           1, "accents",   (25, 80), ACCENT),
    _room("Tray",                1, "accents",   (20, 80), ACCENT),
]

WARDROBE_CATALOG: List[ItemMetadata] = [
    # Bottoms
    _garment("Trousers",           8, "bottoms",     (15, 55), FOUNDATION),
    _garment("Wide Trousers",      8, "bottoms",     (15, 55), FOUNDATION),
    _garment("Jeans",              8, "bottoms",     (20, 50), FOUNDATION),
    _garment("Chinos",             8, "bottoms",     (30, 70), FOUNDATION),
    _garment("Shorts",             6, "bottoms",     (25, 70), FOUNDATION),
    _garment("Joggers",            7, "bottoms",     (15, 50), FOUNDATION),
    _garment("Drawstring Pants",   7, "bottoms",     (15, 55), FOUNDATION),
    _garment("Skirt",              6, "bottoms",     (15, 75), CORE),

    # Tops
    _garment("T-Shirt",            6, "tops",        (15, 92), CORE),
    _garment("Oversized Tee",      7, "tops",        (15, 92), CORE),
    _garment("Button-Down Shirt",  6, "tops",        (60, 95), CORE),
    _garment("Band Collar Shirt",  6, "tops",        (50, 95), CORE),
    _garment("Knit Top",           6, "tops",        (15, 80), CORE),
    _garment("Blouse",             6, "tops",        (40, 90), CORE),
    _garment("Sweater",            7, "tops",        (15, 80), CORE),
    _garment("Turtleneck",         7, "tops",        (10, 75), CORE),
    _garment("Hoodie",             7, "tops",        (15, 65), CORE),
    _garment("Henley",             6, "tops",        (20, 85), CORE),
    _garment("Polo",               6, "tops",        (25, 85), CORE),
    _garment("Tank Top",           4, "tops",        (15, 92), CORE),

    # Outerwear
    _garment("Blazer",             8, "outerwear",   (15, 55), FOUNDATION),
    _garment("Overcoat",           9, "outerwear",   (15, 50), FOUNDATION),
    _garment("Workwear Jacket",    8, "outerwear",   (20, 60), CORE),
    _garment("Chore Coat",         8, "outerwear",   (20, 60), CORE),
    _garment("Bomber Jacket",      7, "outerwear",   (15, 50), FOUNDATION),
    _garment("Denim Jacket",       7, "outerwear",   (30, 60), CORE),
    _garment("Leather Jacket",     8, "outerwear",   (10, 30), FOUNDATION),
    _garment("Cardigan",           6, "outerwear",   (20, 75), CORE),
    _garment("Vest",               5, "outerwear",   (15, 55), CORE),
    _garment("Raincoat",           7, "outerwear",   (15, 65), FOUNDATION),
    _garment("Parka",              9, "outerwear",   (15, 45), FOUNDATION),
    _garment("Shirt Jacket",       7, "outerwear",   (20, 65), CORE),

    # Full-body
    _garment("Dress",              9, "dresses",     (15, 85), CORE),
    _garment("Jumpsuit",           9, "dresses",     (15, 65), CORE),

    # Shoes
    _garment("Dress Shoes",        3, "shoes",       (10, 35), FOUNDATION),
    _garment("Sneakers",           3, "shoes",       (60, 97), ACCENT),
    _garment("Boots",              4, "shoes",       (10, 35), FOUNDATION),
    _garment("Chelsea Boots",      4, "shoes",       (10, 40), FOUNDATION),
    _garment("Loafers",            3, "shoes",       (15, 45), FOUNDATION),
    _garment("Sandals",            2, "shoes",       (25, 60), ACCENT),
    _garment("High-Tops",          4, "shoes",       (10, 40), FOUNDATION),
    _garment("Slip-Ons",           3, "shoes",       (15, 55), FOUNDATION),
    _garment("Heels",              3, "shoes",       (10, 45), ACCENT),

    # Accessories
    _garment("Belt",               1, "accessories", (10, 40), FOUNDATION),
    _garment("Watch",              1, "accessories", (20, 70), ACCENT),
    _garment("Scarf",              3, "accessories", (20, 75), ACCENT),
    _garment("Tote Bag",           4, "accessories", (20, 65), ACCENT),
    _garment("Crossbody Bag",      3, "accessories", (15, 50), ACCENT),
    _garment("Beanie",             2, "accessories", (10, 50), ACCENT),
    _garment("Cap",                2, "accessories", (15, 55), ACCENT),
    _garment("Sunglasses",         1, "accessories", (10, 30), FOUNDATION),
    _garment("Bracelet",           1, "accessories", (20, 70), ACCENT),
    _garment("Ring",               1, "accessories", (30, 80), ACCENT),
    _garment("Tie",                2, "accessories", (15, 65), ACCENT),
    _garment("Pocket Square",      1, "accessories", (30, 85), ACCENT),
    _garment("Hat",                3, "accessories", (15, 55), ACCENT),
    _garment("Bag",                4, "accessories", (15, 55), ACCENT),
    _garment("Jewelry",            1, "accessories", (40, 80), ACCENT),
]


def _index(catalog: List[ItemMetadata]) -> Dict[str, ItemMetadata]:
    return {entry.name.lower(): entry for entry in catalog}


_ROOM_INDEX = _index(ROOM_CATALOG)
_WARDROBE_INDEX = _index(WARDROBE_CATALOG)


def _normalize_name(name: str) -> str:
    return (name or "").strip().lower()


def find_room_item(name: str) -> Optional[ItemMetadata]:
    """Exact (case-insensitive) room catalog match, or None."""
    return _ROOM_INDEX.get(_normalize_name(name))


def find_wardrobe_item(name: str) -> Optional[ItemMetadata]:
    """Exact (case-insensitive) wardrobe catalog match, or None."""
    return _WARDROBE_INDEX.get(_normalize_name(name))


def get_room_metadata(name: str) -> ItemMetadata:
    """Room metadata for `name`, or the room defaults when unrecognized."""
    entry = find_room_item(name)
    if entry is not None:
        return entry
    return ItemMetadata(
        name=(name or "").strip(),
        weight=ROOM_DEFAULT_WEIGHT,
        lightness_range=ROOM_DEFAULT_LIGHTNESS,
        role=ROOM_DEFAULT_ROLE,
    )


def get_wardrobe_metadata(name: str) -> ItemMetadata:
    """Wardrobe metadata for `name`, or the wardrobe defaults when unrecognized."""
    entry = find_wardrobe_item(name)
    if entry is not None:
        return entry
    return ItemMetadata(
        name=(name or "").strip(),
        weight=WARDROBE_DEFAULT_WEIGHT,
        lightness_range=WARDROBE_DEFAULT_LIGHTNESS,
        role=WARDROBE_DEFAULT_ROLE,
    )


def get_metadata(name: str, kind: CatalogKind = CatalogKind.ROOM) -> ItemMetadata:
    """Dispatch to the room or wardrobe catalog."""
    if CatalogKind(kind) == CatalogKind.WARDROBE:
        return get_wardrobe_metadata(name)
    return get_room_metadata(name)


def catalog_by_category(kind: CatalogKind = CatalogKind.ROOM) -> Dict[str, List[ItemMetadata]]:
    """Group catalog entries by category, in label order (for add-item pickers)."""
    if CatalogKind(kind) == CatalogKind.WARDROBE:
        catalog, labels = WARDROBE_CATALOG, WARDROBE_CATEGORY_LABELS
    else:
        catalog, labels = ROOM_CATALOG, ROOM_CATEGORY_LABELS
    grouped: Dict[str, List[ItemMetadata]] = {category: [] for category in labels}
    for entry in catalog:
        grouped.setdefault(entry.category, []).append(entry)
    return grouped
