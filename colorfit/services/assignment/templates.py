"""
Room and outfit templates.

Templates are plain name lists; instantiating one turns each name into an
unassigned `Item` with its catalog weight. Ids come from the caller's id source.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .catalog import get_room_metadata, get_wardrobe_metadata
from .items import Item, Tendency

IdSource = Callable[[], int]


@dataclass(frozen=True)
class RoomTemplate:
    name: str
    items: Tuple[Tuple[str, Tendency], ...]


@dataclass(frozen=True)
class OutfitTemplate:
    name: str
    description: str
    items: Tuple[str, ...] = field(default_factory=tuple)


def _room_items(*entries) -> Tuple[Tuple[str, Tendency], ...]:
    normalized = []
    for entry in entries:
        if isinstance(entry, tuple):
            normalized.append((entry[0], Tendency(entry[1])))
        else:
            normalized.append((entry, Tendency.ANY))
    return tuple(normalized)


ROOM_TEMPLATES: List[RoomTemplate] = [
    RoomTemplate(
        name="Living Room",
        items=_room_items(
            "Floors",
            ("Main Wall", "lighter"),
            "Accent Wall",
            "Built-in Bookshelf",
            ("Doors", "neutral"),
            "Drapes",
            "Couch",
            "Rug",
        ),
    ),
    RoomTemplate(
        name="Bedroom",
        items=_room_items(
            "Floors",
            ("Main Wall", "lighter"),
            "Accent Wall",
            ("Doors", "neutral"),
            "Built-in Bookshelf",
            "Duvet Cover",
            ("Sheets", "lighter"),
            ("Fitted Sheet", "lighter"),
            "Pillowcases",
            "Upholstery",
            "Rug",
        ),
    ),
]

OUTFIT_TEMPLATES: List[OutfitTemplate] = [
    OutfitTemplate("French Workwear", "Chore coat, plain tee, dark denim",
                   ("Chore Coat", "T-Shirt", "Jeans", "Boots", "Belt")),
    OutfitTemplate("The Row Lunch", "Clean knit, tailored wide trousers, slip-ons",
                   ("Knit Top", "Wide Trousers", "Slip-Ons", "Tote Bag")),
    OutfitTemplate("Rick Layered", "Dark draped layers",
                   ("Tank Top", "Hoodie", "Drawstring Pants", "High-Tops")),
    OutfitTemplate("Norse Minimal", "Scandinavian clean lines",
                   ("Sweater", "Chinos", "Sneakers", "Watch")),
    OutfitTemplate("Gallery Opening", "Oversized tee with wide pants",
                   ("Oversized Tee", "Wide Trousers", "Loafers", "Bracelet")),
    OutfitTemplate("Issey Evening", "Architectural layers for going out",
                   ("Turtleneck", "Trousers", "Blazer", "Chelsea Boots")),
    OutfitTemplate("John Elliott Basics", "Elevated essential menswear",
                   ("T-Shirt", "Joggers", "Sneakers", "Cap")),
    OutfitTemplate("Workwear Layers", "French jacket over henley and denim",
                   ("Workwear Jacket", "Henley", "Jeans", "Boots", "Watch")),
    OutfitTemplate("All Black", "Head-to-toe dark",
                   ("Turtleneck", "Wide Trousers", "Chelsea Boots", "Crossbody Bag")),
    OutfitTemplate("Weekend Venice", "Shirt jacket and drawstring",
                   ("Shirt Jacket", "T-Shirt", "Drawstring Pants", "Sandals", "Sunglasses")),
    OutfitTemplate("Smart Overcoat", "Overcoat over knit, tailored bottoms",
                   ("Overcoat", "Knit Top", "Trousers", "Dress Shoes", "Scarf")),
    OutfitTemplate("Margiela Decon", "Oversized proportions, minimal accessories",
                   ("Oversized Tee", "Jeans", "Boots", "Ring")),
    OutfitTemplate("Summer Minimal", "Warm weather, pared back",
                   ("Band Collar Shirt", "Shorts", "Sandals", "Sunglasses")),
    OutfitTemplate("Norse Layered", "Cardigan over tee, clean bottoms",
                   ("Cardigan", "T-Shirt", "Chinos", "Loafers")),
    OutfitTemplate("Dark Tailored", "Blazer with turtleneck, evening-ready",
                   ("Blazer", "Turtleneck", "Trousers", "Dress Shoes", "Watch")),
    OutfitTemplate("Studio Day", "Comfortable creative work outfit",
                   ("Sweater", "Drawstring Pants", "Slip-Ons", "Beanie")),
    OutfitTemplate("Bomber Clean", "Bomber over minimal base",
                   ("Bomber Jacket", "T-Shirt", "Trousers", "Sneakers")),
    OutfitTemplate("Denim on Denim", "Tonal denim with contrast",
                   ("Denim Jacket", "T-Shirt", "Jeans", "Chelsea Boots", "Belt")),
    OutfitTemplate("Parka Weather", "Cold weather, bundled up",
                   ("Parka", "Turtleneck", "Jeans", "Boots", "Beanie")),
    OutfitTemplate("Effortless", "Just a great shirt and great pants",
                   ("Button-Down Shirt", "Trousers", "Loafers", "Watch")),
    OutfitTemplate("Custom Outfit", "Build your own", ()),
]


def find_room_template(name: str) -> Optional[RoomTemplate]:
    key = (name or "").strip().lower()
    return next((t for t in ROOM_TEMPLATES if t.name.lower() == key), None)


def find_outfit_template(name: str) -> Optional[OutfitTemplate]:
    key = (name or "").strip().lower()
    return next((t for t in OUTFIT_TEMPLATES if t.name.lower() == key), None)


def instantiate_room_template(template: RoomTemplate, next_id: IdSource) -> List[Item]:
    """
    Build unassigned room items for a template.

    Args:
        template: Template to instantiate
        next_id: Caller-owned id source (e.g. `ItemIdSequence`)
    """
    return [
        Item(
            id=next_id(),
            name=name,
            weight=get_room_metadata(name).weight,
            tendency=tendency,
        )
        for name, tendency in template.items
    ]


def instantiate_outfit_template(template: OutfitTemplate, next_id: IdSource) -> List[Item]:
    """
    Build unassigned garment items for an outfit.

    Garment types listed more than once are numbered ("T-Shirt 1", "T-Shirt 2")
    so the wardrobe engine can spread their lightness targets.
    """
    totals = Counter(template.items)
    seen: Counter = Counter()
    items = []
    for name in template.items:
        seen[name] += 1
        display_name = f"{name} {seen[name]}" if totals[name] > 1 else name
        items.append(Item(
            id=next_id(),
            name=display_name,
            weight=get_wardrobe_metadata(name).weight,
        ))
    return items
