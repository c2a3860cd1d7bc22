"""
ColorFit v1 API Routes
Palette generation, cohesion scoring, candidate tiers and room/wardrobe auto-fill.
"""
import time
from typing import Any, Dict, List, Optional, Sequence

from fastapi import APIRouter, HTTPException

from colorfit.config import Config
from colorfit.schemas import (
    AutofillResponse,
    CandidatesRequest,
    CandidatesResponse,
    CatalogResponse,
    CohesionScoreRequest,
    CohesionScoreResponse,
    GeneratePaletteRequest,
    GeneratePaletteResponse,
    ItemPayload,
    ParseColorsRequest,
    ParseColorsResponse,
    RoomAutofillRequest,
    WardrobeAutofillRequest,
)
from colorfit.services.assignment import (
    OUTFIT_TEMPLATES,
    ROOM_TEMPLATES,
    CatalogKind,
    Item,
    Tendency,
    assigned_cohesion,
    auto_fill_room,
    auto_fill_wardrobe,
    catalog_by_category,
    get_metadata,
    instantiate_outfit_template,
    instantiate_room_template,
    normalize_weight,
)
from colorfit.services.assignment.templates import find_outfit_template, find_room_template
from colorfit.services.cohesion import (
    FILL_DESCRIPTIONS,
    FILL_LABELS,
    FillAlgorithm,
    cohesion_breakdown,
    item_score_delta,
    score_candidates,
)
from colorfit.services.colors import Color, InvalidColorError, parse_color_list
from colorfit.services.colors.harmony import HarmonyMode
from colorfit.services.colors.harmony.orchestrator import generate_palette_suggestions
from colorfit.utils.ids import ItemIdSequence, generate_request_id
from colorfit.utils.logging import get_logger
from colorfit.utils.metrics import get_metrics

config = Config()
logger = get_logger()
router = APIRouter(prefix="/v1", tags=["ColorFit v1"])


# ============================================================================
# VALIDATION HELPERS
# ============================================================================

def _validate_harmony_mode(mode: Optional[str]) -> HarmonyMode:
    mode = mode or config.DEFAULT_HARMONY_MODE
    if not config.validate_harmony_mode(mode):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid mode '{mode}'. Must be one of: {', '.join(config.SUPPORTED_HARMONY_MODES)}"
        )
    return HarmonyMode(mode)


def _validate_algorithm(algorithm: Optional[str]) -> FillAlgorithm:
    algorithm = algorithm or config.DEFAULT_ALGORITHM
    if not config.validate_algorithm(algorithm):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid algorithm '{algorithm}'. Must be one of: {', '.join(config.SUPPORTED_ALGORITHMS)}"
        )
    return FillAlgorithm(algorithm)


def _validate_tendency(tendency: str) -> Tendency:
    try:
        return Tendency(tendency)
    except ValueError:
        valid = ", ".join(t.value for t in Tendency)
        raise HTTPException(status_code=400, detail=f"Invalid tendency '{tendency}'. Must be one of: {valid}")


def _validate_size(values: Sequence[Any], limit: int, field: str):
    if len(values) > limit:
        raise HTTPException(status_code=400, detail=f"Too many {field}: {len(values)} (max {limit})")


def _validate_weights(weights: Optional[List[float]], colors: Sequence[Any], field: str):
    if weights is not None and len(weights) != len(colors):
        raise HTTPException(
            status_code=400,
            detail=f"{field} must have one entry per color ({len(weights)} != {len(colors)})"
        )


def _to_colors(hexes: Sequence[str]) -> List[Color]:
    try:
        return [Color.from_hex(value) for value in hexes]
    except InvalidColorError as e:
        raise HTTPException(status_code=400, detail=str(e))


def _build_items(payloads: List[ItemPayload], kind: CatalogKind) -> List[Item]:
    """Turn client payloads into Items, issuing ids for payloads that lack one."""
    known_ids = [p.id for p in payloads if p.id is not None]
    next_id = ItemIdSequence(start=max(known_ids, default=0) + 1)
    items = []
    for payload in payloads:
        weight = payload.weight
        if weight is None:
            weight = get_metadata(payload.name, kind).weight
        items.append(Item(
            id=payload.id if payload.id is not None else next_id(),
            name=payload.name,
            color=_to_colors([payload.color])[0] if payload.color else None,
            weight=normalize_weight(weight),
            tendency=_validate_tendency(payload.tendency),
        ))
    return items


def _serialize_items(items: Sequence[Item]) -> List[Dict[str, Any]]:
    return [
        {
            "id": item.id,
            "name": item.name,
            "color": item.color.to_hex() if item.color else None,
            "weight": item.weight,
            "tendency": item.tendency.value,
        }
        for item in items
    ]


def _autofill_summary(items: Sequence[Item], palette: Sequence[Color],
                      algorithm: FillAlgorithm) -> Dict[str, Any]:
    return {
        "items": _serialize_items(items),
        "cohesion": assigned_cohesion(items, palette, algorithm),
        "unassigned": sum(1 for item in items if not item.is_assigned),
    }


def _record_failure(operation: str, request_id: str, error: Exception, start_time: float):
    duration_ms = (time.time() - start_time) * 1000
    logger.error(f"{operation} request {request_id} failed", extra={
        "request_id": request_id,
        "error": str(error),
        "error_type": type(error).__name__,
    })
    get_metrics().record_operation_error(operation, str(error), duration_ms)


# ============================================================================
# ROUTES
# ============================================================================

@router.post("/colors/parse", response_model=ParseColorsResponse,
             summary="Parse Colors",
             description="Parse pasted hex, lab(), L,a,b triples or CSS colors")
async def parse_colors(request: ParseColorsRequest) -> Dict[str, Any]:
    colors, failed = parse_color_list(request.text)
    get_metrics().increment("colors_parsed_total", len(colors))
    return {
        "colors": [
            {
                "hex": c.to_hex(),
                "lab": [round(v, 3) for v in c.to_lab()],
                "lch": [round(v, 3) for v in c.to_lch()],
                "lab_text": c.to_lab_string(),
            }
            for c in colors
        ],
        "failed": failed,
    }


@router.post("/palettes/generate", response_model=GeneratePaletteResponse,
             summary="Generate Palettes",
             description="Generate seeded harmony variations for a set of locked colors")
async def generate_palettes(request: GeneratePaletteRequest) -> Dict[str, Any]:
    """
    Generate palette variations.

    The response's `meta.batch_seed` can be sent back as `batch_seed` to
    reproduce the same batch.
    """
    request_id = generate_request_id("pal")
    start_time = time.time()

    mode = _validate_harmony_mode(request.mode)
    algorithm = _validate_algorithm(request.algorithm)
    count = config.DEFAULT_COLOR_COUNT if request.count is None else request.count
    num_suggestions = config.DEFAULT_SUGGESTIONS if request.num_suggestions is None else request.num_suggestions
    if not config.validate_color_count(count):
        raise HTTPException(status_code=400, detail=f"count must be between 0 and {config.MAX_COLOR_COUNT}")
    if not config.validate_suggestions(num_suggestions):
        raise HTTPException(status_code=400, detail=f"num_suggestions must be between 1 and {config.MAX_SUGGESTIONS}")
    _validate_size(request.base_colors, config.MAX_PALETTE_SIZE, "base colors")

    logger.info(f"Palette generation request {request_id} started", extra={
        "request_id": request_id,
        "mode": mode.value,
        "bases": len(request.base_colors),
        "count": count,
        "num_suggestions": num_suggestions,
    })

    try:
        response = generate_palette_suggestions(
            base_hexes=request.base_colors,
            mode=mode,
            count=count,
            num_suggestions=num_suggestions,
            batch_seed=request.batch_seed,
            algorithm=algorithm,
            return_swatch=request.return_swatch,
        )
        response["debug"]["request_id"] = request_id

        duration_ms = (time.time() - start_time) * 1000
        get_metrics().record_operation_success("palette_generate", duration_ms, {"mode": mode.value})
        logger.info(f"Palette generation request {request_id} completed", extra={
            "request_id": request_id,
            "batch_seed": response["meta"]["batch_seed"],
            "duration_ms": round(duration_ms, 2),
        })
        return response

    except HTTPException:
        raise
    except InvalidColorError as e:
        _record_failure("palette_generate", request_id, e, start_time)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        _record_failure("palette_generate", request_id, e, start_time)
        raise HTTPException(status_code=500, detail="Internal error during palette generation")


@router.post("/cohesion/score", response_model=CohesionScoreResponse,
             summary="Score Cohesion",
             description="Cohesion score, sub-scores and per-color contribution for a color set")
async def score_cohesion(request: CohesionScoreRequest) -> Dict[str, Any]:
    algorithm = _validate_algorithm(request.algorithm)
    _validate_size(request.colors, config.MAX_PALETTE_SIZE, "colors")
    _validate_weights(request.weights, request.colors, "weights")

    colors = _to_colors(request.colors)
    reference = _to_colors(request.reference_palette) if request.reference_palette else None

    breakdown = cohesion_breakdown(colors, algorithm, reference, request.weights)
    seen = set()
    deltas = []
    for color in colors:
        hex_value = color.to_hex()
        if hex_value in seen:
            continue
        seen.add(hex_value)
        deltas.append({
            "hex": hex_value,
            "delta": item_score_delta(color, colors, algorithm, reference, request.weights),
        })

    data = breakdown.to_dict()
    data["deltas"] = deltas
    return data


@router.post("/cohesion/candidates", response_model=CandidatesResponse,
             summary="Candidate Tiers",
             description="Rank palette and grid colors for one slot into great/ok/avoid tiers")
async def cohesion_candidates(request: CandidatesRequest) -> Dict[str, Any]:
    algorithm = _validate_algorithm(request.algorithm)
    _validate_size(request.palette, config.MAX_PALETTE_SIZE, "palette colors")
    _validate_size(request.other_colors, config.MAX_ITEMS, "other colors")
    _validate_weights(request.other_weights, request.other_colors, "other_weights")

    ranked = score_candidates(
        _to_colors(request.palette),
        _to_colors(request.other_colors),
        algorithm,
        request.other_weights,
        request.candidate_weight,
    )
    return {
        "best_score": ranked[0].score if ranked else 0,
        "candidates": [candidate.to_dict() for candidate in ranked],
    }


@router.post("/rooms/autofill", response_model=AutofillResponse,
             summary="Auto-Fill Room",
             description="Assign palette colors to every unassigned room item")
async def autofill_room(request: RoomAutofillRequest) -> Dict[str, Any]:
    request_id = generate_request_id("room")
    start_time = time.time()

    algorithm = _validate_algorithm(request.algorithm)
    _validate_size(request.items, config.MAX_ITEMS, "items")
    _validate_size(request.palette, config.MAX_PALETTE_SIZE, "palette colors")

    if request.items:
        items = _build_items(request.items, CatalogKind.ROOM)
    elif request.template:
        template = find_room_template(request.template)
        if template is None:
            raise HTTPException(status_code=404, detail=f"Unknown room template '{request.template}'")
        items = instantiate_room_template(template, ItemIdSequence())
    else:
        items = []
    palette = _to_colors(request.palette)

    logger.info(f"Room auto-fill request {request_id} started", extra={
        "request_id": request_id,
        "items": len(items),
        "palette": len(palette),
        "algorithm": algorithm.value,
    })

    try:
        filled = auto_fill_room(items, palette, algorithm, request.order)
        summary = _autofill_summary(filled, palette, algorithm)

        duration_ms = (time.time() - start_time) * 1000
        get_metrics().record_operation_success("room_autofill", duration_ms, {"algorithm": algorithm.value})
        logger.info(f"Room auto-fill request {request_id} completed", extra={
            "request_id": request_id,
            "cohesion": summary["cohesion"],
            "duration_ms": round(duration_ms, 2),
        })
        return summary

    except HTTPException:
        raise
    except Exception as e:
        _record_failure("room_autofill", request_id, e, start_time)
        raise HTTPException(status_code=500, detail="Internal error during room auto-fill")


@router.post("/wardrobe/autofill", response_model=AutofillResponse,
             summary="Auto-Fill Wardrobe",
             description="Assign neutrals to foundation pieces and distinct chromatic colors to the rest")
async def autofill_wardrobe(request: WardrobeAutofillRequest) -> Dict[str, Any]:
    request_id = generate_request_id("ward")
    start_time = time.time()

    _validate_size(request.items, config.MAX_ITEMS, "items")
    _validate_size(request.palette, config.MAX_PALETTE_SIZE, "palette colors")

    if request.items:
        items = _build_items(request.items, CatalogKind.WARDROBE)
    elif request.template:
        template = find_outfit_template(request.template)
        if template is None:
            raise HTTPException(status_code=404, detail=f"Unknown outfit template '{request.template}'")
        items = instantiate_outfit_template(template, ItemIdSequence())
    else:
        items = []
    palette = _to_colors(request.palette)

    logger.info(f"Wardrobe auto-fill request {request_id} started", extra={
        "request_id": request_id,
        "items": len(items),
        "palette": len(palette),
    })

    try:
        filled = auto_fill_wardrobe(items, palette)
        summary = _autofill_summary(filled, palette, FillAlgorithm.SURFACE_AREA)

        duration_ms = (time.time() - start_time) * 1000
        get_metrics().record_operation_success("wardrobe_autofill", duration_ms)
        logger.info(f"Wardrobe auto-fill request {request_id} completed", extra={
            "request_id": request_id,
            "unassigned": summary["unassigned"],
            "duration_ms": round(duration_ms, 2),
        })
        return summary

    except HTTPException:
        raise
    except Exception as e:
        _record_failure("wardrobe_autofill", request_id, e, start_time)
        raise HTTPException(status_code=500, detail="Internal error during wardrobe auto-fill")


@router.get("/catalog/{kind}", response_model=CatalogResponse,
            summary="Item Catalog",
            description="Catalog entries grouped by category, plus template names")
async def get_catalog(kind: str) -> Dict[str, Any]:
    try:
        catalog_kind = CatalogKind(kind)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown catalog '{kind}'. Use 'room' or 'wardrobe'")

    templates = ROOM_TEMPLATES if catalog_kind == CatalogKind.ROOM else OUTFIT_TEMPLATES
    return {
        "kind": catalog_kind.value,
        "categories": {
            category: [
                {
                    "name": entry.name,
                    "weight": entry.weight,
                    "lightness_range": list(entry.lightness_range),
                    "role": entry.role.value,
                    "category": entry.category,
                }
                for entry in entries
            ]
            for category, entries in catalog_by_category(catalog_kind).items()
        },
        "templates": [template.name for template in templates],
        "algorithms": [
            {"value": alg.value, "label": FILL_LABELS[alg], "description": FILL_DESCRIPTIONS[alg]}
            for alg in FillAlgorithm
        ] if catalog_kind == CatalogKind.ROOM else [],
    }


@router.get("/metrics", summary="Service Metrics")
async def get_service_metrics() -> Dict[str, Any]:
    return get_metrics().get_summary()
