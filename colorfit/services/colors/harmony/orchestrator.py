"""
ColorFit Palette Engine: Suggestion Orchestrator

Coordinates one "generate" action: parses the locked base colors, picks a
batch seed, generates every variation, scores each against the bases, and
assembles the response with an optional swatch artifact and timing.
"""

import time
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from colorfit.services.cohesion.scorer import FILL_LABELS, FillAlgorithm, compute_cohesion_score
from ..model import Color
from ..swatches import create_swatch_metadata, render_palette_swatch
from . import HARMONY_LABELS, HarmonyMode, generate_harmony, palette_hue_span


def wall_clock_seed() -> int:
    """Millisecond wall-clock seed, truncated to 32 bits."""
    return time.time_ns() // 1_000_000 % (2 ** 32)


def parse_base_colors(base_hexes: Sequence[str]) -> List[Color]:
    """
    Convert hex strings to Colors.

    Raises:
        InvalidColorError: If any entry is not a valid hex color
    """
    return [Color.from_hex(value) for value in base_hexes]


def generate_palette_suggestions(
    base_hexes: Sequence[str],
    mode: HarmonyMode = HarmonyMode.ANALOGOUS,
    count: int = 6,
    num_suggestions: int = 3,
    batch_seed: Optional[int] = None,
    algorithm: FillAlgorithm = FillAlgorithm.SURFACE_AREA,
    return_swatch: bool = False,
) -> Dict[str, Any]:
    """
    Generate several palette variations for one set of locked colors.

    Args:
        base_hexes: Locked base colors as #RRGGBB strings (may be empty)
        mode: Harmony rule
        count: Colors to generate per variation
        num_suggestions: Number of variations
        batch_seed: Seed to reuse; a wall-clock seed is taken when None
        algorithm: Preset used for each variation's cohesion score
        return_swatch: Whether to render a PNG swatch artifact

    Returns:
        Dictionary with meta, suggestions, artifacts and debug sections

    Raises:
        InvalidColorError: If a base color cannot be parsed
    """
    start_time = time.time()
    mode = HarmonyMode(mode)
    algorithm = FillAlgorithm(algorithm)

    bases = parse_base_colors(base_hexes)
    seed = wall_clock_seed() if batch_seed is None else int(batch_seed)
    processing_notes = []
    if not bases:
        processing_notes.append("synthetic_base")

    harmony_start = time.time()
    suggestions = []
    for variation in range(num_suggestions):
        generated = generate_harmony(bases, mode, count, variation, seed)
        if len(generated) < count:
            processing_notes.append(f"variation_{variation}_short:{len(generated)}/{count}")
        scored_set = bases + generated
        span = palette_hue_span(scored_set)
        suggestions.append({
            "variation": variation,
            "colors": [c.to_hex() for c in generated],
            "cohesion": compute_cohesion_score(scored_set, algorithm, bases or None),
            "hue_span": {"min": round(span[0], 1), "max": round(span[1], 1)} if span else None,
        })
    harmony_time = time.time() - harmony_start

    swatch_time = 0.0
    swatch_b64 = None
    swatch_metadata = None
    if return_swatch:
        swatch_start = time.time()
        rows = [("Base", [c.to_hex() for c in bases])] if bases else []
        rows += [(f"{HARMONY_LABELS[mode]} {s['variation'] + 1}", s["colors"]) for s in suggestions]
        try:
            swatch_b64 = render_palette_swatch(rows)
            swatch_metadata = create_swatch_metadata(rows)
        except (OSError, ValueError) as e:
            logger.warning(f"Swatch rendering failed: {e}")
            processing_notes.append(f"swatch_error:{str(e)[:50]}")
        swatch_time = time.time() - swatch_start

    total_time = time.time() - start_time

    return {
        "meta": {
            "base_hexes": [c.to_hex() for c in bases],
            "mode": mode.value,
            "mode_label": HARMONY_LABELS[mode],
            "count": count,
            "num_suggestions": num_suggestions,
            "batch_seed": seed,
            "algorithm": algorithm.value,
            "algorithm_label": FILL_LABELS[algorithm],
        },
        "suggestions": suggestions,
        "artifacts": {
            "swatch_png_b64": swatch_b64,
            "swatch_metadata": swatch_metadata,
        },
        "debug": {
            "processing_notes": processing_notes,
            "timing_ms": {
                "harmony": round(harmony_time * 1000, 2),
                "swatch": round(swatch_time * 1000, 2),
                "total": round(total_time * 1000, 2),
            },
        },
    }
