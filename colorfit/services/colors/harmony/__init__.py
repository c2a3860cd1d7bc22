"""
ColorFit Palette Engine: Color Harmony Generator

This module implements seeded color-theory rules (complementary, analogous,
triadic, split-complementary) for synthesizing new palette colors from a set of
locked base colors. All rotation and jitter happens in CIELCh so hue steps are
perceptually even. The delta-E smart mode lives in `delta_e`.
"""

from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
from loguru import logger

from ..model import Color, InvalidColorError, hue_distance, wrap_hue


class HarmonyMode(str, Enum):
    """Supported palette harmony modes."""
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"
    DELTA_E_SMART = "delta-e-smart"


HARMONY_LABELS = {
    HarmonyMode.COMPLEMENTARY: "Complementary",
    HarmonyMode.ANALOGOUS: "Analogous",
    HarmonyMode.TRIADIC: "Triadic",
    HarmonyMode.SPLIT_COMPLEMENTARY: "Split-Complementary",
    HarmonyMode.DELTA_E_SMART: "Delta-E Smart",
}

# Jitter windows: a draw r in [0, 1) maps to (r - 0.5) * window
LIGHTNESS_JITTER = 30.0
CHROMA_JITTER = 20.0

# Bounds applied after lightness/chroma jitter
LIGHTNESS_BOUNDS = (10.0, 95.0)
CHROMA_MAX = 130.0

# Variation stride mixed into the batch seed
VARIATION_STRIDE = 7919

# Synthetic base when nothing is locked
SYNTHETIC_BASE_LIGHTNESS = (40.0, 70.0)
SYNTHETIC_BASE_CHROMA = (15.0, 55.0)

Rng = Callable[[], float]


def make_rng(batch_seed: int, variation: int = 0) -> Rng:
    """
    Build the deterministic uniform stream for one variation of a batch.

    Args:
        batch_seed: Seed shared by every variation of a generate action
        variation: 0-based variation index

    Returns:
        Zero-argument callable returning floats in [0, 1)
    """
    seed = (int(batch_seed) + int(variation) * VARIATION_STRIDE) % (2 ** 32)
    generator = np.random.default_rng(seed)
    return lambda: float(generator.random())


def rotate_hue(h: float, degrees: float) -> float:
    """
    Rotate hue by specified degrees.

    Args:
        h: Original hue in degrees
        degrees: Rotation in degrees (can be negative)

    Returns:
        Rotated hue in [0, 360)
    """
    return wrap_hue(h + degrees)


def get_hue_separation(h1: float, h2: float) -> float:
    """Minimum angular separation between two hues, in degrees [0, 180]."""
    return hue_distance(h1, h2)


def jitter(rng: Rng, window: float) -> float:
    """Centered uniform offset in [-window/2, window/2)."""
    return (rng() - 0.5) * window


def vary_color(color: Color, hue_offset: float, lightness_offset: float,
               chroma_offset: float) -> Color:
    """
    Apply hue rotation, then lightness and chroma shifts, clamping into range.

    L is bounded to LIGHTNESS_BOUNDS and C to [0, CHROMA_MAX] before the new
    Color is constructed.
    """
    l, c, h = color.to_lch()
    new_h = rotate_hue(h, hue_offset)
    new_l = min(LIGHTNESS_BOUNDS[1], max(LIGHTNESS_BOUNDS[0], l + lightness_offset))
    new_c = min(CHROMA_MAX, max(0.0, c + chroma_offset))
    return Color.from_lch(new_l, new_c, new_h)


def synthesize_base(rng: Rng) -> Color:
    """Random mid-tone, moderately saturated base used when no colors are locked."""
    hue = rng() * 360.0
    lo_l, hi_l = SYNTHETIC_BASE_LIGHTNESS
    lo_c, hi_c = SYNTHETIC_BASE_CHROMA
    lightness = lo_l + rng() * (hi_l - lo_l)
    chroma = lo_c + rng() * (hi_c - lo_c)
    return Color.from_lch(lightness, chroma, hue)


def _rotational_harmony(
    bases: Sequence[Color],
    count: int,
    rng: Rng,
    offsets: Sequence[float],
    hue_window: float,
) -> List[Color]:
    """
    Shared loop for the rotation-based modes.

    Output i is derived from base i % len(bases), rotated by offsets[i % len(offsets)]
    plus hue jitter. Each output draws its own hue, lightness and chroma jitter.
    """
    results = []
    for i in range(count):
        base = bases[i % len(bases)]
        offset = offsets[i % len(offsets)]
        hue_shift = offset + jitter(rng, hue_window)
        lightness_shift = jitter(rng, LIGHTNESS_JITTER)
        chroma_shift = jitter(rng, CHROMA_JITTER)
        try:
            results.append(vary_color(base, hue_shift, lightness_shift, chroma_shift))
        except InvalidColorError as e:
            logger.debug(f"Skipping invalid harmony candidate {i}: {e}")
    return results


def generate_complementary(bases: Sequence[Color], count: int, rng: Rng) -> List[Color]:
    """Complementary: +180° hue rotation with ±12° jitter."""
    return _rotational_harmony(bases, count, rng, offsets=[180.0], hue_window=24.0)


def generate_analogous(bases: Sequence[Color], count: int, rng: Rng) -> List[Color]:
    """Analogous: base hue kept, spread within ±35°."""
    return _rotational_harmony(bases, count, rng, offsets=[0.0], hue_window=70.0)


def generate_triadic(bases: Sequence[Color], count: int, rng: Rng) -> List[Color]:
    """Triadic: alternating +120°/+240° rotations with ±10° jitter."""
    return _rotational_harmony(bases, count, rng, offsets=[120.0, 240.0], hue_window=20.0)


def generate_split_complementary(bases: Sequence[Color], count: int, rng: Rng) -> List[Color]:
    """Split-complementary: alternating +150°/+210° rotations with ±10° jitter."""
    return _rotational_harmony(bases, count, rng, offsets=[150.0, 210.0], hue_window=20.0)


def generate_harmony(
    base_colors: Sequence[Color],
    mode: HarmonyMode,
    count: int,
    variation: int = 0,
    batch_seed: int = 0,
) -> List[Color]:
    """
    Generate `count` colors that harmonize with the locked base colors.

    Deterministic: identical (bases, mode, count, variation, batch_seed) always
    yield the identical sequence.

    Args:
        base_colors: Locked colors to harmonize with (may be empty)
        mode: Harmony rule to apply
        count: Number of colors requested
        variation: 0-based variation index within a batch
        batch_seed: Seed shared by every variation in the batch

    Returns:
        Generated colors (delta-E smart may return fewer than requested)
    """
    if count <= 0:
        return []

    mode = HarmonyMode(mode)
    rng = make_rng(batch_seed, variation)

    bases = list(base_colors)
    if not bases:
        bases = [synthesize_base(rng)]
        logger.debug(f"No locked colors; synthesized base {bases[0].to_hex()}")

    if mode == HarmonyMode.COMPLEMENTARY:
        generated = generate_complementary(bases, count, rng)
    elif mode == HarmonyMode.ANALOGOUS:
        generated = generate_analogous(bases, count, rng)
    elif mode == HarmonyMode.TRIADIC:
        generated = generate_triadic(bases, count, rng)
    elif mode == HarmonyMode.SPLIT_COMPLEMENTARY:
        generated = generate_split_complementary(bases, count, rng)
    else:
        from .delta_e import generate_delta_e_smart
        generated = generate_delta_e_smart(bases, count, rng)

    logger.debug(
        f"Generated {len(generated)}/{count} colors mode={mode.value} "
        f"variation={variation} seed={batch_seed}"
    )
    return generated


def generate_multiple_palettes(
    base_colors: Sequence[Color],
    mode: HarmonyMode,
    count: int,
    num_suggestions: int,
    batch_seed: int = 0,
) -> List[List[Color]]:
    """Generate variations 0..num_suggestions-1 of one batch."""
    return [
        generate_harmony(base_colors, mode, count, variation, batch_seed)
        for variation in range(max(0, num_suggestions))
    ]


def palette_hue_span(colors: Sequence[Color], min_chroma: float = 8.0) -> Optional[Tuple[float, float]]:
    """
    Return (min, max) pairwise hue separation among chromatic colors.

    Used for diagnostics in the palette orchestrator; None when fewer than two
    chromatic colors exist.
    """
    hues = [c.hue for c in colors if c.chroma > min_chroma]
    if len(hues) < 2:
        return None
    separations = [
        get_hue_separation(hues[i], hues[j])
        for i in range(len(hues)) for j in range(i + 1, len(hues))
    ]
    return min(separations), max(separations)
