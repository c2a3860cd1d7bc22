"""
Swatch Rendering Module

Creates PNG swatch artifacts for palette suggestions: one labeled row of
color chips per variation, returned as base64 for inline UI preview.
"""

import base64
import io
from typing import Any, Dict, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from colorfit.config import config


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """
    Convert hex color to RGB tuple.

    Args:
        hex_color: Color in format #RRGGBB

    Returns:
        RGB tuple (r, g, b) with values 0-255
    """
    hex_clean = hex_color.lstrip('#')
    return tuple(int(hex_clean[i:i + 2], 16) for i in (0, 2, 4))


def create_color_row(hex_colors: Sequence[str], chip_size: int, spacing: int = 2) -> Image.Image:
    """Horizontal strip of solid chips."""
    if not hex_colors:
        return Image.new('RGB', (chip_size, chip_size), (255, 255, 255))

    width = len(hex_colors) * chip_size + (len(hex_colors) - 1) * spacing
    row = Image.new('RGB', (width, chip_size), (255, 255, 255))
    x_pos = 0
    for hex_color in hex_colors:
        row.paste(Image.new('RGB', (chip_size, chip_size), hex_to_rgb(hex_color)), (x_pos, 0))
        x_pos += chip_size + spacing
    return row


def render_palette_swatch(
    rows: Sequence[Tuple[str, Sequence[str]]],
    chip_size: Optional[int] = None,
    spacing: Optional[int] = None,
    row_spacing: int = 4,
    include_labels: bool = True,
) -> str:
    """
    Render labeled palette rows as a base64-encoded PNG.

    Args:
        rows: (label, hex colors) pairs, one per palette variation
        chip_size: Chip edge in pixels (defaults to COLORFIT_SWATCH_CHIP_SIZE)
        spacing: Horizontal spacing between chips (defaults to COLORFIT_SWATCH_SPACING)
        row_spacing: Vertical spacing between rows
        include_labels: Whether to draw each row's label above it

    Returns:
        Base64-encoded PNG image string
    """
    chip_size = chip_size or config.SWATCH_CHIP_SIZE
    spacing = config.SWATCH_SPACING if spacing is None else spacing
    rendered = [(label, create_color_row(colors, chip_size, spacing)) for label, colors in rows]

    if not rendered:
        swatch = Image.new('RGB', (chip_size, chip_size), (255, 255, 255))
    else:
        label_height = 16 if include_labels else 0
        width = max(row.width for _, row in rendered)
        height = sum(label_height + row.height + row_spacing for _, row in rendered) - row_spacing
        swatch = Image.new('RGB', (width, height), (255, 255, 255))

        draw = ImageDraw.Draw(swatch)
        y_pos = 0
        for label, row in rendered:
            if include_labels:
                draw.text((2, y_pos), label, fill=(0, 0, 0))
                y_pos += label_height
            swatch.paste(row, (0, y_pos))
            y_pos += row.height + row_spacing

    buffer = io.BytesIO()
    swatch.save(buffer, format='PNG')
    return base64.b64encode(buffer.getvalue()).decode('utf-8')


def create_swatch_metadata(
    rows: Sequence[Tuple[str, Sequence[str]]],
    chip_size: Optional[int] = None,
    spacing: int = 2,
) -> Dict[str, Any]:
    """Describe what a rendered swatch contains."""
    return {
        "format": "rows",
        "chip_size_px": chip_size or config.SWATCH_CHIP_SIZE,
        "spacing_px": spacing,
        "rows": len(rows),
        "total_colors": sum(len(colors) for _, colors in rows),
        "color_mapping": {label: list(colors) for label, colors in rows},
    }
