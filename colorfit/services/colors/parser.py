"""
Color Parser

Best-effort conversion of free-text user input into Colors. Recognizes, in
order: lab(L, a, b), bare "L, a, b" triples, bare RRGGBB hex, then anything
coloraide can read (#hex, rgb(), hsl(), CSS named colors, ...).
"""

import re
from typing import List, Optional, Tuple

from loguru import logger

from .model import Color, InvalidColorError

_NUMBER = r"(-?\d+(?:\.\d+)?|-?\.\d+)"

LAB_FUNCTION_RE = re.compile(
    rf"^lab\s*\(\s*{_NUMBER}\s*,\s*{_NUMBER}\s*,\s*{_NUMBER}\s*\)$", re.IGNORECASE
)
LAB_TRIPLE_RE = re.compile(rf"^{_NUMBER}\s*,\s*{_NUMBER}\s*,\s*{_NUMBER}$")
BARE_HEX_RE = re.compile(r"^[0-9a-fA-F]{6}$")

# Separators for bulk import; commas inside parentheses are protected
_FUNCTION_TOKEN_RE = re.compile(r"[a-zA-Z-]+\s*\([^)]*\)")
_LIST_SEPARATOR_RE = re.compile(r"[,;\n]+")


def _lab_from_match(match: re.Match) -> Optional[Color]:
    l, a, b = (float(group) for group in match.groups())
    try:
        return Color.from_lab(l, a, b)
    except InvalidColorError:
        return None


def parse_color(text: str) -> Optional[Color]:
    """
    Parse a user-provided color string.

    Args:
        text: Free-text color description

    Returns:
        Parsed Color, or None when nothing matches
    """
    if not isinstance(text, str):
        return None

    trimmed = text.strip()
    if not trimmed:
        return None

    match = LAB_FUNCTION_RE.match(trimmed)
    if match:
        return _lab_from_match(match)

    match = LAB_TRIPLE_RE.match(trimmed)
    if match:
        return _lab_from_match(match)

    if BARE_HEX_RE.match(trimmed):
        try:
            return Color.from_hex(trimmed)
        except InvalidColorError:
            return None

    # Fallback: hex with '#', rgb(), hsl(), named colors, etc.
    try:
        return Color.from_css(trimmed)
    except InvalidColorError as e:
        logger.debug(f"Unparseable color input {trimmed!r}: {e}")
        return None


def _split_tokens(text: str) -> List[str]:
    """Split bulk input on commas/semicolons/newlines, keeping function calls whole."""
    protected = {}

    def _protect(match: re.Match) -> str:
        key = f"\x00{len(protected)}\x00"
        protected[key] = match.group(0)
        return key

    masked = _FUNCTION_TOKEN_RE.sub(_protect, text)
    tokens = []
    for raw in _LIST_SEPARATOR_RE.split(masked):
        token = raw.strip()
        for key, original in protected.items():
            token = token.replace(key, original)
        if token:
            tokens.append(token)
    return tokens


def parse_color_list(text: str) -> Tuple[List[Color], List[str]]:
    """
    Parse a bulk list of colors (comma, semicolon or newline separated).

    Args:
        text: Pasted list of color tokens

    Returns:
        Tuple of (parsed colors in input order, tokens that failed to parse)
    """
    if not isinstance(text, str) or not text.strip():
        return [], []

    parsed: List[Color] = []
    failed: List[str] = []
    for token in _split_tokens(text):
        color = parse_color(token)
        if color is None:
            failed.append(token)
        else:
            parsed.append(color)

    logger.debug(f"Parsed {len(parsed)} colors, {len(failed)} failed")
    return parsed, failed
