"""
ColorFit API Schemas
Pydantic models for palette generation, cohesion scoring and auto-fill request/response validation.
"""
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

HEX_PATTERN = r"^#[0-9A-Fa-f]{6}$"

HexColor = Annotated[str, Field(pattern=HEX_PATTERN, description="Hex color code in format #RRGGBB")]


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("colorfit", description="Service name")


# ============================================================================
# PARSING
# ============================================================================

class ParseColorsRequest(BaseModel):
    """Free-text color list (commas, semicolons or newlines between entries)."""
    text: str = Field(..., max_length=10000, description="Colors as hex, lab(L, a, b), rgb(), names...")


class ParsedColor(BaseModel):
    """One successfully parsed color."""
    hex: str = Field(..., description="Display hex #RRGGBB")
    lab: List[float] = Field(..., min_length=3, max_length=3, description="CIELAB D65 [L, a, b]")
    lch: List[float] = Field(..., min_length=3, max_length=3, description="CIELCh D65 [L, C, h]")
    lab_text: str = Field(..., description="Lab triple as text, accepted back by the parser")


class ParseColorsResponse(BaseModel):
    colors: List[ParsedColor]
    failed: List[str] = Field(default_factory=list, description="Tokens that could not be parsed")


# ============================================================================
# PALETTE GENERATION
# ============================================================================

class GeneratePaletteRequest(BaseModel):
    """Palette generation request."""
    base_colors: List[HexColor] = Field(default_factory=list, description="Locked base colors")
    mode: Optional[str] = Field(None, description="Harmony mode (defaults to COLORFIT_DEFAULT_HARMONY_MODE)")
    count: Optional[int] = Field(None, description="Colors per variation")
    num_suggestions: Optional[int] = Field(None, description="Number of variations")
    batch_seed: Optional[int] = Field(None, ge=0, description="Seed to reproduce a previous batch")
    algorithm: Optional[str] = Field(None, description="Preset used to score each variation")
    return_swatch: bool = Field(False, description="Render a PNG swatch artifact")


class HueSpan(BaseModel):
    min: float
    max: float


class PaletteSuggestion(BaseModel):
    """One generated variation."""
    variation: int = Field(..., description="0-based variation index")
    colors: List[str] = Field(..., description="Generated hex colors")
    cohesion: int = Field(..., ge=0, le=100, description="Cohesion of bases + generated colors")
    hue_span: Optional[HueSpan] = Field(None, description="Min/max pairwise hue separation")


class PaletteMeta(BaseModel):
    base_hexes: List[str]
    mode: str
    mode_label: str
    count: int
    num_suggestions: int
    batch_seed: int = Field(..., description="Seed to persist for reproducing this batch")
    algorithm: str
    algorithm_label: str


class PaletteArtifacts(BaseModel):
    swatch_png_b64: Optional[str] = Field(None, description="Base64-encoded PNG swatch")
    swatch_metadata: Optional[Dict[str, Any]] = None


class GeneratePaletteResponse(BaseModel):
    """Palette generation response."""
    meta: PaletteMeta
    suggestions: List[PaletteSuggestion]
    artifacts: PaletteArtifacts
    debug: Dict[str, Any]


# ============================================================================
# COHESION
# ============================================================================

class CohesionScoreRequest(BaseModel):
    """Score a set of colors."""
    colors: List[HexColor] = Field(..., description="Colors to score")
    algorithm: Optional[str] = Field(None, description="Weighting preset")
    reference_palette: Optional[List[HexColor]] = Field(None, description="Palette defining allowed hue families")
    weights: Optional[List[float]] = Field(None, description="Per-color visual weights (1-10)")


class ColorDelta(BaseModel):
    hex: str
    delta: int = Field(..., description="Score with the color minus score without it")


class CohesionScoreResponse(BaseModel):
    score: int = Field(..., ge=0, le=100)
    hue_cohesion: float
    saturation_coherence: float
    lightness_reasonableness: float
    weights: Dict[str, float] = Field(..., description="Sub-score blend weights used")
    deltas: List[ColorDelta] = Field(default_factory=list, description="Per-color contribution")


class CandidatesRequest(BaseModel):
    """Rank candidate colors for one slot."""
    palette: List[HexColor] = Field(default_factory=list)
    other_colors: List[HexColor] = Field(default_factory=list, description="Colors on the other items")
    algorithm: Optional[str] = None
    other_weights: Optional[List[float]] = None
    candidate_weight: Optional[float] = Field(None, ge=1.0, le=10.0)


class CandidateEntry(BaseModel):
    hex: str
    score: int
    tier: str = Field(..., description="great | ok | avoid")
    in_palette: bool


class CandidatesResponse(BaseModel):
    best_score: int
    candidates: List[CandidateEntry]


# ============================================================================
# AUTO-FILL
# ============================================================================

class ItemPayload(BaseModel):
    """An item as sent by the client."""
    id: Optional[int] = Field(None, description="Caller-owned id; issued by the server when omitted")
    name: str = Field(..., min_length=1, max_length=100)
    color: Optional[HexColor] = Field(None, description="Pinned color, or null when unassigned")
    weight: Optional[Union[float, str]] = Field(
        None, description="1-10 or large/medium/small; catalog weight when omitted"
    )
    tendency: str = Field("any", description="any | lighter | darker | warmer | cooler | neutral | bold")


class ItemResult(BaseModel):
    id: int
    name: str
    color: Optional[str]
    weight: float
    tendency: str


class RoomAutofillRequest(BaseModel):
    items: List[ItemPayload] = Field(default_factory=list)
    template: Optional[str] = Field(None, description="Room template used when items is empty")
    palette: List[HexColor] = Field(default_factory=list)
    algorithm: Optional[str] = None
    order: Optional[List[int]] = Field(None, description="Explicit processing order as item ids")


class WardrobeAutofillRequest(BaseModel):
    items: List[ItemPayload] = Field(default_factory=list)
    template: Optional[str] = Field(None, description="Outfit template used when items is empty")
    palette: List[HexColor] = Field(default_factory=list)


class AutofillResponse(BaseModel):
    items: List[ItemResult]
    cohesion: int = Field(..., ge=0, le=100, description="Weighted cohesion of the assigned colors")
    unassigned: int = Field(..., description="Items still without a color")


# ============================================================================
# CATALOG
# ============================================================================

class CatalogEntry(BaseModel):
    name: str
    weight: float
    lightness_range: List[float]
    role: str
    category: str


class AlgorithmInfo(BaseModel):
    value: str
    label: str
    description: str


class CatalogResponse(BaseModel):
    kind: str
    categories: Dict[str, List[CatalogEntry]]
    templates: List[str]
    algorithms: List[AlgorithmInfo] = Field(default_factory=list, description="Fill presets (room catalog only)")
