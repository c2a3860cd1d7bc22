"""
ColorFit Configuration
Manages environment variables and defaults for the palette and assignment services.
"""
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuration class for ColorFit services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("COLORFIT_LOG_LEVEL", "INFO")

    # Generation defaults
    DEFAULT_HARMONY_MODE: str = os.environ.get("COLORFIT_DEFAULT_HARMONY_MODE", "analogous")
    DEFAULT_ALGORITHM: str = os.environ.get("COLORFIT_DEFAULT_ALGORITHM", "surface-area")
    DEFAULT_COLOR_COUNT: int = int(os.environ.get("COLORFIT_DEFAULT_COLOR_COUNT", "6"))
    DEFAULT_SUGGESTIONS: int = int(os.environ.get("COLORFIT_DEFAULT_SUGGESTIONS", "3"))

    # Request size limits
    MAX_COLOR_COUNT: int = int(os.environ.get("COLORFIT_MAX_COLOR_COUNT", "24"))
    MAX_SUGGESTIONS: int = int(os.environ.get("COLORFIT_MAX_SUGGESTIONS", "12"))
    MAX_ITEMS: int = int(os.environ.get("COLORFIT_MAX_ITEMS", "64"))
    MAX_PALETTE_SIZE: int = int(os.environ.get("COLORFIT_MAX_PALETTE_SIZE", "64"))

    # Swatch artifacts
    SWATCH_CHIP_SIZE: int = int(os.environ.get("COLORFIT_SWATCH_CHIP_SIZE", "40"))
    SWATCH_SPACING: int = int(os.environ.get("COLORFIT_SWATCH_SPACING", "2"))

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("COLORFIT_METRICS_ENABLED", "1")))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get(
        "COLORFIT_ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173"
    )

    SUPPORTED_HARMONY_MODES = [
        "complementary", "analogous", "triadic", "split-complementary", "delta-e-smart"
    ]
    SUPPORTED_ALGORITHMS = [
        "surface-area", "tonal-gradient", "anchor-piece", "minimal-palette"
    ]

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Split the configured CORS origins."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @classmethod
    def validate_harmony_mode(cls, mode: str) -> bool:
        """Validate harmony mode parameter."""
        return mode in cls.SUPPORTED_HARMONY_MODES

    @classmethod
    def validate_algorithm(cls, algorithm: str) -> bool:
        """Validate fill algorithm parameter."""
        return algorithm in cls.SUPPORTED_ALGORITHMS

    @classmethod
    def validate_color_count(cls, count: int) -> bool:
        """Validate requested number of generated colors."""
        return 0 <= count <= cls.MAX_COLOR_COUNT

    @classmethod
    def validate_suggestions(cls, suggestions: int) -> bool:
        """Validate requested number of palette variations."""
        return 1 <= suggestions <= cls.MAX_SUGGESTIONS


# Global config instance
config = Config()
