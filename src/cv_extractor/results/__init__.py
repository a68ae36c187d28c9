"""Result types for extraction outputs."""

from cv_extractor.results.types import ExtractionResult, StoredAnalysis

__all__ = [
    "ExtractionResult",
    "StoredAnalysis",
]
