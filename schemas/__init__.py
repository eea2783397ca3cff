"""
Pydantic schemas for puzzle input and solver output.
"""

from .puzzle import PageRequest, PieceSpec, PuzzleSpec, PuzzleSummary, SolutionPage

__all__ = [
    "PieceSpec",
    "PuzzleSpec",
    "PageRequest",
    "PuzzleSummary",
    "SolutionPage",
]
