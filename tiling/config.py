"""
Solver configuration.

Values can be given directly, from a dictionary, or from environment
variables (``TILING_MAX_CELLS``, ``TILING_LARGEST_FIRST``,
``TILING_BREAK_SYMMETRY``, ``TILING_SOLVER_DEBUG``).
"""

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from .bitboard import MASK_WIDTH


def _env_flag(name: str, default: bool, environ: Mapping[str, str]) -> bool:
    value = environ.get(name)
    if value is None or value == "":
        return default
    return value.strip().lower() not in ("0", "false", "no", "off")


@dataclass
class SolverConfig:
    """
    Structured solver configuration.

    Attributes:
        max_cells: Largest board (in cells) the solver accepts, at most 64
        largest_first: Place pieces by descending cell count (ties keep the
            puzzle order). When False the puzzle order is used as is.
        break_symmetry: Report one solution per arrangement of interchangeable
            pieces (same shape up to orientation, same colors) instead of one
            per assignment of those pieces to the arranged cells
        debug: Log per-piece frontier sizes and timings at INFO level
    """

    max_cells: int = MASK_WIDTH
    largest_first: bool = True
    break_symmetry: bool = True
    debug: bool = False

    def __post_init__(self):
        if not 1 <= self.max_cells <= MASK_WIDTH:
            raise ValueError(f"max_cells must be between 1 and {MASK_WIDTH}, got {self.max_cells}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "SolverConfig":
        """Create config from dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in fields(cls)}
        filtered_dict = {k: v for k, v in config_dict.items() if k in valid_keys}
        return cls(**filtered_dict)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SolverConfig":
        """Create config from ``TILING_*`` environment variables."""
        if environ is None:
            environ = os.environ
        max_cells = environ.get("TILING_MAX_CELLS")
        return cls(
            max_cells=int(max_cells) if max_cells else MASK_WIDTH,
            largest_first=_env_flag("TILING_LARGEST_FIRST", True, environ),
            break_symmetry=_env_flag("TILING_BREAK_SYMMETRY", True, environ),
            debug=_env_flag("TILING_SOLVER_DEBUG", False, environ),
        )
