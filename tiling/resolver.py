"""
Puzzle resolver: finds every way to tile the board with the puzzle pieces.

Two strategies share one canonical solution order:

- breadth expansion (``solve``, ``solve_count``): a frontier of partial
  boards is extended one piece at a time;
- depth-first traversal (``iter_solutions``, ``solve_page``): placements
  are chosen piece by piece, so a page of solutions can be returned without
  building the boards that precede it.

Pieces are placed by descending cell count and each piece's placements are
tried by ascending bit mask. A solution is identified by the placement index
chosen for every piece, and both strategies order solutions lexicographically
on those indexes.

Interchangeable pieces (same shape up to orientation, same colors) are
placed in increasing mask order, so each arrangement is reported once.
"""

import logging
import math
import threading
import time
from collections import defaultdict
from dataclasses import dataclass
from itertools import islice
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .bitboard import check_capacity
from .colors import tag_color
from .config import SolverConfig
from .errors import SearchCancelled
from .pieces import Piece
from .placements import Placement, piece_placements
from .puzzle import Puzzle
from .variants import canonical_key, variants_of

logger = logging.getLogger(__name__)


@dataclass
class SearchPlan:
    """Precomputed placements for every piece, in placement order."""
    rows: int
    cols: int
    order: List[int]  # puzzle piece indexes in the order they are placed
    placements: List[List[Placement]]
    twins: List[Optional[int]]  # depth of the previous interchangeable piece
    symmetry: int  # assignments of interchangeable pieces per arrangement

    def empty_grid(self) -> np.ndarray:
        return np.zeros((self.rows, self.cols), dtype=np.int64)


class GameResolver:
    """Finds the tilings of a puzzle board."""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self._log_level = logging.INFO if self.config.debug else logging.DEBUG

    def piece_variants(self, piece: Piece) -> List[Piece]:
        """Generate all unique rotations and reflections of a piece."""
        return variants_of(piece)

    def piece_order(self, puzzle: Puzzle) -> List[int]:
        """Indexes of the puzzle pieces in the order they are placed."""
        indexes = puzzle.piece_ids()
        if self.config.largest_first:
            # Bigger pieces have fewer placements, so they prune the search earlier
            indexes.sort(key=lambda i: -puzzle.pieces[i].cells)
        return indexes

    def plan(self, puzzle: Puzzle) -> Optional[SearchPlan]:
        """
        Precompute the placements of every piece.

        Returns:
            The search plan, or None for an invalid puzzle

        Raises:
            BoardCapacityError: if the board does not fit in the bit mask
            PieceIdOverflowError: if a piece index cannot be tagged
        """
        check_capacity(puzzle.cells, self.config.max_cells)
        if not puzzle.is_valid():
            logger.debug(f"Invalid puzzle: {puzzle.cells} cells on {puzzle.columns} columns, "
                         f"{len(puzzle.pieces)} pieces")
            return None

        rows, cols = puzzle.rows, puzzle.columns
        order = self.piece_order(puzzle)
        placements = []
        twins: List[Optional[int]] = []
        last_depth: Dict[Tuple, int] = {}
        group_sizes: Dict[Tuple, int] = defaultdict(int)
        for depth, piece_idx in enumerate(order):
            piece = puzzle.pieces[piece_idx]
            fill = tag_color(piece.color, piece_idx)
            placements.append(piece_placements(piece.shape, fill, rows, cols))

            if self.config.break_symmetry:
                key = canonical_key(piece)
                twins.append(last_depth.get(key))
                last_depth[key] = depth
                group_sizes[key] += 1
            else:
                twins.append(None)

        symmetry = 1
        for size in group_sizes.values():
            symmetry *= math.factorial(size)
        return SearchPlan(rows, cols, order, placements, twins, symmetry)

    def solve(self, puzzle: Puzzle, cancel: Optional[threading.Event] = None) -> List[np.ndarray]:
        """
        Find all solutions of a puzzle.

        Args:
            puzzle: Puzzle to solve
            cancel: Optional event; the search raises SearchCancelled once it is set

        Returns:
            Solution grids in canonical order; empty for an invalid puzzle
        """
        plan = self.plan(puzzle)
        if plan is None:
            return []

        start = time.perf_counter()
        # (board mask, mask chosen for each placed piece, colored grid)
        frontier: List[Tuple[int, Tuple[int, ...], np.ndarray]] = [(0, (), plan.empty_grid())]
        for depth, placements in enumerate(plan.placements):
            _check_cancel(cancel)
            twin = plan.twins[depth]
            next_frontier = []
            for mask, chosen, grid in frontier:
                floor = chosen[twin] if twin is not None else -1
                for placement in placements:
                    if mask & placement.mask == 0 and placement.mask > floor:
                        next_frontier.append((mask | placement.mask,
                                              chosen + (placement.mask,),
                                              grid + placement.patch))
            frontier = next_frontier
            logger.log(self._log_level,
                       f"Found {len(frontier)} possible boards for piece {plan.order[depth]}")
            if not frontier:
                break

        logger.log(self._log_level,
                   f"Solved {plan.rows}x{plan.cols}: {len(frontier)} solutions "
                   f"in {(time.perf_counter() - start) * 1000.0:.2f}ms")
        return [grid for _, _, grid in frontier]

    def solve_count(self, puzzle: Puzzle, cancel: Optional[threading.Event] = None) -> int:
        """
        Count the solutions of a puzzle without building solution grids.

        Partial boards covering the same cells are merged and carried with
        their multiplicity. Every arrangement is counted once per assignment
        of interchangeable pieces, then divided by the number of assignments.
        """
        plan = self.plan(puzzle)
        if plan is None:
            return 0

        counts: Dict[int, int] = {0: 1}
        for depth, placements in enumerate(plan.placements):
            _check_cancel(cancel)
            next_counts: Dict[int, int] = defaultdict(int)
            for mask, count in counts.items():
                for placement in placements:
                    if mask & placement.mask == 0:
                        next_counts[mask | placement.mask] += count
            counts = next_counts
            logger.log(self._log_level,
                       f"{len(counts)} distinct masks after piece {plan.order[depth]}")
            if not counts:
                return 0
        return sum(counts.values()) // plan.symmetry

    def iter_solutions(self, puzzle: Puzzle,
                       cancel: Optional[threading.Event] = None) -> Iterator[np.ndarray]:
        """Lazily yield every solution grid in canonical order."""
        plan = self.plan(puzzle)
        if plan is None:
            return
        for chosen in _walk(plan, cancel):
            yield _materialize(plan, chosen)

    def solve_page(self, puzzle: Puzzle, page_index: int, page_size: int,
                   cancel: Optional[threading.Event] = None) -> List[np.ndarray]:
        """
        Get one page of solutions.

        Only solutions whose ordinal falls in
        ``[page_index * page_size, (page_index + 1) * page_size)`` are turned
        into grids, and the traversal stops at the end of the page.

        Raises:
            ValueError: for a negative page index or a non-positive page size
        """
        if page_index < 0:
            raise ValueError(f"page_index must be >= 0, got {page_index}")
        if page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {page_size}")

        plan = self.plan(puzzle)
        if plan is None:
            return []

        start = page_index * page_size
        end = start + page_size
        page = [_materialize(plan, chosen) for chosen in islice(_walk(plan, cancel), start, end)]
        logger.log(self._log_level,
                   f"Page {page_index} (size {page_size}): {len(page)} solutions")
        return page


def _check_cancel(cancel: Optional[threading.Event]) -> None:
    if cancel is not None and cancel.is_set():
        raise SearchCancelled("Search cancelled")


def _walk(plan: SearchPlan, cancel: Optional[threading.Event]) -> Iterator[Tuple[Placement, ...]]:
    """Depth-first enumeration of the placements chosen for each piece."""
    chosen: List[Placement] = []

    def visit(depth: int, mask: int) -> Iterator[Tuple[Placement, ...]]:
        _check_cancel(cancel)
        if depth == len(plan.placements):
            yield tuple(chosen)
            return
        twin = plan.twins[depth]
        floor = chosen[twin].mask if twin is not None else -1
        for placement in plan.placements[depth]:
            if mask & placement.mask or placement.mask <= floor:
                continue
            chosen.append(placement)
            yield from visit(depth + 1, mask | placement.mask)
            chosen.pop()

    return visit(0, 0)


def _materialize(plan: SearchPlan, chosen: Sequence[Placement]) -> np.ndarray:
    grid = plan.empty_grid()
    for placement in chosen:
        grid += placement.patch
    return grid
