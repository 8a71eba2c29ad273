"""Random movement sampling for automated racers."""

import logging
from typing import List, Optional

from ..utils.rng import SeededRNG, make_rng
from .grid import Grid
from .neighbors import neighbors
from .types import Position

logger = logging.getLogger(__name__)


def random_walk(grid: Grid, origin: Position, max_steps: int,
                rng: Optional[SeededRNG] = None) -> List[Position]:
    """
    Take up to max_steps uniformly random moves to passable neighbors.

    The walk starts with origin and stops early at a dead cell with no
    passable neighbor. It is not a search and may revisit cells.
    An out-of-bounds origin yields an empty list.
    """
    if not grid.in_bounds(origin):
        logger.debug("Random walk origin %s is out of bounds", origin)
        return []
    rng = make_rng(rng)

    walk = [origin]
    current = origin
    for step in range(max(max_steps, 0)):
        options = neighbors(grid, current)
        if not options:
            logger.debug("No available neighbors at step %d", step)
            break
        current = rng.choice(options).position
        walk.append(current)
    return walk
