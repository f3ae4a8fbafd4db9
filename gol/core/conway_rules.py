"""
Conway's Game of Life transition rule (B3/S23)

Maps a cell's current state and live-neighbour count to its next state.
Only the canonical rule is supported.
"""

from typing import Dict, FrozenSet, Tuple


RULE_STRING = "B3/S23"
SURVIVAL_SET: FrozenSet[int] = frozenset({2, 3})  # Live cells survive with 2-3 neighbors
BIRTH_SET: FrozenSet[int] = frozenset({3})        # Dead cells born with exactly 3 neighbors

MAX_NEIGHBORS = 8


def next_state(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)

    Raises:
        ValueError: If live_neighbors is outside 0-8
    """
    if not 0 <= live_neighbors <= MAX_NEIGHBORS:
        raise ValueError(f"Neighbor count must be between 0 and {MAX_NEIGHBORS}, got {live_neighbors}")

    if alive and live_neighbors < 2:
        return False  # Underpopulation
    if alive and live_neighbors in SURVIVAL_SET:
        return True
    if alive and live_neighbors > 3:
        return False  # Overpopulation
    if not alive and live_neighbors in BIRTH_SET:
        return True

    return alive


def rule_table() -> Dict[Tuple[bool, int], bool]:
    """Get the complete rule table.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    return {
        (alive, neighbors): next_state(alive, neighbors)
        for alive in (False, True)
        for neighbors in range(MAX_NEIGHBORS + 1)
    }
