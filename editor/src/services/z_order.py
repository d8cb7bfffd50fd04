"""
Collage Canvas Editor - Z-Order Service

Pure functions that decide new z_index values. They never touch layers
directly: callers pass a {layer_id: z_index} mapping and apply the returned
changes. models/layer_store/z_order_mixin.py is the only caller inside the
editor.

Step moves work on the sequence of DISTINCT z values, not on layer count. If
several layers share one z value they move as a group: the acting layer swaps
places with the whole group in one step.
"""

from typing import Dict, Iterable, List, Optional

UP = 1
DOWN = -1


def distinct_sorted(values: Iterable[int]) -> List[int]:
    """Deduplicate and sort z values ascending."""
    return sorted(set(values))


def neighbour_value(values: Iterable[int], current: int, direction: int) -> Optional[int]:
    """Find the next distinct z value above or below current
    
    Args:
        values: All z values currently in use (duplicates allowed)
        current: The acting layer's z value (must be in values)
        direction: UP (+1) or DOWN (-1)
        
    Returns:
        Neighbouring z value, or None if current is already the extreme
    """
    ordered = distinct_sorted(values)
    index = ordered.index(current) + direction
    if 0 <= index < len(ordered):
        return ordered[index]
    return None


def plan_step(z_by_id: Dict[int, int], layer_id: int, direction: int) -> Dict[int, int]:
    """Plan a single-step reorder for one layer
    
    Every layer at the neighbour value takes the acting layer's old value and
    the acting layer takes the neighbour value. Layers at other values are not
    touched.
    
    Args:
        z_by_id: Current z_index of every layer
        layer_id: Layer being moved
        direction: UP (+1) or DOWN (-1)
        
    Returns:
        {layer_id: new_z_index} for every layer whose value changes; empty if
        the layer is unknown or already at the extreme
    """
    if layer_id not in z_by_id:
        return {}
    
    current = z_by_id[layer_id]
    target = neighbour_value(z_by_id.values(), current, direction)
    if target is None:
        return {}
    
    changes = {other_id: current for other_id, z in z_by_id.items() if z == target}
    changes[layer_id] = target
    return changes


def front_value(z_values: Iterable[int]) -> int:
    """z value that paints above everything currently in use."""
    return max(z_values) + 1


def back_value(z_values: Iterable[int]) -> int:
    """z value that paints below everything currently in use."""
    return min(z_values) - 1
