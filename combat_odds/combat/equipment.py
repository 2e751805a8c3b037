"""
Equipment module for the combat odds engine.

Player compositions report worn items with ITEM_OFFSET added to the item id;
values at or below the offset are kit ids and pass through unchanged.
"""

from collections.abc import Sequence

from combat_odds.core.constants import ITEM_OFFSET


def fix_item_id(item_id: int) -> int:
    """Removes the composition offset from a single equipment id."""
    return item_id - ITEM_OFFSET if item_id > ITEM_OFFSET else item_id


def fix_item_ids(item_ids: Sequence[int] | None) -> list[int]:
    """
    Removes the composition offset from every equipment id.

    Args:
        item_ids (Sequence[int] | None):
            The equipment ids of a player composition.

    Returns:
        list[int]:
            A new list of item ids, [0] when there are none.

    """
    if not item_ids:
        return [0]
    return [fix_item_id(item_id) for item_id in item_ids]
