"""Reorder engine — computes the next item sequence for a drag-and-drop move.

Everything here is a pure function of its inputs: nothing is committed to a
store. The caller hands ``Outcome.items`` to ``ItemStore.replace()``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from taskboard.board.errors import Failure, FailureKind
from taskboard.board.models import Item, Lane, Outcome

logger = logging.getLogger("taskboard.board.engine")


def _locate(items: Sequence[Item], item_id: str) -> int | None:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    return None


def reorder(
    items: Sequence[Item],
    dragged_id: str,
    target_id: str | None,
    destination: Lane | str,
) -> Outcome:
    """Move *dragged_id* to *destination*, before *target_id* when given.

    - Dropping an item on itself changes nothing.
    - A missing or exiting dragged item is reported as a stale reference.
    - Within one lane the item lands immediately before the target.
    - Across lanes the item lands before the target if the target is in the
      destination lane, otherwise at the end of the sequence.
    - Exiting items are never targets; a missing target is not an error.

    Raises UnknownLane if *destination* is outside the lane set.
    """
    destination = Lane.parse(destination)
    current = tuple(items)

    if target_id is not None and dragged_id == target_id:
        return Outcome(items=current)

    dragged_index = _locate(current, dragged_id)
    if dragged_index is None:
        logger.warning("Stale drag: item %s is not on the board", dragged_id)
        return Outcome(
            items=current,
            failure=Failure(
                FailureKind.STALE_REFERENCE,
                f"Dragged item {dragged_id} no longer exists",
                dragged_id,
            ),
        )
    dragged = current[dragged_index]
    if dragged.is_exiting:
        logger.warning("Stale drag: item %s is being deleted", dragged_id)
        return Outcome(
            items=current,
            failure=Failure(
                FailureKind.STALE_REFERENCE,
                f"Dragged item {dragged_id} is being deleted",
                dragged_id,
            ),
        )

    target_index = _locate(current, target_id) if target_id is not None else None
    target = current[target_index] if target_index is not None else None
    if target is not None and (target.is_exiting or target.lane is not destination):
        # Not a valid drop target: fall back to a drop on the lane area
        target, target_index = None, None

    if dragged.lane is destination:
        if target is None:
            # Dropped on its own lane's empty area
            return Outcome(items=current)
        reordered = list(current)
        del reordered[dragged_index]
        # Removal shifted everything after the dragged slot down by one
        insert_at = target_index - 1 if target_index > dragged_index else target_index
        reordered.insert(insert_at, dragged)
        result = tuple(reordered)
        logger.debug("Reordered %s before %s in %s", dragged_id, target_id, destination)
        return Outcome(items=result, changed=result != current, item=dragged)

    # Cross-lane move
    moved = dragged.model_copy(update={"lane": destination})
    remaining = [item for item in current if item.id != dragged_id]
    if target is None:
        remaining.append(moved)
    else:
        remaining.insert(_locate(remaining, target.id), moved)

    logger.info("Moved %s from %s to %s", dragged_id, dragged.lane, destination)
    return Outcome(items=tuple(remaining), changed=True, item=moved)
