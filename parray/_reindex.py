def shift_after(mutation, pivot, direction):
    """
    Move the positions on one side of pivot in an ongoing immutables.MapMutation.

    direction = 1 makes room for an insertion: every position >= pivot moves one step up
    and pivot keeps its old element until the caller overwrites it.

    direction = -1 closes the gap of a removal: every position > pivot moves one step down,
    overwriting the element at pivot, and the now unused last position is dropped.

    Positions below pivot are never visited.
    """
    last = len(mutation) - 1
    if direction == 1:
        # Descending, so no position is overwritten before it has been moved
        for position in range(last, pivot - 1, -1):
            mutation[position + 1] = mutation[position]
    elif direction == -1:
        for position in range(pivot + 1, last + 1):
            mutation[position - 1] = mutation[position]
        del mutation[last]
    else:
        raise ValueError('direction must be 1 or -1, was {0}'.format(direction))

    return mutation
