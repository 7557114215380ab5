import itertools


class RequestSequencer:
    """Issues increasing ids for outbound session requests.

    A completion is only applied when its id is newer than the last applied
    one, so a slow response can never overwrite the result of a request that
    was issued after it.
    """

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._last_issued = start - 1
        self._last_applied = start - 1

    @property
    def last_issued(self) -> int:
        return self._last_issued

    @property
    def last_applied(self) -> int:
        return self._last_applied

    def next_id(self) -> int:
        self._last_issued = next(self._counter)
        return self._last_issued

    def accept(self, request_id: int) -> bool:
        """Mark *request_id* as applied; ``False`` if it is stale."""
        if request_id <= self._last_applied:
            return False
        self._last_applied = request_id
        return True
