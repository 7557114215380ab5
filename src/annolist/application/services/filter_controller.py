import logging
from typing import Any, Optional, Sequence, Tuple

from annolist.application.interfaces import IAnnotationSession
from annolist.application.services.request_sequencer import RequestSequencer


class FilterController:
    """Owns the active annotation filters and triggers refetches."""

    def __init__(self, session: IAnnotationSession, sequencer: Optional[RequestSequencer] = None):
        self._session = session
        self._sequencer = sequencer or RequestSequencer()
        self._filters: Tuple[str, ...] = ()
        self._logger = logging.getLogger(__name__)

    @property
    def filters(self) -> Tuple[str, ...]:
        return self._filters

    def set_filters(self, job: Any, filters: Sequence[str]) -> int:
        """Replace the filters, then refetch the current frame.

        The session sees the new filters before the fetch is issued so no
        fetch can run against the previous set.
        """
        self._filters = tuple(filters)
        self._session.update_filters(self._filters)
        request_id = self._sequencer.next_id()
        self._logger.info(f"Filters changed to {list(self._filters)}; refetching (request {request_id})")
        self._session.fetch(job, request_id=request_id)
        return request_id
