import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from annolist.application.interfaces import IAnnotationSession
from annolist.application.services.request_sequencer import RequestSequencer
from annolist.domain.models import ObjectState


@dataclass(frozen=True)
class PersistRequest:
    """The collection handed to ``persist`` and the id it was stamped with."""
    request_id: int
    states: Tuple[ObjectState, ...]


class BulkMutator:
    """
    Applies one field value to every object on the frame.
    The session receives the whole updated collection in a single persist call.
    """

    def __init__(self, session: IAnnotationSession, sequencer: Optional[RequestSequencer] = None):
        self._session = session
        self._sequencer = sequencer or RequestSequencer()
        self._logger = logging.getLogger(__name__)

    def set_lock_for_all(
        self, job: Any, frame_number: int, states: Sequence[ObjectState], locked: bool
    ) -> PersistRequest:
        return self._apply(job, frame_number, states, lock=bool(locked))

    def set_hidden_for_all(
        self, job: Any, frame_number: int, states: Sequence[ObjectState], hidden: bool
    ) -> PersistRequest:
        return self._apply(job, frame_number, states, hidden=bool(hidden))

    def _apply(self, job: Any, frame_number: int, states: Sequence[ObjectState], **changes) -> PersistRequest:
        # The renderer may still be reading *states*, so work on copies.
        updated = [state.with_changes(**changes) for state in states]
        request_id = self._sequencer.next_id()
        self._logger.info(
            f"Persisting {changes} for {len(updated)} objects on frame {frame_number} (request {request_id})"
        )
        self._session.persist(job, frame_number, updated, request_id=request_id)
        return PersistRequest(request_id=request_id, states=tuple(updated))
