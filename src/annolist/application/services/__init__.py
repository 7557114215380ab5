from .request_sequencer import RequestSequencer
from .bulk_mutator import BulkMutator, PersistRequest
from .filter_controller import FilterController

__all__ = [
    "BulkMutator",
    "FilterController",
    "PersistRequest",
    "RequestSequencer",
]
