from .signal import Signal, ObservableProperty
from .base import BaseViewModel
from .objects_list_viewmodel import ObjectsListViewModel, recompute

__all__ = [
    "BaseViewModel",
    "ObjectsListViewModel",
    "ObservableProperty",
    "Signal",
    "recompute",
]
