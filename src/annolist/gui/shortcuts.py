"""Keyboard shortcut table for the objects list.

The keymap is plain data: which logical action a key sequence triggers.
Capturing keys is left to an adapter (see ``qt_shortcuts``) that calls
:meth:`ShortcutDispatcher.trigger` once a sequence completes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from annolist.errors import UnknownShortcutError

_logger = logging.getLogger(__name__)


class ShortcutAction(Enum):
    SWITCH_ALL_LOCK = "SWITCH_ALL_LOCK"
    SWITCH_ALL_HIDDEN = "SWITCH_ALL_HIDDEN"


@dataclass(frozen=True)
class KeyBinding:
    name: str
    description: str
    sequence: str
    action: str = "keydown"


DEFAULT_KEYMAP: Mapping[ShortcutAction, KeyBinding] = MappingProxyType({
    ShortcutAction.SWITCH_ALL_LOCK: KeyBinding(
        name="Lock/unlock all objects",
        description="Locking objects allows to prevent any updates",
        sequence="t+l",
    ),
    ShortcutAction.SWITCH_ALL_HIDDEN: KeyBinding(
        name="Hide/show all objects",
        description="Hidden objects are invisible on the canvas",
        sequence="t+h",
    ),
})


def keymap_with_sequences(
    overrides: Mapping[str, str],
    base: Mapping[ShortcutAction, KeyBinding] = DEFAULT_KEYMAP,
) -> dict[ShortcutAction, KeyBinding]:
    """Return a copy of *base* with sequences replaced by action name."""
    keymap = dict(base)
    for name, sequence in overrides.items():
        try:
            action = ShortcutAction[name]
        except KeyError:
            raise UnknownShortcutError(f"Unknown shortcut action: {name!r}") from None
        keymap[action] = replace(keymap[action], sequence=sequence)
    return keymap


def parse_sequence(sequence: str) -> list[str]:
    """Split ``"t+l"`` (or ``"t l"``) into the keys pressed in order."""
    keys = [key.strip() for key in sequence.replace(" ", "+").split("+")]
    keys = [key for key in keys if key]
    if not keys:
        raise UnknownShortcutError(f"Empty shortcut sequence: {sequence!r}")
    return keys


def suppress_default(event: Any) -> None:
    """Stop the key event that completed a shortcut from reaching other widgets."""
    if event is None:
        return
    prevent_default = getattr(event, "prevent_default", None)
    if callable(prevent_default):
        prevent_default()
        return
    accept = getattr(event, "accept", None)
    if callable(accept):
        accept()


class ShortcutDispatcher:
    """Routes completed shortcuts to their handlers."""

    def __init__(
        self,
        handlers: Mapping[ShortcutAction, Callable[[], Any]],
        keymap: Mapping[ShortcutAction, KeyBinding] = DEFAULT_KEYMAP,
    ) -> None:
        missing = [action.name for action in keymap if action not in handlers]
        if missing:
            raise UnknownShortcutError(f"No handler for shortcut actions: {', '.join(missing)}")
        self._handlers = dict(handlers)
        self._keymap = dict(keymap)

    @property
    def keymap(self) -> Mapping[ShortcutAction, KeyBinding]:
        return MappingProxyType(self._keymap)

    def trigger(self, action: ShortcutAction, event: Optional[Any] = None) -> None:
        if action not in self._keymap:
            raise UnknownShortcutError(f"Shortcut action is not bound: {action!r}")
        suppress_default(event)
        _logger.debug("Shortcut %s (%s)", action.name, self._keymap[action].sequence)
        self._handlers[action]()

    def handler_for(self, action: ShortcutAction) -> Callable[..., None]:
        """Return a callback taking the optional triggering event."""
        def _handler(event: Optional[Any] = None) -> None:
            self.trigger(action, event)

        return _handler
