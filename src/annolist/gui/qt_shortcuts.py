"""Binds the objects-list keymap to Qt shortcuts."""

from __future__ import annotations

import logging
from typing import List

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QWidget

from annolist.gui.shortcuts import ShortcutAction, ShortcutDispatcher, parse_sequence


def to_qt_sequence(sequence: str) -> QKeySequence:
    """Translate ``"t+l"`` into the two-key chord ``"T, L"``."""
    return QKeySequence(", ".join(key.upper() for key in parse_sequence(sequence)))


class QtShortcutBinder:
    """Creates one ``QShortcut`` per keymap entry on *widget*.

    ``QShortcut`` consumes the key event that completes the chord, so the
    event never reaches the focused widget.
    """

    def __init__(self, dispatcher: ShortcutDispatcher, widget: QWidget) -> None:
        self._dispatcher = dispatcher
        self._widget = widget
        self._shortcuts: List[QShortcut] = []
        self._logger = logging.getLogger(__name__)

    @property
    def shortcuts(self) -> List[QShortcut]:
        return list(self._shortcuts)

    def bind(self) -> None:
        self.unbind()
        for action, binding in self._dispatcher.keymap.items():
            shortcut = QShortcut(to_qt_sequence(binding.sequence), self._widget)
            shortcut.setContext(Qt.ShortcutContext.WindowShortcut)
            shortcut.setWhatsThis(binding.description)
            shortcut.activated.connect(self._make_slot(action))
            self._shortcuts.append(shortcut)
            self._logger.debug("Bound %s to %s", binding.sequence, action.name)

    def unbind(self) -> None:
        for shortcut in self._shortcuts:
            shortcut.setEnabled(False)
            shortcut.setParent(None)
            shortcut.deleteLater()
        self._shortcuts.clear()

    def _make_slot(self, action: ShortcutAction):
        def _slot() -> None:
            self._dispatcher.trigger(action)

        return _slot
