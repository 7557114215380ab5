"""Tests for the keymap table and ShortcutDispatcher."""

from unittest.mock import Mock

import pytest

from annolist.errors import UnknownShortcutError
from annolist.gui.shortcuts import (
    DEFAULT_KEYMAP,
    KeyBinding,
    ShortcutAction,
    ShortcutDispatcher,
    keymap_with_sequences,
    parse_sequence,
    suppress_default,
)


def _handlers():
    return {
        ShortcutAction.SWITCH_ALL_LOCK: Mock(),
        ShortcutAction.SWITCH_ALL_HIDDEN: Mock(),
    }


def test_default_sequences():
    assert DEFAULT_KEYMAP[ShortcutAction.SWITCH_ALL_LOCK].sequence == "t+l"
    assert DEFAULT_KEYMAP[ShortcutAction.SWITCH_ALL_HIDDEN].sequence == "t+h"
    assert all(b.action == "keydown" for b in DEFAULT_KEYMAP.values())


def test_default_keymap_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_KEYMAP[ShortcutAction.SWITCH_ALL_LOCK] = KeyBinding("x", "y", "z")


@pytest.mark.parametrize(
    "sequence, keys",
    [("t+l", ["t", "l"]), ("t l", ["t", "l"]), ("ctrl+shift+h", ["ctrl", "shift", "h"])],
)
def test_parse_sequence(sequence, keys):
    assert parse_sequence(sequence) == keys


def test_parse_empty_sequence_rejected():
    with pytest.raises(UnknownShortcutError):
        parse_sequence(" + ")


def test_keymap_overrides():
    keymap = keymap_with_sequences({"SWITCH_ALL_LOCK": "x+l"})

    assert keymap[ShortcutAction.SWITCH_ALL_LOCK].sequence == "x+l"
    assert keymap[ShortcutAction.SWITCH_ALL_LOCK].name == "Lock/unlock all objects"
    assert DEFAULT_KEYMAP[ShortcutAction.SWITCH_ALL_LOCK].sequence == "t+l"


def test_keymap_override_unknown_action():
    with pytest.raises(UnknownShortcutError):
        keymap_with_sequences({"SWITCH_ALL_COLOR": "t+c"})


class TestDispatcher:
    def test_trigger_calls_handler(self):
        handlers = _handlers()
        dispatcher = ShortcutDispatcher(handlers)

        dispatcher.trigger(ShortcutAction.SWITCH_ALL_HIDDEN)

        handlers[ShortcutAction.SWITCH_ALL_HIDDEN].assert_called_once_with()
        handlers[ShortcutAction.SWITCH_ALL_LOCK].assert_not_called()

    def test_prevent_default_before_toggle(self):
        order = []
        handlers = _handlers()
        handlers[ShortcutAction.SWITCH_ALL_LOCK].side_effect = lambda: order.append("toggle")
        event = Mock(spec=["prevent_default"])
        event.prevent_default.side_effect = lambda: order.append("prevent")
        dispatcher = ShortcutDispatcher(handlers)

        dispatcher.handler_for(ShortcutAction.SWITCH_ALL_LOCK)(event)

        assert order == ["prevent", "toggle"]

    def test_qt_style_event_is_accepted(self):
        event = Mock(spec=["accept"])

        suppress_default(event)

        event.accept.assert_called_once_with()

    def test_missing_event_is_fine(self):
        handlers = _handlers()
        ShortcutDispatcher(handlers).handler_for(ShortcutAction.SWITCH_ALL_LOCK)()

        handlers[ShortcutAction.SWITCH_ALL_LOCK].assert_called_once_with()

    def test_missing_handler_rejected(self):
        with pytest.raises(UnknownShortcutError):
            ShortcutDispatcher({ShortcutAction.SWITCH_ALL_LOCK: Mock()})

    def test_unbound_action_rejected(self):
        handlers = _handlers()
        keymap = {ShortcutAction.SWITCH_ALL_LOCK: DEFAULT_KEYMAP[ShortcutAction.SWITCH_ALL_LOCK]}
        dispatcher = ShortcutDispatcher(handlers, keymap)

        with pytest.raises(UnknownShortcutError):
            dispatcher.trigger(ShortcutAction.SWITCH_ALL_HIDDEN)
