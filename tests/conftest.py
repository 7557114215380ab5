import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Qt tests run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from annolist.domain.models import ObjectState  # noqa: E402
from annolist.events.bus import EventBus  # noqa: E402


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def two_states():
    """The collection used by the list scenarios: one visible, one hidden."""
    return [
        ObjectState(client_id=1, lock=False, hidden=False, updated=5),
        ObjectState(client_id=2, lock=False, hidden=True, updated=3),
    ]
