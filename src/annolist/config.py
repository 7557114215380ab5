"""Default configuration values for annolist."""

from __future__ import annotations

from typing import Final

APP_DIR_NAME: Final[str] = "annolist"
SETTINGS_FILE_NAME: Final[str] = "settings.json"
SETTINGS_SCHEMA_ID: Final[str] = "annolist/settings@1"

# Ordering applied to a freshly created objects list.
DEFAULT_ORDERING: Final[str] = "ID_ASCENT"

# Height (px) reported to the list view before the host measures its tab.
DEFAULT_LIST_HEIGHT: Final[int] = 0

CONSOLE_HANDLER_NAME: Final[str] = "annolist.console"
