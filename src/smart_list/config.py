"""Configuration constants for smart lists."""

import os
from pathlib import Path

# Icon set used when a document does not name one.
DEFAULT_ICON_SET_ID: str = "task-status"

# Opacity of revealed-but-unfocused rows in one-by-one-focus playback.
DIMMED_OPACITY: float = 0.45

# Reserved bucket for nodes without a (resolvable) primary icon.
NO_STATUS_ID: str = "__none__"
NO_STATUS_LABEL: str = "No status"
NO_STATUS_COLOR: str = "#6b7280"

# Synthetic headers created by group-by-status.
GROUP_HEADER_PREFIX: str = "__group-header-"

# Accent used when a row has no resolved icon.
DEFAULT_ACCENT_COLOR: str = "#3b82f6"

# Bullet drawn for rows with neither icon nor number.
DEFAULT_BULLET: str = "•"

# Alpha suffix appended to the accent color for conditional formatting.
FORMAT_ALPHA: dict[str, str] = {
    "subtle": "0D",  # ~5%
    "medium": "1A",  # ~10%
    "strong": "26",  # ~15%
}

# Directory with list documents, used by the MCP server.
DEFAULT_LIST_DIR: Path = Path("~/.local/share/smart-list").expanduser()


def resolve_list_directory() -> Path:
    """Return the list document directory, honouring SMART_LIST_DIR."""
    env = os.environ.get("SMART_LIST_DIR")
    return Path(env).expanduser() if env else DEFAULT_LIST_DIR
