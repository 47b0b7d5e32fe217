#------------------------------------------------------------
#                      console_view.py
#          Selects the display window and renders
#                   console activity lines.

from typing import List, Sequence
from ..config import (
    ACTIVITY_HEADER_TEMPLATE,
    ACTIVITY_LINE_TEMPLATE,
    DEFAULT_ACTIVITY_WINDOW,
    NO_ACTIVITY_MESSAGE_TEMPLATE,
)
from ..models import Event
from ..services.event_service import format_event

# This function does select the most recent events for display.
# It takes at most window_size events and returns them oldest-first.
def select_window(events: Sequence[Event], window_size: int = DEFAULT_ACTIVITY_WINDOW) -> List[Event]:
    return list(reversed(events[:max(window_size, 0)]))

def render_header(username: str, window_size: int = DEFAULT_ACTIVITY_WINDOW) -> str:
    return ACTIVITY_HEADER_TEMPLATE.format(window=window_size, username=username)

def render_no_activity(username: str) -> str:
    return NO_ACTIVITY_MESSAGE_TEMPLATE.format(username=username)

# This function does render the bullet lines for a window of events.
# Events that format to an empty string are skipped.
def render_activity_lines(events: Sequence[Event]) -> List[str]:
    lines = []
    for event in events:
        message = format_event(event)
        if message:
            lines.append(ACTIVITY_LINE_TEMPLATE.format(message=message))
    return lines
