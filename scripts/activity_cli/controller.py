#------------------------------------------------------------
#                        controller.py
#       Coordinates argument handling, the events fetch,
#                    and console output.

import sys
from typing import List, Optional, Sequence
from .config import ERROR_MESSAGE_TEMPLATE, PROGRAM_NAME, USAGE_MESSAGE
from .errors import FetchError
from .models import ActivityConfig
from .services.github_service import GitHubService
from .views.console_view import (
    render_activity_lines,
    render_header,
    render_no_activity,
    select_window,
)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# This function does print recent activity for one username.
# It returns the process exit code instead of exiting.
def main(argv: Sequence[str]) -> int:
    if len(argv) != 1:
        print(USAGE_MESSAGE.format(program=PROGRAM_NAME))
        return EXIT_SUCCESS

    config = ActivityConfig(username=argv[0])
    github_service = GitHubService(config)

    try:
        events = github_service.fetch_events(config.username)
    except FetchError as exc:
        print(ERROR_MESSAGE_TEMPLATE.format(error=exc), file=sys.stderr)
        return EXIT_FAILURE

    if not events:
        print(render_no_activity(config.username))
        return EXIT_SUCCESS

    print(render_header(config.username, config.window_size))
    for line in render_activity_lines(select_window(events, config.window_size)):
        print(line)
    return EXIT_SUCCESS

def run(argv: Optional[List[str]] = None) -> None:
    sys.exit(main(sys.argv[1:] if argv is None else argv))
