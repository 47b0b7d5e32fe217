#------------------------------------------------------------
#                          config.py
#    Centralizes GitHub API constants and console messages.

# Constants for GitHub API interaction
GITHUB_API_BASE_URL = "https://api.github.com"
USER_EVENTS_ENDPOINT_TEMPLATE = "/users/{username}/events"
GITHUB_USER_AGENT = "GitHubActivityCLI"
GITHUB_ACCEPT_HEADER_NAME = "Accepts"
GITHUB_ACCEPT_HEADER_VALUE = "application/json"

# The whole request (connect, headers and body) must finish within this many seconds.
GITHUB_REQUEST_TIMEOUT_SECONDS = 1
GITHUB_RESPONSE_CHUNK_BYTES = 8192

# Number of most recent events considered for display.
DEFAULT_ACTIVITY_WINDOW = 30

# Event type tags as reported by the events API.
EVENT_TYPE_PUSH = "PushEvent"
EVENT_TYPE_ISSUES = "IssuesEvent"
EVENT_TYPE_WATCH = "WatchEvent"
EVENT_TYPE_FORK = "ForkEvent"
EVENT_TYPE_CREATE = "CreateEvent"
EVENT_TYPE_DELETE = "DeleteEvent"
EVENT_TYPE_PULL_REQUEST = "PullRequestEvent"

# Payload values that make an event worth showing.
ACTION_OPENED = "opened"
ACTION_STARTED = "started"
REF_TYPE_REPOSITORY = "repository"

# Messages and templates for console output.
PROGRAM_NAME = "github-activity"
USAGE_MESSAGE = "Usage: {program} <username>"
ERROR_MESSAGE_TEMPLATE = "Error: {error}"
NO_ACTIVITY_MESSAGE_TEMPLATE = "No recent activity found for {username}"
ACTIVITY_HEADER_TEMPLATE = "Last {window} activities for {username}:"
ACTIVITY_LINE_TEMPLATE = "- {message}"
