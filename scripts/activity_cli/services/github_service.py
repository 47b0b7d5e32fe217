#------------------------------------------------------------
#                      github_service.py
#            Handles the GitHub events request and
#                   response decoding.

import json
import threading
import time
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Dict, List, Optional
import requests
from ..config import (
    GITHUB_ACCEPT_HEADER_NAME,
    GITHUB_ACCEPT_HEADER_VALUE,
    GITHUB_API_BASE_URL,
    GITHUB_RESPONSE_CHUNK_BYTES,
    GITHUB_USER_AGENT,
    USER_EVENTS_ENDPOINT_TEMPLATE,
)
from ..errors import (
    BodyReadError,
    DecodeError,
    NetworkError,
    RateLimitError,
    RequestTimeoutError,
    UnexpectedStatusError,
    UserNotFoundError,
)
from ..models import ActivityConfig, Event

STATUS_OK = 200
STATUS_FORBIDDEN = 403
STATUS_NOT_FOUND = 404

RESPONSE_BODY_ENCODING = "utf-8"
EXCHANGE_THREAD_NAME = "github-events-fetch"
NOT_AN_ARRAY_REASON_TEMPLATE = "expected a JSON array, got {kind}"

class GitHubService:

    # This function does initialize the service with runtime settings.
    # It keeps the timeout that bounds every request made by this service.
    def __init__(self, config: ActivityConfig):
        self.config = config

    # This function does build request headers for the events API.
    # It identifies the client and asks for a JSON response.
    def headers(self) -> Dict[str, str]:
        return {
            "User-Agent": GITHUB_USER_AGENT,
            GITHUB_ACCEPT_HEADER_NAME: GITHUB_ACCEPT_HEADER_VALUE,
        }

    # This function does build the events URL for a username.
    # The username is inserted as given, without escaping.
    @staticmethod
    def events_url(username: str) -> str:
        return f"{GITHUB_API_BASE_URL}{USER_EVENTS_ENDPOINT_TEMPLATE.format(username=username)}"

    # This function does fetch the public events of a user.
    # It returns decoded events newest-first or raises a FetchError subclass.
    def fetch_events(self, username: Optional[str] = None) -> List[Event]:
        if username is None:
            username = self.config.username
        timeout = self.config.timeout_seconds
        deadline = time.monotonic() + timeout

        # The exchange runs on a daemon thread so the wall-clock deadline holds
        # even while a socket read is blocked on a trickling server.
        future: "Future[bytes]" = Future()
        worker = threading.Thread(
            target=self._run_exchange,
            args=(future, username, deadline, timeout),
            name=EXCHANGE_THREAD_NAME,
            daemon=True,
        )
        worker.start()

        try:
            body = future.result(timeout=max(deadline - time.monotonic(), 0))
        except FutureTimeoutError as exc:
            raise RequestTimeoutError.deadline_exceeded(timeout) from exc

        return self.decode_events(body)

    # This function does complete the future with the outcome of the exchange.
    def _run_exchange(self, future: "Future[bytes]", username: str, deadline: float, timeout: float) -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            future.set_result(self._exchange(username, deadline, timeout))
        except Exception as exc:
            future.set_exception(exc)

    # This function does perform the GET and read the whole body.
    # It stops at the next read once the deadline has passed.
    def _exchange(self, username: str, deadline: float, timeout: float) -> bytes:
        try:
            response = requests.get(
                self.events_url(username),
                headers=self.headers(),
                timeout=timeout,
                stream=True,
            )
        except requests.Timeout as exc:
            raise RequestTimeoutError.deadline_exceeded(timeout) from exc
        except requests.RequestException as exc:
            raise NetworkError.transport(exc) from exc

        try:
            if time.monotonic() > deadline:
                raise RequestTimeoutError.deadline_exceeded(timeout)
            self._check_status(response.status_code, username)
            body = self._read_body(response, deadline, timeout)
        finally:
            response.close()

        return body

    # This function does map non-success status codes to errors.
    @staticmethod
    def _check_status(status_code: int, username: str) -> None:
        if status_code == STATUS_OK:
            return
        if status_code == STATUS_NOT_FOUND:
            raise UserNotFoundError.for_username(username)
        if status_code == STATUS_FORBIDDEN:
            raise RateLimitError.exceeded()
        raise UnexpectedStatusError.for_status(status_code)

    # This function does read the streamed body chunk by chunk.
    # It abandons the transfer once the request deadline has passed.
    @staticmethod
    def _read_body(response: requests.Response, deadline: float, timeout: float) -> bytes:
        chunks: List[bytes] = []
        try:
            for chunk in response.iter_content(chunk_size=GITHUB_RESPONSE_CHUNK_BYTES):
                if time.monotonic() > deadline:
                    raise RequestTimeoutError.deadline_exceeded(timeout)
                chunks.append(chunk)
        except requests.Timeout as exc:
            raise RequestTimeoutError.deadline_exceeded(timeout) from exc
        except requests.RequestException as exc:
            # urllib3 read timeouts surface here as ConnectionError
            if time.monotonic() > deadline:
                raise RequestTimeoutError.deadline_exceeded(timeout) from exc
            raise BodyReadError.from_reason(exc) from exc
        return b"".join(chunks)

    # This function does decode a raw response body into events.
    # A JSON null body is treated as an empty list.
    @staticmethod
    def decode_events(body: bytes) -> List[Event]:
        try:
            data = json.loads(body.decode(RESPONSE_BODY_ENCODING))
        except ValueError as exc:
            raise DecodeError.from_reason(exc) from exc

        if data is None:
            return []
        if not isinstance(data, list):
            raise DecodeError.from_reason(NOT_AN_ARRAY_REASON_TEMPLATE.format(kind=type(data).__name__))

        events: List[Event] = []
        for record in data:
            try:
                events.append(Event.from_api(record))
            except ValueError as exc:
                raise DecodeError.from_reason(exc) from exc
        return events
