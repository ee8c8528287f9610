"""
Client side of the analyzer service.

`AnalyzerClient` asks a remote analyzer over HTTP and falls back to the local
analyzer whenever the remote call fails, so the caller always gets a result.
`Debouncer` delays live-input analysis until typing pauses.
"""

import logging
import threading
from typing import Any, Callable, Optional, Tuple

import requests

from .analyzer import PasswordAnalysis, PasswordAnalyzer
from .config import AppConfig

logger = logging.getLogger(__name__)


class AnalyzerClient:
    def __init__(self, api_url: Optional[str] = None, timeout: Optional[float] = None,
                 analyzer: Optional[PasswordAnalyzer] = None,
                 session: Optional[requests.Session] = None):
        self.api_url = api_url or AppConfig.API_URL
        self.timeout = timeout if timeout is not None else AppConfig.REQUEST_TIMEOUT_SECONDS
        self.analyzer = analyzer if analyzer is not None else PasswordAnalyzer()
        self.session = session or requests.Session()
        self.headers = {"Content-Type": "application/json"}

    def analyze(self, password: str) -> PasswordAnalysis:
        """
        Analyze a password remotely, falling back to local analysis.
        """
        if not password:
            return PasswordAnalysis()

        try:
            return self._analyze_remote(password)
        except (requests.exceptions.RequestException, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Remote analysis at {self.api_url} failed, using local analyzer: {e}")
            return self.analyzer.analyze(password)

    def _analyze_remote(self, password: str) -> PasswordAnalysis:
        response = self.session.post(
            self.api_url,
            headers=self.headers,
            json={"password": password},
            timeout=self.timeout,
        )
        response.raise_for_status()
        body = response.json()
        # Accept both the enveloped API response and a bare analysis object.
        data = body["data"] if "data" in body else body
        return PasswordAnalysis.from_dict(data)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "AnalyzerClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Debouncer:
    """
    Run `func` only after `wait` seconds pass without another call.

    Each call() cancels the pending one and restarts the timer with the new
    arguments. Every call bumps a generation counter; a timer only fires the
    pending call if no newer call() or cancel() happened since it started.
    """

    def __init__(self, func: Callable[..., Any], wait: Optional[float] = None):
        self.func = func
        self.wait = wait if wait is not None else AppConfig.DEBOUNCE_SECONDS
        self.lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._pending: Optional[Tuple[tuple, dict]] = None
        self._generation = 0

    def call(self, *args, **kwargs) -> None:
        with self.lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = (args, kwargs)
            self._timer = threading.Timer(self.wait, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def _fire(self, generation: int) -> None:
        with self.lock:
            # An expired timer may still be waiting on the lock after a newer call().
            if generation != self._generation or self._pending is None:
                return
            pending = self._pending
            self._pending = None
            self._timer = None
        args, kwargs = pending
        self.func(*args, **kwargs)

    def flush(self) -> None:
        """Run the pending call now, if there is one."""
        with self.lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            generation = self._generation
        self._fire(generation)

    def cancel(self) -> None:
        with self.lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._timer = None
            self._pending = None

    @property
    def pending(self) -> bool:
        with self.lock:
            return self._pending is not None
