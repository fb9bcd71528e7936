# infrastructure/http/server_probe.py
from __future__ import annotations

import time
from typing import Callable

import requests

from application.ports.logger import LoggerPort


class DevServerProbe:
    """Polls the application under test until it answers or a deadline passes."""

    def __init__(
        self,
        logger: LoggerPort,
        interval_sec: float = 0.5,
        request_timeout_sec: float = 5.0,
        sleep: Callable[[float], None] = time.sleep,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self._logger = logger
        self._interval = interval_sec
        self._request_timeout = request_timeout_sec
        self._sleep = sleep
        self._monotonic = monotonic

    def wait_until_ready(self, url: str, timeout_sec: float) -> bool:
        deadline = self._monotonic() + timeout_sec
        attempt = 0
        while True:
            attempt += 1
            try:
                response = requests.get(url, timeout=self._request_timeout)
                if response.status_code < 500:
                    self._logger.info("server.ready", url=url, status=response.status_code, attempts=attempt)
                    return True
                self._logger.debug("server.not_ready", url=url, status=response.status_code)
            except requests.RequestException as exc:
                self._logger.debug("server.unreachable", url=url, error=str(exc))
            if self._monotonic() >= deadline:
                self._logger.error("server.timeout", url=url, timeout_sec=timeout_sec, attempts=attempt)
                return False
            self._sleep(self._interval)
