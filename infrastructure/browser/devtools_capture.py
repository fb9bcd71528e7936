from __future__ import annotations

import time
from typing import Any, Dict

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from application.ports.logger import LoggerPort
from application.services.devtools_report import DevToolsLog
from domain.config import Viewport
from domain.exceptions import ActionError

NAVIGATION_TIMING_SCRIPT = """() => {
  const t = performance.timing;
  return {
    dns: t.domainLookupEnd - t.domainLookupStart,
    tcp: t.connectEnd - t.connectStart,
    ttfb: t.responseStart - t.navigationStart,
    download: t.responseEnd - t.responseStart,
    domInteractive: t.domInteractive - t.navigationStart,
    domContentLoaded: t.domContentLoadedEventEnd - t.navigationStart,
    load: t.loadEventEnd - t.navigationStart
  };
}"""

WEB_VITALS_SCRIPT = """() => new Promise(resolve => {
  const vitals = {};
  try {
    const lcp = performance.getEntriesByType('largest-contentful-paint');
    if (lcp.length > 0) vitals.lcp = lcp[lcp.length - 1].startTime;
  } catch (e) {}
  try {
    const fcp = performance.getEntriesByName('first-contentful-paint')[0];
    if (fcp) vitals.fcp = fcp.startTime;
  } catch (e) {}
  try {
    let cls = 0;
    performance.getEntriesByType('layout-shift').forEach(e => { if (!e.hadRecentInput) cls += e.value; });
    vitals.cls = cls;
  } catch (e) {}
  try {
    const resources = performance.getEntriesByType('resource');
    vitals.resourceCount = resources.length;
    vitals.totalResourceSize = resources.reduce((sum, r) => sum + (r.transferSize || 0), 0);
  } catch (e) {}
  setTimeout(() => resolve(vitals), 1000);
})"""

RESOURCES_SCRIPT = """() => performance.getEntriesByType('resource').map(r => ({
  name: r.name,
  type: r.initiatorType,
  duration: r.duration,
  size: r.transferSize || 0,
  startTime: r.startTime
}))"""


def _now_ms() -> int:
    return int(time.time() * 1000)


class DevToolsCapture:
    """
    Loads one URL and records what the browser's developer tools would
    show: console output, page errors, network traffic and timings.
    Navigation failures are recorded in the log, not raised.
    """

    def __init__(self, logger: LoggerPort, headless: bool = True, viewport: Viewport = Viewport()):
        self._logger = logger
        self._headless = headless
        self._viewport = viewport

    def capture(self, url: str, timeout_ms: int = 30000, wait_ms: int = 5000, performance: bool = True) -> DevToolsLog:
        log = DevToolsLog(url=url)
        started: Dict[Any, float] = {}

        def on_request(request) -> None:
            started[request] = time.monotonic()
            log.record_request()

        def on_response(response) -> None:
            request = response.request
            t0 = started.pop(request, None)
            duration = int((time.monotonic() - t0) * 1000) if t0 is not None else None
            log.record_response(
                {
                    "url": response.url,
                    "method": request.method,
                    "resourceType": request.resource_type,
                    "status": response.status,
                    "statusText": response.status_text,
                    "duration": duration,
                    "size": int(response.headers.get("content-length") or 0),
                }
            )

        def on_request_failed(request) -> None:
            started.pop(request, None)
            log.record_request_failed(request.url, request.failure, request.resource_type)

        with sync_playwright() as pw:
            try:
                browser = pw.chromium.launch(headless=self._headless)
            except PlaywrightError as exc:
                raise ActionError(f"Could not start chromium: {exc.message}") from exc
            try:
                context = browser.new_context(
                    viewport={"width": self._viewport.width, "height": self._viewport.height}
                )
                page = context.new_page()
                page.on("console", lambda msg: log.record_console(msg.type, msg.text, msg.location, _now_ms()))
                page.on("pageerror", lambda err: log.record_page_error(err.message, err.stack, _now_ms()))
                page.on("request", on_request)
                page.on("response", on_response)
                page.on("requestfailed", on_request_failed)

                self._logger.info("devtools.capture_start", url=url)
                try:
                    t0 = time.monotonic()
                    page.goto(url, wait_until="networkidle", timeout=timeout_ms)
                    log.timing["navigationToLoad"] = int((time.monotonic() - t0) * 1000)
                    if performance:
                        page.wait_for_timeout(wait_ms)
                        log.timing.update(page.evaluate(NAVIGATION_TIMING_SCRIPT))
                        log.web_vitals = page.evaluate(WEB_VITALS_SCRIPT)
                        log.resources = page.evaluate(RESOURCES_SCRIPT)
                except PlaywrightError as exc:
                    self._logger.error("devtools.navigation_failed", url=url, error=exc.message)
                    log.record_navigation_error(exc.message, _now_ms())
            finally:
                browser.close()

        log.finalize()
        self._logger.info("devtools.capture_end", url=url, **{k: v for k, v in log.summary.items() if k != "grades"})
        return log
