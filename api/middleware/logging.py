"""
Request logging middleware - one pretty (or JSON) access line per request
"""
import asyncio
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from typing import AsyncIterator, Callable, Optional

from prettylog.composer import Cycle, LogLineComposer
from prettylog.events import LogEvent, RequestInfo, ResponseInfo
from prettylog.formatters import select_formatter
from prettylog.logging import setup_logging
from prettylog.prometheus_metrics import observe_event
from prettylog.settings import Settings, settings as default_settings
from prettylog.sinks import LineSink, LoggerSink

# Don't track metrics endpoint itself
UNTRACKED_PATHS = {"/metrics"}


def request_info(request: Request) -> RequestInfo:
    return RequestInfo(
        method=request.method,
        path=request.url.path,
        content_length=request.headers.get("content-length")
    )


def response_info(response: Response) -> ResponseInfo:
    """Status and declared size of the produced response"""
    content_length = response.headers.get("content-length")
    try:
        size = int(content_length) if content_length else 0
    except ValueError:
        size = 0
    return ResponseInfo(status_code=response.status_code, size_bytes=size)


async def counted_body(body_iterator: AsyncIterator, cycle: Cycle, status_code: int):
    """Pass the body through, logging the cycle once it has been sent"""
    size = 0
    try:
        async for chunk in body_iterator:
            size += len(chunk.encode("utf-8") if isinstance(chunk, str) else chunk)
            yield chunk
    except Exception as exc:
        cycle.fail(exc)
        raise
    finally:
        # Disconnected clients still get a line with what was sent so far
        cycle.finish(ResponseInfo(status_code=status_code, size_bytes=size))


def track_metrics(event: LogEvent) -> None:
    if event.path not in UNTRACKED_PATHS:
        observe_event(event)


def build_composer(config: Optional[Settings] = None, sink: Optional[LineSink] = None,
                   **kwargs) -> LogLineComposer:
    """Build the composer once from settings (log style, sink, metrics)"""
    config = config or default_settings
    if sink is None:
        sink = LoggerSink(setup_logging(config.log_level, config.log_format))
    observers = [track_metrics] if config.metrics_enabled else []
    return LogLineComposer(
        formatter=select_formatter(config.log_style),
        sink=sink,
        observers=observers,
        **kwargs
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, composer: Optional[LogLineComposer] = None):
        super().__init__(app)
        self.composer = composer or build_composer()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        cycle = self.composer.begin(request_info(request))

        try:
            response = await call_next(request)
        except (Exception, asyncio.CancelledError) as exc:
            cycle.fail(exc)
            raise

        if "content-length" in response.headers or not hasattr(response, "body_iterator"):
            cycle.finish(response_info(response))
        else:
            # Streamed body: count what is actually written
            response.body_iterator = counted_body(response.body_iterator, cycle, response.status_code)
        return response


def install_logging(app: FastAPI, composer: Optional[LogLineComposer] = None):
    """Install the request logging middleware on the app"""
    app.add_middleware(RequestLoggingMiddleware, composer=composer)
