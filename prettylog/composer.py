"""
Log line composer - measures one request/response cycle and emits one line
"""
import asyncio
import logging
import time
from datetime import datetime
from typing import Any, Awaitable, Callable, Iterable, Optional

from prettylog.events import LogEvent, RequestInfo, ResponseInfo
from prettylog.formatters import PrettyLineFormatter
from prettylog.sinks import LineSink, LoggerSink

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Awaitable[Any]]


def describe_request(request: Any) -> RequestInfo:
    """Read a RequestInfo off a duck-typed request (method, path, headers)"""
    if isinstance(request, RequestInfo):
        return request
    headers = getattr(request, "headers", None) or {}
    return RequestInfo(
        method=request.method,
        path=request.path,
        content_length=headers.get("content-length", headers.get("Content-Length"))
    )


def describe_response(response: Any) -> ResponseInfo:
    """Read a ResponseInfo off a duck-typed response (status_code, size_bytes)"""
    if isinstance(response, ResponseInfo):
        return response
    return ResponseInfo(
        status_code=response.status_code,
        size_bytes=getattr(response, "size_bytes", 0) or 0
    )


class LogLineComposer:
    """
    Wraps request handlers and writes one access line per completed cycle.

    formatter, sink, clock and timer are injected by the host. Observers get
    each LogEvent after its line is written (metrics hook). No per-request
    state is kept between calls.
    """

    def __init__(
        self,
        formatter=None,
        sink: Optional[LineSink] = None,
        clock: Callable[[], datetime] = datetime.now,
        timer: Callable[[], float] = time.perf_counter,
        observers: Iterable[Callable[[LogEvent], None]] = (),
    ):
        self.formatter = formatter or PrettyLineFormatter()
        self.sink = sink or LoggerSink()
        self.clock = clock
        self.timer = timer
        self.observers = list(observers)

    def compose(self, event: LogEvent) -> str:
        return self.formatter.format(event)

    def emit(self, event: LogEvent) -> str:
        line = self.compose(event)
        self.sink(line)
        for observe in self.observers:
            try:
                observe(event)
            except Exception:
                logger.exception("Access log observer %r failed", observe)
        return line

    def begin(self, request_info: RequestInfo) -> "Cycle":
        """Start timing one cycle; the line is written by its finish() or fail()"""
        return Cycle(self, request_info)

    async def run(
        self,
        handler: Handler,
        request: Any,
        describe_request: Callable[[Any], RequestInfo] = describe_request,
        describe_response: Callable[[Any], ResponseInfo] = describe_response,
    ):
        """
        Invoke handler(request), log the cycle, then hand back its result.

        A failing handler is logged with the exception's status_code (500 when
        it has none) and the original exception is re-raised afterwards.
        """
        cycle = self.begin(describe_request(request))

        try:
            response = await handler(request)
        except (Exception, asyncio.CancelledError) as exc:
            cycle.fail(exc)
            raise

        cycle.finish(describe_response(response))
        return response

    def wrap(
        self,
        handler: Handler,
        describe_request: Callable[[Any], RequestInfo] = describe_request,
        describe_response: Callable[[Any], ResponseInfo] = describe_response,
    ) -> Handler:
        """Return a new handler that logs every call to handler"""
        async def logged(request):
            return await self.run(handler, request, describe_request, describe_response)

        return logged


class Cycle:
    """One in-flight request/response cycle, logged exactly once"""

    def __init__(self, composer: LogLineComposer, request_info: RequestInfo):
        self.composer = composer
        self.request_info = request_info
        self.start = composer.timer()
        self.done = False

    def finish(self, response_info: ResponseInfo) -> Optional[str]:
        return self._emit(response_info)

    def fail(self, exc: BaseException) -> Optional[str]:
        status_code = getattr(exc, "status_code", None)
        if not isinstance(status_code, int):
            status_code = 500
        logger.debug("Handler failed for %s %s: %r",
                     self.request_info.method, self.request_info.path, exc)
        return self._emit(
            ResponseInfo(status_code=status_code),
            error=str(exc) or exc.__class__.__name__
        )

    def _emit(self, response_info: ResponseInfo, error: Optional[str] = None) -> Optional[str]:
        if self.done:
            return None
        self.done = True

        composer = self.composer
        duration_ms = max(int((composer.timer() - self.start) * 1000), 0)
        return composer.emit(LogEvent(
            timestamp=composer.clock(),
            method=self.request_info.method,
            path=self.request_info.path,
            status_code=response_info.status_code,
            duration_ms=duration_ms,
            bytes_in=self.request_info.bytes_in,
            bytes_out=max(response_info.size_bytes, 0),
            error=error
        ))
