"""
Test output sinks and access logger setup
"""
import io
import logging
import threading

from prettylog.logging import ACCESS_LOGGER_NAME, setup_logging
from prettylog.sinks import LoggerSink, StreamSink


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


def test_logger_sink_logs_line_at_info():
    logger = logging.getLogger("prettylog.test.sink")
    logger.setLevel(logging.INFO)
    handler = ListHandler()
    logger.addHandler(handler)
    try:
        LoggerSink(logger)("GET / 200")
    finally:
        logger.removeHandler(handler)

    assert handler.messages == ["GET / 200"]


def test_logger_sink_defaults_to_access_logger():
    assert LoggerSink().logger.name == ACCESS_LOGGER_NAME


def test_stream_sink_writes_whole_lines_from_threads():
    stream = io.StringIO()
    sink = StreamSink(stream)

    threads = [
        threading.Thread(target=lambda n=n: [sink(f"line-{n}-{i}") for i in range(50)])
        for n in range(4)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    written = stream.getvalue().splitlines()
    assert len(written) == 200
    assert all(line.startswith("line-") for line in written)


def test_setup_logging_is_idempotent():
    logger = setup_logging("debug", "%(levelname)s %(message)s")
    logger = setup_logging("INFO")

    handlers = [h for h in logger.handlers if h.get_name() == ACCESS_LOGGER_NAME]
    assert len(handlers) == 1
    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert handlers[0].formatter._fmt == "%(message)s"
