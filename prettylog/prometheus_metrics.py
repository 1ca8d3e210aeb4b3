"""
Prometheus metrics for HTTP access logging
Following standard naming conventions: https://prometheus.io/docs/practices/naming/
"""
from prometheus_client import Counter, Histogram

# ============================================================================
# HTTP Metrics
# ============================================================================

# Total HTTP requests
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status']
)

# HTTP request duration
http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request latency in seconds',
    ['method', 'endpoint'],
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)

# HTTP request size
http_request_size_bytes = Histogram(
    'http_request_size_bytes',
    'HTTP request size in bytes',
    ['method', 'endpoint'],
    buckets=[100, 1000, 10000, 100000, 1000000, 10000000]
)

# HTTP response size
http_response_size_bytes = Histogram(
    'http_response_size_bytes',
    'HTTP response size in bytes',
    ['method', 'endpoint'],
    buckets=[100, 1000, 10000, 100000, 1000000, 10000000]
)


# ============================================================================
# Helper Functions
# ============================================================================

def observe_event(event) -> None:
    """Record one completed cycle (a LogEvent) in the HTTP metrics"""
    endpoint = event.path or "/"

    http_requests_total.labels(
        method=event.method,
        endpoint=endpoint,
        status=str(event.status_code)
    ).inc()

    http_request_duration_seconds.labels(
        method=event.method,
        endpoint=endpoint
    ).observe(event.duration_ms / 1000)

    http_request_size_bytes.labels(
        method=event.method,
        endpoint=endpoint
    ).observe(event.bytes_in)

    http_response_size_bytes.labels(
        method=event.method,
        endpoint=endpoint
    ).observe(event.bytes_out)
