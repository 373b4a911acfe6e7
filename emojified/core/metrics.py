import time
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

# Define metrics (names follow Prometheus conventions)
REQ_COUNT = Counter("http_requests_total", "Total HTTP requests", ["path","method","code"])
REQ_LATENCY = Histogram("http_request_duration_seconds", "Request latency", ["path","method"])
FINGERPRINTS = Counter(
    "fingerprints_rendered_total", "Addresses rendered, by validity", ["outcome"]
)

class PromMiddleware(BaseHTTPMiddleware):
    """
    Measures latency and counts requests.
    """
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed = time.perf_counter() - start

        # Route template rather than raw path: addresses in the path would explode labels
        route = request.scope.get("route")
        if route is not None:
            path = route.path
        elif request.scope.get("endpoint") is not None:
            # Plain Starlette routes (e.g. /v1/metrics) have fixed paths
            path = request.url.path
        else:
            path = "unmatched"
        method = request.method
        code = str(response.status_code)

        REQ_COUNT.labels(path=path, method=method, code=code).inc()
        REQ_LATENCY.labels(path=path, method=method).observe(elapsed)
        return response

def record_rendering(valid: bool) -> None:
    FINGERPRINTS.labels(outcome="valid" if valid else "invalid").inc()

async def metrics_endpoint(request: Request):
    """
    GET /v1/metrics, scraped by Prometheus.
    """
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
