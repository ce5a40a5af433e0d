"""
Tests for the per-client limiter on generation routes.
"""
import threading

from starlette.requests import Request

from app.core.rate_limit import SlidingWindowLimiter, get_client_ip, limiter


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def _request(ip="10.0.0.1", forwarded=None):
    headers = []
    if forwarded:
        headers.append((b"x-forwarded-for", forwarded.encode()))
    return Request({"type": "http", "headers": headers, "client": (ip, 1234)})


def test_get_client_ip_ignores_forwarded_header_by_default():
    assert get_client_ip(_request(forwarded="203.0.113.5")) == "10.0.0.1"


def test_get_client_ip_uses_forwarded_header_behind_trusted_proxy():
    request = _request(forwarded="203.0.113.5, 10.0.0.1")
    assert get_client_ip(request, trust_proxy=True) == "203.0.113.5"
    assert get_client_ip(_request(), trust_proxy=True) == "10.0.0.1"


def test_limiter_blocks_after_max_per_client():
    window = SlidingWindowLimiter(max_requests=3, window_seconds=60, clock=FakeClock())

    assert [window.hit("a") for _ in range(4)] == [True, True, True, False]
    # Other clients are unaffected
    assert window.hit("b") is True


def test_limiter_forgets_clients_once_window_passes():
    clock = FakeClock()
    window = SlidingWindowLimiter(max_requests=1, window_seconds=60, clock=clock)
    for i in range(50):
        window.hit(f"198.51.100.{i}")
    assert window.tracked_clients() == 50

    clock.now += 61
    assert window.hit("10.0.0.1") is True
    assert window.tracked_clients() == 1


def test_limiter_counts_every_concurrent_hit():
    window = SlidingWindowLimiter(max_requests=1000, window_seconds=60)

    def worker():
        for _ in range(100):
            window.hit("shared")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(window._hits["shared"]) == 800


def test_generation_route_returns_429(client, stub):
    stub.response = "• Done"
    for _ in range(limiter.max_requests):
        assert client.post("/api/generate-project", json={"name": "X"}).status_code == 200

    response = client.post("/api/generate-project", json={"name": "X"})
    assert response.status_code == 429


def test_spoofed_forwarded_headers_are_still_limited(client, stub):
    stub.response = "• Done"
    codes = set()
    for i in range(limiter.max_requests + 5):
        response = client.post(
            "/api/generate-project",
            json={"name": "X"},
            headers={"X-Forwarded-For": f"198.51.100.{i}"},
        )
        codes.add(response.status_code)

    assert 429 in codes
    assert limiter.tracked_clients() == 1
