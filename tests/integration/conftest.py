"""Integration test configuration."""

import json
import math
import time
from collections import deque

import httpx
import pytest


class FakeRiotServer:
    """MockTransport handler enforcing a per-route sliding-window limit.

    Requests over the limit get a 429 with ``Retry-After``; everything else
    gets a canned payload for the route.
    """

    def __init__(self, limit: int, window_s: float):
        self.limit = limit
        self.window_s = window_s
        self.hits: dict[str, deque[float]] = {}
        self.requests: list[str] = []
        self.throttled = 0

    @staticmethod
    def route(path: str) -> str:
        if "/ids" in path:
            return "match-list"
        if "/tft/match/" in path:
            return "match-detail"
        if "/tft/league/" in path:
            return "league"
        return "summoner"

    def payload(self, path: str) -> object:
        route = self.route(path)
        if route == "league":
            return {
                "tier": "CHALLENGER",
                "entries": [
                    {"puuid": f"p{i}", "rank": "I", "leaguePoints": 1000 - i}
                    for i in range(3)
                ],
            }
        if route == "match-list":
            puuid = path.split("/")[-2]
            return [f"EUW1_{puuid}_{i}" for i in range(5)]
        match_id = path.rsplit("/", 1)[-1]
        return {
            "metadata": {"data_version": "5", "match_id": match_id},
            "info": {
                "game_datetime": 1,
                "game_length": 1800.0,
                "game_version": "Version 14.1",
                "queue_id": 1100,
                "tft_set_number": 10,
            },
        }

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requests.append(path)
        now = time.monotonic()
        hits = self.hits.setdefault(self.route(path), deque())
        while hits and hits[0] <= now - self.window_s:
            hits.popleft()

        if len(hits) >= self.limit:
            self.throttled += 1
            retry_after = math.ceil((hits[0] + self.window_s - now) * 1000) / 1000
            return httpx.Response(429, headers={"Retry-After": f"{retry_after:.3f}"})

        hits.append(now)
        return httpx.Response(
            200,
            content=json.dumps(self.payload(path)).encode(),
            headers={"Content-Type": "application/json"},
        )


@pytest.fixture
def fake_server():
    """Create a fake Riot server allowing 5 requests per route every 0.19s."""
    return FakeRiotServer(limit=5, window_s=0.19)


@pytest.fixture
def http_client(fake_server):
    """Create an httpx client routed to the fake server."""
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_server))
