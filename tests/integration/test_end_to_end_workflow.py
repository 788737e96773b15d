"""Test end-to-end workflow functionality."""

import pytest

from tft_client import RateLimitException, Region, RetryConfig, TftClient, get_region_group

LIMITS = {
    name: {"max_requests": 5, "window_ms": 200, "buffer_rate": 1.0}
    for name in ("league", "match-list", "match-detail", "summoner")
}


class TestEndToEndWorkflow:
    """Test ladder to match details against a throttling server."""

    @pytest.mark.asyncio
    @pytest.mark.slow
    async def test_workflow_stays_under_server_limit(self, fake_server, http_client):
        """Test client-side limiting avoids every server 429."""
        async with TftClient(
            "RGAPI-test",
            rate_limits=LIMITS,
            http_client=http_client,
            retry=RetryConfig(max_attempts=1),
        ) as client:
            ladder = await client.league.get_challenger_league(Region.EU_WEST)
            puuids = [entry.puuid for entry in ladder.entries]

            region_group = get_region_group(Region.EU_WEST)
            match_ids = await client.match.batch_list(region_group, puuids)
            all_ids = [match_id for ids in match_ids.values() for match_id in ids]
            matches = await client.match.batch_get(region_group, all_ids)

        assert puuids == ["p0", "p1", "p2"]
        assert len(all_ids) == 15
        assert list(matches) == all_ids
        assert fake_server.throttled == 0
        await http_client.aclose()

    @pytest.mark.asyncio
    @pytest.mark.slow
    async def test_unbuffered_overload_recovers_with_retry(self, fake_server, http_client):
        """Test server throttling is absorbed by Retry-After retries."""
        async with TftClient(
            "RGAPI-test",
            rate_limits={"match-detail": {"max_requests": 50, "window_ms": 200}},
            http_client=http_client,
            retry=RetryConfig(max_attempts=10, base_delay_ms=10, max_delay_ms=500),
        ) as client:
            ids = [f"EUW1_{i}" for i in range(8)]
            matches = await client.match.batch_get("europe", ids)

        assert list(matches) == ids
        assert fake_server.throttled > 0
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_throttling_surfaces_without_retries(self, fake_server, http_client):
        """Test a 429 reaches the caller when retries are disabled."""
        async with TftClient(
            "RGAPI-test",
            rate_limits={"match-detail": {"max_requests": 50, "window_ms": 200}},
            http_client=http_client,
            retry=RetryConfig(max_attempts=1),
        ) as client:
            with pytest.raises(RateLimitException) as exc_info:
                await client.match.batch_get("europe", [f"EUW1_{i}" for i in range(8)])

        assert exc_info.value.retry_after_ms is not None
        await http_client.aclose()
