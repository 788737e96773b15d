"""Demonstration of the rate-limited TFT client.

Needs a Riot API key in ``TFT_API_KEY``. Shows single lookups, batch match
fetching under the match-detail budget, and bucket status reporting.
"""

import asyncio
import os

from tft_client import (
    MatchListOptions,
    Region,
    RetryConfig,
    TftClient,
    TftClientException,
    get_region_group,
)
from tft_client.observability import LogFormat, setup_logging

REGION = Region.EU_WEST


async def demo_ladder(client: TftClient) -> str | None:
    """Print the top of the Challenger ladder and return its leader's PUUID."""
    print("\n=== Challenger Ladder Demo ===")

    ladder = await client.league.get_challenger_league(REGION)
    top = sorted(ladder.entries, key=lambda entry: entry.league_points, reverse=True)

    for rank, entry in enumerate(top[:5], start=1):
        print(f"{rank}. {entry.puuid[:12]}... {entry.league_points} LP")

    return top[0].puuid if top else None


async def demo_matches(client: TftClient, puuid: str) -> None:
    """Fetch recent matches for one player as a batch."""
    print("\n=== Batch Match Demo ===")

    region_group = get_region_group(REGION)
    match_ids = await client.match.list(region_group, puuid, MatchListOptions(count=10))
    matches = await client.match.batch_get(region_group, match_ids)

    for match_id, match in matches.items():
        placement = next(
            (p.placement for p in match.info.participants if p.puuid == puuid), None
        )
        print(f"✅ {match_id}: placement {placement}, set {match.info.tft_set_number}")


def print_status(client: TftClient) -> None:
    """Print the remaining budget of every bucket."""
    print("\n=== Bucket Status ===")
    for name in client.rate_limiter.bucket_names:
        status = client.get_status(name)
        print(
            f"{name:>13}: available={status.available} "
            f"queued={status.queued} in_flight={status.in_flight}"
        )


async def main():
    """Run the demo."""
    setup_logging(level="INFO", format_type=LogFormat.CONSOLE)

    api_key = os.environ.get("TFT_API_KEY")
    if not api_key:
        print("Set TFT_API_KEY to run this demo")
        return

    async with TftClient(
        api_key,
        app_rate_limit={"max_requests": 100, "window_ms": 120_000},
        retry=RetryConfig(max_attempts=4),
        batch_concurrency=5,
    ) as client:
        try:
            puuid = await demo_ladder(client)
            if puuid:
                await demo_matches(client, puuid)
        except TftClientException as e:
            print(f"❌ Request failed ({e.error_code.value}): {e}")
        print_status(client)


if __name__ == "__main__":
    asyncio.run(main())
