"""TFT match-v1 endpoints."""

# MatchApi.list shadows the builtin inside the class body
from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import urlencode

from pydantic import BaseModel, Field

from ..domain.models import RegionGroup
from ..domain.riot_models import MatchDTO
from ..regions import get_region_group_host
from .base import BatchExecutor, RequestExecutor

LIST_BUCKET = "match-list"
DETAIL_BUCKET = "match-detail"


class MatchListOptions(BaseModel):
    """Query parameters for the match ID list endpoint."""

    count: int | None = Field(default=None, ge=1, le=100)
    start_time: int | None = Field(default=None, description="Epoch seconds")
    end_time: int | None = Field(default=None, description="Epoch seconds")
    start: int | None = Field(default=None, ge=0)

    def to_query(self) -> str:
        params = {
            "count": self.count,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "start": self.start,
        }
        encoded = urlencode({k: v for k, v in params.items() if v is not None})
        return f"?{encoded}" if encoded else ""


class MatchApi:
    """Match history and match detail lookups."""

    def __init__(self, execute: RequestExecutor, execute_batch: BatchExecutor):
        self._execute = execute
        self._execute_batch = execute_batch

    @staticmethod
    def _ids_url(host: str, puuid: str, options: MatchListOptions | None) -> str:
        query = options.to_query() if options else ""
        return f"{host}/tft/match/v1/matches/by-puuid/{puuid}/ids{query}"

    async def list(
        self,
        region_group: RegionGroup | str,
        puuid: str,
        options: MatchListOptions | None = None,
    ) -> list[str]:
        """Get match IDs for a player."""
        host = get_region_group_host(region_group)
        return await self._execute(LIST_BUCKET, self._ids_url(host, puuid, options))

    async def get(self, region_group: RegionGroup | str, match_id: str) -> MatchDTO:
        """Get match details by match ID."""
        host = get_region_group_host(region_group)
        payload = await self._execute(
            DETAIL_BUCKET, f"{host}/tft/match/v1/matches/{match_id}"
        )
        return MatchDTO.model_validate(payload)

    async def batch_list(
        self,
        region_group: RegionGroup | str,
        puuids: Sequence[str],
        options: MatchListOptions | None = None,
    ) -> dict[str, list[str]]:
        """Get match IDs for several players, keyed by PUUID."""
        host = get_region_group_host(region_group)
        results = await self._execute_batch(
            LIST_BUCKET, puuids, lambda puuid: self._ids_url(host, puuid, options)
        )
        return dict(zip(puuids, results, strict=True))

    async def batch_get(
        self, region_group: RegionGroup | str, match_ids: Sequence[str]
    ) -> dict[str, MatchDTO]:
        """Get details for several matches, keyed by match ID."""
        host = get_region_group_host(region_group)
        results = await self._execute_batch(
            DETAIL_BUCKET,
            match_ids,
            lambda match_id: f"{host}/tft/match/v1/matches/{match_id}",
        )
        return {
            match_id: MatchDTO.model_validate(payload)
            for match_id, payload in zip(match_ids, results, strict=True)
        }
