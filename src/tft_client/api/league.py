"""TFT league-v1 endpoints."""

from ..domain.models import Division, LowerTier, Region
from ..domain.riot_models import LeagueEntryDTO, LeagueListDTO
from ..regions import get_regional_host
from .base import RequestExecutor

BUCKET = "league"


class LeagueApi:
    """Ranked ladder lookups, routed through the ``league`` bucket."""

    def __init__(self, execute: RequestExecutor):
        self._execute = execute

    async def _get_list(self, region: Region | str, tier_path: str) -> LeagueListDTO:
        host = get_regional_host(region)
        payload = await self._execute(BUCKET, f"{host}/tft/league/v1/{tier_path}")
        return LeagueListDTO.model_validate(payload)

    async def get_challenger_league(self, region: Region | str) -> LeagueListDTO:
        """Get Challenger league entries."""
        return await self._get_list(region, "challenger")

    async def get_grandmaster_league(self, region: Region | str) -> LeagueListDTO:
        """Get GrandMaster league entries."""
        return await self._get_list(region, "grandmaster")

    async def get_master_league(self, region: Region | str) -> LeagueListDTO:
        """Get Master league entries."""
        return await self._get_list(region, "master")

    async def get_by_tier_division(
        self,
        region: Region | str,
        tier: LowerTier | str,
        division: Division | str,
        page: int | None = None,
    ) -> list[LeagueEntryDTO]:
        """Get one page of entries for a tier and division.

        Args:
            region: Platform region
            tier: Tier below Master
            division: Division within the tier
            page: 1-based page; omitted from the URL for the first page

        Returns:
            League entries on that page
        """
        host = get_regional_host(region)
        params = f"?page={page}" if page is not None and page > 1 else ""
        url = (
            f"{host}/tft/league/v1/entries/"
            f"{LowerTier(tier).value}/{Division(division).value}{params}"
        )
        payload = await self._execute(BUCKET, url)
        return [LeagueEntryDTO.model_validate(entry) for entry in payload]

    async def get_by_puuid(self, region: Region | str, puuid: str) -> list[LeagueEntryDTO]:
        """Get league entries for a player."""
        host = get_regional_host(region)
        payload = await self._execute(
            BUCKET, f"{host}/tft/league/v1/entries/by-puuid/{puuid}"
        )
        return [LeagueEntryDTO.model_validate(entry) for entry in payload]
