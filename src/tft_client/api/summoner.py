"""TFT summoner-v1 endpoints."""

from ..domain.models import Region
from ..domain.riot_models import SummonerDTO
from ..regions import get_regional_host
from .base import RequestExecutor

BUCKET = "summoner"


class SummonerApi:
    def __init__(self, execute: RequestExecutor):
        self._execute = execute

    async def get_by_puuid(self, region: Region | str, puuid: str) -> SummonerDTO:
        """Get summoner by PUUID."""
        host = get_regional_host(region)
        payload = await self._execute(
            BUCKET, f"{host}/tft/summoner/v1/summoners/by-puuid/{puuid}"
        )
        return SummonerDTO.model_validate(payload)
