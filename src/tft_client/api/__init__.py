"""Endpoint classes: URL building and bucket routing per Riot API method."""

from .base import BatchExecutor, RequestExecutor
from .league import LeagueApi
from .match import MatchApi, MatchListOptions
from .summoner import SummonerApi

__all__ = [
    "LeagueApi",
    "MatchApi",
    "MatchListOptions",
    "SummonerApi",
    "RequestExecutor",
    "BatchExecutor",
]
