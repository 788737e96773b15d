"""Response models for the TFT league, summoner and match endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RiotModel(BaseModel):
    """Base model for Riot payloads.

    Riot adds fields between patches, so unknown keys are kept rather than
    rejected.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class CamelCaseModel(RiotModel):
    """Base model for payloads whose keys are camelCase."""

    model_config = ConfigDict(
        extra="allow", populate_by_name=True, alias_generator=to_camel
    )


# League
class MiniSeriesDTO(CamelCaseModel):
    losses: int
    progress: str
    target: int
    wins: int


class LeagueItemDTO(CamelCaseModel):
    summoner_id: str | None = None
    puuid: str | None = None
    league_points: int = 0
    rank: str
    wins: int = 0
    losses: int = 0
    veteran: bool = False
    inactive: bool = False
    fresh_blood: bool = False
    hot_streak: bool = False


class LeagueListDTO(CamelCaseModel):
    """Response from ``/tft/league/v1/{challenger,grandmaster,master}``."""

    tier: str
    league_id: str | None = None
    queue: str | None = None
    name: str | None = None
    entries: list[LeagueItemDTO] = Field(default_factory=list)


class LeagueEntryDTO(CamelCaseModel):
    """Entry from ``/tft/league/v1/entries/...`` and ``/by-puuid/{puuid}``."""

    league_id: str | None = None
    summoner_id: str | None = None
    puuid: str | None = None
    queue_type: str
    tier: str | None = None
    rank: str | None = None
    league_points: int = 0
    wins: int = 0
    losses: int = 0
    hot_streak: bool = False
    veteran: bool = False
    fresh_blood: bool = False
    inactive: bool = False
    mini_series: MiniSeriesDTO | None = None


# Summoner
class SummonerDTO(CamelCaseModel):
    """Response from ``/tft/summoner/v1/summoners/by-puuid/{puuid}``."""

    puuid: str
    id: str | None = None
    account_id: str | None = None
    profile_icon_id: int
    revision_date: int
    summoner_level: int


# Match
class CompanionDTO(RiotModel):
    content_id: str = Field(alias="content_ID")
    item_id: int = Field(alias="item_ID")
    skin_id: int = Field(alias="skin_ID")
    species: str


class MatchTraitDTO(RiotModel):
    name: str
    num_units: int
    style: int
    tier_current: int
    tier_total: int


class MatchUnitDTO(RiotModel):
    character_id: str
    item_names: list[str] = Field(default_factory=list, alias="itemNames")
    items: list[int] = Field(default_factory=list)
    name: str = ""
    rarity: int
    tier: int


class MatchParticipantDTO(RiotModel):
    puuid: str
    placement: int
    level: int
    gold_left: int
    last_round: int
    time_eliminated: float
    traits: list[MatchTraitDTO] = Field(default_factory=list)
    units: list[MatchUnitDTO] = Field(default_factory=list)
    augments: list[str] = Field(default_factory=list)
    companion: CompanionDTO | None = None


class MatchMetadataDTO(RiotModel):
    data_version: str
    match_id: str
    participants: list[str] = Field(default_factory=list)


class MatchInfoDTO(RiotModel):
    game_datetime: int
    game_length: float
    game_version: str
    participants: list[MatchParticipantDTO] = Field(default_factory=list)
    queue_id: int
    tft_game_type: str | None = None
    tft_set_core_name: str | None = None
    tft_set_number: int


class MatchDTO(RiotModel):
    """Response from ``/tft/match/v1/matches/{matchId}``."""

    metadata: MatchMetadataDTO
    info: MatchInfoDTO
