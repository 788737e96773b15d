"""Domain layer for the TFT client.

Error taxonomy, routing enums and response models.
"""

from .exceptions import (
    ApiException,
    ConfigurationException,
    RateLimiterDestroyedException,
    RateLimitException,
    TftClientException,
    TransportException,
    UnknownBucketException,
)
from .models import (
    REGION_TO_GROUP,
    TFT_QUEUE_ID,
    Division,
    ErrorCode,
    LowerTier,
    Region,
    RegionGroup,
    Tier,
)
from .riot_models import (
    LeagueEntryDTO,
    LeagueItemDTO,
    LeagueListDTO,
    MatchDTO,
    MatchInfoDTO,
    MatchMetadataDTO,
    MatchParticipantDTO,
    MatchTraitDTO,
    MatchUnitDTO,
    MiniSeriesDTO,
    SummonerDTO,
)

__all__ = [
    "TftClientException",
    "ConfigurationException",
    "ApiException",
    "RateLimitException",
    "TransportException",
    "UnknownBucketException",
    "RateLimiterDestroyedException",
    "ErrorCode",
    "Region",
    "RegionGroup",
    "REGION_TO_GROUP",
    "Tier",
    "LowerTier",
    "Division",
    "TFT_QUEUE_ID",
    "LeagueListDTO",
    "LeagueItemDTO",
    "LeagueEntryDTO",
    "MiniSeriesDTO",
    "SummonerDTO",
    "MatchDTO",
    "MatchMetadataDTO",
    "MatchInfoDTO",
    "MatchParticipantDTO",
    "MatchTraitDTO",
    "MatchUnitDTO",
]
