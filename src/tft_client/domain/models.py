"""Domain enums and constants for the TFT client."""

from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes."""

    CONFIGURATION_ERROR = "configuration_error"
    API_ERROR = "api_error"
    RATE_LIMIT_ERROR = "rate_limit_error"
    TRANSPORT_ERROR = "transport_error"
    UNKNOWN_BUCKET = "unknown_bucket"
    LIMITER_DESTROYED = "limiter_destroyed"


class Region(str, Enum):
    """Riot platform routing values (regional servers)."""

    BRAZIL = "BR1"
    EU_EAST = "EUN1"
    EU_WEST = "EUW1"
    JAPAN = "JP1"
    KOREA = "KR"
    LATIN_AMERICA_NORTH = "LA1"
    LATIN_AMERICA_SOUTH = "LA2"
    NORTH_AMERICA = "NA1"
    OCEANIA = "OC1"
    TURKEY = "TR1"
    RUSSIA = "RU"
    PBE = "PBE1"
    VIETNAM = "VN2"


class RegionGroup(str, Enum):
    """Riot regional routing values, used by match endpoints."""

    AMERICAS = "americas"
    EUROPE = "europe"
    ASIA = "asia"
    SEA = "sea"


REGION_TO_GROUP: dict[Region, RegionGroup] = {
    Region.BRAZIL: RegionGroup.AMERICAS,
    Region.EU_EAST: RegionGroup.EUROPE,
    Region.EU_WEST: RegionGroup.EUROPE,
    Region.JAPAN: RegionGroup.ASIA,
    Region.KOREA: RegionGroup.ASIA,
    Region.LATIN_AMERICA_NORTH: RegionGroup.AMERICAS,
    Region.LATIN_AMERICA_SOUTH: RegionGroup.AMERICAS,
    Region.NORTH_AMERICA: RegionGroup.AMERICAS,
    Region.OCEANIA: RegionGroup.SEA,
    Region.TURKEY: RegionGroup.EUROPE,
    Region.RUSSIA: RegionGroup.EUROPE,
    Region.PBE: RegionGroup.AMERICAS,
    Region.VIETNAM: RegionGroup.SEA,
}

# Ranked TFT queue
TFT_QUEUE_ID = 1100


class Tier(str, Enum):
    """Ranked tiers."""

    CHALLENGER = "CHALLENGER"
    GRANDMASTER = "GRANDMASTER"
    MASTER = "MASTER"
    DIAMOND = "DIAMOND"
    EMERALD = "EMERALD"
    PLATINUM = "PLATINUM"
    GOLD = "GOLD"
    SILVER = "SILVER"
    BRONZE = "BRONZE"
    IRON = "IRON"


class LowerTier(str, Enum):
    """Tiers served by the paginated entries endpoint."""

    DIAMOND = "DIAMOND"
    EMERALD = "EMERALD"
    PLATINUM = "PLATINUM"
    GOLD = "GOLD"
    SILVER = "SILVER"
    BRONZE = "BRONZE"
    IRON = "IRON"


class Division(str, Enum):
    """Division within a tier."""

    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"
