"""Host lookup for Riot platform and regional routing values."""

from .domain.models import REGION_TO_GROUP, Region, RegionGroup


def get_region_group(region: Region | str) -> RegionGroup:
    """Regional routing group for a platform region."""
    return REGION_TO_GROUP[Region(region)]


def get_regional_host(region: Region | str) -> str:
    """Platform-specific API host, e.g. ``https://na1.api.riotgames.com``."""
    return f"https://{Region(region).value.lower()}.api.riotgames.com"


def get_region_group_host(region_group: RegionGroup | str) -> str:
    """Regional routing host, used by match endpoints."""
    return f"https://{RegionGroup(region_group).value}.api.riotgames.com"
