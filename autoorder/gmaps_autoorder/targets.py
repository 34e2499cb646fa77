"""
Target resolution: which cities a campaign should be scraped in.

campaign_cities wins. client_city_claims is only consulted when
campaign_cities yields nothing for the campaign; the two are never merged.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from .config import COUNTY_MARKER
from .models import GeoTarget
from .stores import RegistryStore

logger = logging.getLogger(__name__)


def normalize_targets(targets: Iterable[GeoTarget]) -> List[GeoTarget]:
    """
    Drop county-level rows, collapse case-insensitive duplicates (first
    spelling wins) and sort by city name, then region.
    """
    seen: Dict[Tuple[str, str], GeoTarget] = {}
    for t in targets:
        city = (t.city_name or "").strip()
        region = (t.region_code or "").strip()
        if not city:
            continue
        if COUNTY_MARKER in city.lower():
            continue
        key = (city.lower(), region.upper())
        if key in seen:
            continue
        seen[key] = GeoTarget(city_name=city, region_code=region)

    return sorted(seen.values(), key=lambda t: (t.city_name.lower(), t.region_code.upper()))


def resolve_targets(registry: RegistryStore, campaign_id: int) -> List[GeoTarget]:
    primary = normalize_targets(registry.fetch_campaign_city_targets(campaign_id))
    if primary:
        return primary

    logger.debug("campaign %s has no campaign_cities rows; falling back to client_city_claims", campaign_id)
    return normalize_targets(registry.fetch_claimed_city_targets(campaign_id))
