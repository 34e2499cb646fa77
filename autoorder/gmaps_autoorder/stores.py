"""
Query surfaces for the two stores.

RegistryStore (lead-recycling DB, read-only):
- active GMaps campaigns
- city targets from campaign_cities, and from the older client_city_claims

TrackerStore (GMaps DB):
- existing-batch count for a campaign
- campaign_name correction for a created batch

Every method opens its own short transaction; errors propagate as
SQLAlchemyError and are fatal to the run.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import text
from sqlalchemy.engine import Engine

from .config import CAMPAIGN_MARKER, COUNTY_MARKER
from .models import Campaign, GeoTarget


def like_escape(value: str) -> str:
    """Escape LIKE wildcards so `value` matches literally (ESCAPE '\\')."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


_ACTIVE_CAMPAIGNS_SQL = text(
    """
    SELECT ic.id, ic.campaign_name
    FROM instant_campaigns ic
    WHERE ic.campaign_name ILIKE :pattern ESCAPE '\\'
      AND ic.is_active = true
    ORDER BY ic.id ASC
    """
)

# pipeline integration table (newer campaigns)
_CAMPAIGN_CITIES_SQL = text(
    """
    SELECT DISTINCT c.city_name, c.state_code
    FROM campaign_cities cc
    JOIN cities c ON c.id = cc.city_id
    WHERE cc.campaign_id = :campaign_id
      AND c.city_name NOT ILIKE :county_pattern
    ORDER BY c.city_name
    """
)

# older city ownership table, keyed by the campaign's client
_CLAIMED_CITIES_SQL = text(
    """
    SELECT DISTINCT c.city_name, c.state_code
    FROM client_city_claims ccc
    JOIN instant_campaigns ic ON ic.client_id = ccc.client_id
    JOIN cities c ON c.id = ccc.city_id
    WHERE ic.id = :campaign_id
      AND c.city_name NOT ILIKE :county_pattern
    ORDER BY c.city_name
    """
)

# Older batches may predate lead_recycling_campaign_id; multi-part batches are
# named "<base> Part N".
_EXISTING_BATCHES_SQL = text(
    """
    SELECT COUNT(*)::int AS cnt
    FROM jobs_batch
    WHERE lead_recycling_campaign_id = :campaign_id
       OR campaign_name = :campaign_name
       OR name LIKE :name_prefix ESCAPE '\\'
    """
)

_RENAME_BATCH_SQL = text(
    """
    UPDATE jobs_batch
    SET campaign_name = :campaign_name
    WHERE batch_id = :batch_id
    """
)


def _rows_to_targets(rows) -> List[GeoTarget]:
    return [GeoTarget(city_name=r["city_name"], region_code=r["state_code"]) for r in rows]


class RegistryStore:
    def __init__(self, engine: Engine, marker: str = CAMPAIGN_MARKER) -> None:
        self.engine = engine
        self.marker = marker

    def fetch_active_campaigns(self) -> List[Campaign]:
        with self.engine.begin() as conn:
            rows = conn.execute(
                _ACTIVE_CAMPAIGNS_SQL,
                {"pattern": f"%{like_escape(self.marker)}%"},
            ).mappings().all()
        return [Campaign(id=int(r["id"]), name=r["campaign_name"]) for r in rows]

    def fetch_campaign_city_targets(self, campaign_id: int) -> List[GeoTarget]:
        with self.engine.begin() as conn:
            rows = conn.execute(
                _CAMPAIGN_CITIES_SQL,
                {"campaign_id": campaign_id, "county_pattern": f"%{COUNTY_MARKER}%"},
            ).mappings().all()
        return _rows_to_targets(rows)

    def fetch_claimed_city_targets(self, campaign_id: int) -> List[GeoTarget]:
        with self.engine.begin() as conn:
            rows = conn.execute(
                _CLAIMED_CITIES_SQL,
                {"campaign_id": campaign_id, "county_pattern": f"%{COUNTY_MARKER}%"},
            ).mappings().all()
        return _rows_to_targets(rows)


class TrackerStore:
    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def count_existing_batches(self, campaign: Campaign) -> int:
        with self.engine.begin() as conn:
            cnt = conn.execute(
                _EXISTING_BATCHES_SQL,
                {
                    "campaign_id": campaign.id,
                    "campaign_name": campaign.name,
                    "name_prefix": f"{like_escape(campaign.name)}%",
                },
            ).scalar()
        return int(cnt or 0)

    def set_batch_campaign_name(self, batch_id: str, campaign_name: str) -> int:
        with self.engine.begin() as conn:
            res = conn.execute(
                _RENAME_BATCH_SQL,
                {"campaign_name": campaign_name, "batch_id": batch_id},
            )
        return int(res.rowcount or 0)
