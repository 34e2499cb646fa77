"""
Pytest configuration: repo root on sys.path, logging to stdout, shared fakes.
"""
import logging
import os
import sys
from typing import Dict, List, Optional

# Ensure project root is in sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from autoorder.gmaps_autoorder.models import Campaign, GeoTarget

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)


class FakeRegistry:
    def __init__(
        self,
        campaigns: Optional[List[Campaign]] = None,
        campaign_cities: Optional[Dict[int, List[GeoTarget]]] = None,
        claimed_cities: Optional[Dict[int, List[GeoTarget]]] = None,
    ):
        self.campaigns = campaigns or []
        self.campaign_cities = campaign_cities or {}
        self.claimed_cities = claimed_cities or {}
        self.claim_lookups: List[int] = []

    def fetch_active_campaigns(self):
        return list(self.campaigns)

    def fetch_campaign_city_targets(self, campaign_id):
        return list(self.campaign_cities.get(campaign_id, []))

    def fetch_claimed_city_targets(self, campaign_id):
        self.claim_lookups.append(campaign_id)
        return list(self.claimed_cities.get(campaign_id, []))


class FakeTracker:
    """In-memory jobs_batch: rows of {batch_id, name, campaign_name, campaign_id}."""

    def __init__(self, rows: Optional[List[dict]] = None):
        self.rows = list(rows or [])
        self.renames: List[tuple] = []

    def count_existing_batches(self, campaign):
        return sum(
            1
            for r in self.rows
            if r.get("campaign_id") == campaign.id
            or r.get("campaign_name") == campaign.name
            or (r.get("name") or "").startswith(campaign.name)
        )

    def set_batch_campaign_name(self, batch_id, campaign_name):
        self.renames.append((batch_id, campaign_name))
        hit = 0
        for r in self.rows:
            if r["batch_id"] == batch_id:
                r["campaign_name"] = campaign_name
                hit += 1
        return hit


class FakeDashboard:
    """Records submissions; mirrors the dashboard by inserting into the tracker."""

    def __init__(self, tracker: Optional[FakeTracker] = None, fail_on_call: Optional[int] = None):
        self.tracker = tracker
        self.fail_on_call = fail_on_call
        self.submitted: List = []

    def create_batch(self, plan):
        from autoorder.gmaps_autoorder.errors import DashboardError

        if self.fail_on_call is not None and len(self.submitted) + 1 == self.fail_on_call:
            raise DashboardError("POST /api/batches returned 502: bad gateway")
        self.submitted.append(plan)
        batch_id = f"b{len(self.submitted)}"
        if self.tracker is not None:
            self.tracker.rows.append(
                {
                    "batch_id": batch_id,
                    "name": plan.display_name,
                    "campaign_name": plan.display_name,
                    "campaign_id": plan.source_campaign_id,
                }
            )
        return batch_id


@pytest.fixture
def sleeps():
    calls: List[float] = []
    return calls


@pytest.fixture
def fake_sleep(sleeps):
    return sleeps.append
