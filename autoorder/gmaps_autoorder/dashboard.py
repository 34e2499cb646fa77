"""
Client for the GMaps dashboard batch API.

POST {DASHBOARD_URL}/api/batches
    {"name", "queries", "autoImport", "targetStates", "leadRecyclingCampaignId"}
-> {"batchId": ...}

Any failure raises DashboardError; there are no retries. Re-running the job
is the recovery path.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from .config import DEFAULT_DASHBOARD_URL, REQUEST_TIMEOUT_S
from .errors import DashboardError
from .models import BatchPlan

logger = logging.getLogger(__name__)


def batch_payload(plan: BatchPlan) -> Dict[str, Any]:
    return {
        "name": plan.display_name,
        "queries": list(plan.queries),
        "autoImport": True,
        "targetStates": list(plan.target_regions),
        "leadRecyclingCampaignId": plan.source_campaign_id,
    }


class DashboardClient:
    def __init__(self, base_url: str = DEFAULT_DASHBOARD_URL, timeout_s: float = REQUEST_TIMEOUT_S) -> None:
        self.base_url = (base_url or DEFAULT_DASHBOARD_URL).rstrip("/")
        self.timeout_s = timeout_s

    @property
    def batches_url(self) -> str:
        return f"{self.base_url}/api/batches"

    def create_batch(self, plan: BatchPlan) -> str:
        """Submit one part and return the dashboard's batchId."""
        payload = batch_payload(plan)
        try:
            resp = requests.post(self.batches_url, json=payload, timeout=self.timeout_s)
        except requests.exceptions.RequestException as e:
            raise DashboardError(f"POST {self.batches_url} failed: {type(e).__name__}: {e}") from e

        if resp.status_code >= 400:
            raise DashboardError(
                f"POST {self.batches_url} returned {resp.status_code}: {resp.text[:200]}"
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise DashboardError(f"dashboard returned non-JSON body: {resp.text[:200]!r}") from e

        batch_id = data.get("batchId") if isinstance(data, dict) else None
        if batch_id is None or str(batch_id).strip() == "":
            raise DashboardError(f"dashboard response has no batchId: {str(data)[:200]}")

        logger.debug("dashboard accepted %r -> batchId %s", plan.display_name, batch_id)
        return str(batch_id)
