from __future__ import annotations

import logging
import time
from typing import Callable, List, Sequence

from .config import PART_DELAY_S
from .dashboard import DashboardClient
from .models import BatchPlan
from .stores import TrackerStore

logger = logging.getLogger(__name__)


def submit_plans(
    plans: Sequence[BatchPlan],
    client: DashboardClient,
    tracker: TrackerStore,
    *,
    delay_s: float = PART_DELAY_S,
    sleep: Callable[[float], None] = time.sleep,
) -> List[str]:
    """
    Create one dashboard batch per plan, in order, and return the batch ids.

    The dashboard gets "<base> Part N" names for multi-part campaigns; the
    tracker's campaign_name is then reset to the base name so the pipeline
    still matches every part to the same Instantly campaign.
    """
    batch_ids: List[str] = []
    total = len(plans)

    for i, plan in enumerate(plans):
        batch_id = client.create_batch(plan)

        if plan.total_parts > 1:
            updated = tracker.set_batch_campaign_name(batch_id, plan.name)
            if updated == 0:
                logger.warning(
                    "  -> campaign_name correction for batchId %s matched no jobs_batch row; "
                    'it still needs campaign_name = "%s"',
                    batch_id,
                    plan.name,
                )

        logger.info(
            '  -> Created "%s" -> batchId %s (%d queries)',
            plan.display_name,
            batch_id,
            len(plan.queries),
        )
        batch_ids.append(batch_id)

        if i < total - 1:
            sleep(delay_s)

    return batch_ids
