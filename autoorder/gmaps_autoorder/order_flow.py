"""
Core auto-order run for GMaps campaigns.

Prefect-free on purpose; Prefect wrapper lives in flows/gmaps_autoorder_flow.py.

Per campaign:
    PENDING -> has batches?  -> SKIPPED
            -> no cities?    -> SKIPPED
            -> PLANNED -> SUBMITTING -> DONE

Only the two skip cases are contained per campaign. Store and dashboard
errors propagate and end the run; batches already created stay in place and
the existing-batch check keeps a re-run from ordering them twice.

Two overlapping runs can both pass the existing-batch check for the same
campaign. There is no lock or uniqueness constraint behind it.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from autoorder.db import make_engine

from .config import BATCH_SIZE, CONNECT_TIMEOUT_S, PART_DELAY_S, Settings
from .dashboard import DashboardClient
from .models import Campaign, CampaignOutcome, Planned, RunCounters, Skip
from .planner import plan_batches
from .stores import RegistryStore, TrackerStore
from .submitter import submit_plans
from .targets import resolve_targets

logger = logging.getLogger(__name__)


def plan_campaign(
    campaign: Campaign,
    registry: RegistryStore,
    tracker: TrackerStore,
    *,
    batch_size: int = BATCH_SIZE,
) -> CampaignOutcome:
    existing = tracker.count_existing_batches(campaign)
    if existing > 0:
        return Skip(f"already has {existing} batch(es)")

    targets = resolve_targets(registry, campaign.id)
    if not targets:
        return Skip("no cities configured")

    plans = plan_batches(campaign, targets, batch_size=batch_size)
    return Planned(campaign=campaign, targets=tuple(targets), plans=tuple(plans))


def process_campaigns(
    registry: RegistryStore,
    tracker: TrackerStore,
    client: DashboardClient,
    *,
    dry_run: bool = False,
    delay_s: float = PART_DELAY_S,
    sleep: Callable[[float], None] = time.sleep,
) -> RunCounters:
    counters = RunCounters()

    campaigns = registry.fetch_active_campaigns()
    counters.found = len(campaigns)
    logger.info("[AutoOrder] Found %d active GMaps campaign(s)", len(campaigns))

    for campaign in campaigns:
        logger.info('[AutoOrder] Checking: "%s" (ID %s)', campaign.name, campaign.id)

        outcome = plan_campaign(campaign, registry, tracker)

        if isinstance(outcome, Skip):
            logger.info("  -> Skipping: %s", outcome.reason)
            counters.skipped += 1
            counters.skip_reasons.append(f"{campaign.id}: {outcome.reason}")
            continue

        logger.info(
            "  -> %d city/cities: %s",
            len(outcome.targets),
            " | ".join(t.location for t in outcome.targets),
        )
        logger.info(
            "  -> %d queries -> %d batch part(s) | states: %s",
            outcome.query_count,
            len(outcome.plans),
            ",".join(outcome.plans[0].target_regions),
        )
        counters.planned_parts += len(outcome.plans)

        if dry_run:
            logger.info("  -> DRY RUN: skipping batch creation")
            continue

        batch_ids = submit_plans(outcome.plans, client, tracker, delay_s=delay_s, sleep=sleep)
        counters.created += len(batch_ids)

    logger.info(
        "[AutoOrder] Done. Created %d batch(es), skipped %d campaign(s).",
        counters.created,
        counters.skipped,
    )
    return counters


def run_autoorder(
    settings: Settings,
    *,
    engine_factory: Callable = make_engine,
    client: Optional[DashboardClient] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> RunCounters:
    """
    Run one reconciliation pass. Both engines are disposed exactly once,
    whichever stage fails.
    """
    if settings.dry_run:
        logger.info("[AutoOrder] DRY_RUN enabled: planning only, no batches will be created")

    recycling = engine_factory(
        settings.recycling_db_url,
        ssl=settings.recycling_db_ssl,
        connect_timeout_s=CONNECT_TIMEOUT_S,
    )
    gmaps = None
    try:
        gmaps = engine_factory(
            settings.gmaps_db_url,
            ssl=settings.gmaps_db_ssl,
            connect_timeout_s=CONNECT_TIMEOUT_S,
        )
        return process_campaigns(
            RegistryStore(recycling),
            TrackerStore(gmaps),
            client or DashboardClient(settings.dashboard_url),
            dry_run=settings.dry_run,
            sleep=sleep,
        )
    finally:
        recycling.dispose()
        if gmaps is not None:
            gmaps.dispose()
