from __future__ import annotations

import json
from typing import Any, Dict, Optional

from prefect import flow, get_run_logger
from prefect.runtime import flow_run  # type: ignore

from autoorder.discord import send_discord_message
from autoorder.gmaps_autoorder import load_settings, run_autoorder


def _summary_line(counts: Dict[str, int]) -> str:
    return (
        f"GMaps auto-order: created {counts['created']} batch(es), "
        f"skipped {counts['skipped']} of {counts['found']} campaign(s)"
    )


@flow(name="gmaps-autoorder", persist_result=False)
def gmaps_autoorder(dry_run: Optional[bool] = None) -> Dict[str, Any]:
    """
    Prefect flow wrapper for the GMaps auto-order run.

    Delegates to `run_autoorder()` and emits JSON log lines for runbook checks.
    dry_run=None defers to the DRY_RUN env var. Any config, store or dashboard
    error is logged, alerted and fails the flow run.
    """
    logger = get_run_logger()
    run_id = getattr(flow_run, "id", None)
    run_id = str(run_id) if run_id else None

    try:
        settings = load_settings(dry_run=dry_run)
        logger.info(
            json.dumps(
                {
                    "event": "gmaps_autoorder_started",
                    "run_id": run_id,
                    "dry_run": settings.dry_run,
                    "dashboard_url": settings.dashboard_url,
                },
                sort_keys=True,
            )
        )
        counters = run_autoorder(settings)
    except Exception as e:
        logger.error(f"[AutoOrder] FATAL: {type(e).__name__}: {e}")
        send_discord_message(f"GMaps auto-order FAILED: {type(e).__name__}: {str(e)[:500]}")
        raise

    counts = counters.as_dict()
    logger.info(
        json.dumps(
            {
                "event": "gmaps_autoorder_run_complete",
                "run_id": run_id,
                "dry_run": settings.dry_run,
                **counts,
            },
            sort_keys=True,
        )
    )

    if counters.created > 0:
        send_discord_message(_summary_line(counts))

    return {
        "run_id": run_id,
        "dry_run": settings.dry_run,
        "counts": counts,
        "skip_reasons": list(counters.skip_reasons),
    }


if __name__ == "__main__":
    gmaps_autoorder()
