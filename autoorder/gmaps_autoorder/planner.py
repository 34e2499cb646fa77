from __future__ import annotations

import math
from typing import List, Sequence

from .categories import CATEGORIES
from .config import BATCH_SIZE
from .models import BatchPlan, Campaign, GeoTarget


def build_queries(targets: Sequence[GeoTarget], categories: Sequence[str] = CATEGORIES) -> List[str]:
    """Every category for the first target, then every category for the next, and so on."""
    queries: List[str] = []
    for target in targets:
        location = target.location
        for cat in categories:
            queries.append(f"{cat} in {location}")
    return queries


def target_regions(targets: Sequence[GeoTarget]) -> List[str]:
    """Distinct region codes in first-seen order."""
    regions: List[str] = []
    for target in targets:
        if target.region_code not in regions:
            regions.append(target.region_code)
    return regions


def partition(queries: Sequence[str], size: int = BATCH_SIZE) -> List[List[str]]:
    if size <= 0:
        raise ValueError("partition size must be positive")
    total_parts = math.ceil(len(queries) / size)
    return [list(queries[i * size:(i + 1) * size]) for i in range(total_parts)]


def plan_batches(
    campaign: Campaign,
    targets: Sequence[GeoTarget],
    *,
    categories: Sequence[str] = CATEGORIES,
    batch_size: int = BATCH_SIZE,
) -> List[BatchPlan]:
    """
    Expand (category x target) for one campaign and split it into parts of at
    most batch_size queries. All parts share the campaign's base name.
    """
    queries = build_queries(targets, categories)
    regions = target_regions(targets)
    chunks = partition(queries, batch_size)

    return [
        BatchPlan(
            name=campaign.name,
            queries=chunk,
            target_regions=list(regions),
            source_campaign_id=campaign.id,
            part_number=i + 1,
            total_parts=len(chunks),
        )
        for i, chunk in enumerate(chunks)
    ]
