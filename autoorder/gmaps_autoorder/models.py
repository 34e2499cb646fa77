from dataclasses import dataclass, field
from typing import List, Tuple, Union


@dataclass(frozen=True)
class Campaign:
    """A registry campaign (instant_campaigns row). Read-only for the run."""
    id: int
    name: str


@dataclass(frozen=True)
class GeoTarget:
    city_name: str
    region_code: str   # state / province code

    @property
    def location(self) -> str:
        return f"{self.city_name}, {self.region_code}"


@dataclass
class BatchPlan:
    """
    One dashboard batch, planned in memory and discarded after submission.

    `name` is the campaign's base name. The dashboard is told `display_name`,
    which carries a " Part N" suffix only when the campaign spans several parts.
    """
    name: str
    queries: List[str]
    target_regions: List[str]
    source_campaign_id: int
    part_number: int = 1
    total_parts: int = 1

    @property
    def display_name(self) -> str:
        if self.total_parts > 1:
            return f"{self.name} Part {self.part_number}"
        return self.name


@dataclass(frozen=True)
class Skip:
    """Per-campaign data outcome: nothing to order, carry on with the next campaign."""
    reason: str


@dataclass(frozen=True)
class Planned:
    campaign: Campaign
    targets: Tuple[GeoTarget, ...]
    plans: Tuple[BatchPlan, ...]

    @property
    def query_count(self) -> int:
        return sum(len(p.queries) for p in self.plans)


CampaignOutcome = Union[Skip, Planned]


@dataclass
class RunCounters:
    found: int = 0
    created: int = 0          # individual batches submitted
    skipped: int = 0          # campaigns, not parts
    planned_parts: int = 0
    skip_reasons: List[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "found": self.found,
            "created": self.created,
            "skipped": self.skipped,
            "planned_parts": self.planned_parts,
        }
