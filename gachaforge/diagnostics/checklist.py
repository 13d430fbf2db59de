"""Automated checks to highlight balancing issues."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.banners import GachaBanner
from ..domain.items import ItemCatalog
from ..domain.rates import soft_pity_start
from ..validators import validate_banner


@dataclass(slots=True)
class ChecklistIssue:
    severity: str
    message: str


def run_checklist(banner: GachaBanner, catalog: ItemCatalog) -> list[ChecklistIssue]:
    issues = [ChecklistIssue("error", message) for message in validate_banner(banner, catalog)]

    if not banner.featured_items:
        issues.append(ChecklistIssue("warning", f"Banner {banner.banner_id} has no featured items."))
    elif banner.rate_up_multiplier <= 1:
        issues.append(
            ChecklistIssue(
                "warning",
                f"Banner {banner.banner_id} rate-up multiplier {banner.rate_up_multiplier} "
                "does not favour featured items.",
            )
        )

    if banner.rates.legendary >= banner.soft_pity_peak:
        issues.append(
            ChecklistIssue(
                "warning",
                f"Banner {banner.banner_id} base legendary rate is already above the soft pity peak.",
            )
        )

    start = soft_pity_start(banner.pity_counter, banner.soft_pity_start_ratio)
    if start >= banner.pity_counter - 1:
        issues.append(
            ChecklistIssue(
                "warning",
                f"Banner {banner.banner_id} pity counter {banner.pity_counter} leaves no soft pity window.",
            )
        )

    return issues
