"""
Prefect flow that pre-fetches solar data into the record store.

Each place is handled by its own task, one after another, so the upstream
provider never sees more than one client at a time.

Run locally:
    python -m daylight_planner.flows.warm Berlin "Lisbon, Portugal"
"""

from __future__ import annotations

import sys
from datetime import date, timedelta
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NONE

from daylight_planner.config import get_settings
from daylight_planner.errors import ValidationError
from daylight_planner.facade import SolarDataService, build_service
from daylight_planner.validation import validate_request


@task(name="warm-place", cache_policy=NONE)
def warm_place(service: SolarDataService, place: str, start: date, end: date) -> dict[str, Any]:
    """Fetch one place's range; failures are reported, not raised."""
    result = service.get_solar_data(place, start, end)
    return {
        "place": place,
        "success": result.success,
        "source": str(result.source) if result.source else None,
        "days": len(result.data),
        "error": result.error,
    }


@flow(name="warm-cache", log_prints=True)
def warm_cache(places: list[str], start: date, end: date) -> dict[str, Any]:
    """
    Make sure every place has cached data for ``[start, end]``.

    Places that fail validation are skipped and listed in the summary.
    """
    service = build_service(get_settings())
    results: list[dict[str, Any]] = []
    skipped: list[dict[str, str]] = []

    for raw_place in places:
        try:
            place, first, last = validate_request(raw_place, start, end)
        except ValidationError as exc:
            print(f"Skipping {raw_place!r}: {exc}")
            skipped.append({"place": raw_place, "error": str(exc)})
            continue

        print(f"Warming {place} for {first}..{last}...")
        outcome = warm_place(service, place, first, last)
        if outcome["success"]:
            print(f"{place}: {outcome['days']} days ({outcome['source']})")
        else:
            print(f"{place}: failed - {outcome['error']}")
        results.append(outcome)

    return {
        "places": len(places),
        "warmed": sum(1 for r in results if r["success"]),
        "failed": [r for r in results if not r["success"]],
        "skipped": skipped,
    }


if __name__ == "__main__":
    today = date.today()
    summary = warm_cache(sys.argv[1:] or ["Berlin"], today, today + timedelta(days=6))
    print(f"Flow complete: {summary}")
