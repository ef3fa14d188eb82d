"""
Prefect flows.

Flows:
- warm: pre-fetch a date range for a list of places so later requests are
  served from the cache

Usage (local):
    python -m daylight_planner.flows.warm "Berlin" "Lisbon, Portugal"

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    daylight-planner warm 2024-01-01 2024-03-31 Berlin Lisbon
"""
