"""External data source integrations.

Each subdirectory is one upstream service with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, status codes
    ├── models.py         # Dataclasses for API results
    └── {feature}.py      # The client class for the endpoint

Clients take an explicit ``services.http.HttpConfig`` and never raise for
upstream problems: failures are returned as result values so callers can
collect them.
"""
