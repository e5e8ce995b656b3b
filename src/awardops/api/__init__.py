"""API module for award operations.

API layer:
- Validates inputs, reads/writes through the store repository
- Returns payloads for the dashboard UI
- Forbidden: aggregation logic beyond calling the builders
"""
