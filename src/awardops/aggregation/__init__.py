"""Aggregation module for award summaries.

Reduces already-fetched award, participant and team lists into display-ready
payloads. Every builder is a pure function of its inputs.
- Forbidden: store calls, caching between requests
"""
