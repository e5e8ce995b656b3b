"""Award nominations: request validation and status changes.

Validation runs before any store call so that malformed input is reported
without side effects.
"""
