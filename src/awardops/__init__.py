"""Award operations dashboard service.

Reads ceremonies, awards, categories, participants and teams from an external
Directus-style content store, aggregates them into display-ready summaries and
exposes nomination/approval operations over a JSON API.
"""

__version__ = "0.1.0"
