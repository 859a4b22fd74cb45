"""Score Gateway: validates leaderboard submissions and forwards them to Airtable."""

__version__ = "0.1.0"
