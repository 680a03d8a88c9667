"""Adapters – HTTP client and flag data sources."""
