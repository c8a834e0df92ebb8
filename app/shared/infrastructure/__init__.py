"""
Infrastructure layer package for Leaflings.
Provides database connections, local image storage and external API clients.
"""
