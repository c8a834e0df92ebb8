"""
Database infrastructure: engine, sessions and the generic repository.
"""
