"""
Plant Journal Database Infrastructure: ORM models and repository implementations.
"""
