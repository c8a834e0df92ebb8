"""
User Management Database Infrastructure: ORM models and repository implementations.
"""
