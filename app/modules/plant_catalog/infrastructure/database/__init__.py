"""
Plant Catalog Database Infrastructure: ORM models and repository implementations.
"""
