"""
Payments Database Infrastructure: ORM model and repository implementation.
"""
