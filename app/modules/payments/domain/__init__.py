"""
Payments Domain Layer
"""
