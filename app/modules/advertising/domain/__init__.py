"""
Advertising Domain Layer
"""
