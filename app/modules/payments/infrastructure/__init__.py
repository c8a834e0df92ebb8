"""
Payments Infrastructure Layer
"""
