"""
Payments API
"""
