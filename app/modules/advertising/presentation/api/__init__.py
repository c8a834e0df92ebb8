"""
Advertising API
"""
