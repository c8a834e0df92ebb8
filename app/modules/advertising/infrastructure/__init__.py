"""
Advertising Infrastructure Layer
"""
