"""
Plant Catalog Infrastructure Layer
"""
