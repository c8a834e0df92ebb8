"""
Plant Catalog Presentation Layer
"""
