"""
Plant Matching Presentation Layer
"""
