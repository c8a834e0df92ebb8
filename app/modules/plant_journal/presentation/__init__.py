"""
Plant Journal Presentation Layer
"""
