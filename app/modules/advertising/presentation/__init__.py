"""
Advertising Presentation Layer
"""
