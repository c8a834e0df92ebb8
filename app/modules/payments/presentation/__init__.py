"""
Payments Presentation Layer
"""
