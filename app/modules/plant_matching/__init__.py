"""
Plant matching: rule-based compatibility between a user's care capabilities and plant needs.
"""
