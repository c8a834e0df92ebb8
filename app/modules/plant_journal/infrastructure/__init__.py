"""
Plant Journal Infrastructure Layer
"""
