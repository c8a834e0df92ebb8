"""
User Management Infrastructure Layer
"""
