"""
Plant Journal API: versioned routers and schemas.
"""
