"""
Plant Catalog API: versioned routers and schemas.
"""
