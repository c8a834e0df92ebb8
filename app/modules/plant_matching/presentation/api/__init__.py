"""
Plant Matching API: the user/plant compatibility endpoint.
"""
