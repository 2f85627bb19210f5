"""
Configuration defaults, loading and validation for the train lookup.
"""
