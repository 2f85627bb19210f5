"""
Result delivery module.

Renders ranked trains for the console.
"""
