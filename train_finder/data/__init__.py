"""
Schedule data module.

Canonical train records, decoding of the schedule file and validation of
lookup input.
"""
