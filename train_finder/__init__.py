"""
Train Finder - Scheduled Train Lookup

Finds scheduled trains between a departure and an arrival station, orders
them by price, arrival time or departure time and returns the top results.
"""

__version__ = "0.1.0"
__author__ = "Train Finder Team"
