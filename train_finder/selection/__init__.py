"""
Train selection module.

Filters schedule records by station pair and ranks the matches.
"""
from .ranker import rank_trains
from .selector import select_trains

__all__ = ["rank_trains", "select_trains"]
