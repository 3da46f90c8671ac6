"""
Tournament Leaderboard - Core Package

This package contains the core modules for:
- Text parsing into candidate player records (leaderboard.ingestion)
- Ranking and tie-aware position labels (leaderboard.standings)
- Shared configuration, models and utilities
"""

from leaderboard.config import *
