"""
Standings

Modules:
- builder: Score padding, ranking and tie-aware position labels
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "build_standings":
        from leaderboard.standings.builder import build_standings
        return build_standings
    if name == "standings_to_dataframe":
        from leaderboard.standings.builder import standings_to_dataframe
        return standings_to_dataframe
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
