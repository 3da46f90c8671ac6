"""
Text Ingestion

Modules:
- text_parser: Per-line tokenizer for pasted leaderboard text
- paste_mode: Whole-text recompute with last-good-state session
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "parse_line":
        from leaderboard.ingestion.text_parser import parse_line
        return parse_line
    if name == "ingest_leaderboard_text":
        from leaderboard.ingestion.paste_mode import ingest_leaderboard_text
        return ingest_leaderboard_text
    if name == "BoardSession":
        from leaderboard.ingestion.paste_mode import BoardSession
        return BoardSession
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
