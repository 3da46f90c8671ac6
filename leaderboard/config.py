"""
Central configuration for the tournament leaderboard.

All shared constants and static lookup tables are defined here
to avoid duplication and ensure consistency across modules.
"""

# --- Input Grammar ---
DATE_PREFIX = "Дата:"  # Leading line consumed into GameState.date

# --- Name Normalization ---
# Known misspellings, keyed by lower-case form
NAME_CORRECTIONS = {
    "макларн": "Макларен",
}

# Decorative suffix appended to the display name (case-insensitive key)
NAME_DECORATIONS = {
    "альф": "👽",
    "котик": "🐱",
    "макларен": "🏎️",
    "шляпа": "🎩",
    "яблоко": "🍏",
    "сахарок": "🍬",
}

# --- Ranking ---
# 0.0 = bit-exact total comparison for tie groups.
# A positive value groups totals within this absolute distance.
TIE_TOLERANCE = 0.0

# Discounts for the next game, assigned by sorted index (top 3 only)
DISCOUNTS = ("100%*", "50%*", "25%*")

# --- Display ---
SCORE_DISPLAY_DECIMALS = 1
PARSE_ERROR_MESSAGE = "Помилка розбору тексту: попередня таблиця збережена"

# --- Input Validation ---
MAX_INPUT_SIZE = 20_000  # Maximum input text size in characters

# --- Seed Board ---
DEFAULT_TITLE = "MafiaCartel"
DEFAULT_DATE = "Класика 04.02.25"
DEFAULT_FOOTNOTE = "* - знижка на наступну гру"

DEFAULT_BOARD_TEXT = """Дата: Класика 04.02.25
Альф 1.2 1.4 1.4 0
СексШоп 1 1.4 1.4 0
Котик 0 1 1 1.6
Макларен 1.4 0 1 1
Изи 1 1 1 0
ПокаТак 0 0 1.4 1.6
Шляпа 1.4 1.4 0 0
Яблоко 0 1.2 0 1.4
Жан 1.4 0 1.2 0
Сахарок 1 0 0 1"""

# --- Page Flourishes ---
RANK_ICONS = {
    1: {"icon": "🏆", "color": "#FBBF24", "label": "Champion"},
    2: {"icon": "🥈", "color": "#CBD5E1", "label": "Runner-up"},
    3: {"icon": "🥉", "color": "#F59E0B", "label": "Third Place"},
}
