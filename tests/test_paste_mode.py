"""
Tests for whole-text recompute, canonical text and the board session.
"""

import pytest

from leaderboard.config import DEFAULT_BOARD_TEXT, MAX_INPUT_SIZE, PARSE_ERROR_MESSAGE
from leaderboard.exceptions import EmptyInputError, InputTooLargeError, NumberFormatError
from leaderboard.ingestion.paste_mode import (
    BoardSession,
    ingest_leaderboard_text,
    parse_leaderboard_text,
    serialize_standings,
)
from leaderboard.models import NAME, FieldRef, HeaderField


class TestParseLeaderboardText:
    """Tests for parse_leaderboard_text function."""

    def test_extracts_date_line(self):
        date, candidates = parse_leaderboard_text("Дата: Класика 04.02.25\nАльф 1 2\nИзи 3")
        assert date == "Класика 04.02.25"
        assert [c.base_name for c in candidates] == ["Альф", "Изи"]

    def test_without_date(self):
        date, candidates = parse_leaderboard_text("Альф 1 2")
        assert date is None
        assert len(candidates) == 1

    def test_empty_text_raises(self):
        with pytest.raises(EmptyInputError):
            parse_leaderboard_text("")

    def test_date_only_raises(self):
        with pytest.raises(EmptyInputError):
            parse_leaderboard_text("Дата: 04.02.25\n\n   \n")

    def test_no_valid_player_lines_raises(self):
        with pytest.raises(EmptyInputError):
            parse_leaderboard_text("просто текст\nще рядок")

    def test_malformed_number_raises(self):
        with pytest.raises(NumberFormatError):
            parse_leaderboard_text("Альф 1 2\nИзи 1.2.3")

    def test_oversized_input_raises(self):
        with pytest.raises(InputTooLargeError):
            parse_leaderboard_text("Альф 1\n" * (MAX_INPUT_SIZE // 7 + 1))


class TestIngestLeaderboardText:
    """Tests for ingest_leaderboard_text function."""

    def test_success_result(self):
        result = ingest_leaderboard_text("Альф 1.2 1.4 1.4 0\nКотик 0 1 1 1.6")
        assert result['success'] is True
        assert result['error'] is None
        assert result['rows'] == 2
        assert [p.position for p in result['players']] == ["1", "2"]

    def test_date_excluded_from_players(self):
        result = ingest_leaderboard_text("Дата: Класика 04.02.25\nИзи 1 1 1 0\nПокаТак 0 0 1.4 1.6")
        assert result['date'] == "Класика 04.02.25"
        assert [p.name for p in result['players']] == ["Изи", "ПокаТак"]
        assert [p.position for p in result['players']] == ["1-2", "1-2"]

    def test_discounts_attached(self):
        result = ingest_leaderboard_text("a 4\nb 3\nc 2\nd 1")
        assert [p.discount for p in result['players']] == ["100%*", "50%*", "25%*", None]

    def test_failure_is_captured(self):
        result = ingest_leaderboard_text("")
        assert result['success'] is False
        assert result['players'] == []
        assert result['error'] == PARSE_ERROR_MESSAGE

    def test_number_error_is_captured(self):
        result = ingest_leaderboard_text("Альф 1 -")
        assert result['success'] is False
        assert result['error'] == PARSE_ERROR_MESSAGE

    def test_infinite_scores_rejected(self):
        huge = "9" * 400
        result = ingest_leaderboard_text(f"a {huge} - {huge}\nb 1\nc 2")
        assert result['success'] is False
        assert result['players'] == []

    def test_default_board(self):
        result = ingest_leaderboard_text(DEFAULT_BOARD_TEXT)
        assert result['date'] == "Класика 04.02.25"
        assert [p.base_name for p in result['players']] == [
            "Альф", "СексШоп", "Котик", "Макларен", "Изи",
            "ПокаТак", "Шляпа", "Яблоко", "Жан", "Сахарок",
        ]
        assert [p.position for p in result['players']] == [
            "1", "2", "3", "4", "5-6", "5-6", "7", "8-9", "8-9", "10",
        ]

    def test_stable_across_runs(self):
        first = ingest_leaderboard_text(DEFAULT_BOARD_TEXT)['players']
        second = ingest_leaderboard_text(DEFAULT_BOARD_TEXT)['players']
        assert first == second


class TestSerializeStandings:
    """Tests for canonical text reconstruction."""

    def test_format(self):
        result = ingest_leaderboard_text("Котик 1,5 - 2\nИзи 3")
        assert serialize_standings(result['players']) == "Изи 3 0\nКотик 1.5 -2"

    def test_includes_date(self):
        result = ingest_leaderboard_text("Изи 3")
        assert serialize_standings(result['players'], "04.02.25") == "Дата: 04.02.25\nИзи 3"

    @pytest.mark.parametrize("text", [
        DEFAULT_BOARD_TEXT,
        "5. Жан 1,4 0 1,2 0 = коментар\nМакларн 1 - 1,5\n2 Изи 0.1 0.2 0.3",
    ])
    def test_reparse_gives_same_scores_and_names(self, text):
        first = ingest_leaderboard_text(text)
        second = ingest_leaderboard_text(serialize_standings(first['players'], first['date']))

        assert second['success'] is True
        assert second['date'] == first['date']
        assert [(p.base_name, p.scores) for p in second['players']] == \
            [(p.base_name, p.scores) for p in first['players']]
        assert [p.position for p in second['players']] == [p.position for p in first['players']]


class TestBoardSession:
    """Tests for the last-good-state session."""

    def test_initial_state(self):
        session = BoardSession()
        assert session.players == []
        assert session.state.title == "MafiaCartel"
        assert session.state.footnote == "* - знижка на наступну гру"

    def test_apply_text_replaces_snapshots(self):
        session = BoardSession()
        assert session.apply_text("Дата: 05.02.25\nИзи 1\nЖан 2") is True
        assert session.text == "Дата: 05.02.25\nИзи 1\nЖан 2"
        assert [p.name for p in session.players] == ["Жан", "Изи"]
        assert session.state.date == "05.02.25"
        assert session.last_error is None

    def test_text_without_date_keeps_date(self):
        session = BoardSession(date="Класика 04.02.25")
        session.apply_text("Изи 1")
        assert session.state.date == "Класика 04.02.25"

    @pytest.mark.parametrize("bad_text", ["", "Дата: 06.02.25", "Изи 1.2.3", "Изи 1 -", "тільки імена"])
    def test_failure_keeps_previous_standings(self, bad_text):
        session = BoardSession()
        session.apply_text("Дата: 05.02.25\nИзи 1\nЖан 2")
        players, text, state = session.players, session.text, session.state

        assert session.apply_text(bad_text) is False
        assert session.players is players
        assert session.text == text
        assert session.state == state
        assert session.last_error == PARSE_ERROR_MESSAGE

    def test_recovers_after_failure(self):
        session = BoardSession()
        session.apply_text("Изи 1.2.3")
        assert session.apply_text("Изи 1") is True
        assert session.last_error is None

    def test_edit_player(self):
        session = BoardSession()
        session.apply_text("Изи 1\nЖан 2")
        assert session.edit_player(1, NAME, "Изи Второй") is True
        assert session.players[1].name == "Изи Второй"

    def test_rejected_edit_keeps_players(self):
        session = BoardSession()
        session.apply_text("Изи 1\nЖан 2")
        players = session.players
        assert session.edit_player(0, FieldRef.score_at(5), "3") is False
        assert session.players is players
        assert session.last_error is not None

    def test_renamed_player_in_canonical_text(self):
        session = BoardSession(date="Класика 04.02.25")
        session.apply_text("Изи 1 2")
        session.edit_player(0, NAME, "Жан")
        assert session.canonical_text() == "Дата: Класика 04.02.25\nЖан 1 2"

    def test_edit_header(self):
        session = BoardSession()
        session.edit_header(HeaderField.TITLE, "  Турнір  ")
        assert session.state.title == "Турнір"

    def test_canonical_text(self):
        session = BoardSession(date="")
        session.apply_text("Дата: 05.02.25\nКотик 1 2")
        assert session.canonical_text() == "Дата: 05.02.25\nКотик 1 2"
