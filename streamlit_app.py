import base64
import html

import streamlit as st
import plotly.graph_objects as go

from leaderboard.config import DEFAULT_BOARD_TEXT, PARSE_ERROR_MESSAGE, RANK_ICONS
from leaderboard.ingestion.paste_mode import BoardSession
from leaderboard.models import DISCOUNT, NAME, POSITION, FieldRef, HeaderField
from leaderboard.standings.builder import standings_to_dataframe
from leaderboard.utils import format_score

# --- Page Configuration ---
st.set_page_config(
    page_title="Tournament Leaderboard",
    page_icon="🏆",
    layout="centered",
    initial_sidebar_state="expanded"
)

# --- Design System ---
ACCENT_COLORS = {
    "gold": "#F59E0B",
    "gold_light": "#FBBF24",
    "discount": "#4ADE80",
    "muted": "#9CA3AF",
    "chart_palette": ["#FBBF24", "#CBD5E1", "#F59E0B", "#6B7280"],
}

CUSTOM_CSS = """
<style>
    .board {
        background: linear-gradient(180deg, rgba(17,24,39,0.95) 0%, rgba(31,41,55,0.95) 100%);
        border: 1px solid rgba(245,158,11,0.3);
        border-radius: 12px;
        padding: 1rem;
        max-width: 22rem;
        margin: 0 auto;
    }
    .board-title { color: #F59E0B; font-size: 1.5rem; font-weight: 700; font-style: italic; text-align: center; }
    .board-date { color: rgba(251,191,36,0.8); font-size: 0.875rem; font-weight: 700; font-style: italic; text-align: center; margin-bottom: 1rem; }
    .podium { display: flex; justify-content: space-between; align-items: flex-end; margin-bottom: 1.5rem; }
    .podium-slot { text-align: center; flex: 1; }
    .podium-icon { line-height: 1; }
    .podium-name { font-weight: 700; font-size: 0.875rem; }
    .podium-score { font-weight: 700; }
    .discount { color: #4ADE80; font-size: 0.875rem; font-weight: 700; }
    .row-card {
        display: flex; justify-content: space-between; align-items: center;
        padding: 0.75rem; margin-bottom: 0.5rem;
        background: rgba(0,0,0,0.2); border: 1px solid rgba(120,53,15,0.2); border-radius: 8px;
    }
    .row-left { display: flex; gap: 0.75rem; }
    .row-position { color: rgba(245,158,11,0.8); }
    .row-name { color: #D1D5DB; }
    .row-score { color: #9CA3AF; }
    .footnote { color: #4ADE80; font-size: 0.875rem; font-weight: 700; text-align: center; margin-top: 1rem; }
</style>
"""

# Podium is laid out 2nd - 1st - 3rd, with the icon shrinking by place
PODIUM_ORDER = (1, 0, 2)
PODIUM_ICON_SIZES = {1: "3.5rem", 2: "2.75rem", 3: "2rem"}


def generate_podium_html(players):
    """
    Generate HTML for the top-3 podium.
    Slots without a player (fewer than 3 entries) are left empty.
    """
    slots = []
    for idx in PODIUM_ORDER:
        place = idx + 1
        if idx >= len(players):
            slots.append('<div class="podium-slot"></div>')
            continue

        p = players[idx]
        info = RANK_ICONS[place]
        icon = f'<div class="podium-icon" style="font-size:{PODIUM_ICON_SIZES[place]};">{info["icon"]}</div>'
        name = f'<div class="podium-name" style="color:{info["color"]};">{html.escape(p.name)}</div>'
        score = f'<div class="podium-score" style="color:{info["color"]};">{format_score(p.total)}</div>'
        discount = f'<div class="discount">-{html.escape(p.discount)}</div>' if p.discount else ""
        lift = "margin-top:-1rem;" if place == 1 else ""
        slots.append(f'<div class="podium-slot" style="{lift}">{icon}{name}{score}{discount}</div>')

    return f'<div class="podium">{"".join(slots)}</div>'


def generate_row_cards(players, start=3):
    """Generate HTML cards for players below the podium."""
    cards = []
    for p in players[start:]:
        cards.append(
            '<div class="row-card"><div class="row-left">'
            f'<span class="row-position">{html.escape(p.position or "")}</span>'
            f'<span class="row-name">{html.escape(p.name)}</span>'
            f'</div><span class="row-score">{format_score(p.total)}</span></div>'
        )
    return "".join(cards)


def generate_board_html(session):
    """Full board: header, podium, remaining rows, footnote."""
    state = session.state
    return (
        '<div class="board">'
        f'<div class="board-title">{html.escape(state.title)}</div>'
        f'<div class="board-date">{html.escape(state.date)}</div>'
        f'{generate_podium_html(session.players)}'
        f'{generate_row_cards(session.players)}'
        f'<div class="footnote">{html.escape(state.footnote)}</div>'
        '</div>'
    )


def create_download_link(data: str, filename: str, label: str) -> str:
    """
    Create a styled HTML download link.

    Args:
        data: The CSV string data to download
        filename: The filename for the download
        label: The link label text

    Returns:
        HTML string with styled download link
    """
    b64 = base64.b64encode(data.encode("utf-8")).decode()
    style = (
        "display:inline-block;padding:0.4rem 0.9rem;border-radius:8px;"
        "border:1px solid rgba(245,158,11,0.4);color:#F59E0B;text-decoration:none;font-weight:600;"
    )
    return f'<a href="data:text/csv;base64,{b64}" download="{filename}" style="{style}">{label}</a>'


def build_totals_chart(df):
    """Horizontal bar chart of totals, best player on top."""
    colors = [
        ACCENT_COLORS["chart_palette"][min(i, 3)] for i in range(len(df))
    ]
    fig = go.Figure(go.Bar(
        x=df['total'],
        y=df['player_name'],
        orientation='h',
        marker_color=colors,
        text=[format_score(t) for t in df['total']],
        textposition='outside',
        hovertemplate="%{y}: %{x:.1f}<extra></extra>",
    ))
    fig.update_layout(
        yaxis=dict(autorange="reversed"),
        margin=dict(l=10, r=10, t=10, b=10),
        height=40 * len(df) + 40,
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
        showlegend=False,
    )
    return fig


def get_session():
    """One BoardSession per browser session, seeded with the sample board."""
    if "board_session" not in st.session_state:
        session = BoardSession()
        session.apply_text(DEFAULT_BOARD_TEXT)
        st.session_state.board_session = session
    return st.session_state.board_session


def render_edit_panel(session):
    """Inline edits for one player field or a header field."""
    with st.expander("✏️ Edit board"):
        header_field = st.selectbox("Header field", options=list(HeaderField), format_func=lambda f: f.value)
        header_value = st.text_input("Header text", value=getattr(session.state, header_field.value))
        if st.button("Apply header edit"):
            session.edit_header(header_field, header_value)
            st.rerun()

        if not session.players:
            return

        st.markdown("---")
        row = st.selectbox(
            "Player",
            options=range(len(session.players)),
            format_func=lambda i: f"{session.players[i].position} {session.players[i].name}"
        )
        player = session.players[row]
        fields = [NAME, POSITION]
        if player.discount:
            fields.append(DISCOUNT)
        fields.extend(FieldRef.score_at(i) for i in range(len(player.scores)))

        field = st.selectbox("Field", options=fields, format_func=lambda f: f.label)
        value = st.text_input("New value", key=f"edit_{row}_{field.label}")
        if st.button("Apply player edit"):
            if session.edit_player(row, field, value):
                st.rerun()
            else:
                st.error(session.last_error)


# --- Main App ---
def main():
    st.html(CUSTOM_CSS)

    session = get_session()

    # --- Sidebar ---
    with st.sidebar:
        st.header("📝 Results")
        text = st.text_area(
            "Leaderboard text",
            value=session.text or DEFAULT_BOARD_TEXT,
            height=320,
            label_visibility="collapsed",
            help="One player per line: name followed by scores. Optional first line 'Дата: ...'."
        )
        if text != session.text and not session.apply_text(text):
            st.error(PARSE_ERROR_MESSAGE)

        st.markdown("---")
        st.header("📥 Export Data")
        df = standings_to_dataframe(session.players)
        st.markdown(
            create_download_link(df.to_csv(index=False), "standings.csv", "Download Standings CSV"),
            unsafe_allow_html=True
        )

    st.html(generate_board_html(session))

    render_edit_panel(session)

    if not df.empty:
        st.plotly_chart(build_totals_chart(df), use_container_width=True, config={'displayModeBar': False, 'scrollZoom': False})


if __name__ == "__main__":
    main()
