from __future__ import annotations

import logging
import os

import streamlit as st

from dotenv import load_dotenv
load_dotenv(override=False)  # Load .env into process env

# --- Core game imports ---
from src.core.engine import GameEngine
from src.core.state import GameState
from src.core.wordlist import WordSourceError, load_word_source

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# =======================================
# Session-state helpers & game management
# =======================================

def _ensure_engine() -> GameEngine:
    """
    Return the engine owned by this browser session, creating it on first use.

    Raises
    ------
    WordSourceError
        If the configured word catalog cannot support a game.
    """
    engine = st.session_state.get("engine")
    if not isinstance(engine, GameEngine):
        engine = GameEngine(load_word_source())
        st.session_state["engine"] = engine
        logger.info("Created game engine for new session")
    return engine


def _submit(engine: GameEngine, text: str) -> None:
    engine.set_pending_guess((text or "").strip())
    engine.submit_guess()


# =========
# The App
# =========

def main() -> None:
    st.set_page_config(page_title="Unscramble", page_icon="🔤", layout="centered")
    st.title("🔤 Unscramble")

    try:
        engine = _ensure_engine()
    except WordSourceError as exc:
        st.error(f"Word list configuration error: {exc}")
        st.stop()

    # ---- Sidebar ----
    with st.sidebar:
        st.header("Game")
        if st.button("🔁 New Game", use_container_width=True):
            engine.reset()
            st.rerun()
        st.caption(f"{engine.max_rounds} words per game, {engine.score_increase} points each.")

    game: GameState = engine.state

    # ---- Board ----
    c1, c2 = st.columns(2)
    c1.metric("Word", f"{game.round_count} / {engine.max_rounds}")
    c2.metric("Score", game.score)
    st.progress(game.round_count / engine.max_rounds)

    st.markdown(f"## `{game.scrambled_word}`")
    st.caption("Unscramble the word using all the letters.")

    if game.guess_was_wrong:
        st.warning("Wrong guess! Try again.")

    # ---- Game over ----
    if game.is_game_over:
        st.success(f"🎉 Congratulations! You scored **{game.score}**.")
        st.button("Play again", on_click=engine.reset)
        return

    # ---- Move input ----
    with st.form("guess_form", clear_on_submit=True):
        guess_inp = st.text_input("Enter your word:", max_chars=32)
        submitted = st.form_submit_button("Submit")
        if submitted:
            _submit(engine, guess_inp)
            st.rerun()

    if st.button("Skip"):
        engine.skip_word()
        st.rerun()


if __name__ == "__main__":
    main()
