"""Page-level tests with Streamlit's AppTest. None of these trigger a fetch."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from finfixed.app.logic.cards import EMPTY_STATE_COMPARE, EMPTY_STATE_SEARCH
from finfixed.app.logic.dashboard import MSG_DUPLICATE_SYMBOL

PAGE = Path(__file__).parents[1] / "finfixed" / "app" / "00_Dashboard.py"


def button(at: AppTest, label: str):
    return next(b for b in at.button if b.label == label)


@pytest.fixture
def app() -> AppTest:
    at = AppTest.from_file(str(PAGE), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_initial_render_shows_search_empty_state(app: AppTest) -> None:
    assert app.title[0].value == "📈 FinFixed"
    assert [info.value for info in app.info] == [EMPTY_STATE_SEARCH]
    assert "Search" in [b.label for b in app.button]
    assert app.toggle[0].value is False


def test_compare_mode_switches_labels_and_empty_state(app: AppTest) -> None:
    app.toggle[0].set_value(True).run()

    assert not app.exception
    assert [info.value for info in app.info] == [EMPTY_STATE_COMPARE]
    assert "Add" in [b.label for b in app.button]


def test_adding_compare_symbols_shows_chips(app: AppTest) -> None:
    app.toggle[0].set_value(True).run()

    app.text_input[0].input("aapl")
    button(app, "Add").click().run()
    app.text_input[0].input("msft")
    button(app, "Add").click().run()

    assert not app.exception
    labels = [b.label for b in app.button]
    assert "✕ AAPL" in labels
    assert "✕ MSFT" in labels
    assert "Compare Now" in labels
    assert "Clear" in labels
    # accepted input is cleared from the box
    assert app.text_input[0].value == ""


def test_duplicate_symbol_shows_warning(app: AppTest) -> None:
    app.toggle[0].set_value(True).run()

    for _ in range(2):
        app.text_input[0].input("aapl")
        button(app, "Add").click().run()

    assert [w.value for w in app.warning] == [MSG_DUPLICATE_SYMBOL]
    assert app.text_input[0].value == "aapl"


def test_clear_removes_chips(app: AppTest) -> None:
    app.toggle[0].set_value(True).run()
    app.text_input[0].input("aapl")
    button(app, "Add").click().run()

    button(app, "Clear").click().run()

    assert "✕ AAPL" not in [b.label for b in app.button]
