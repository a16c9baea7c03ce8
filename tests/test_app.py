"""
Smoke tests for the Streamlit showcase using the in-process AppTest runner.
"""

import importlib

import pytest
from streamlit.testing.v1 import AppTest

from pagination_showcase import config
from pagination_showcase.config import ELLIPSIS_LABEL


@pytest.fixture
def app(app_path):
    """Run the showcase once and return the test harness."""
    at = AppTest.from_file(str(app_path), default_timeout=30)
    at.run()
    return at


class TestShowcaseRender:
    """Initial render."""

    def test_renders_without_exception(self, app):
        assert not app.exception

    def test_navbar_shows_default_skin(self, app):
        assert any("Skin: Default" in block.value for block in app.markdown)

    def test_example_pagers_gate_previous_and_next(self, app):
        assert app.button(key="example_1_prev").disabled is True
        assert app.button(key="example_1_next").disabled is False
        assert app.button(key="example_2_next").disabled is True

    def test_example_with_first_last_buttons(self, app):
        assert app.button(key="example_3_first").disabled is False
        assert app.button(key="example_3_last").disabled is False

    def test_ellipsis_marker_relies_on_skin_css(self, app):
        markers = [block.value for block in app.markdown if 'class="pagination-ellipsis"' in block.value]

        assert markers
        assert all(marker == f'<div class="pagination-ellipsis">{ELLIPSIS_LABEL}</div>' for marker in markers)


class TestShowcaseInteraction:
    """Navigation and skin switching."""

    def test_clicking_a_page_moves_the_playground(self, app):
        app.button(key="playground_page_2").click().run()

        assert not app.exception
        assert app.session_state["playground_page"] == 2

    def test_next_button_moves_the_table_page(self, app):
        app.button(key="table_next").click().run()

        assert not app.exception
        assert app.session_state["table_page"] == 2

    def test_switching_skin_updates_navbar(self, app):
        app.selectbox(key="active_skin").set_value("editorial").run()

        assert not app.exception
        assert any("Skin: Editorial" in block.value for block in app.markdown)

    def test_empty_playground_shows_no_pager(self, app):
        app.number_input(key="playground_total_pages").set_value(0).run()

        assert not app.exception
        assert any(block.value == "No pages to show." for block in app.caption)
        assert app.session_state["playground_page"] == 1


@pytest.fixture
def reload_config(monkeypatch):
    """Reload settings after the test changes environment variables."""

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        importlib.reload(config)

    yield _reload
    monkeypatch.undo()
    importlib.reload(config)


class TestShowcaseSettings:
    """Environment overrides."""

    def test_unusable_sibling_count_falls_back_to_one(self, app_path, reload_config):
        reload_config(SHOWCASE_SIBLING_COUNT="two")
        at = AppTest.from_file(str(app_path), default_timeout=30).run()

        assert config.SHOWCASE_SIBLING_COUNT == "two"
        assert not at.exception
        assert at.slider(key="playground_sibling_count").value == 1

    def test_sibling_count_override_is_applied(self, app_path, reload_config):
        reload_config(SHOWCASE_SIBLING_COUNT="2")
        at = AppTest.from_file(str(app_path), default_timeout=30).run()

        assert not at.exception
        assert at.slider(key="playground_sibling_count").value == 2

    def test_unknown_log_level_does_not_break_startup(self, app_path, reload_config):
        reload_config(SHOWCASE_LOG_LEVEL="chatty")
        at = AppTest.from_file(str(app_path), default_timeout=30).run()

        assert not at.exception
