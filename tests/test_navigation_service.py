"""
Unit tests for pagination navigation rules.
"""

import pytest

from pagination_showcase.services.navigation_service import NavigationState, navigation_state, resolve_page_change
from pagination_showcase.services.page_range import build_page_range
from pagination_showcase.services.validation_service import coerce_pagination_request


def _state(current_page, total_pages, show_first_last=False):
    request = coerce_pagination_request(current_page, total_pages)
    return navigation_state(request, build_page_range(request), show_first_last)


class TestResolvePageChange:
    """Page-change requests coming from clicked controls."""

    def test_valid_target_is_returned(self):
        assert resolve_page_change(4, current_page=5, total_pages=10) == 4

    def test_current_page_is_a_no_op(self):
        assert resolve_page_change(5, current_page=5, total_pages=10) is None

    @pytest.mark.parametrize("target", [0, -1, 11, None, "next"])
    def test_out_of_range_is_a_no_op(self, target):
        assert resolve_page_change(target, current_page=5, total_pages=10) is None

    def test_empty_dataset_accepts_nothing(self):
        assert resolve_page_change(1, current_page=1, total_pages=0) is None


class TestNavigationState:
    """Previous/next/first/last control state."""

    def test_middle_page(self):
        assert _state(5, 10) == NavigationState(
            previous_page=4,
            next_page=6,
            first_page=1,
            last_page=10,
            can_go_previous=True,
            can_go_next=True,
            show_first_last=False,
        )

    def test_first_page_disables_previous(self):
        state = _state(1, 10)
        assert state.can_go_previous is False
        assert state.can_go_next is True

    def test_last_page_disables_next(self):
        state = _state(10, 10)
        assert state.can_go_previous is True
        assert state.can_go_next is False

    def test_single_page_disables_both(self):
        state = _state(1, 1)
        assert state.can_go_previous is False
        assert state.can_go_next is False

    def test_empty_dataset_disables_both(self):
        state = _state(1, 0)
        assert state.can_go_previous is False
        assert state.can_go_next is False

    def test_first_last_flag_is_carried(self):
        assert _state(5, 10, show_first_last=True).show_first_last is True

    def test_targets_resolve_to_navigation(self):
        state = _state(5, 10)
        assert resolve_page_change(state.previous_page, 5, 10) == 4
        assert resolve_page_change(state.last_page, 5, 10) == 10
