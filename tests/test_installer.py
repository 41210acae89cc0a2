"""Tests for installer page sequencing."""

import pytest

from sciclope.install.installer import WebInstaller, WizardState
from sciclope.install.pages import Signal


class TestWizardState:
    """Test wizard state bookkeeping."""

    def test_first_remaining_empty(self):
        """No filled pages means the first page."""
        assert WizardState().first_remaining() == 0

    @pytest.mark.parametrize("filled,expected", [
        ([0], 1),
        ([0, 1], 2),
        ([0, 3], 4),
        ([2], 3),
    ])
    def test_first_remaining_is_max_plus_one(self, filled, expected):
        assert WizardState(filled_pages=filled).first_remaining() == expected

    def test_mark_filled_keeps_sorted_set(self):
        state = WizardState()
        state.mark_filled(2)
        state.mark_filled(0)
        state.mark_filled(2)
        assert state.filled_pages == [0, 2]

    def test_from_dict_discards_invalid_indices(self):
        """Bad entries from a tampered or legacy session are dropped."""
        state = WizardState.from_dict({
            "filled_pages": [1, -1, "2", None, True, 0, 1],
            "remainingPages": [],
        })
        assert state.filled_pages == [0, 1]
        assert state.completed is False

    def test_round_trip_through_dict(self):
        state = WizardState.new()
        state.mark_filled(0)
        restored = WizardState.from_dict(state.to_dict())
        assert restored == state

    def test_new_state_is_not_stale(self):
        assert not WizardState.new().is_stale()

    def test_old_state_is_stale(self):
        state = WizardState(started_at="2000-01-01T00:00:00")
        assert state.is_stale()

    def test_unparseable_timestamp_is_not_stale(self):
        assert WizardState(started_at="yesterday").get_age_hours() == 0


class TestPageSelection:
    """Test which page is chosen for a request."""

    @pytest.fixture
    def installer(self, context, two_page_registry, get_request):
        return WebInstaller(context, request=get_request, registry=two_page_registry)

    def test_empty_request_targets_first_remaining(self, installer):
        assert installer.select_page(WizardState(), "") == 0
        assert installer.select_page(WizardState(filled_pages=[0]), "") == 1

    def test_unknown_page_targets_first_remaining(self, installer):
        assert installer.select_page(WizardState(), "Nonexistent") == 0
        assert installer.select_page(WizardState(filled_pages=[0]), "Nonexistent") == 1

    def test_cannot_skip_ahead(self, installer):
        assert installer.select_page(WizardState(), "Done") == 0

    def test_may_request_first_remaining(self, installer):
        assert installer.select_page(WizardState(filled_pages=[0]), "Done") == 1

    def test_may_go_back(self, installer):
        assert installer.select_page(WizardState(filled_pages=[0]), "Welcome") == 0

    def test_all_filled_clamps_to_last_page(self, installer):
        assert installer.select_page(WizardState(filled_pages=[0, 1]), "") == 1

    def test_next_page_name(self, installer):
        assert installer.next_page_name(0) == "Done"
        assert installer.next_page_name(1) is None


class TestAdvance:
    """Test a full installer step."""

    def test_single_page_empty_request_renders_welcome(self, context, get_request):
        """Default registry, fresh state, no page requested."""
        installer = WebInstaller(context, request=get_request)
        result = installer.advance(WizardState(), "")

        assert installer.registry.names == ["Welcome"]
        assert result.page_index == 0
        assert result.page_name == "Welcome"
        assert result.signal is Signal.INCOMPLETE
        assert "<h2>Welcome</h2>" in result.output
        assert result.state.filled_pages == []

    def test_requested_next_page_is_rendered(self, context, two_page_registry, get_request):
        installer = WebInstaller(context, request=get_request, registry=two_page_registry)
        result = installer.advance(WizardState(filled_pages=[0]), "Done")

        assert result.page_index == 1
        assert result.page_name == "Done"
        assert "<h2>Done</h2>" in result.output

    def test_skip_ahead_is_clamped(self, context, two_page_registry, get_request):
        installer = WebInstaller(context, request=get_request, registry=two_page_registry)
        result = installer.advance(WizardState(), "Done")

        assert result.page_index == 0
        assert result.page_name == "Welcome"
        assert "<h2>Welcome</h2>" in result.output
        assert "<h2>Done</h2>" not in result.output

    def test_continue_marks_page_filled(self, context, two_page_registry, continue_request):
        installer = WebInstaller(context, request=continue_request, registry=two_page_registry)
        state = WizardState.new()
        result = installer.advance(state, "Welcome")

        assert result.signal is Signal.CONTINUE
        assert result.state.filled_pages == [0]
        assert result.state.completed is False
        # The caller's state is left alone
        assert state.filled_pages == []

    def test_continue_on_last_page_completes(self, context, two_page_registry, finish_request):
        installer = WebInstaller(context, request=finish_request, registry=two_page_registry)
        result = installer.advance(WizardState(filled_pages=[0]), "Done")

        assert result.signal is Signal.CONTINUE
        assert result.state.filled_pages == [0, 1]
        assert result.state.completed is True

    def test_continue_on_single_page_completes(self, context, continue_request):
        installer = WebInstaller(context, request=continue_request)
        result = installer.advance(WizardState(), "")

        assert result.state.completed is True
        assert result.output == ""

    def test_incomplete_leaves_state_unchanged(self, context, two_page_registry, get_request):
        installer = WebInstaller(context, request=get_request, registry=two_page_registry)
        state = WizardState(filled_pages=[0])
        result = installer.advance(state, "Welcome")

        assert result.signal is Signal.INCOMPLETE
        assert result.state == state

    def test_form_posts_back_to_page(self, context, get_request):
        installer = WebInstaller(context, request=get_request)
        result = installer.advance(WizardState(), "")

        assert '<form method="post" action="?p=Welcome">' in result.output
        assert result.output.count("<form") == result.output.count("</form>") == 1

    def test_custom_page_urls(self, context, get_request):
        installer = WebInstaller(
            context,
            request=get_request,
            url_for_page=lambda name: f"/install?p={name}",
        )
        result = installer.advance(WizardState(), "")
        assert 'action="/install?p=Welcome"' in result.output


class TestFingerprint:
    """Test the installer's fingerprint."""

    def test_fingerprint_is_stable(self, context):
        first = WebInstaller(context).get_fingerprint()
        second = WebInstaller(context).get_fingerprint()
        assert first == second

    def test_fingerprint_depends_on_version(self, context):
        from dataclasses import replace

        other = replace(context, version="1.0.1")
        assert WebInstaller(context).get_fingerprint() != WebInstaller(other).get_fingerprint()
