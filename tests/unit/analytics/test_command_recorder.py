"""Unit tests for CommandRecorder admission and ordering."""

import logging

import pytest

from ga_snippet.analytics.commands import Command, CommandInvocation
from ga_snippet.analytics.recorder import CommandRecorder


class TestRecord:
    def test_allowed_name_appends_in_order(self):
        recorder = CommandRecorder()

        assert recorder.record("trackEvent", "Videos", "Play") is True
        assert recorder.record("_setDomainName", "example.com") is True
        assert recorder.record(Command.ANONYMIZE_IP) is True

        assert recorder.invocations == (
            CommandInvocation(name=Command.TRACK_EVENT, args=("Videos", "Play")),
            CommandInvocation(name=Command.SET_DOMAIN_NAME, args=("example.com",)),
            CommandInvocation(name=Command.ANONYMIZE_IP),
        )

    def test_unknown_name_leaves_log_untouched(self):
        recorder = CommandRecorder()
        recorder.record("trackEvent", "a", "b")

        assert recorder.record("trackpageview") is False
        assert recorder.record("link", "http://example.com") is False
        assert len(recorder) == 1

    def test_arguments_are_not_validated(self):
        recorder = CommandRecorder()

        assert recorder.record("addItem") is True
        assert recorder.record("addItem", 1, 2.5, True, "x", None, "extra") is True
        assert recorder.invocations[1].args == (1, 2.5, True, "x", None, "extra")

    def test_repeated_commands_are_kept(self):
        recorder = CommandRecorder()
        recorder.record("trackPageview", "/a")
        recorder.record("trackPageview", "/b")

        assert recorder.called_commands == [Command.TRACK_PAGEVIEW, Command.TRACK_PAGEVIEW]
        assert recorder.has_called("trackPageview")
        assert not recorder.has_called("trackEvent")
        assert not recorder.has_called("bogus")

    def test_invocations_snapshot_is_immutable(self):
        recorder = CommandRecorder()
        recorder.record("trackPageview")
        snapshot = recorder.invocations

        recorder.record("trackEvent", "a", "b")

        assert len(snapshot) == 1
        assert len(recorder) == 2

    def test_clear(self):
        recorder = CommandRecorder()
        recorder.record("trackPageview")
        recorder.clear()

        assert len(recorder) == 0


class TestDiagnostics:
    def test_unknown_command_logged_in_debug_mode(self, caplog):
        recorder = CommandRecorder(debug_mode=True)

        with caplog.at_level(logging.INFO, logger="ga_snippet.analytics.recorder"):
            recorder.record("notACommand")

        assert "notACommand" in caplog.text

    def test_unknown_command_silent_without_debug(self, caplog):
        recorder = CommandRecorder()

        with caplog.at_level(logging.DEBUG, logger="ga_snippet.analytics.recorder"):
            recorder.record("notACommand")

        assert caplog.records == []


class TestAttributeSurface:
    def test_method_style_calls_funnel_into_record(self):
        recorder = CommandRecorder()

        assert recorder.trackEvent("Videos", "Play", "intro", 3) is True
        assert recorder._setCustomVar(1, "plan", "gold", 2) is True

        assert recorder.invocations == (
            CommandInvocation(name=Command.TRACK_EVENT, args=("Videos", "Play", "intro", 3)),
            CommandInvocation(name=Command.SET_CUSTOM_VAR, args=(1, "plan", "gold", 2)),
        )

    def test_unknown_attribute_raises(self):
        recorder = CommandRecorder()

        with pytest.raises(AttributeError):
            recorder.trackpageview()
        assert not hasattr(recorder, "link")
        assert len(recorder) == 0
