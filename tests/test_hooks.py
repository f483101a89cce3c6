"""Tests for filter hooks."""

from seokar.core.hooks import HookManager


class TestHookManager:
    """Tests for HookManager."""

    def test_emit_without_hooks_returns_value(self):
        assert HookManager().emit("ai_api_request_timeout", 30.0) == 30.0

    def test_filters_chain_in_priority_order(self):
        """Test lower priority runs first and each sees the previous value."""
        hooks = HookManager()
        hooks.register("ai_openai_model", lambda m: m + "-late", priority=90)
        hooks.register("ai_openai_model", lambda m: m + "-early", priority=10)

        assert hooks.emit("ai_openai_model", "gpt") == "gpt-early-late"

    def test_equal_priority_keeps_registration_order(self):
        hooks = HookManager()
        hooks.register("ai_google_model", lambda m: m + "-a")
        hooks.register("ai_google_model", lambda m: m + "-b")

        assert hooks.emit("ai_google_model", "gemini") == "gemini-a-b"

    def test_none_keeps_value(self):
        hooks = HookManager()
        hooks.register("ai_api_sslverify", lambda v: None)

        assert hooks.emit("ai_api_sslverify", True) is True

    def test_false_replaces_value(self):
        hooks = HookManager()
        hooks.register("ai_api_sslverify", lambda v: False)

        assert hooks.emit("ai_api_sslverify", True) is False

    def test_failing_filter_does_not_break_chain(self):
        """Test an exception in one filter is logged and skipped."""
        hooks = HookManager()

        def broken(value):
            raise RuntimeError("boom")

        hooks.register("ai_api_request_timeout", broken, priority=10)
        hooks.register("ai_api_request_timeout", lambda v: v * 2, priority=20)

        assert hooks.emit("ai_api_request_timeout", 15.0) == 30.0

    def test_chains_are_separate(self):
        hooks = HookManager()
        hooks.register("ai_openai_model", lambda m: "gpt-4o")

        assert hooks.emit("ai_huggingface_model", "gpt2") == "gpt2"

    def test_unknown_filter_still_runs(self):
        hooks = HookManager()
        hooks.register("not_a_filter", lambda v: v + 1)

        assert hooks.emit("not_a_filter", 1) == 2
