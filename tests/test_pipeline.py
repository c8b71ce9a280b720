"""
Tests for the phased interception pipeline
"""

import pytest

from httpcharsets import UNCHANGED, Pipeline, Replaced, RequestPipeline, ResponsePipeline


class TestPipeline:
    """Test Pipeline.intercept() and Pipeline.execute()"""

    def test_runs_phases_in_declared_order(self):
        """Test that interceptors run by phase, not by registration order"""
        pipeline = Pipeline("first", "second")
        calls = []
        pipeline.intercept("second", lambda ctx, subject: calls.append("second") or UNCHANGED)
        pipeline.intercept("first", lambda ctx, subject: calls.append("first") or UNCHANGED)

        assert pipeline.execute(None, "subject") == "subject"
        assert calls == ["first", "second"]

    def test_replaced_value_flows_to_next_interceptor(self):
        """Test that a Replaced result becomes the next subject"""
        pipeline = Pipeline("only")
        pipeline.intercept("only", lambda ctx, subject: Replaced(subject + 1))
        pipeline.intercept("only", lambda ctx, subject: Replaced(subject * 10))

        assert pipeline.execute(None, 1) == 20

    def test_context_is_passed_through(self):
        """Test that every interceptor sees the same context"""
        pipeline = Pipeline("only")
        seen = []
        pipeline.intercept("only", lambda ctx, subject: seen.append(ctx) or UNCHANGED)
        context = object()
        pipeline.execute(context, None)
        assert seen == [context]

    def test_unknown_phase(self):
        """Test that intercepting an unknown phase fails"""
        with pytest.raises(ValueError, match="Unknown phase"):
            Pipeline("a").intercept("b", lambda ctx, subject: UNCHANGED)

    def test_duplicate_phase(self):
        """Test that phase names must be unique"""
        with pytest.raises(ValueError):
            Pipeline("a", "a")

    def test_invalid_result(self):
        """Test that interceptors must return Unchanged or Replaced"""
        pipeline = Pipeline("only")
        pipeline.intercept("only", lambda ctx, subject: subject)
        with pytest.raises(TypeError):
            pipeline.execute(None, "value")

    def test_exceptions_propagate(self):
        """Test that interceptor errors reach the caller unmodified"""
        error = RuntimeError("boom")

        def failing(ctx, subject):
            raise error

        pipeline = Pipeline("only")
        pipeline.intercept("only", failing)
        with pytest.raises(RuntimeError) as excinfo:
            pipeline.execute(None, None)
        assert excinfo.value is error


class TestStandardPipelines:
    """Test the request and response phase layouts"""

    def test_request_phases(self):
        """Test the request phase order"""
        assert RequestPipeline().phases == ("before", "state", "transform", "render", "send")

    def test_response_phases(self):
        """Test the response phase order"""
        assert ResponsePipeline().phases == ("receive", "parse", "transform", "state", "after")
