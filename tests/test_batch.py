"""Tests for batch (collect-all) validation."""
import pytest
from structlog.testing import capture_logs

from validcheck import BatchValidationContext, ValidationConfig, ValidationError, ValidationMode


class TestAccumulation:

    def test_failures_do_not_raise_until_validate(self, batch_ctx):
        batch_ctx.check("", "name").not_empty()
        batch_ctx.check(-1, "age").is_positive()
        assert batch_ctx.has_errors()

    def test_end_to_end_record(self, batch_ctx):
        batch_ctx.check("", "name").not_empty()
        batch_ctx.check(-1, "age").is_positive()
        with pytest.raises(ValidationError) as exc_info:
            batch_ctx.validate()
        assert str(exc_info.value) == (
            "Validation failed with 2 error(s):\n- 'name' must not be empty\n- 'age' must be positive, but it was -1")
        assert exc_info.value.errors == ("'name' must not be empty", "'age' must be positive, but it was -1")
        assert exc_info.value.mode is ValidationMode.COLLECT_ALL

    def test_only_failing_checks_are_reported_in_order(self, batch_ctx):
        batch_ctx.check("ok", "a").not_empty()
        batch_ctx.check(5, "b").between(10, 20)
        batch_ctx.check([1], "c").not_empty()
        batch_ctx.check(None, "d").not_null()
        with pytest.raises(ValidationError) as exc_info:
            batch_ctx.validate()
        assert exc_info.value.errors == (
            "'b' must be between 10 and 20, but it was 5",
            "'d' must not be null",
        )
        assert str(exc_info.value).startswith("Validation failed with 2 error(s):")

    def test_chain_continues_after_failure(self, batch_ctx):
        batch_ctx.check("x", "code").min_length(3).starts_with("A").ends_with("Z")
        assert len(batch_ctx.errors) == 3

    def test_validate_without_failures_is_a_no_op(self, batch_ctx):
        batch_ctx.check("fine", "name").not_empty()
        batch_ctx.validate()
        batch_ctx.validate()
        assert not batch_ctx.has_errors()

    def test_fail_records_raw_message(self, batch_ctx):
        batch_ctx.fail("Error 1")
        batch_ctx.fail("Error 2")
        with pytest.raises(ValidationError, match="^Validation failed with 2 error\\(s\\):\n- Error 1\n- Error 2$"):
            batch_ctx.validate()

    def test_batch_remains_usable_after_raising(self, batch_ctx):
        batch_ctx.fail("first")
        with pytest.raises(ValidationError):
            batch_ctx.validate()
        batch_ctx.fail("second")
        with pytest.raises(ValidationError) as exc_info:
            batch_ctx.validate()
        assert exc_info.value.errors == ("first", "second")

    def test_errors_snapshot_is_immutable(self, batch_ctx):
        batch_ctx.fail("first")
        snapshot = batch_ctx.errors
        batch_ctx.fail("second")
        assert snapshot == ("first",)


class TestConditions:

    def test_is_true_and_is_false(self, batch_ctx):
        batch_ctx.is_true(True, "never")
        batch_ctx.is_false(False, "never")
        batch_ctx.is_true(False, "start must precede end")
        batch_ctx.is_false(True, "must not be archived")
        assert batch_ctx.errors == ("start must precede end", "must not be archived")


class TestInclude:

    def test_include_appends_after_existing(self, config):
        outer, inner = BatchValidationContext(config), BatchValidationContext(config)
        outer.fail("outer 1")
        outer.fail("outer 2")
        inner.fail("inner 1")
        assert outer.include(inner) is outer
        with pytest.raises(ValidationError) as exc_info:
            outer.validate()
        assert exc_info.value.errors == ("outer 1", "outer 2", "inner 1")
        assert str(exc_info.value).startswith("Validation failed with 3 error(s):")

    def test_include_leaves_other_untouched(self, config):
        outer, inner = BatchValidationContext(config), BatchValidationContext(config)
        inner.fail("inner")
        outer.include(inner)
        assert inner.errors == ("inner",)

    def test_include_empty_batch(self, config):
        outer = BatchValidationContext(config)
        outer.include(BatchValidationContext(config))
        outer.validate()


class TestApply:

    def test_apply_returns_batch_and_dispatches(self, batch_ctx):
        result = (batch_ctx
            .apply("", lambda v: v.not_empty(), name="name")
            .apply(200, lambda v: v.max(150), name="age")
            .apply({"a": 1}, lambda v: v.contains_key("b"), name="attrs"))
        assert result is batch_ctx
        assert batch_ctx.errors == (
            "'name' must not be empty",
            "'age' must be at most 150, but it was 200",
            "'attrs' must contain key 'b'",
        )


class TestContextManager:

    def test_validates_on_clean_exit(self, config):
        with pytest.raises(ValidationError, match="Validation failed with 1 error"):
            with BatchValidationContext(config) as batch:
                batch.check("", "name").not_empty()

    def test_no_error_when_clean(self, config):
        with BatchValidationContext(config) as batch:
            batch.check("Ada", "name").not_empty()

    def test_original_exception_propagates(self, config):
        with pytest.raises(KeyError):
            with BatchValidationContext(config) as batch:
                batch.fail("recorded")
                raise KeyError("boom")


class TestBatchConfiguration:

    def test_actual_values_suppressed(self):
        batch = BatchValidationContext(ValidationConfig(include_actual_value=False))
        batch.check(-1, "age").is_positive()
        assert batch.errors == ("'age' must be positive",)

    def test_logs_aggregate_failure(self, batch_ctx, debug_logs):
        batch_ctx.fail("first")
        with pytest.raises(ValidationError):
            batch_ctx.validate()
        assert {"event": "batch_validation_failed", "error_count": 1, "log_level": "debug"}.items() <= debug_logs[0].items()

    def test_logs_include(self, config, debug_logs):
        outer, inner = BatchValidationContext(config), BatchValidationContext(config)
        outer.fail("a")
        inner.fail("b")
        inner.fail("c")
        outer.include(inner)
        assert debug_logs == [{"event": "batch_included", "included": 2, "error_count": 3, "log_level": "debug"}]

    def test_silent_below_debug(self, batch_ctx):
        batch_ctx.fail("first")
        with capture_logs() as logs:
            with pytest.raises(ValidationError):
                batch_ctx.validate()
        assert logs == []
