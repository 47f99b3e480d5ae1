"""Unit tests for DetailedError.

Tests cover:
- Log-exactly-once lifecycle (construction logs, log() is idempotent)
- Record contents (errors, additional_context, call site)
- to_response() purity and delegation
- into_parts() ownership transfer
- Display/debug forms and Python exception chaining
- Contract violations

Architecture:
- Logger is a MagicMock injected through the mock_logger fixture
"""

import copy
import pickle
import sys
import threading
import traceback
from unittest.mock import MagicMock

import pytest

from api_error.core.enums import Level
from api_error.domain.detailed_error import DetailedError
from api_error.domain.public_error import UnexpectedServerError
from api_error.infrastructure.chain import ContextError, ExceptionChain, TracebackChain

EXPECTED_MSG = "An unexpected server error occurred, please try again in 5 seconds."


def _build(private=None, context=None, level=Level.ERROR, fields=None, **kwargs):
    return DetailedError(
        private or FileNotFoundError("file not found"),
        UnexpectedServerError(),
        context,
        level,
        "service.py",
        12,
        "app.service",
        fields,
        **kwargs,
    )


@pytest.mark.unit
class TestDetailedErrorLifecycle:
    """Test the log-exactly-once lifecycle."""

    def test_construction_logs_once(self, mock_logger):
        """Test a record is emitted before the constructor returns."""
        error = _build()

        assert error.has_logged is True
        mock_logger.log.assert_called_once()

    def test_log_is_idempotent(self, mock_logger):
        """Test repeated log() calls do not emit again."""
        error = _build()

        error.log()
        error.log()

        assert mock_logger.log.call_count == 1

    def test_concurrent_log_calls_emit_once(self):
        """Test log() from many threads keeps a single record."""
        logger = MagicMock()
        error = _build(logger=logger)
        error._meta.has_logged = False
        logger.reset_mock()

        threads = [threading.Thread(target=error.log) for _ in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert logger.log.call_count == 1

    def test_explicit_logger_overrides_container(self, mock_logger):
        """Test the logger argument takes precedence."""
        logger = MagicMock()
        _build(logger=logger)

        logger.log.assert_called_once()
        mock_logger.log.assert_not_called()

    def test_sink_failure_propagates_from_constructor(self):
        """Test a sink failure is not swallowed."""
        logger = MagicMock()
        logger.log.side_effect = OSError("stdout closed")

        with pytest.raises(OSError):
            _build(logger=logger)


@pytest.mark.unit
class TestDetailedErrorRecord:
    """Test the emitted diagnostic record."""

    def test_unexpected_server_error_scenario(self, mock_logger):
        """Test bare error, no context, no fields, at ERROR."""
        error = _build()

        assert error.to_response() == {
            "category": "UnexpectedServerError",
            "msg": EXPECTED_MSG,
        }
        mock_logger.log.assert_called_once_with(
            Level.ERROR,
            "file not found",
            errors=[],
            public_error="UnexpectedServerError",
            file="service.py",
            line=12,
            module="app.service",
        )

    def test_context_scenario(self, mock_logger):
        """Test context is the head and the error the sole trailing entry."""
        error = _build(context="failed to read my amazing file")

        assert list(error.private.chain())[0] == "failed to read my amazing file"
        args, kwargs = mock_logger.log.call_args
        assert args == (Level.ERROR, "failed to read my amazing file")
        assert kwargs["errors"] == ["file not found"]
        assert "additional_context" not in kwargs

    def test_fields_scenario(self, mock_logger):
        """Test fields become additional_context."""
        _build(fields={"user_id": "42"})

        _, kwargs = mock_logger.log.call_args
        assert kwargs["additional_context"] == {"user_id": "42"}

    def test_fields_are_stringified(self, mock_logger):
        """Test non-string keys and values are converted with str()."""
        _build(fields={"user_id": 42, 7: None})

        _, kwargs = mock_logger.log.call_args
        assert kwargs["additional_context"] == {"user_id": "42", "7": "None"}

    @pytest.mark.parametrize("level", list(Level))
    def test_level_is_forwarded(self, mock_logger, level):
        """Test every severity reaches the sink unchanged."""
        _build(level=level)

        assert mock_logger.log.call_args.args[0] is level

    def test_level_name_is_parsed(self, mock_logger):
        """Test string level names are accepted."""
        error = _build(level="warning")

        assert error.level is Level.WARN

    def test_call_site_captured_when_omitted(self, mock_logger):
        """Test omitted file/line/module come from the direct caller."""
        line = sys._getframe().f_lineno + 1
        DetailedError(RuntimeError("boom"), UnexpectedServerError())

        _, kwargs = mock_logger.log.call_args
        assert kwargs["file"] == __file__
        assert kwargs["line"] == line
        assert kwargs["module"] == __name__


@pytest.mark.unit
class TestDetailedErrorResponse:
    """Test public response mapping."""

    def test_to_response_is_pure(self, mock_logger):
        """Test repeated calls return equal results."""
        error = _build()

        assert error.to_response() == error.to_response()

    def test_to_response_delegates_to_public(self, mock_logger):
        """Test the public value decides the response."""
        public = MagicMock()
        public.to_response.return_value = {"code": "nope"}

        error = DetailedError(RuntimeError("boom"), public, logger=MagicMock())

        assert error.to_response() == {"code": "nope"}
        assert error.public is public

    def test_response_never_contains_private_details(self, mock_logger):
        """Test the private chain and fields stay out of the response."""
        error = _build(context="secret path /etc/app.conf", fields={"user_id": "42"})

        rendered = str(error.to_response())
        assert "secret path" not in rendered
        assert "file not found" not in rendered
        assert "42" not in rendered


@pytest.mark.unit
class TestDetailedErrorIntoParts:
    """Test into_parts()."""

    def test_returns_chain_and_public(self, mock_logger):
        """Test the root cause display string is preserved."""
        private = FileNotFoundError("file not found")
        error = _build(private=private, context="ctx")

        chain, public = error.into_parts()

        assert str(chain.root_cause()) == "file not found"
        assert chain.root_cause() is private
        assert public == UnexpectedServerError()

    def test_metadata_is_dropped(self, mock_logger):
        """Test the container no longer logs after being split."""
        error = _build()
        error.into_parts()

        error.log()

        assert error.level is None
        assert mock_logger.log.call_count == 1

    def test_second_split_raises(self, mock_logger):
        """Test into_parts() can only be called once."""
        error = _build()
        error.into_parts()

        with pytest.raises(RuntimeError, match="already split"):
            error.into_parts()

    def test_root_cause_survives_later_reraise(self, mock_logger):
        """Test re-raising the private error elsewhere does not grow the chain."""
        private = FileNotFoundError("file not found")
        error = _build(private=private)

        try:
            try:
                raise ValueError("later unrelated")
            except ValueError:
                raise private
        except FileNotFoundError:
            pass

        chain, _ = error.into_parts()
        assert list(chain.chain()) == ["file not found"]
        assert chain.root_cause() is private


@pytest.mark.unit
class TestDetailedErrorRendering:
    """Test display, debug and exception chaining."""

    def test_str_is_chain_head(self, mock_logger):
        assert str(_build()) == "file not found"
        assert str(_build(context="ctx")) == "ctx"

    def test_repr_is_chain_debug_form(self, mock_logger):
        error = _build(context="ctx")

        assert repr(error) == repr(error.private)

    def test_source_forwards_to_chain(self, mock_logger):
        """Test source() is the entry below the head."""
        private = FileNotFoundError("file not found")

        assert _build(private=private).source() is None
        assert _build(private=private, context="ctx").source() is private

    def test_python_cause_is_chain_head(self, mock_logger):
        """Test traceback tooling walks into the private chain."""
        error = _build(context="ctx")

        assert isinstance(error.__cause__, ContextError)
        assert error.__suppress_context__ is True

    def test_traceback_format_includes_private_chain(self, mock_logger):
        """Test formatted tracebacks show every private entry."""
        try:
            raise _build(context="failed to read my amazing file")
        except DetailedError as error:
            formatted = "".join(traceback.format_exception(error))

        assert "FileNotFoundError: file not found" in formatted
        assert "failed to read my amazing file" in formatted

    def test_is_catchable_as_exception(self, mock_logger):
        with pytest.raises(Exception):
            raise _build()

    @pytest.mark.parametrize("chain_cls", [ExceptionChain, TracebackChain])
    def test_chain_factory_override(self, mock_logger, chain_cls):
        """Test the chain backend can be injected."""
        error = _build(chain_factory=chain_cls)

        assert isinstance(error.private, chain_cls)


@pytest.mark.unit
class TestDetailedErrorContract:
    """Test construction contract violations."""

    def test_non_exception_private_raises(self, mock_logger):
        with pytest.raises(TypeError, match="must be an exception"):
            _build(private="file not found")

    def test_public_without_to_response_raises(self, mock_logger):
        with pytest.raises(TypeError, match="to_response"):
            DetailedError(RuntimeError("boom"), object())

        mock_logger.log.assert_not_called()


@pytest.mark.unit
class TestNestedDetailedError:
    """Test wrapping a DetailedError in another one."""

    def test_inner_head_is_not_repeated(self, mock_logger):
        inner = _build()
        _build(private=inner, context="ctx")

        args, kwargs = mock_logger.log.call_args
        assert args[1] == "ctx"
        assert kwargs["errors"] == ["file not found"]

    def test_inner_context_and_cause_follow_in_order(self, mock_logger):
        inner = _build(context="inner ctx")
        outer = _build(private=inner, context="outer ctx")

        assert list(outer.private.chain()) == ["outer ctx", "inner ctx", "file not found"]
        assert outer.source() is inner
        assert isinstance(outer.private.root_cause(), FileNotFoundError)

    def test_wrapped_without_context(self, mock_logger):
        inner = _build(context="inner ctx")
        outer = _build(private=inner)

        assert list(outer.private.chain()) == ["inner ctx", "file not found"]
        assert mock_logger.log.call_args.kwargs["errors"] == ["file not found"]


@pytest.mark.unit
class TestDetailedErrorCopying:
    """Test copy and pickle support."""

    def test_copy_does_not_log_again(self, mock_logger):
        error = _build(context="ctx", fields={"user_id": 42})

        duplicate = copy.copy(error)

        assert mock_logger.log.call_count == 1
        assert duplicate is not error
        assert str(duplicate) == "ctx"
        assert duplicate.has_logged
        assert duplicate.private is error.private

    def test_pickle_round_trip(self, mock_logger):
        error = _build(context="ctx")

        restored = pickle.loads(pickle.dumps(error))

        assert mock_logger.log.call_count == 1
        assert list(restored.private.chain()) == ["ctx", "file not found"]
        assert restored.to_response() == error.to_response()
        assert restored.level is Level.ERROR
        assert restored.has_logged
        assert isinstance(restored.__cause__, ContextError)

    def test_restored_error_can_be_split(self, mock_logger):
        restored = pickle.loads(pickle.dumps(_build()))

        chain, public = restored.into_parts()

        assert str(chain.root_cause()) == "file not found"
        assert public == UnexpectedServerError()
