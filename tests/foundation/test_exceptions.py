"""Tests for the moeadkit exception hierarchy."""

from __future__ import annotations

import pytest


class TestMOEADKitError:
    """Test base MOEADKitError class."""

    def test_basic_error(self):
        from moeadkit.foundation.exceptions import MOEADKitError

        err = MOEADKitError("Something went wrong")
        assert str(err) == "Something went wrong"
        assert err.suggestion is None
        assert err.details == {}

    def test_error_with_suggestion(self):
        from moeadkit.foundation.exceptions import MOEADKitError

        err = MOEADKitError("Something went wrong", suggestion="Try this instead")
        assert "Suggestion: Try this instead" in str(err)


class TestArgumentErrors:
    """Argument errors are ValueErrors so callers can catch them generically."""

    def test_hierarchy(self):
        from moeadkit.foundation.exceptions import (
            ConfigurationError,
            DimensionMismatchError,
            InvalidArgumentError,
            InvalidParameterError,
            MissingInputError,
            MOEADKitError,
        )

        for cls in (DimensionMismatchError, InvalidParameterError, MissingInputError):
            assert issubclass(cls, InvalidArgumentError)
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(InvalidArgumentError, ConfigurationError)
        assert issubclass(ConfigurationError, MOEADKitError)

    def test_missing_input_message(self):
        from moeadkit.foundation.exceptions import MissingInputError

        err = MissingInputError("neighborhood array")
        assert err.message == "Provided neighborhood array is None."
        with pytest.raises(ValueError):
            raise err

    def test_invalid_parameter_details(self):
        from moeadkit.foundation.exceptions import InvalidParameterError

        err = InvalidParameterError("neighborhood_size", 0, "a positive integer")
        assert err.details == {"parameter": "neighborhood_size", "value": 0}
        assert "a positive integer" in str(err)

    def test_dimension_mismatch(self):
        from moeadkit.foundation.exceptions import DimensionMismatchError

        err = DimensionMismatchError(3, 2)
        assert "3 != 2" in str(err)
        assert err.details == {"expected": 3, "actual": 2}


class TestConfigurationErrors:
    def test_missing_config_mentions_default(self):
        from moeadkit.foundation.exceptions import MissingConfigError

        err = MissingConfigError("num_problems", "MOEADConfig")
        assert "num_problems" in str(err)
        assert "MOEADConfig.default()" in str(err)

    def test_invalid_operator_lists_available(self):
        from moeadkit.foundation.exceptions import InvalidOperatorError

        err = InvalidOperatorError("crossover", "bogus", ["pm", "sbx"])
        assert "bogus" in str(err)
        assert "pm, sbx" in str(err)


class TestRuntimeErrors:
    def test_not_initialized(self):
        from moeadkit.foundation.exceptions import NotInitializedError, OptimizationError

        err = NotInitializedError("step")
        assert isinstance(err, OptimizationError)
        assert "step() called before initialize()" in str(err)


def test_public_namespace_reexports():
    import moeadkit.exceptions as public
    from moeadkit.foundation import exceptions as canonical

    assert public.MissingInputError is canonical.MissingInputError
    with pytest.raises(AttributeError):
        _ = public.NoSuchError


def test_version_is_a_string():
    import moeadkit
    from moeadkit.foundation.version import get_version

    assert isinstance(moeadkit.__version__, str)
    assert moeadkit.__version__ == get_version()
