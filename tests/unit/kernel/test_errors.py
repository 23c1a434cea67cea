"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from flagquery.config import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from flagquery.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    DuplicateKeyError,
    DuplicateOperatorError,
    InvalidCapabilityError,
    InvalidOperatorError,
    InvalidQueryError,
    NoProviderError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        err = BaseError("boom")
        assert err.code == "base_error"
        assert err.message == "boom"
        assert err.detail == {}

    def test_custom_code_and_detail(self) -> None:
        err = BaseError("boom", code="custom", detail={"k": 1})
        assert err.code == "custom"
        assert err.detail == {"k": 1}

    def test_cause_is_chained(self) -> None:
        cause = ValueError("inner")
        err = BaseError("outer", cause=cause)
        assert err.__cause__ is cause
        assert "cause" in err.to_dict()

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("boom")))
        assert payload == {"error": "BaseError", "code": "base_error", "message": "boom", "detail": {}}

    def test_detail_is_copied(self) -> None:
        detail = {"slug": "beta"}
        err = BaseError("boom", detail=detail)
        err.detail["extra"] = 1
        assert detail == {"slug": "beta"}

    def test_repr(self) -> None:
        assert repr(BaseError("boom")) == "BaseError(code='base_error', message='boom')"


class TestQueryErrors:
    def test_invalid_operator_is_invalid_query(self) -> None:
        err = InvalidOperatorError("$not", path=("$or", 0))
        assert isinstance(err, InvalidQueryError)
        assert isinstance(err, DomainError)
        assert err.code == "invalid_operator"
        assert err.key == "$not"
        assert err.path == ("$or", 0)
        assert err.detail["path"] == ["$or", 0]

    def test_invalid_operator_custom_message(self) -> None:
        err = InvalidOperatorError("$or", "Operator '$or' expects a list")
        assert err.message == "Operator '$or' expects a list"

    def test_duplicate_operator_hierarchy(self) -> None:
        err = DuplicateOperatorError("$and")
        assert isinstance(err, DuplicateKeyError)
        assert isinstance(err, InvalidQueryError)
        assert err.code == "duplicate_operator"
        assert err.detail["key"] == "$and"

    def test_invalid_capability_is_domain_error(self) -> None:
        assert issubclass(InvalidCapabilityError, DomainError)


class TestApplicationErrors:
    def test_no_provider_message(self) -> None:
        err = NoProviderError()
        assert err.message == "Component must be wrapped with FeatureProvider."
        assert isinstance(err, ApplicationError)

    def test_config_errors_are_application_errors(self) -> None:
        err = InvalidSettingValueError("log_level", "LOUD", "nope")
        assert isinstance(err, ConfigError)
        assert isinstance(err, ApplicationError)
        assert err.setting_name == "log_level"
        assert err.to_dict()["detail"] == {"setting": "log_level", "value": "'LOUD'", "reason": "nope"}
        assert "LOUD" in err.message

    def test_missing_setting_names_the_variable(self) -> None:
        err = MissingRequiredSettingError("FLAGQUERY_LOG_LEVEL")
        assert err.code == "missing_required_setting"
        assert err.detail == {"setting": "FLAGQUERY_LOG_LEVEL"}
        assert "FLAGQUERY_LOG_LEVEL" in err.message

    def test_catch_all_by_base(self) -> None:
        with pytest.raises(BaseError):
            raise NoProviderError()


class TestPublicReExports:
    def test_all_symbols_importable(self) -> None:
        import importlib

        mod = importlib.import_module("flagquery.kernel.errors")
        for name in mod.__all__:
            assert hasattr(mod, name), f"{name!r} missing"
