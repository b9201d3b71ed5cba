"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ironclad.kernel.errors import (
    ApplicationError,
    DomainError,
    FileReadError,
    FileWriteError,
    InfrastructureError,
    InvalidInputError,
    IroncladError,
    MaskGeneratorError,
    RedactionIOError,
    RedactionRuleError,
    RuleApplicationError,
    RuleCompilationError,
    SerializationError,
    UnsupportedAlgorithmError,
    UnsupportedConfigurationError,
    UsageError,
)


class TestIroncladError:
    def test_message_is_stored(self) -> None:
        err = IroncladError("something went wrong")
        assert err.message == "something went wrong"

    def test_str_is_message(self) -> None:
        assert str(IroncladError("plain text")) == "plain text"

    def test_default_code(self) -> None:
        assert IroncladError("m").code == "ironclad_error"

    def test_custom_code(self) -> None:
        assert IroncladError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = IroncladError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = IroncladError("wrapper", cause=ValueError("original"))
        d = err.to_dict()
        assert "original" in d["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = IroncladError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_to_json_is_valid_json(self) -> None:
        parsed = json.loads(IroncladError("oops", code="oops", detail={"x": 1}).to_json())
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(IroncladError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r

    def test_is_exception(self) -> None:
        with pytest.raises(IroncladError):
            raise IroncladError("boom")


class TestDomainErrors:
    def test_invalid_input_is_type_error(self) -> None:
        err = InvalidInputError("bad", argument="length")
        assert isinstance(err, DomainError)
        assert isinstance(err, TypeError)
        assert err.argument == "length"
        assert err.detail == {"argument": "length"}
        assert err.code == "invalid_input"

    def test_unsupported_configuration_is_value_error(self) -> None:
        err = UnsupportedConfigurationError("nope", option="encoding", value="rot13")
        assert isinstance(err, ValueError)
        assert err.detail == {"option": "encoding", "value": "rot13"}

    def test_unsupported_algorithm_message(self) -> None:
        err = UnsupportedAlgorithmError("md5")
        assert str(err) == "Unsupported hashing algorithm: md5"
        assert err.algorithm == "md5"
        assert err.option == "algorithm"
        assert isinstance(err, UnsupportedConfigurationError)
        assert err.code == "unsupported_algorithm"


class TestApplicationErrors:
    @pytest.mark.parametrize("cls", [MaskGeneratorError, UsageError, RedactionRuleError])
    def test_subclasses_application_error(self, cls) -> None:
        assert issubclass(cls, ApplicationError)

    def test_rule_error_carries_pattern(self) -> None:
        err = RuleCompilationError("([", "Invalid pattern")
        assert err.pattern == "(["
        assert err.detail["pattern"] == "(["
        assert isinstance(err, RedactionRuleError)

    def test_rule_application_error_code(self) -> None:
        assert RuleApplicationError("x", "boom").code == "rule_application_error"


class TestInfrastructureErrors:
    def test_serialization_payload_type(self) -> None:
        err = SerializationError("bad json", payload_type="json")
        assert err.payload_type == "json"
        assert isinstance(err, InfrastructureError)

    def test_read_error_default_message(self) -> None:
        cause = FileNotFoundError(2, "No such file or directory")
        err = FileReadError("/tmp/x.txt", cause=cause)
        assert str(err) == "Could not read '/tmp/x.txt': No such file or directory"
        assert err.path == Path("/tmp/x.txt")
        assert err.detail["path"] == "/tmp/x.txt"
        assert err.__cause__ is cause

    def test_write_error_default_message(self) -> None:
        err = FileWriteError("out.txt", cause=PermissionError(13, "Permission denied"))
        assert str(err) == "Could not write 'out.txt': Permission denied"

    def test_io_error_without_cause(self) -> None:
        assert str(FileReadError("a.txt")) == "Could not read 'a.txt'"

    def test_explicit_message_wins(self) -> None:
        assert str(FileWriteError("a.txt", "disk full")) == "disk full"

    @pytest.mark.parametrize("cls", [FileReadError, FileWriteError])
    def test_io_hierarchy(self, cls) -> None:
        assert issubclass(cls, RedactionIOError)
        assert issubclass(cls, InfrastructureError)
        assert issubclass(cls, IroncladError)
