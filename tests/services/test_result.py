"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from roverctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="run", data={"x": 1})
        assert result.ok is True
        assert result.data == {"x": 1}
        assert result.warnings == []
        assert result.error is None

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("run", "NOT_LANDED", "Land first", commands="ff")
        assert result.ok is False
        assert result.error == ServiceError(
            code="NOT_LANDED", message="Land first", detail={"commands": "ff"}
        )

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="run", data={"display": "(0, 0) NORTH"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["display"] == "(0, 0) NORTH"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="run")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
