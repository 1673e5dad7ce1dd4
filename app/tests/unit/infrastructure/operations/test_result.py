"""Unit tests for OperationResult and OperationStatus."""

import pytest
from infrastructure.operations import OperationResult, OperationStatus


@pytest.mark.unit
class TestOperationStatus:
    @pytest.mark.parametrize(
        "status,value",
        [
            (OperationStatus.SUCCESS, "success"),
            (OperationStatus.PARTIAL, "partial"),
            (OperationStatus.DEFERRED, "deferred"),
            (OperationStatus.REJECTED, "rejected"),
            (OperationStatus.FAILED, "failed"),
            (OperationStatus.SUPERSEDED, "superseded"),
        ],
    )
    def test_values(self, status, value):
        assert status.value == value


@pytest.mark.unit
class TestOperationResult:
    def test_success_factory(self):
        result = OperationResult.success(data="it", message="language activated")
        assert result.status == OperationStatus.SUCCESS
        assert result.data == "it"
        assert result.is_success
        assert result.is_applied

    def test_error_factory(self):
        result = OperationResult.error(
            OperationStatus.FAILED, "boom", error_code="locale_load_failed"
        )
        assert result.message == "boom"
        assert result.error_code == "locale_load_failed"
        assert not result.is_success
        assert not result.is_applied

    def test_partial_counts_as_applied(self):
        result = OperationResult.error(OperationStatus.PARTIAL, "content failed")
        assert not result.is_success
        assert result.is_applied
