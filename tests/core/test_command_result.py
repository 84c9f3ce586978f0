import pytest
from essentials.core.commands import CommandResult


def test_success_carries_value():
    result = CommandResult.success(42)
    assert result.ok
    assert result.value == 42
    assert not result.failed
    assert not result.skipped


def test_failure_carries_error():
    error = RuntimeError("boom")
    result = CommandResult.failure(error)
    assert not result.ok
    assert result.failed
    assert result.error is error


def test_failure_requires_error():
    with pytest.raises(ValueError):
        CommandResult.failure(None)


def test_rejected_is_neither_success_nor_failure():
    result = CommandResult.rejected()
    assert result.skipped
    assert not result.ok
    assert not result.failed


def test_from_return_passes_results_through():
    explicit = CommandResult.failure(KeyError("x"))
    assert CommandResult.from_return(explicit) is explicit
    assert CommandResult.from_return("value") == CommandResult.success("value")
