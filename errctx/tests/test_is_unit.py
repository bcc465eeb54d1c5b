"""Unit tests for the chain-aware identity test ``is_``."""
from __future__ import annotations

import pytest

from errctx import format_error, is_, new

BASE_ERR = RuntimeError("base error")
TARGET_ERR = RuntimeError("target error")


@pytest.mark.parametrize(
    ("err", "target", "expected"),
    [
        pytest.param(TARGET_ERR, TARGET_ERR, True, id="simple error match"),
        pytest.param(BASE_ERR, TARGET_ERR, False, id="simple error no match"),
        pytest.param(format_error("wrapped: {}", TARGET_ERR), TARGET_ERR, True, id="context with matching inner error"),
        pytest.param(format_error("wrapped: {}", BASE_ERR), TARGET_ERR, False, id="context with non-matching inner error"),
        pytest.param(
            format_error("outer: {}", format_error("inner: {}", TARGET_ERR)),
            TARGET_ERR,
            True,
            id="nested context with matching error",
        ),
        pytest.param(
            format_error("outer: {}", format_error("inner: {}", BASE_ERR)),
            TARGET_ERR,
            False,
            id="nested context with non-matching error",
        ),
        pytest.param(new("custom error"), new("custom error"), False, id="equal messages are different errors"),
        pytest.param(None, None, True, id="none with none"),
        pytest.param(None, TARGET_ERR, False, id="none with error"),
        pytest.param(BASE_ERR, None, False, id="error with none"),
        pytest.param(new("main").join(TARGET_ERR), TARGET_ERR, True, id="joined errors containing target"),
        pytest.param(new("main").join(BASE_ERR), TARGET_ERR, False, id="joined errors not containing target"),
    ],
)
def test_is(err, target, expected):
    assert is_(err, target) is expected  # nosec B101 - assert is appropriate in unit tests


def test_is_survives_deep_nesting():
    root = ValueError("root")
    err = root
    for depth in range(1000):
        err = format_error(f"layer {depth}: {{}}", err)
    assert is_(err, root)  # nosec B101 - assert is appropriate in unit tests


def test_is_matches_original_cause_of_new():
    err = new("boom")
    assert is_(err, err.cause)  # nosec B101 - assert is appropriate in unit tests
    assert not is_(err, err)  # nosec B101 - target is never unwrapped and err is peeled off


def test_is_finds_context_behind_standard_wrapper():
    ctx = format_error("query: {}", TARGET_ERR)
    try:
        try:
            raise ctx
        except Exception as exc:
            raise RuntimeError("handler failed") from exc
    except RuntimeError as outer:
        assert is_(outer, ctx)  # nosec B101 - assert is appropriate in unit tests
        assert is_(outer, TARGET_ERR)  # nosec B101 - assert is appropriate in unit tests
