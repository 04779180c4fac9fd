from __future__ import annotations

from order_result.core.domain.model.diagnostic import (
    INFRASTRUCTURE_CODES,
    Diagnostic,
    ErrorCodes,
)


def test_new_diagnostic_defaults():
    diag = Diagnostic("something broke")
    assert diag.code == ErrorCodes.UNKNOWN
    assert diag.context == {}
    assert diag.cause is None


def test_with_context_keeps_insertion_order_and_overwrites():
    diag = (
        Diagnostic("x", "C")
        .with_context("b", 1)
        .with_context("a", 2)
        .with_context("b", 3)
    )
    assert list(diag.context.items()) == [("b", 3), ("a", 2)]


def test_wrap_keeps_original_as_cause():
    inner = Diagnostic("Timeout expired", ErrorCodes.DB_TIMEOUT)
    outer = inner.wrap("Failed to check inventory", ErrorCodes.RESERVATION_FAILED)
    assert outer is not inner
    assert outer.cause is inner
    assert outer.context == {}
    assert inner.cause is None


def test_render_includes_whole_chain():
    inner = Diagnostic("Timeout expired", ErrorCodes.DB_TIMEOUT).with_context("itemId", 1)
    outer = inner.wrap("Order 4 failed", ErrorCodes.ORDER_FAILED).with_context("orderId", 4)
    assert str(inner) == "[DB_TIMEOUT] Timeout expired {itemId=1}"
    assert str(outer) == (
        "[ORDER_FAILED] Order 4 failed {orderId=4} -> "
        "[DB_TIMEOUT] Timeout expired {itemId=1}"
    )


def test_render_without_context():
    assert str(Diagnostic("plain", "P")) == "[P] plain"


def test_cause_chain_helpers():
    root = Diagnostic("root", ErrorCodes.DB_CONNECTION)
    mid = root.wrap("mid", ErrorCodes.RESERVATION_FAILED)
    top = mid.wrap("top", ErrorCodes.ORDER_FAILED)
    assert [d.code for d in top.causes()] == [
        ErrorCodes.ORDER_FAILED,
        ErrorCodes.RESERVATION_FAILED,
        ErrorCodes.DB_CONNECTION,
    ]
    assert top.root_cause() is root
    assert top.find(ErrorCodes.RESERVATION_FAILED) is mid
    assert top.find(ErrorCodes.ITEM_NOT_FOUND) is None
    assert root.code in INFRASTRUCTURE_CODES
