"""Fixed user-facing message per (operation, failure kind)."""
from shopcart.errors import (
    ERROR_ADD_PRODUCT,
    ERROR_OUT_OF_STOCK,
    ERROR_REMOVE_PRODUCT,
    ERROR_UPDATE_AMOUNT,
)
from shopcart.i18n import get_text
from .constants import CartOperation, FailureKind

_GENERIC_BY_OPERATION = {
    CartOperation.ADD: ("cart.add_failed", ERROR_ADD_PRODUCT),
    CartOperation.REMOVE: ("cart.remove_failed", ERROR_REMOVE_PRODUCT),
    CartOperation.UPDATE: ("cart.update_failed", ERROR_UPDATE_AMOUNT),
}


def failure_message(operation: CartOperation, kind: FailureKind, lang: str = "en") -> str:
    """Message shown when `operation` fails with `kind`.

    Out-of-stock has its own message; every other kind gets the
    generic message for the operation.
    """
    if kind == FailureKind.INSUFFICIENT_STOCK:
        return get_text("cart.out_of_stock", lang, default=ERROR_OUT_OF_STOCK)
    key, default = _GENERIC_BY_OPERATION[operation]
    return get_text(key, lang, default=default)
