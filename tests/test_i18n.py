"""Tests for i18n translations and failure messages"""
import pytest

from shopcart.cart.constants import CartOperation, FailureKind
from shopcart.cart.messages import failure_message
from shopcart.i18n import SUPPORTED_LANGUAGES, detect_language, get_text


def test_get_text_existing_key():
    """Test getting existing translation"""
    assert get_text("cart.out_of_stock", "pt") == "Quantidade solicitada fora de estoque"


def test_get_text_missing_key_returns_default():
    assert get_text("cart.non_existent", "pt", default="fallback") == "fallback"
    assert get_text("cart.non_existent", "pt") == "cart.non_existent"


def test_get_text_section_key_is_not_text():
    """Test a partial key pointing at a section"""
    assert get_text("cart", "en") == "cart"


def test_unsupported_language_falls_back_to_english():
    assert get_text("cart.add_failed", "de") == "Failed to add product"


@pytest.mark.parametrize("code,expected", [
    ("pt-BR", "pt"),
    ("pt_BR", "pt"),
    ("EN", "en"),
    ("ru", "en"),
    (None, "en"),
])
def test_detect_language(code, expected):
    assert detect_language(code) == expected


def test_supported_languages():
    assert "en" in SUPPORTED_LANGUAGES
    assert "pt" in SUPPORTED_LANGUAGES


def test_out_of_stock_message_for_every_operation():
    for operation in CartOperation:
        assert failure_message(operation, FailureKind.INSUFFICIENT_STOCK) == "Requested quantity is out of stock"


@pytest.mark.parametrize("kind", [
    FailureKind.FETCH_FAILURE,
    FailureKind.NOT_FOUND,
    FailureKind.UNKNOWN_FAILURE,
])
def test_generic_message_per_operation(kind):
    """Test every non-stock failure shares the operation's generic message"""
    assert failure_message(CartOperation.ADD, kind) == "Failed to add product"
    assert failure_message(CartOperation.REMOVE, kind) == "Failed to remove product"
    assert failure_message(CartOperation.UPDATE, kind) == "Failed to update product quantity"


def test_portuguese_messages():
    assert failure_message(CartOperation.ADD, FailureKind.FETCH_FAILURE, "pt") == "Erro na adição do produto"
    assert failure_message(CartOperation.UPDATE, FailureKind.NOT_FOUND, "pt") == "Erro na alteração de quantidade do produto"
