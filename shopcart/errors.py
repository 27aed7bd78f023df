"""
Common Error Constants

Default (English) user-facing messages for cart failures.
Translations live in shopcart/i18n/locales/*.json.
"""

ERROR_OUT_OF_STOCK = "Requested quantity is out of stock"
ERROR_ADD_PRODUCT = "Failed to add product"
ERROR_REMOVE_PRODUCT = "Failed to remove product"
ERROR_UPDATE_AMOUNT = "Failed to update product quantity"
