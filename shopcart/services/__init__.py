# Services Module
#
# Imports are lazy: cart models import money helpers from here, while the
# catalog and notifiers import cart contracts.
__all__ = ["HttpCatalogService", "LogNotifier", "CollectingNotifier"]


def __getattr__(name):
    if name == "HttpCatalogService":
        from .catalog import HttpCatalogService
        return HttpCatalogService
    if name in ("LogNotifier", "CollectingNotifier"):
        from . import notifications
        return getattr(notifications, name)
    raise AttributeError(f"module 'shopcart.services' has no attribute '{name}'")
