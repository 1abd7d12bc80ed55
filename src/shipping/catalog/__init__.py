"""Order catalog factory.

Provides get_catalog() / set_catalog() to swap implementations. The adapter
is chosen by the ORDER_CATALOG_ADAPTER environment variable ("memory" by
default).
"""

import os

from shipping.catalog.memory_adapter import InMemoryOrderCatalog
from shipping.catalog.port import OrderCatalog

_current_catalog: OrderCatalog | None = None


def get_catalog() -> OrderCatalog:
    """Return the current order catalog."""
    global _current_catalog
    if _current_catalog is None:
        adapter = os.environ.get("ORDER_CATALOG_ADAPTER", "memory")
        if adapter == "memory":
            _current_catalog = InMemoryOrderCatalog()
        else:
            raise ValueError(f"Unknown order catalog adapter: {adapter}")
    return _current_catalog


def set_catalog(catalog: OrderCatalog) -> None:
    """Override the active order catalog (useful for tests)."""
    global _current_catalog
    _current_catalog = catalog


def reset_catalog() -> None:
    """Reset to the default catalog."""
    global _current_catalog
    _current_catalog = None
