"""Resource-specific convenience wrappers."""
from .inventory import InventoryResource
from .orders import OrdersResource
from .products import ProductsResource
from .profiles import ProfilesResource
from .transactions import TransactionsResource
from .webhooks import WebhooksResource

__all__ = [
    "ProductsResource",
    "InventoryResource",
    "OrdersResource",
    "ProfilesResource",
    "TransactionsResource",
    "WebhooksResource",
]
