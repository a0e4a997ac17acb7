"""Typed request and response records for the Commerce APIs."""
from .base import Address, Amount, CommerceModel, Pagination
from .inventory import (
    AdjustStockQuantitiesRequest,
    InventoryItem,
    InventoryResponse,
    QuantityOperation,
)
from .orders import (
    CreateOrderLineItem,
    CreateOrderRequest,
    FulfillOrderRequest,
    Order,
    OrderLineItem,
    OrdersResponse,
    Shipment,
)
from .products import (
    AssignProductImageToVariantRequest,
    CreateProductRequest,
    CreateProductVariantRequest,
    ImageUploadStatusResponse,
    Pricing,
    Product,
    ProductImage,
    ProductsResponse,
    ProductVariant,
    ReorderProductImageRequest,
    SEOOptions,
    Stock,
    StorePage,
    StorePagesResponse,
    UpdateProductImageRequest,
    UpdateProductRequest,
    UpdateProductVariantRequest,
    UploadProductImageResponse,
)
from .profiles import Profile, ProfilesResponse
from .transactions import TransactionDocument, TransactionsResponse
from .webhooks import (
    RotateSecretResponse,
    SendTestNotificationRequest,
    SendTestNotificationResponse,
    WebhookSubscription,
    WebhookSubscriptionRequest,
    WebhookSubscriptionsResponse,
)

__all__ = [
    "Address",
    "AdjustStockQuantitiesRequest",
    "Amount",
    "AssignProductImageToVariantRequest",
    "CommerceModel",
    "CreateOrderLineItem",
    "CreateOrderRequest",
    "CreateProductRequest",
    "CreateProductVariantRequest",
    "FulfillOrderRequest",
    "ImageUploadStatusResponse",
    "InventoryItem",
    "InventoryResponse",
    "Order",
    "OrderLineItem",
    "OrdersResponse",
    "Pagination",
    "Pricing",
    "Product",
    "ProductImage",
    "ProductVariant",
    "ProductsResponse",
    "Profile",
    "ProfilesResponse",
    "QuantityOperation",
    "ReorderProductImageRequest",
    "RotateSecretResponse",
    "SEOOptions",
    "SendTestNotificationRequest",
    "SendTestNotificationResponse",
    "Shipment",
    "Stock",
    "StorePage",
    "StorePagesResponse",
    "TransactionDocument",
    "TransactionsResponse",
    "UpdateProductImageRequest",
    "UpdateProductRequest",
    "UpdateProductVariantRequest",
    "UploadProductImageResponse",
    "WebhookSubscription",
    "WebhookSubscriptionRequest",
    "WebhookSubscriptionsResponse",
]
