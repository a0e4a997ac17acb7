"""Products API records."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from .base import Amount, CommerceModel, Pagination


class StorePage(CommerceModel):
    id: str | None = None
    title: str | None = None
    is_enabled: bool = False


class StorePagesResponse(CommerceModel):
    store_pages: list[StorePage] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


class Pricing(CommerceModel):
    base_price: Amount | None = None
    on_sale: bool | None = None
    sale_price: Amount | None = None


class Stock(CommerceModel):
    quantity: int | None = None
    unlimited: bool | None = None


class Weight(CommerceModel):
    unit: str | None = None
    value: float | None = None


class Dimensions(CommerceModel):
    unit: str | None = None
    length: float | None = None
    width: float | None = None
    height: float | None = None


class ShippingMeasurements(CommerceModel):
    weight: Weight | None = None
    dimensions: Dimensions | None = None


class ImageSize(CommerceModel):
    width: int | None = None
    height: int | None = None


class ProductImage(CommerceModel):
    id: str | None = None
    alt_text: str | None = None
    url: str | None = None
    original_size: ImageSize | None = None
    available_formats: list[str] = Field(default_factory=list)


class ProductVariant(CommerceModel):
    id: str | None = None
    sku: str | None = None
    pricing: Pricing | None = None
    stock: Stock | None = None
    attributes: dict[str, str] | None = None
    shipping_measurements: ShippingMeasurements | None = None
    image: ProductImage | None = None


class SEOOptions(CommerceModel):
    title: str | None = None
    description: str | None = None


class DigitalGood(CommerceModel):
    id: str | None = None
    filename: str | None = None


class Product(CommerceModel):
    id: str | None = None
    type: str | None = None
    store_page_id: str | None = None
    name: str | None = None
    description: str | None = None
    url: str | None = None
    url_slug: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_visible: bool = False
    seo_options: SEOOptions | None = None
    variant_attributes: list[str] = Field(default_factory=list)
    variants: list[ProductVariant] = Field(default_factory=list)
    images: list[ProductImage] = Field(default_factory=list)
    pricing: Pricing | None = None
    digital_good: DigitalGood | None = None
    created_on: datetime | None = None
    modified_on: datetime | None = None


class ProductsResponse(CommerceModel):
    products: list[Product] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


class CreateProductRequest(CommerceModel):
    type: str
    store_page_id: str
    name: str | None = None
    description: str | None = None
    url_slug: str | None = None
    tags: list[str] | None = None
    is_visible: bool = False
    variant_attributes: list[str] | None = None
    variants: list[ProductVariant] = Field(default_factory=list)


class UpdateProductRequest(CommerceModel):
    """Partial update; fields left as None are not sent."""

    name: str | None = None
    description: str | None = None
    url_slug: str | None = None
    tags: list[str] | None = None
    is_visible: bool | None = None
    variant_attributes: list[str] | None = None
    seo_options: SEOOptions | None = None


class CreateProductVariantRequest(CommerceModel):
    sku: str
    pricing: Pricing
    stock: Stock | None = None
    attributes: dict[str, str] | None = None
    shipping_measurements: ShippingMeasurements | None = None


class UpdateProductVariantRequest(CommerceModel):
    sku: str | None = None
    pricing: Pricing | None = None
    attributes: dict[str, str] | None = None
    shipping_measurements: ShippingMeasurements | None = None


class UpdateProductImageRequest(CommerceModel):
    alt_text: str


class AssignProductImageToVariantRequest(CommerceModel):
    """Set a variant image; None removes the current one."""

    image_id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return {"imageId": self.image_id}


class ReorderProductImageRequest(CommerceModel):
    """Move an image after ``after_image_id``; None moves it to the front."""

    after_image_id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        # The API treats a missing field and null differently, always send it.
        return {"afterImageId": self.after_image_id}


class UploadProductImageResponse(CommerceModel):
    image_id: str | None = None


class ImageUploadStatusResponse(CommerceModel):
    status: str | None = None
