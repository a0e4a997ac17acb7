"""Product, variant and image operations."""

from __future__ import annotations

import os
from collections.abc import Sequence

from requests_toolbelt import MultipartEncoder

from ..exceptions import ValidationError
from ..models.products import (
    AssignProductImageToVariantRequest,
    CreateProductRequest,
    CreateProductVariantRequest,
    ImageUploadStatusResponse,
    Product,
    ProductImage,
    ProductsResponse,
    ProductVariant,
    ReorderProductImageRequest,
    StorePagesResponse,
    UpdateProductImageRequest,
    UpdateProductRequest,
    UpdateProductVariantRequest,
    UploadProductImageResponse,
)
from ..operations import Operation
from ..query import QueryParams, require_id
from .base import ResourceBase

LIST_STORE_PAGES = Operation("RetrieveAllStorePages", "GET", "commerce/store_pages", 200, StorePagesResponse)
LIST_PRODUCTS = Operation("RetrieveAllProducts", "GET", "commerce/products", 200, ProductsResponse)
GET_PRODUCTS = Operation("RetrieveSpecificProducts", "GET", "commerce/products/{ids}", 200, ProductsResponse)
CREATE_PRODUCT = Operation("CreateProduct", "POST", "commerce/products", 201, Product)
UPDATE_PRODUCT = Operation("UpdateProduct", "POST", "commerce/products/{product_id}", 200, Product)
DELETE_PRODUCT = Operation("DeleteProduct", "DELETE", "commerce/products/{product_id}", 204)
CREATE_VARIANT = Operation(
    "CreateProductVariant", "POST", "commerce/products/{product_id}/variants", 201, ProductVariant
)
UPDATE_VARIANT = Operation(
    "UpdateProductVariant",
    "POST",
    "commerce/products/{product_id}/variants/{variant_id}",
    200,
    ProductVariant,
)
DELETE_VARIANT = Operation(
    "DeleteProductVariant", "DELETE", "commerce/products/{product_id}/variants/{variant_id}", 204
)
UPLOAD_IMAGE = Operation(
    "UploadProductImage", "POST", "commerce/products/{product_id}/images", 202, UploadProductImageResponse
)
IMAGE_UPLOAD_STATUS = Operation(
    "GetProductImageUploadStatus",
    "GET",
    "commerce/products/{product_id}/images/{image_id}/status",
    200,
    ImageUploadStatusResponse,
)
UPDATE_IMAGE = Operation(
    "UpdateProductImage", "POST", "commerce/products/{product_id}/images/{image_id}", 200, ProductImage
)
DELETE_IMAGE = Operation(
    "DeleteProductImage", "DELETE", "commerce/products/{product_id}/images/{image_id}", 204
)
REORDER_IMAGE = Operation(
    "ReorderProductImage", "POST", "commerce/products/{product_id}/images/{image_id}/order", 204
)
ASSIGN_IMAGE = Operation(
    "AssignProductImageToVariant",
    "POST",
    "commerce/products/{product_id}/variants/{variant_id}/image",
    204,
)


class ProductsResource(ResourceBase):
    """Work with store pages, products, variants and product images."""

    def list_store_pages(self, params: QueryParams | None = None) -> StorePagesResponse:
        return self._list(LIST_STORE_PAGES, params, ("cursor",))

    def list(self, params: QueryParams | None = None) -> ProductsResponse:
        """Retrieve a page of products.

        Without a cursor a ``type`` filter (PHYSICAL, DIGITAL or both) is
        required; with a cursor no type may be given.
        """
        params = params or QueryParams()
        if params.cursor and params.type:
            raise ValidationError(
                "cannot use cursor alongside modifiedAfter, modifiedBefore, or type"
            )
        if not params.cursor and not params.type:
            raise ValidationError("type is required when cursor is not specified")
        return self._list(
            LIST_PRODUCTS, params, ("cursor", "modified_after", "modified_before", "type")
        )

    def get(self, product_ids: Sequence[str]) -> ProductsResponse:
        return self._get_many(GET_PRODUCTS, product_ids, "product")

    def create(self, request: CreateProductRequest) -> Product:
        return self._execute(CREATE_PRODUCT, payload=request)

    def update(self, product_id: str, request: UpdateProductRequest) -> Product:
        return self._execute(
            UPDATE_PRODUCT,
            path_args={"product_id": require_id(product_id, "productID")},
            payload=request,
        )

    def delete(self, product_id: str) -> int:
        return self._execute(
            DELETE_PRODUCT, path_args={"product_id": require_id(product_id, "productID")}
        )

    def create_variant(self, product_id: str, request: CreateProductVariantRequest) -> ProductVariant:
        return self._execute(
            CREATE_VARIANT,
            path_args={"product_id": require_id(product_id, "productID")},
            payload=request,
        )

    def update_variant(
        self, product_id: str, variant_id: str, request: UpdateProductVariantRequest
    ) -> ProductVariant:
        return self._execute(
            UPDATE_VARIANT,
            path_args=self._variant_path(product_id, variant_id),
            payload=request,
        )

    def delete_variant(self, product_id: str, variant_id: str) -> int:
        return self._execute(DELETE_VARIANT, path_args=self._variant_path(product_id, variant_id))

    def upload_image(self, product_id: str, file_path: str | os.PathLike[str]) -> UploadProductImageResponse:
        """Upload a local image file as a multipart ``file`` field.

        The file is read in chunks while the request body is sent.
        """

        path_args = {"product_id": require_id(product_id, "productID")}
        try:
            handle = open(file_path, "rb")
        except OSError as exc:
            raise ValidationError(f"failed to open file: {exc}") from exc
        with handle:
            filename = os.path.basename(os.fspath(file_path))
            encoder = MultipartEncoder(
                fields={"file": (filename, handle, "application/octet-stream")}
            )
            return self._execute(UPLOAD_IMAGE, path_args=path_args, data=encoder)

    def get_image_upload_status(self, product_id: str, image_id: str) -> ImageUploadStatusResponse:
        return self._execute(IMAGE_UPLOAD_STATUS, path_args=self._image_path(product_id, image_id))

    def update_image(
        self, product_id: str, image_id: str, request: UpdateProductImageRequest
    ) -> ProductImage:
        return self._execute(
            UPDATE_IMAGE, path_args=self._image_path(product_id, image_id), payload=request
        )

    def delete_image(self, product_id: str, image_id: str) -> int:
        return self._execute(DELETE_IMAGE, path_args=self._image_path(product_id, image_id))

    def reorder_image(self, product_id: str, image_id: str, after_image_id: str | None = None) -> int:
        """Move an image after ``after_image_id``, or to the front when None."""

        return self._execute(
            REORDER_IMAGE,
            path_args=self._image_path(product_id, image_id),
            payload=ReorderProductImageRequest(after_image_id=after_image_id),
        )

    def assign_image_to_variant(self, product_id: str, variant_id: str, image_id: str | None) -> int:
        """Assign an image to a variant; None removes the variant's image."""

        return self._execute(
            ASSIGN_IMAGE,
            path_args=self._variant_path(product_id, variant_id),
            payload=AssignProductImageToVariantRequest(image_id=image_id),
        )

    @staticmethod
    def _variant_path(product_id: str, variant_id: str) -> dict[str, str]:
        return {
            "product_id": require_id(product_id, "productID"),
            "variant_id": require_id(variant_id, "variantID"),
        }

    @staticmethod
    def _image_path(product_id: str, image_id: str) -> dict[str, str]:
        return {
            "product_id": require_id(product_id, "productID"),
            "image_id": require_id(image_id, "imageID"),
        }
