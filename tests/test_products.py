from urllib.parse import parse_qs, urlparse

import pytest
import requests_mock as requests_mock_module
from requests_toolbelt import MultipartEncoder

from squarespace_commerce import CommerceClient, QueryParams
from squarespace_commerce.exceptions import APIError, ValidationError
from squarespace_commerce.models import (
    Amount,
    CreateProductRequest,
    CreateProductVariantRequest,
    Pricing,
    UpdateProductImageRequest,
    UpdateProductRequest,
)

BASE = "https://mock.test/1.0/commerce"


def build_client():
    return CommerceClient(api_key="test-key", user_agent="test-agent", base_url="https://mock.test")


def query_of(request):
    return parse_qs(urlparse(request.url).query)


def test_create_product_returns_typed_record(requests_mock):
    matcher = requests_mock.post(
        f"{BASE}/products",
        status_code=201,
        json={
            "id": "prod123",
            "type": "PHYSICAL",
            "storePageId": "page1",
            "name": "Test Product",
            "createdOn": "2024-01-01T00:00:00Z",
        },
        additional_matcher=lambda request: request.json()
        == {"type": "PHYSICAL", "storePageId": "page1", "name": "Test Product", "isVisible": False, "variants": []},
    )
    client = build_client()

    product = client.products.create(
        CreateProductRequest(type="PHYSICAL", store_page_id="page1", name="Test Product")
    )

    assert product.id == "prod123"
    assert product.store_page_id == "page1"
    assert product.created_on.year == 2024
    assert matcher.last_request.headers["Content-Type"] == "application/json"


def test_create_product_error_carries_remote_message(requests_mock):
    requests_mock.post(
        f"{BASE}/products",
        status_code=400,
        json={"type": "INVALID_REQUEST_ERROR", "message": "Invalid product data"},
    )
    client = build_client()

    with pytest.raises(APIError) as excinfo:
        client.products.create(CreateProductRequest(type="PHYSICAL", store_page_id="page1"))

    assert "CreateProduct url: https://mock.test/1.0/commerce/products: status: 400" in str(excinfo.value)
    assert "Invalid product data" in str(excinfo.value)
    assert excinfo.value.status_code == 400


def test_unexpected_success_status_is_an_error(requests_mock):
    requests_mock.post(
        f"{BASE}/products",
        status_code=200,
        json={"type": "UNEXPECTED", "message": "created elsewhere"},
    )
    client = build_client()

    with pytest.raises(APIError) as excinfo:
        client.products.create(CreateProductRequest(type="PHYSICAL", store_page_id="page1"))

    assert excinfo.value.status_code == 200


def test_list_products_sends_type_and_window(requests_mock):
    matcher = requests_mock.get(
        f"{BASE}/products",
        json={
            "products": [{"id": "p1", "name": "Mug"}],
            "pagination": {"hasNextPage": True, "nextPageCursor": "next"},
        },
    )
    client = build_client()

    page = client.products.list(
        QueryParams(
            type="PHYSICAL,DIGITAL",
            modified_after="2024-01-01T00:00:00Z",
            modified_before="2024-02-01T00:00:00Z",
        )
    )

    assert page.products[0].name == "Mug"
    assert page.pagination.has_next_page is True
    assert page.pagination.next_page_cursor == "next"
    assert query_of(matcher.last_request) == {
        "type": ["PHYSICAL,DIGITAL"],
        "modifiedAfter": ["2024-01-01T00:00:00Z"],
        "modifiedBefore": ["2024-02-01T00:00:00Z"],
    }


def test_list_products_with_cursor_only(requests_mock):
    matcher = requests_mock.get(f"{BASE}/products", json={"products": []})

    build_client().products.list(QueryParams(cursor="abc"))

    assert query_of(matcher.last_request) == {"cursor": ["abc"]}


def test_list_products_type_rules(requests_mock):
    client = build_client()

    with pytest.raises(ValidationError, match="type is required when cursor is not specified"):
        client.products.list()
    with pytest.raises(ValidationError, match="cannot use cursor alongside"):
        client.products.list(QueryParams(cursor="abc", type="PHYSICAL"))
    with pytest.raises(ValidationError, match="invalid type"):
        client.products.list(QueryParams(type="BOTH"))

    assert requests_mock.call_count == 0


def test_get_products_joins_ids(requests_mock):
    requests_mock.get(f"{BASE}/products/a,b", json={"products": [{"id": "a"}, {"id": "b"}]})

    page = build_client().products.get(["a", "b"])

    assert [product.id for product in page.products] == ["a", "b"]


def test_get_products_rejects_more_than_fifty_ids(requests_mock):
    client = build_client()

    with pytest.raises(ValidationError, match="cannot retrieve more than 50 product IDs"):
        client.products.get([f"id{i}" for i in range(51)])

    assert requests_mock.call_count == 0


def test_update_product_sends_only_set_fields(requests_mock):
    requests_mock.post(
        f"{BASE}/products/prod123",
        json={"id": "prod123", "name": "Renamed"},
        additional_matcher=lambda request: request.json() == {"name": "Renamed"},
    )

    product = build_client().products.update("prod123", UpdateProductRequest(name="Renamed"))

    assert product.name == "Renamed"


def test_delete_product_returns_status(requests_mock):
    requests_mock.delete(f"{BASE}/products/prod123", status_code=204)

    assert build_client().products.delete("prod123") == 204


def test_delete_product_requires_id(requests_mock):
    with pytest.raises(ValidationError, match="productID is required"):
        build_client().products.delete("")

    assert requests_mock.call_count == 0


def test_create_variant(requests_mock):
    requests_mock.post(
        f"{BASE}/products/prod123/variants",
        status_code=201,
        json={"id": "var1", "sku": "SKU-1"},
        additional_matcher=lambda request: request.json()
        == {"sku": "SKU-1", "pricing": {"basePrice": {"currency": "USD", "value": "10.00"}}},
    )
    request = CreateProductVariantRequest(
        sku="SKU-1", pricing=Pricing(base_price=Amount(currency="USD", value="10.00"))
    )

    variant = build_client().products.create_variant("prod123", request)

    assert variant.id == "var1"


def test_delete_variant_requires_variant_id(requests_mock):
    with pytest.raises(ValidationError, match="variantID is required"):
        build_client().products.delete_variant("prod123", " ")

    assert requests_mock.call_count == 0


def test_upload_image_sends_multipart_file(requests_mock, tmp_path):
    image = tmp_path / "photo.png"
    image.write_bytes(b"\x89PNG fake image")
    sent: list[bytes] = []

    def record_body(request, context):
        sent.append(request.body.read())
        return {"imageId": "img1"}

    matcher = requests_mock.post(
        f"{BASE}/products/prod123/images",
        status_code=202,
        json=record_body,
    )

    response = build_client().products.upload_image("prod123", image)

    assert response.image_id == "img1"
    request = matcher.last_request
    assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    assert b'name="file"; filename="photo.png"' in sent[0]
    assert b"Content-Type: application/octet-stream" in sent[0]
    assert b"fake image" in sent[0]


def test_upload_image_streams_large_file(requests_mock, tmp_path):
    image = tmp_path / "large.png"
    image.write_bytes(b"x" * (5 * 1024 * 1024))
    chunk_sizes: list[int] = []

    def read_first_chunk(request, context):
        chunk_sizes.append(len(request.body.read(8192)))
        return {"imageId": "img2"}

    matcher = requests_mock.post(
        f"{BASE}/products/prod123/images",
        status_code=202,
        json=read_first_chunk,
    )

    build_client().products.upload_image("prod123", image)

    body = matcher.last_request.body
    assert isinstance(body, MultipartEncoder)
    assert not isinstance(body, bytes)
    assert body.content_type == matcher.last_request.headers["Content-Type"]
    assert int(matcher.last_request.headers["Content-Length"]) > 5 * 1024 * 1024
    assert chunk_sizes == [8192]


def test_upload_image_missing_file(requests_mock, tmp_path):
    with pytest.raises(ValidationError, match="failed to open file"):
        build_client().products.upload_image("prod123", tmp_path / "missing.png")

    assert requests_mock.call_count == 0


def test_image_upload_status(requests_mock):
    requests_mock.get(f"{BASE}/products/prod123/images/img1/status", json={"status": "READY"})

    status = build_client().products.get_image_upload_status("prod123", "img1")

    assert status.status == "READY"


def test_update_image_alt_text(requests_mock):
    requests_mock.post(
        f"{BASE}/products/prod123/images/img1",
        json={"id": "img1", "altText": "A mug"},
        additional_matcher=lambda request: request.json() == {"altText": "A mug"},
    )

    image = build_client().products.update_image(
        "prod123", "img1", UpdateProductImageRequest(alt_text="A mug")
    )

    assert image.alt_text == "A mug"


def test_delete_image(requests_mock):
    requests_mock.delete(f"{BASE}/products/prod123/images/img1", status_code=204)

    assert build_client().products.delete_image("prod123", "img1") == 204


def test_reorder_image_to_front_sends_null(requests_mock):
    requests_mock.post(
        f"{BASE}/products/prod123/images/img2/order",
        status_code=204,
        additional_matcher=lambda request: request.json() == {"afterImageId": None},
    )

    assert build_client().products.reorder_image("prod123", "img2") == 204


def test_reorder_image_after_other_image(requests_mock):
    requests_mock.post(
        f"{BASE}/products/prod123/images/img2/order",
        status_code=204,
        additional_matcher=lambda request: request.json() == {"afterImageId": "img1"},
    )

    assert build_client().products.reorder_image("prod123", "img2", "img1") == 204


def test_assign_image_to_variant(requests_mock):
    requests_mock.post(
        f"{BASE}/products/prod123/variants/var1/image",
        status_code=204,
        additional_matcher=lambda request: request.json() == {"imageId": "img1"},
    )

    assert build_client().products.assign_image_to_variant("prod123", "var1", "img1") == 204


def test_store_pages(requests_mock):
    requests_mock.get(
        f"{BASE}/store_pages",
        json={"storePages": [{"id": "page1", "title": "Shop", "isEnabled": True}]},
    )

    pages = build_client().products.list_store_pages()

    assert pages.store_pages[0].title == "Shop"
    assert pages.store_pages[0].is_enabled is True
    assert pages.pagination.has_next_page is False


def test_product_id_is_escaped_into_one_segment(requests_mock):
    matcher = requests_mock.delete(requests_mock_module.ANY, status_code=204)

    build_client().products.delete("../orders")

    assert matcher.last_request.url == "https://mock.test/1.0/commerce/products/..%2Forders"


def test_dot_segment_ids_are_rejected(requests_mock):
    with pytest.raises(ValidationError, match="path identifier cannot be '..'"):
        build_client().products.delete_image("prod123", "..")
    with pytest.raises(ValidationError, match="path identifier cannot be '.'"):
        build_client().inventory.get(["v1", "."])

    assert requests_mock.call_count == 0


def test_bulk_ids_are_escaped_before_joining(requests_mock):
    matcher = requests_mock.get(requests_mock_module.ANY, json={"products": []})

    build_client().products.get(["a/b", "c?d", "e"])

    assert matcher.last_request.url == "https://mock.test/1.0/commerce/products/a%2Fb,c%3Fd,e"
