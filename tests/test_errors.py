from squarespace_commerce.exceptions import APIError, RequestError
from squarespace_commerce.http import parse_error_response

URL = "http://example.com/api"


def test_basic_error_message():
    error = parse_error_response(
        "TestEndpoint", URL, b'{"type":"ERROR_TYPE","message":"Error occurred"}', 400
    )

    assert str(error) == (
        "TestEndpoint url: http://example.com/api: status: 400, type: ERROR_TYPE, "
        "message: Error occurred"
    )
    assert "subtype" not in str(error)
    assert "detail" not in str(error)


def test_error_with_subtype():
    error = parse_error_response(
        "TestEndpoint",
        URL,
        b'{"type":"ERROR_TYPE","subtype":"SUB_ERROR","message":"Error occurred"}',
        400,
    )

    assert str(error) == (
        "TestEndpoint url: http://example.com/api: status: 400, type: ERROR_TYPE, "
        "subtype: SUB_ERROR, message: Error occurred"
    )


def test_error_with_detail():
    error = parse_error_response(
        "TestEndpoint",
        URL,
        b'{"type":"ERROR_TYPE","message":"Error occurred","detail":"Additional details"}',
        400,
    )

    assert str(error) == (
        "TestEndpoint url: http://example.com/api: status: 400, type: ERROR_TYPE, "
        "message: Error occurred, detail: Additional details"
    )


def test_structured_fields_are_exposed():
    error = parse_error_response(
        "CreateProduct",
        URL,
        b'{"type":"INVALID_REQUEST_ERROR","subtype":"INVALID_ARGUMENT",'
        b'"message":"bad","detail":"name"}',
        409,
    )

    assert isinstance(error, APIError)
    assert isinstance(error, RequestError)
    assert error.endpoint == "CreateProduct"
    assert error.url == URL
    assert error.status_code == 409
    assert error.type == "INVALID_REQUEST_ERROR"
    assert error.subtype == "INVALID_ARGUMENT"
    assert error.message == "bad"
    assert error.detail == "name"


def test_invalid_json_body_is_not_echoed():
    error = parse_error_response("TestEndpoint", URL, b"invalid json", 400)

    assert str(error) == "TestEndpoint: error unmarshalling response body: status: 400"
    assert "invalid json" not in str(error)
    assert error.type is None
    assert error.status_code == 400


def test_empty_body_is_reported_generically():
    error = parse_error_response("DeleteProduct", URL, b"", 502)

    assert str(error) == "DeleteProduct: error unmarshalling response body: status: 502"
