import pytest

from tweetapi.errors import (
    ErrorDetail,
    ErrorObj,
    ErrorResponse,
    HTTPError,
    ParameterError,
)


def test_parameter_error_default_message():
    assert str(ParameterError()) == "twitter input parameter error"


def test_parameter_error_is_value_error():
    err = ParameterError("tweet lookup: an id is required")
    assert isinstance(err, ValueError)
    assert "an id is required" in str(err)


def test_http_error_str():
    err = HTTPError("404 Not Found", 404, "https://api.example.com/2/x")
    assert str(err) == "twitter [https://api.example.com/2/x] status: 404 Not Found code: 404"
    assert err.status_code == 404


def test_error_obj_from_dict():
    obj = ErrorObj.from_dict(
        {
            "title": "Not Found Error",
            "detail": "Could not find tweet",
            "type": "resource-not-found",
            "resource_type": "tweet",
            "parameter": "id",
            "value": "123",
        }
    )
    assert obj == ErrorObj(
        title="Not Found Error",
        detail="Could not find tweet",
        type="resource-not-found",
        resource_type="tweet",
        parameter="id",
        value="123",
    )


def test_error_obj_missing_keys_default():
    assert ErrorObj.from_dict({}) == ErrorObj()


def test_error_detail_from_dict():
    detail = ErrorDetail.from_dict({"parameters": {"ids": ["x"]}, "message": "bad"})
    assert detail.parameters == {"ids": ["x"]}
    assert detail.message == "bad"


def test_error_response_from_dict():
    resp = ErrorResponse.from_dict(
        {
            "errors": [{"parameters": {}, "message": "m"}],
            "title": "Invalid Request",
            "detail": "One or more parameters are invalid.",
            "type": "invalid-request",
        },
        400,
    )
    assert resp.status_code == 400
    assert resp.errors == [ErrorDetail(parameters={}, message="m")]
    assert resp.type == "invalid-request"
    assert str(resp) == "twitter callout status 400 Invalid Request:One or more parameters are invalid."


def test_error_response_constructed_directly():
    err = ErrorResponse(status_code=401, title="Unauthorized", detail="d")
    assert isinstance(err, Exception)
    assert err.status_code == 401
    assert err.errors == []
    assert str(err) == "twitter callout status 401 Unauthorized:d"


def test_error_response_rejects_non_object():
    with pytest.raises(ValueError):
        ErrorResponse.from_dict(["not", "a", "dict"], 500)