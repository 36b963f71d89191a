import json

from app.serverless import lambda_handler


def test_lambda_handler_rest_api_event(api_key, mock_send, mock_session_cls, ok, success_body):
    """Test a REST API (v1) event end to end."""
    mock_send.return_value = ok
    event = {"httpMethod": "POST", "body": json.dumps({"prompt": "What is 2+2?"})}

    result = lambda_handler(event, context=None)

    assert result["statusCode"] == 200
    assert json.loads(result["body"]) == success_body


def test_lambda_handler_rejects_get(mock_send):
    assert lambda_handler({"httpMethod": "GET"}, context=None) == {"statusCode": 405}
    mock_send.assert_not_awaited()


def test_lambda_handler_missing_key(no_api_key, mock_send, mock_session_cls):
    event = {"httpMethod": "POST", "body": json.dumps({"prompt": "x"})}

    result = lambda_handler(event, context=None)

    assert result["statusCode"] == 500
    mock_send.assert_not_awaited()
