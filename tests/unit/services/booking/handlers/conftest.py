import json
from dataclasses import dataclass

import pytest

from services.booking.handlers import dependencies


@dataclass
class FakeLambdaContext:
    function_name: str = "booking-handler"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:booking-handler"
    )
    aws_request_id: str = "request-123"


@pytest.fixture(autouse=True)
def settings_env(monkeypatch):
    """ハンドラーが読む環境変数（設定のキャッシュはテストごとに破棄する）"""
    monkeypatch.setenv("BOOKINGS_TABLE", "bookings")
    monkeypatch.delenv("SEAT_CLAIMS_TABLE", raising=False)
    monkeypatch.setenv("POWERTOOLS_SERVICE_NAME", "booking-service")
    dependencies.get_settings.cache_clear()
    yield
    dependencies.get_settings.cache_clear()


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST) のプロキシイベントを生成する Factory fixture"""

    def _factory(
        method: str = "GET",
        body: dict | str | None = None,
        path_parameters: dict | None = None,
        query_parameters: dict | None = None,
    ) -> dict:
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "resource": "/bookings",
            "path": "/bookings",
            "httpMethod": method,
            "headers": {"Content-Type": "application/json"},
            "pathParameters": path_parameters,
            "queryStringParameters": query_parameters,
            "requestContext": {"requestId": "request-123", "stage": "prod"},
            "body": body,
            "isBase64Encoded": False,
        }

    return _factory
