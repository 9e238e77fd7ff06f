import json
from decimal import Decimal

DEFAULT_ALLOWED_HEADERS = "Content-Type,Authorization"


def _json_default(value: object) -> object:
    """json.dumps で扱えない値を変換する

    DynamoDB から読んだ数値は Decimal になるため、JSON の数値として返す。
    """
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return str(value)


def cors_headers(methods: str, allow_origin: str = "*") -> dict:
    """CORS ヘッダーを生成する"""
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Headers": DEFAULT_ALLOWED_HEADERS,
        "Access-Control-Allow-Methods": methods,
    }


def api_response(status_code: int, body: dict, headers: dict | None = None) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": headers or {"Content-Type": "application/json"},
        "body": json.dumps(body, default=_json_default),
    }


def preflight_response(headers: dict) -> dict:
    """OPTIONS（プリフライト）への応答"""
    return {
        "statusCode": 200,
        "headers": headers,
        "body": "",
    }


def error_response(status_code: int, message: str, headers: dict | None = None) -> dict:
    """{"error": message} 形式のエラーレスポンス"""
    return api_response(status_code, {"error": message}, headers)
