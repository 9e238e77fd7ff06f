import json

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    InvalidInputException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from services.shared.utils import error_response

logger = Logger(child=True)


def _validation_message(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(loc) for loc in first.get("loc", ())) or "body"
    return f"Invalid value for {field}: {first.get('msg', 'invalid')}"


def to_error_response(error: Exception, headers: dict, failure_message: str) -> dict:
    """例外を HTTP のエラーレスポンスに変換する

    4xx は例外のメッセージをそのまま返し、5xx は内部情報を含めない
    固定メッセージ（failure_message）を返す。
    """
    if isinstance(error, InvalidInputException):
        logger.info("Invalid request", extra={"field": error.field})
        return error_response(400, str(error), headers)
    if isinstance(error, ValidationError):
        logger.info("Request validation failed")
        return error_response(400, _validation_message(error), headers)
    if isinstance(error, json.JSONDecodeError):
        logger.info("Request body is not valid JSON")
        return error_response(400, "Invalid JSON body", headers)
    if isinstance(error, BusinessRuleViolationException):
        logger.info("Business rule violated", extra={"reason": str(error)})
        return error_response(400, str(error), headers)
    if isinstance(error, ResourceNotFoundException):
        logger.info(str(error))
        return error_response(404, str(error), headers)
    if isinstance(error, (DuplicateResourceException, OptimisticLockException)):
        logger.warning("Booking conflict", extra={"reason": str(error)})
        return error_response(409, str(error), headers)

    logger.exception(failure_message)
    return error_response(500, failure_message, headers)
