import json

from pydantic import BaseModel, ValidationError

from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    InvalidInputException,
    OptimisticLockException,
    ResourceNotFoundException,
)


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    error: str
    details: list[dict] | None = None


def api_response(status_code: int, body: dict | BaseModel) -> dict:
    """API Gateway Lambda Proxy Integration のレスポンス形式を生成する"""
    if isinstance(body, BaseModel):
        body = body.model_dump(mode="json", exclude_none=True)
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


# 上から順に評価するため、サブクラスを先に並べる
_STATUS_BY_EXCEPTION: list[tuple[type[Exception], int]] = [
    (ResourceNotFoundException, 404),
    (InvalidInputException, 400),
    (BusinessRuleViolationException, 409),
    (OptimisticLockException, 409),
    (DuplicateResourceException, 409),
    (ValueError, 400),
]


def error_response(exc: Exception) -> dict:
    """例外を HTTP エラーレスポンスに変換する

    分類できない例外は 500 とし、内部のメッセージは返さない。
    """
    if isinstance(exc, ValidationError):
        details = [
            {"loc": ".".join(str(p) for p in e["loc"]), "msg": e["msg"]}
            for e in exc.errors()
        ]
        return api_response(
            400, ErrorResponse(error="Invalid request", details=details)
        )

    for exc_type, status_code in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return api_response(status_code, ErrorResponse(error=str(exc)))

    return api_response(500, ErrorResponse(error="Internal server error"))
