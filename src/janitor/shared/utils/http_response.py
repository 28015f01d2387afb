import json

from pydantic import BaseModel


def api_response(status_code: int, body: BaseModel | dict) -> dict:
    """API Gateway (REST) のプロキシ統合レスポンスを生成する

    pydantic モデルは None のフィールドを省いて JSON 化する。
    dict は Decimal などを文字列として JSON 化する。
    """
    if isinstance(body, BaseModel):
        payload = body.model_dump_json(exclude_none=True)
    else:
        payload = json.dumps(body, default=str)

    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": payload,
    }
