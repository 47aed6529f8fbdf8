from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

SUCCESS = "success"
ERROR = "error"


def _dump(data: Any) -> Any:
    # 응답 스키마는 camelCase 별칭으로 직렬화
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True)
    if isinstance(data, list):
        return [_dump(item) for item in data]
    if isinstance(data, dict):
        return {key: _dump(value) for key, value in data.items()}
    return jsonable_encoder(data)


def ok_response(data: Any = None, message: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    """
    성공 응답을 표준 envelope 형태로 반환한다.
    extra는 data와 같은 레벨에 붙는 필드 (totalItems 등)
    """
    out: Dict[str, Any] = {"status": SUCCESS}
    if message is not None:
        out["message"] = message
    if data is not None:
        out["data"] = _dump(data)
    for key, value in extra.items():
        out[key] = _dump(value)
    return out


def error_response(message: str, **extra: Any) -> Dict[str, Any]:
    """
    실패 응답을 표준 envelope 형태로 반환한다.
    내부 에러 상세(스택 등)는 절대 넣지 않는다.
    """
    out: Dict[str, Any] = {"status": ERROR, "message": message}
    out.update(extra)
    return out
