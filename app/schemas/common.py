from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# 빈 값 대신 응답에 채우는 문자열
EMPTY_FIELD_PLACEHOLDER = "미기제"
EMPTY_RESUME_PLACEHOLDER = "미등록"


def or_placeholder(value: Any, placeholder: str = EMPTY_FIELD_PLACEHOLDER) -> Any:
    """None 또는 빈 문자열이면 placeholder로 치환"""
    if value is None or value == "":
        return placeholder
    return value


class CamelModel(BaseModel):
    """
    JSON은 camelCase(techStack, jobId), 파이썬 속성은 snake_case.
    입력은 두 형식 모두 허용합니다.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
