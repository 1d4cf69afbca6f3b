from typing import Any

import pydantic


class GenerateRequest(pydantic.BaseModel):
    brief: str = ""

    @pydantic.field_validator("brief", mode="before")
    @classmethod
    def _coerce_brief(cls, v: Any) -> str:
        # A missing or non-string brief is treated as empty
        return v if isinstance(v, str) else ""


class ErrorResponse(pydantic.BaseModel):
    error: str
