from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, ValidationError, model_validator


class ErrorKind(str, Enum):
    """
    流程执行失败的类别。
    """

    INVALID_INPUT = "invalid_input"  # 本地校验失败，不会调用上游
    UPSTREAM_FAILURE = "upstream_failure"  # 网络、供应商错误或超时
    INVALID_OUTPUT = "invalid_output"  # 有响应，但不符合输出结构
    EMPTY_RESPONSE = "empty_response"  # 响应为空

    @property
    def retryable(self) -> bool:
        return self in (ErrorKind.UPSTREAM_FAILURE, ErrorKind.EMPTY_RESPONSE)


class UpstreamCause(str, Enum):
    TIMEOUT = "timeout"
    RATE_LIMIT = "rate_limit"
    AUTH = "auth"
    TRANSPORT = "transport"
    PROVIDER = "provider"


class FieldError(BaseModel):
    field: str
    message: str
    type: str

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> List["FieldError"]:
        return [
            cls(field=".".join(str(part) for part in item["loc"]) or "__root__", message=item["msg"], type=item["type"])
            for item in error.errors()
        ]


class PipelineError(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    message: str
    field_errors: List[FieldError] = Field(default_factory=list)
    cause: Optional[UpstreamCause] = None

    @property
    def retryable(self) -> bool:
        return self.kind.retryable


class FlowResult(BaseModel):
    """
    一次流程执行的结果：成功时带 content，失败时带 error，二者只有一个。
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    content: Optional[SerializeAsAny[BaseModel]] = None
    error: Optional[PipelineError] = None

    @model_validator(mode="after")
    def check_outcome(self) -> "FlowResult":
        if self.success and (self.content is None or self.error is not None):
            raise ValueError("a successful result carries content and no error")
        if not self.success and (self.error is None or self.content is not None):
            raise ValueError("a failed result carries an error and no content")
        return self

    @classmethod
    def ok(cls, content: BaseModel) -> "FlowResult":
        return cls(success=True, content=content)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str, **kwargs: Any) -> "FlowResult":
        return cls(success=False, error=PipelineError(kind=kind, message=message, **kwargs))
