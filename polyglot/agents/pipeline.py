import asyncio
import json
import re
from typing import Any, Optional

from pydantic import BaseModel, ValidationError

from polyglot.core.config import settings
from polyglot.core.exceptions import UpstreamError
from polyglot.core.logger import pal_logger as logger
from polyglot.flows import FlowDefinition
from polyglot.schemas import ErrorKind, FieldError, FlowResult, UpstreamCause
from polyglot.services.generation import AgnoGenerationService, GenerationService

FENCED_JSON_PATTERN = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def _unwrap_fenced_json(text: str) -> str:
    """
    去掉模型偶尔包在外面的 Markdown 代码块。
    """
    match = FENCED_JSON_PATTERN.match(text.strip())
    if match:
        return match.group(1)
    return text.strip()


def _is_empty(payload: Any) -> bool:
    """
    None、空白字符串、null 和 {}（含格式化过的 "{ }"、bytes 形式）都算空响应。

    无法解析的文本不算空，留给输出校验报 invalid_output。
    """
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError:
            return False
    if isinstance(payload, str):
        text = _unwrap_fenced_json(payload)
        if not text:
            return True
        try:
            payload = json.loads(text)
        except json.JSONDecodeError:
            return False
    if payload is None:
        return True
    if isinstance(payload, dict):
        return not payload
    return False


def _summarize_validation_error(error: ValidationError) -> str:
    return "; ".join(f"{item.field}: {item.message}" for item in FieldError.from_validation_error(error))


class SchemaValidatedPipeline:
    """
    执行单个流程：校验输入 -> 渲染提示词 -> 调用一次上游 -> 校验输出。

    预期内的失败都以 FlowResult 返回，不抛异常。提示词渲染出错、生成服务抛出 UpstreamError
    以外的异常都属于代码缺陷，会直接抛出。
    管道不持有任何跨调用的可变状态，可以并发调用。
    """

    def __init__(self, service: Optional[GenerationService] = None, timeout: Optional[float] = None):
        self.service = service or AgnoGenerationService()
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout

    async def execute(self, flow: FlowDefinition, payload: Any) -> FlowResult:
        """
        执行流程。

        Args:
            flow: 要执行的流程定义。
            payload: 调用方传入的输入记录（dict 或 flow.input_schema 实例）。

        Returns:
            成功时 content 一定符合 flow.output_schema。
        """
        # 1. 输入校验，失败时不会发出任何请求
        if isinstance(payload, BaseModel) and not isinstance(payload, flow.input_schema):
            payload = payload.model_dump(by_alias=True)
        try:
            request = flow.input_schema.model_validate(payload)
        except ValidationError as e:
            field_errors = FieldError.from_validation_error(e)
            logger.warning(f"输入校验失败 (flow={flow.name}): {[item.field for item in field_errors]}")
            return FlowResult.fail(ErrorKind.INVALID_INPUT, "输入校验失败。", field_errors=field_errors)

        # 2. 渲染提示词
        prompt = flow.render_prompt(request)

        # 3. 调用上游，只调用一次
        logger.info(f"调用上游模型 (flow={flow.name}, prompt={len(prompt)} 字符)")
        try:
            raw = await asyncio.wait_for(self.service.generate(flow, prompt), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error(f"上游调用超时 (flow={flow.name}, timeout={self.timeout}s)")
            return FlowResult.fail(
                ErrorKind.UPSTREAM_FAILURE, f"上游调用超过 {self.timeout} 秒未返回。", cause=UpstreamCause.TIMEOUT
            )
        except UpstreamError as e:
            logger.error(f"上游调用失败 (flow={flow.name}, cause={e.cause.value}): {e}")
            return FlowResult.fail(ErrorKind.UPSTREAM_FAILURE, str(e), cause=e.cause)

        # 4. 输出校验
        return self._validate_output(flow, raw)

    def _validate_output(self, flow: FlowDefinition, raw: Any) -> FlowResult:
        if _is_empty(raw):
            logger.error(f"上游返回了空响应 (flow={flow.name})")
            return FlowResult.fail(ErrorKind.EMPTY_RESPONSE, "模型没有返回任何内容。")

        try:
            if isinstance(raw, BaseModel):
                content = flow.output_schema.model_validate(raw.model_dump(by_alias=True))
            elif isinstance(raw, (str, bytes)):
                text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
                content = flow.output_schema.model_validate_json(_unwrap_fenced_json(text))
            else:
                content = flow.output_schema.model_validate(raw)
        except ValidationError as e:
            reason = _summarize_validation_error(e)
            logger.error(f"响应不符合输出结构 (flow={flow.name}): {reason}")
            return FlowResult.fail(ErrorKind.INVALID_OUTPUT, reason)
        except UnicodeDecodeError as e:
            logger.error(f"响应无法解析 (flow={flow.name}): {e}")
            return FlowResult.fail(ErrorKind.INVALID_OUTPUT, str(e))

        logger.info(f"流程执行成功 (flow={flow.name})")
        return FlowResult.ok(content)
