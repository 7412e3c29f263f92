from typing import Any, Optional, Protocol

import httpx
from agno.exceptions import ModelProviderError
from agno.models.base import Model

from polyglot.agents.messages import JSON_MODE, build_messages
from polyglot.agents.models import get_model
from polyglot.core.exceptions import UpstreamError
from polyglot.core.logger import pal_logger as logger
from polyglot.flows import FlowDefinition
from polyglot.schemas import UpstreamCause


class GenerationService(Protocol):
    """
    The upstream text-generation collaborator.

    ``generate`` receives the flow (its name and output schema) and the rendered prompt, and returns
    the raw payload: a pydantic instance, a dict, a JSON string or None. Failures are raised as
    ``UpstreamError``.
    """

    async def generate(self, flow: FlowDefinition, prompt: str) -> Any: ...


def cause_from_status(status_code: Optional[int]) -> UpstreamCause:
    if status_code == 429:
        return UpstreamCause.RATE_LIMIT
    if status_code in (401, 403):
        return UpstreamCause.AUTH
    if status_code in (408, 504):
        return UpstreamCause.TIMEOUT
    return UpstreamCause.PROVIDER


def status_of(error: Optional[BaseException]) -> Optional[int]:
    """
    取异常链最内层的 HTTP 状态码。

    供应商适配器包装 SDK 异常时可能只留下默认的 502，原始状态码在 __cause__ 上。
    """
    status_code = None
    seen = set()
    # agno 会 raise e from e，异常链可能指回自身
    while error is not None and id(error) not in seen:
        seen.add(id(error))
        code = getattr(error, "status_code", None)
        if isinstance(code, int):
            status_code = code
        error = error.__cause__
    return status_code


class AgnoGenerationService:
    """
    Generation service that calls the agno model directly in JSON mode.

    The model (client and credentials) is created once and shared read-only by every call.
    Provider and transport exceptions reach this service untouched, so each one is mapped to an
    ``UpstreamCause``.
    """

    def __init__(self, model: Optional[Model] = None) -> None:
        self.model = model or get_model()

    async def generate(self, flow: FlowDefinition, prompt: str) -> Any:
        messages = build_messages(flow, prompt)
        try:
            response = await self.model.aresponse(messages=messages, response_format=JSON_MODE)
        except ModelProviderError as e:
            status_code = status_of(e)
            logger.error(f"模型供应商返回错误 (flow={flow.name}, status={status_code}): {e}")
            raise UpstreamError(str(e), cause=cause_from_status(status_code)) from e
        except (httpx.TimeoutException, TimeoutError) as e:
            logger.error(f"请求超时 (flow={flow.name}): {e}")
            raise UpstreamError(f"请求超时: {e}", cause=UpstreamCause.TIMEOUT) from e
        except (httpx.TransportError, ConnectionError) as e:
            logger.error(f"网络错误 (flow={flow.name}): {e}")
            raise UpstreamError(f"网络错误: {e}", cause=UpstreamCause.TRANSPORT) from e

        return response.content
