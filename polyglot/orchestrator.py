from typing import Any, Optional

from polyglot.agents.pipeline import SchemaValidatedPipeline
from polyglot.core.logger import pal_logger as logger
from polyglot.flows import CORRECTION, SUMMARIZATION, TRANSLATION, FlowRegistry, build_default_registry
from polyglot.schemas import FlowResult


class Orchestrator:
    """
    面向调用方（界面、命令行）的入口，按名字查找流程并交给管道执行。
    """

    def __init__(self, registry: Optional[FlowRegistry] = None, pipeline: Optional[SchemaValidatedPipeline] = None):
        self.registry = registry or build_default_registry()
        self.pipeline = pipeline or SchemaValidatedPipeline()

    async def run(self, flow_name: str, payload: Any, attempts: int = 1) -> FlowResult:
        """
        执行指定名字的流程。

        重试是调用方的策略：attempts 默认为 1，即不重试；大于 1 时只对可重试的失败
        （上游失败、空响应）再次执行，返回最后一次的结果。

        Args:
            flow_name: 流程名，未知名字会抛出 FlowNotFoundError。
            payload: 输入记录。
            attempts: 最多执行的次数。

        Returns:
            FlowResult
        """
        flow = self.registry.get(flow_name)
        max_attempts = max(1, attempts)
        result = await self.pipeline.execute(flow, payload)
        for attempt in range(1, max_attempts):
            if result.success or not result.error.retryable:
                break
            logger.warning(
                f"Flow {flow_name} failed with {result.error.kind.value} (attempt {attempt}/{max_attempts}), retrying"
            )
            result = await self.pipeline.execute(flow, payload)
        return result

    async def correct(self, payload: Any, attempts: int = 1) -> FlowResult:
        return await self.run(CORRECTION, payload, attempts=attempts)

    async def translate(self, payload: Any, attempts: int = 1) -> FlowResult:
        return await self.run(TRANSLATION, payload, attempts=attempts)

    async def summarize(self, payload: Any, attempts: int = 1) -> FlowResult:
        return await self.run(SUMMARIZATION, payload, attempts=attempts)
