from unittest.mock import AsyncMock, MagicMock

import pytest

from polyglot.agents.pipeline import SchemaValidatedPipeline
from polyglot.core.exceptions import FlowNotFoundError, UpstreamError
from polyglot.flows import correction_flow, summarization_flow, translation_flow
from polyglot.orchestrator import Orchestrator
from polyglot.schemas import CorrectionResult, ErrorKind, FlowResult, UpstreamCause

UPSTREAM_DOWN = FlowResult.fail(ErrorKind.UPSTREAM_FAILURE, "service down", cause=UpstreamCause.TRANSPORT)
EMPTY = FlowResult.fail(ErrorKind.EMPTY_RESPONSE, "nothing")
BAD_INPUT = FlowResult.fail(ErrorKind.INVALID_INPUT, "bad input")
OK = FlowResult.ok(CorrectionResult(corrected_text="I have an apple."))


@pytest.mark.asyncio
class TestOrchestrator:
    """
    测试 Orchestrator 的流程分发和调用方重试策略。
    """

    @pytest.fixture
    def pipeline(self):
        pipeline = MagicMock()
        pipeline.execute = AsyncMock(return_value=OK)
        return pipeline

    @pytest.fixture
    def orchestrator(self, pipeline):
        return Orchestrator(pipeline=pipeline)

    @pytest.mark.parametrize(
        "method, flow",
        [("correct", correction_flow), ("translate", translation_flow), ("summarize", summarization_flow)],
    )
    async def test_entry_points_dispatch_to_flows(self, orchestrator, pipeline, method, flow):
        payload = {"text": "Hello"}
        result = await getattr(orchestrator, method)(payload)
        assert result is OK
        pipeline.execute.assert_awaited_once_with(flow, payload)

    async def test_unknown_flow_raises(self, orchestrator, pipeline):
        with pytest.raises(FlowNotFoundError):
            await orchestrator.run("poetry", {"text": "Hello"})
        pipeline.execute.assert_not_called()

    async def test_no_retry_by_default(self, orchestrator, pipeline):
        pipeline.execute.return_value = UPSTREAM_DOWN
        result = await orchestrator.correct({"text": "Hi", "language": "English"})
        assert result is UPSTREAM_DOWN
        assert pipeline.execute.await_count == 1

    async def test_retries_retryable_failures(self, orchestrator, pipeline):
        pipeline.execute.side_effect = [UPSTREAM_DOWN, EMPTY, OK]
        result = await orchestrator.correct({"text": "Hi", "language": "English"}, attempts=3)
        assert result is OK
        assert pipeline.execute.await_count == 3

    async def test_returns_last_failure_when_attempts_run_out(self, orchestrator, pipeline):
        pipeline.execute.side_effect = [UPSTREAM_DOWN, EMPTY]
        result = await orchestrator.correct({"text": "Hi", "language": "English"}, attempts=2)
        assert result is EMPTY
        assert pipeline.execute.await_count == 2

    async def test_invalid_input_is_not_retried(self, orchestrator, pipeline):
        pipeline.execute.return_value = BAD_INPUT
        result = await orchestrator.correct({"text": ""}, attempts=5)
        assert result is BAD_INPUT
        assert pipeline.execute.await_count == 1

    async def test_end_to_end_with_stub_service(self):
        service = MagicMock()
        service.generate = AsyncMock(return_value={"correctedText": "I have an apple."})
        orchestrator = Orchestrator(pipeline=SchemaValidatedPipeline(service=service))

        result = await orchestrator.correct({"text": "I has a apple.", "language": "English"})

        assert result.success is True
        assert result.content.corrected_text == "I have an apple."
        service.generate.assert_awaited_once()

    async def test_end_to_end_upstream_failure_with_retry(self):
        service = MagicMock()
        service.generate = AsyncMock(
            side_effect=[UpstreamError("rate limited", cause=UpstreamCause.RATE_LIMIT), {"translatedText": "Hola"}]
        )
        orchestrator = Orchestrator(pipeline=SchemaValidatedPipeline(service=service))

        result = await orchestrator.translate({"text": "Hello", "targetLanguage": "es-ES"}, attempts=2)

        assert result.success is True
        assert result.content.translated_text == "Hola"
        assert service.generate.await_count == 2
