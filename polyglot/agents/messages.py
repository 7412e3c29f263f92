import json
from typing import Any, Dict, List

from agno.models.message import Message

from polyglot.flows import FlowDefinition

JSON_MODE: Dict[str, Any] = {"type": "json_object"}


def build_messages(flow: FlowDefinition, prompt: str) -> List[Message]:
    """
    为一次生成构造 system + user 消息。

    system 消息包含流程说明和输出结构的 JSON Schema（camelCase 字段名），
    配合 JSON 模式要求模型只返回一个 JSON 对象。
    """
    schema = json.dumps(flow.response_schema(), ensure_ascii=False)
    system_content = "\n".join(
        [
            flow.description,
            "",
            "Respond with a single JSON object that matches this JSON Schema. Do not wrap it in Markdown.",
            "<json_schema>",
            schema,
            "</json_schema>",
        ]
    )
    return [
        Message(role="system", content=system_content),
        Message(role="user", content=prompt),
    ]
