from typing import Any, Callable, Dict, Type

from pydantic import BaseModel, ConfigDict, Field


class FlowDefinition(BaseModel):
    """
    一个流程 = 输入结构 + 输出结构 + 提示词模板。

    启动时构建一次，之后不可变。
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., description="作为系统角色交给代理的说明")
    input_schema: Type[BaseModel]
    output_schema: Type[BaseModel]
    render_prompt: Callable[[Any], str]

    def response_schema(self) -> Dict[str, Any]:
        """输出结构的 JSON Schema（camelCase 字段名）。"""
        return self.output_schema.model_json_schema(by_alias=True)


def flag(value: bool) -> str:
    return "true" if value else "false"
