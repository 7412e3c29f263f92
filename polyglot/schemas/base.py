from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """
    调用方传入的请求记录。

    字段在 Python 中使用 snake_case，对外（表单、JSON）使用 camelCase，两种写法都接受。
    未知字段直接拒绝。
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid", frozen=True)


class ResultModel(BaseModel):
    """
    模型返回的结构化结果。

    输出不可变；模型多返回的字段会被忽略。
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True)
