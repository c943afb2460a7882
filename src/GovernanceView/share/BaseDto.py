from humps import camelize
from pydantic import BaseModel, ConfigDict


class BaseDto(BaseModel):
    """
    所有 DTO 的基类，统一配置。
    - 链上接口返回驼峰字段，通过 humps 自动映射到蛇形属性名。
    - DTO 一旦创建即不可变。
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=camelize,
        populate_by_name=True,
        frozen=True,
    )
