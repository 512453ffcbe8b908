from typing import Generic, TypeVar
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

T = TypeVar("T")


class CamelModel(BaseModel):
  """Snake_case in Python, camelCase on the wire."""

  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class MessageResponse(CamelModel):
  success: bool = True
  message: str


class DataResponse(CamelModel, Generic[T]):
  success: bool = True
  data: T


class ListResponse(CamelModel, Generic[T]):
  success: bool = True
  count: int
  data: list[T]


class EmptyDataResponse(CamelModel):
  success: bool = True
  data: dict = {}
