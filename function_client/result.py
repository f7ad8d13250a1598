from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from function_client.errors import FunctionClientError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: FunctionClientError


Result = Union[Ok[T], Err]
