"""Handler outcomes: a response on success or the error that stopped the handler."""

from dataclasses import dataclass
from typing import Union

from lambda_webapp.models.response import Response


@dataclass(frozen=True)
class Ok:
    response: Response


@dataclass(frozen=True)
class Err:
    error: BaseException


HandlerResult = Union[Ok, Err]
