from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ArrayErrorCode(str, Enum):
    INTERSECTION_INVALID_ARGUMENT = "E_ARRAY_INTERSECTION_INVALID_ARGUMENT"
    XOR_INVALID_ARGUMENT = "E_ARRAY_XOR_INVALID_ARGUMENT"
    UNIQUE_INVALID_ARGUMENT = "E_ARRAY_UNIQUE_INVALID_ARGUMENT"


class ArrayArgumentError(TypeError):
    """
    Raised when a set-like operation receives an argument that is not array-like.

    `code` identifies the operation that rejected the argument, `argument_index`
    is the position of the first offending argument.
    """

    def __init__(
        self,
        code: ArrayErrorCode,
        message: str = "All arguments must be an array",
        *,
        argument_index: Optional[int] = None,
        argument: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.argument_index = argument_index
        self.argument = argument

    def __str__(self) -> str:
        if self.argument_index is None:
            return f"{self.message} [{self.code.value}]"
        return f"{self.message} (argument {self.argument_index}: {type(self.argument).__name__}) [{self.code.value}]"
