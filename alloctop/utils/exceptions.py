"""Collection of helper exception classes"""
from __future__ import annotations

# Standard Imports
from typing import Any

# Third-Party Imports

# Alloctop Imports


class InvalidParameterException(Exception):
    """Raises when the given parameter is invalid"""

    __slots__ = ["parameter", "value", "choices_msg"]

    def __init__(self, parameter: str, parameter_value: Any, choices_msg: str = "") -> None:
        """
        :param str parameter: name of the parameter that is invalid
        :param object parameter_value: value of the parameter
        :param str choices_msg: string with choices for the valid parameters
        """
        super().__init__("")
        self.parameter = parameter
        self.value = str(parameter_value)
        self.choices_msg = " " + choices_msg

    def __str__(self) -> str:
        return (
            f"Invalid value '{self.value}' for the parameter '{self.parameter}'" + self.choices_msg
        )


class AllocInfoReadException(Exception):
    """Raised when the allocation report cannot be opened or read"""

    __slots__ = ["path", "reason"]

    def __init__(self, path: str, reason: str) -> None:
        """
        :param str path: path to the report that could not be read
        :param str reason: reason why the report could not be read
        """
        super().__init__("")
        self.path = path
        self.reason = reason

    def __str__(self) -> str:
        return f"could not read the allocation report '{self.path}': {self.reason}"
