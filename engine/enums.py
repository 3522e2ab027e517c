"""
Enumerations for impact detection verdicts.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

_SYMBOLS = {
    "equals": "=",
    "greater_than": ">",
    "less_than": "<",
}


class Operator(str, Enum):
    """Direction of the candidate window relative to the simulated continuation."""

    equals = "equals"
    greater_than = "greater_than"
    less_than = "less_than"

    def symbol(self) -> str:
        return _SYMBOLS[self.value]

    @property
    def is_change(self) -> bool:
        return self is not Operator.equals
