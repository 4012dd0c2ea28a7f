# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""genro-patterns - a catalogue of Builder design pattern variants."""

from genro_patterns.builders import (
    CarBuilder,
    CarType,
    EmployeeBuilder,
    MarkupBuilder,
    MemberBuilder,
    Person,
)
from genro_patterns.demo import run

__version__ = "0.1.0"

__all__ = [
    "MarkupBuilder",
    "Person",
    "CarBuilder",
    "CarType",
    "EmployeeBuilder",
    "MemberBuilder",
    "run",
]
