# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Fluent builder inheritance with recursive generics.

Each stage of the builder hierarchy adds one fluent method. The methods
annotate ``self`` with a TypeVar bound to the declaring stage, so the
returned type is always the concrete builder the call was made on and
methods of different stages can be chained in any order.

Example:
    >>> me = Person.new().called('Mykola').works_as_a('quant').build()
    >>> str(me)
    'Name: Mykola, Position: quant'
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import TypeVar


@dataclass
class Person:
    """Flat record filled in by the person builders."""

    name: str | None = None
    position: str | None = None

    @classmethod
    def new(cls) -> PersonJobBuilder:
        """Return a builder ready to chain every person stage."""
        return PersonJobBuilder()

    def __str__(self) -> str:
        return f"Name: {self.name}, Position: {self.position}"


class PersonBuilder(ABC):
    """Base stage: owns the Person under construction."""

    def __init__(self) -> None:
        self.person = Person()

    def build(self) -> Person:
        """Return the Person built so far."""
        return self.person


TInfo = TypeVar('TInfo', bound='PersonInfoBuilder')
TJob = TypeVar('TJob', bound='PersonJobBuilder')


class PersonInfoBuilder(PersonBuilder):
    """Stage adding personal information."""

    def called(self: TInfo, name: str) -> TInfo:
        self.person.name = name
        return self


class PersonJobBuilder(PersonInfoBuilder):
    """Stage adding job information on top of PersonInfoBuilder."""

    def works_as_a(self: TJob, position: str) -> TJob:
        self.person.position = position
        return self
