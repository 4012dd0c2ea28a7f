# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Functional builder - a builder made of deferred steps.

A FunctionalBuilder does not touch its subject while the chain is being
written. Each call appends a step; ``build()`` creates a fresh subject and
applies the steps in insertion order.

New fluent methods can be attached from outside the class body with the
``extension`` decorator, which is how ``EmployeeBuilder.works_as`` is
defined below.

Example:
    >>> employee = EmployeeBuilder().called('Sarah').works_as('Developer').build()
    >>> employee.position
    'Developer'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import reduce
from typing import Any, Generic, TypeVar

TSubject = TypeVar('TSubject')
TSelf = TypeVar('TSelf', bound='FunctionalBuilder[Any, Any]')


@dataclass
class Employee:
    """Flat record produced by EmployeeBuilder."""

    name: str | None = None
    position: str | None = None

    def __str__(self) -> str:
        return f"Name: {self.name}, Position: {self.position}"


class FunctionalBuilder(Generic[TSubject, TSelf]):
    """Base class for builders that accumulate deferred steps.

    Subclasses bind ``TSelf`` to themselves and set ``subject_type`` to the
    class of the object to build, which must be constructible without
    arguments.

    Attributes:
        subject_type: Class instantiated by each ``build()`` call.
    """

    subject_type: type[TSubject]

    def __init__(self) -> None:
        self._steps: list[Callable[[TSubject], TSubject]] = []

    def do(self: TSelf, action: Callable[[TSubject], Any]) -> TSelf:
        """Append a step that runs action on the subject.

        Args:
            action: Callable mutating the subject in place. Its return
                value is ignored.

        Returns:
            This builder, for chaining.
        """

        def step(subject: TSubject) -> TSubject:
            action(subject)
            return subject

        self._steps.append(step)
        return self

    def build(self) -> TSubject:
        """Create a new subject and apply every step in order."""
        return reduce(lambda subject, step: step(subject), self._steps, self.subject_type())

    @classmethod
    def extension(cls, func: Callable[..., Any]) -> Callable[..., Any]:
        """Decorator attaching func to this builder class as a method.

        The function receives the builder as first argument and is
        expected to return ``builder.do(...)``.

        Example:
            >>> @EmployeeBuilder.extension
            ... def earning(builder, amount):
            ...     return builder.do(lambda e: setattr(e, 'salary', amount))
        """
        setattr(cls, func.__name__, func)
        return func


class EmployeeBuilder(FunctionalBuilder[Employee, 'EmployeeBuilder']):
    """Functional builder for Employee records."""

    subject_type = Employee

    def called(self, name: str) -> EmployeeBuilder:
        return self.do(lambda employee: setattr(employee, 'name', name))


@EmployeeBuilder.extension
def works_as(builder: EmployeeBuilder, position: str) -> EmployeeBuilder:
    """Set the employee position."""
    return builder.do(lambda employee: setattr(employee, 'position', position))
