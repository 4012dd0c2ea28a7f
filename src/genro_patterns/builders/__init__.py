# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Builder pattern variants.

Each module is a self-contained example of one way to shape a builder API.

Builder Types:
    - **MarkupBuilder**: fluent builder for a tree of markup nodes
    - **Person.new()**: fluent inheritance with recursive generics
    - **CarBuilder**: stepwise builder, one protocol per step
    - **EmployeeBuilder**: functional builder made of deferred steps
    - **MemberBuilder**: faceted builder, facades sharing one record

Example:
    >>> from genro_patterns.builders import CarBuilder, CarType
    >>>
    >>> car = CarBuilder.create().of_type(CarType.SEDAN).with_wheels(16).build()
"""

from genro_patterns.builders.car import (
    WHEEL_SIZES,
    BuildCar,
    Car,
    CarBuilder,
    CarType,
    SpecifyCarType,
    SpecifyWheelSize,
)
from genro_patterns.builders.employee import Employee, EmployeeBuilder, FunctionalBuilder
from genro_patterns.builders.markup import MarkupBuilder, MarkupNode
from genro_patterns.builders.member import (
    Member,
    MemberAddressBuilder,
    MemberBuilder,
    MemberJobBuilder,
)
from genro_patterns.builders.person import (
    Person,
    PersonBuilder,
    PersonInfoBuilder,
    PersonJobBuilder,
)

__all__ = [
    "MarkupBuilder",
    "MarkupNode",
    "Person",
    "PersonBuilder",
    "PersonInfoBuilder",
    "PersonJobBuilder",
    "CarBuilder",
    "CarType",
    "Car",
    "WHEEL_SIZES",
    "SpecifyCarType",
    "SpecifyWheelSize",
    "BuildCar",
    "FunctionalBuilder",
    "EmployeeBuilder",
    "Employee",
    "MemberBuilder",
    "MemberAddressBuilder",
    "MemberJobBuilder",
    "Member",
]
