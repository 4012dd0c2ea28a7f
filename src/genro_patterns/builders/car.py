# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""CarBuilder - stepwise builder with staged capabilities.

The builder is exposed through three protocols, one per construction
step. Each operation returns the protocol of the next step, so a type
checker rejects any call made out of order:

    SpecifyCarType --of_type--> SpecifyWheelSize --with_wheels--> BuildCar

A single private class implements all three protocols. Only the static
type of the handle returned at each step restricts the caller.

Example:
    >>> car = CarBuilder.create().of_type(CarType.CROSSOVER).with_wheels(18).build()
    >>> car.wheel_size
    18
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class CarType(Enum):
    """Car categories, each with its own wheel size range."""

    SEDAN = 'Sedan'
    CROSSOVER = 'Crossover'


# Allowed wheel sizes per category (inclusive bounds)
WHEEL_SIZES: dict[CarType, range] = {
    CarType.SEDAN: range(15, 18),
    CarType.CROSSOVER: range(17, 21),
}


@dataclass
class Car:
    """The vehicle produced by CarBuilder."""

    type: CarType | None = None
    wheel_size: int = 0


class SpecifyCarType(Protocol):
    """First step: choose the car type."""

    def of_type(self, car_type: CarType) -> SpecifyWheelSize: ...


class SpecifyWheelSize(Protocol):
    """Second step: choose a wheel size valid for the car type."""

    def with_wheels(self, size: int) -> BuildCar: ...


class BuildCar(Protocol):
    """Terminal step: obtain the car."""

    def build(self) -> Car: ...


class _CarBuilderImpl:
    """Implementation behind every CarBuilder step."""

    def __init__(self) -> None:
        self._car = Car()

    def of_type(self, car_type: CarType) -> SpecifyWheelSize:
        self._car.type = car_type
        return self

    def with_wheels(self, size: int) -> BuildCar:
        """Set the wheel size after checking it against the car type.

        Raises:
            ValueError: If size is outside the range allowed for the type.
        """
        car_type = self._car.type
        allowed = WHEEL_SIZES[car_type]
        if size not in allowed:
            raise ValueError(
                f"Wrong size of wheel of {car_type.value}: {size} "
                f"(allowed {allowed.start}-{allowed.stop - 1})"
            )
        self._car.wheel_size = size
        return self

    def build(self) -> Car:
        return self._car


class CarBuilder:
    """Entry point of the stepwise car builder."""

    @staticmethod
    def create() -> SpecifyCarType:
        """Start a new construction at the car type step."""
        return _CarBuilderImpl()
