# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Demo driver exercising every builder variant.

Usage:
    python -m genro_patterns

or from code::

    >>> import io
    >>> from genro_patterns.demo import run
    >>> out = io.StringIO()
    >>> run(out)
    >>> out.getvalue().splitlines()[0]
    'Start -> Builder'
"""

from __future__ import annotations

import sys
from typing import TextIO

from genro_patterns.builders import (
    CarBuilder,
    CarType,
    EmployeeBuilder,
    MarkupBuilder,
    MemberBuilder,
    Person,
)


def run(out: TextIO | None = None) -> None:
    """Build one object with each builder and print it to out.

    Args:
        out: Text stream to write to. Defaults to sys.stdout.
    """
    out = out if out is not None else sys.stdout
    print("Start -> Builder", file=out)

    # fluent
    builder = MarkupBuilder.create('ul')
    builder.add_child('li', 'hello').add_child('li', 'world')
    print(builder, file=out)

    # recursive generics
    me = Person.new().called('Mykola').works_as_a('quant').build()
    print(me, file=out)

    # stepwise
    car = CarBuilder.create().of_type(CarType.CROSSOVER).with_wheels(18).build()
    print(f"Car: {car.type.value}, WheelSize: {car.wheel_size}", file=out)

    # functional
    employee = EmployeeBuilder().called('Sarah').works_as('Developer').build()
    print(employee, file=out)

    # faceted
    member = (
        MemberBuilder()
        .address.at('123 London Road').in_('London').with_postcode('SW12AC')
        .works.at('Company Name').as_a('Position Name').earning(3000)
        .build()
    )
    print(member, file=out)

    print("End -> Builder", file=out)


def main() -> None:
    """Console entry point."""
    run()
