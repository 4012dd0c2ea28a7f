# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Faceted builder - several facades writing into one shared record.

MemberBuilder owns a single Member. Its ``address`` and ``works``
properties return facades that hold a reference to the same Member, so
every write through any facade lands on the one record. Facades are
themselves MemberBuilders, which allows switching facade in the middle
of a chain:

    >>> member = (
    ...     MemberBuilder()
    ...     .address.at('123 London Road').in_('London').with_postcode('SW12AC')
    ...     .works.at('Fabrikam').as_a('Engineer').earning(123000)
    ...     .build()
    ... )
    >>> member.city, member.company_name
    ('London', 'Fabrikam')

Methods named after Python keywords carry a trailing underscore (``in_``).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Member:
    """Record shared by a MemberBuilder and all of its facades."""

    street_address: str | None = None
    postcode: str | None = None
    city: str | None = None
    company_name: str | None = None
    position: str | None = None
    annual_income: int = 0

    def __str__(self) -> str:
        return (
            f"StreetAddress: {self.street_address}, Postcode: {self.postcode}, "
            f"City: {self.city}, CompanyName: {self.company_name}, "
            f"Position: {self.position}, AnnualIncome: {self.annual_income}"
        )


class MemberBuilder:
    """Root builder and common base of the member facades.

    Args:
        member: Member to write into. A new one is created if omitted.
    """

    def __init__(self, member: Member | None = None) -> None:
        self.member = member if member is not None else Member()

    @property
    def address(self) -> MemberAddressBuilder:
        """Facade for the address fields."""
        return MemberAddressBuilder(self.member)

    @property
    def works(self) -> MemberJobBuilder:
        """Facade for the job fields."""
        return MemberJobBuilder(self.member)

    def build(self) -> Member:
        """Return the shared Member (not a copy)."""
        return self.member


class MemberAddressBuilder(MemberBuilder):
    """Facade writing street address, postcode and city."""

    def at(self, street_address: str) -> MemberAddressBuilder:
        self.member.street_address = street_address
        return self

    def with_postcode(self, postcode: str) -> MemberAddressBuilder:
        self.member.postcode = postcode
        return self

    def in_(self, city: str) -> MemberAddressBuilder:
        self.member.city = city
        return self


class MemberJobBuilder(MemberBuilder):
    """Facade writing company, position and income."""

    def at(self, company_name: str) -> MemberJobBuilder:
        self.member.company_name = company_name
        return self

    def as_a(self, position: str) -> MemberJobBuilder:
        self.member.position = position
        return self

    def earning(self, amount: int) -> MemberJobBuilder:
        self.member.annual_income = amount
        return self
