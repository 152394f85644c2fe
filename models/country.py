"""Countries the dashboard manages content for."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Country:
    """A country site.

    Attributes:
        id: Identifier used by the API ("1".."4").
        code: Two letter country code.
        name: Display name.
    """

    id: str
    code: str
    name: str


COUNTRIES = (
    Country(id="1", code="jo", name="Jordan"),
    Country(id="2", code="sa", name="Saudi Arabia"),
    Country(id="3", code="eg", name="Egypt"),
    Country(id="4", code="ps", name="Palestine"),
)


def find_country(value: str) -> Optional[Country]:
    """Look up a country by id or code (case-insensitive)."""
    needle = value.strip().lower()
    for country in COUNTRIES:
        if needle in (country.id, country.code):
            return country
    return None
