"""Domain primitives derived from stored records."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class PriceRange:
    """Cheapest and most expensive ticket price of a concert."""

    min_price: int
    max_price: int

    @classmethod
    def from_prices(cls, prices: Iterable[int]) -> Self:
        """Build a range from ticket prices; an empty set yields 0/0."""
        prices = list(prices)
        if not prices:
            return cls(min_price=0, max_price=0)
        return cls(min_price=min(prices), max_price=max(prices))

    def __str__(self) -> str:
        return f"{self.min_price}-{self.max_price}"
