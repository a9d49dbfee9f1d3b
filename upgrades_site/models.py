"""
Catalog models for the Upgrades Offers demo site.

The demo site has no persistence: the catalog below is the full data set
rendered by the listing and review views.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LanguageCode(str, Enum):
    """Languages offered by the language selector."""

    EN = "EN"
    HE = "HE"
    DE = "DE"
    PL = "PL"
    RU = "RU"
    ES = "ES"
    FR = "FR"
    PT = "PT"
    IT = "IT"


class DealKind(str, Enum):
    """Offer category selected by the ``deal_kind`` query parameter."""

    OFFERS = "offers"
    UPGRADES = "upgrades"


@dataclass(frozen=True)
class DealCard:
    """
    A single card shown on the listing page.

    Attributes:
        name: Title shown on the card.
        description: Short marketing text.
        price: Buy-now price in the site currency.
        min_bid: Lowest accepted bid.
    """

    name: str
    description: str
    price: float
    min_bid: float

    def to_dict(self) -> dict[str, Any]:
        """Convert the card to a dictionary for JSON/template use."""
        return {
            "name": self.name,
            "description": self.description,
            "price": f"{self.price:.2f}",
            "min_bid": f"{self.min_bid:.2f}",
        }


CATALOG: dict[DealKind, tuple[DealCard, ...]] = {
    DealKind.UPGRADES: (
        DealCard("Business Class Upgrade", "Lie-flat seat and lounge access", 349.00, 120.00),
        DealCard("Premium Economy Upgrade", "Extra legroom and priority boarding", 149.00, 60.00),
        DealCard("Sea View Room Upgrade", "Upgrade your stay to a sea view room", 89.00, 35.00),
    ),
    DealKind.OFFERS: (
        DealCard("Extra Baggage", "One additional 23kg checked bag", 45.00, 20.00),
        DealCard("Airport Transfer", "Private transfer from the airport", 60.00, 25.00),
    ),
}


def parse_deal_kind(value: str | None) -> DealKind:
    """Return the matching deal kind, falling back to upgrades."""
    try:
        return DealKind(value)
    except ValueError:
        return DealKind.UPGRADES


def parse_language(value: str | None) -> LanguageCode:
    """Return the matching language code, falling back to English."""
    try:
        return LanguageCode(value)
    except ValueError:
        return LanguageCode.EN


def get_cards(deal_kind: DealKind) -> tuple[DealCard, ...]:
    """Return the cards listed under a deal kind."""
    return CATALOG[deal_kind]
