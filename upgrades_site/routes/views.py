"""
HTML view routes for the Upgrades Offers demo site.

Routes:
    GET  /health                          - Liveness check used by the suite
    GET  /upgrade/<record_id>             - Offers/upgrades listing page
    GET  /upgrade/<record_id>/review/     - Checkout review page for a card
"""

import logging

from flask import Blueprint, abort, jsonify, render_template, request, url_for

from upgrades_site.models import (
    DealKind,
    LanguageCode,
    get_cards,
    parse_deal_kind,
    parse_language,
)

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)


def _query_with(**overrides: str) -> dict[str, str]:
    """Return the current query parameters with some values replaced."""
    params = request.args.to_dict()
    params.update(overrides)
    return params


@views_bp.route("/health")
def health():
    """Report that the demo site is serving requests."""
    return jsonify({"status": "healthy", "service": "upgrades-site"})


@views_bp.route("/upgrade/<record_id>")
def listing(record_id: str):
    """
    Render the listing page for a record.

    Query Parameters:
        lang: Selected language code
        deal_kind: Tab to show (offers or upgrades)

    Returns:
        Rendered offers.html template.
    """
    deal_kind = parse_deal_kind(request.args.get("deal_kind"))
    language = parse_language(request.args.get("lang"))
    logger.info(f"GET /upgrade/{record_id} - deal_kind={deal_kind.value} lang={language.value}")

    tabs = [
        {
            "kind": kind.value,
            "label": f"{len(get_cards(kind))} {kind.value.capitalize()}",
            "href": url_for(
                "views.listing", record_id=record_id, **_query_with(deal_kind=kind.value)
            ),
            "active": kind == deal_kind,
        }
        for kind in (DealKind.OFFERS, DealKind.UPGRADES)
    ]

    cards = []
    for index, card in enumerate(get_cards(deal_kind)):
        card_data = card.to_dict()
        card_data["review_url"] = url_for(
            "views.review", record_id=record_id, **_query_with(card=str(index))
        )
        cards.append(card_data)

    return render_template(
        "offers.html",
        record_id=record_id,
        languages=LanguageCode,
        current_language=language.value,
        deal_kind=deal_kind.value,
        tabs=tabs,
        cards=cards,
    )


@views_bp.route("/upgrade/<record_id>/review/")
def review(record_id: str):
    """
    Render the checkout review page for the selected card.

    Query Parameters:
        card: Index of the card within the current deal kind

    Returns:
        Rendered review.html template, or 404 for an unknown card.
    """
    deal_kind = parse_deal_kind(request.args.get("deal_kind"))
    language = parse_language(request.args.get("lang"))
    logger.info(f"GET /upgrade/{record_id}/review/ - card={request.args.get('card')}")

    try:
        index = int(request.args.get("card", "0"))
    except ValueError:
        abort(404)

    cards = get_cards(deal_kind)
    if not 0 <= index < len(cards):
        abort(404)

    return render_template(
        "review.html",
        record_id=record_id,
        current_language=language.value,
        deal_kind=deal_kind.value,
        card=cards[index].to_dict(),
    )
