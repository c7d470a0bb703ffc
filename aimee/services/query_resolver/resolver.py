"""Keyword-driven query resolver.

Turns a free-text question into either a text answer or an email draft by
running an ordered list of rules over the lower-cased query. The first rule
whose predicate holds produces the result, so the order of ``DEFAULT_RULES``
is also the tie-break policy: a query naming both a customer and a wine is
answered by the customer rule.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from aimee.models.wine import WineRecord

from .constants import (
    CUSTOMER_ORDER,
    CUSTOMER_ORDER_DATE,
    DATE_KEYWORDS,
    EMAIL_KEYWORDS,
    EMAIL_SUMMARY,
    HELP_MESSAGE,
    LISTING_INTRO,
    LISTING_ITEM,
    LISTING_KEYWORDS,
    ORDER_KEYWORDS,
    PRICE_KEYWORDS,
    STOCK_KEYWORDS,
    TYPE_KEYWORDS,
    WINE_PRICE,
    WINE_STOCK,
    WINE_SUMMARY,
    WINE_TYPE,
)
from .email_intent import extract_recipient, generate_email_content
from .matchers import contains_any, find_by_customer, find_by_wine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextAnswer:
    """A plain text reply."""

    text: str


@dataclass(frozen=True)
class EmailDraft:
    """An email composed for the user to review and send."""

    recipient: str
    content: str
    summary: str

    @property
    def text(self) -> str:
        return self.summary


ResolverResult = TextAnswer | EmailDraft


@dataclass(frozen=True)
class QueryContext:
    """Inputs visible to every rule."""

    text: str  # lower-cased query
    inventory: tuple[WineRecord, ...]


@dataclass(frozen=True)
class Rule:
    """A named (predicate, handler) pair."""

    name: str
    applies: Callable[[QueryContext], bool]
    respond: Callable[[QueryContext], ResolverResult]


def _is_email_request(ctx: QueryContext) -> bool:
    return contains_any(ctx.text, EMAIL_KEYWORDS)


def _draft_email(ctx: QueryContext) -> EmailDraft:
    recipient = extract_recipient(ctx.text, ctx.inventory)
    return EmailDraft(
        recipient=recipient,
        content=generate_email_content(ctx.text, recipient),
        summary=EMAIL_SUMMARY.format(recipient=recipient),
    )


def _mentions_customer(ctx: QueryContext) -> bool:
    return find_by_customer(ctx.text, ctx.inventory) is not None


def _answer_customer(ctx: QueryContext) -> TextAnswer:
    record = find_by_customer(ctx.text, ctx.inventory)
    if contains_any(ctx.text, DATE_KEYWORDS):
        template = CUSTOMER_ORDER_DATE
    else:
        template = CUSTOMER_ORDER
    return TextAnswer(
        template.format(
            customer=record.customer_last_ordered,
            wine=record.wine_name,
            date=record.last_order_date,
        )
    )


def _mentions_wine(ctx: QueryContext) -> bool:
    return find_by_wine(ctx.text, ctx.inventory) is not None


def _answer_wine(ctx: QueryContext) -> TextAnswer:
    record = find_by_wine(ctx.text, ctx.inventory)
    values = {
        "wine": record.wine_name,
        "inventory": record.inventory,
        "price": record.price,
        "customer": record.customer_last_ordered,
        "date": record.last_order_date,
        "wine_type": record.wine_type,
    }

    if contains_any(ctx.text, STOCK_KEYWORDS):
        template = WINE_STOCK
    elif contains_any(ctx.text, PRICE_KEYWORDS):
        template = WINE_PRICE
    elif contains_any(ctx.text, ORDER_KEYWORDS):
        template = CUSTOMER_ORDER_DATE
    elif contains_any(ctx.text, TYPE_KEYWORDS):
        template = WINE_TYPE
    else:
        template = WINE_SUMMARY
    return TextAnswer(template.format(**values))


def _wants_listing(ctx: QueryContext) -> bool:
    return contains_any(ctx.text, LISTING_KEYWORDS)


def _list_inventory(ctx: QueryContext) -> TextAnswer:
    items = [
        LISTING_ITEM.format(wine=r.wine_name, inventory=r.inventory, price=r.price)
        for r in ctx.inventory
    ]
    return TextAnswer(LISTING_INTRO + ", ".join(items))


EMAIL_RULE = Rule("email_intent", _is_email_request, _draft_email)

DEFAULT_RULES: tuple[Rule, ...] = (
    EMAIL_RULE,
    Rule("customer_lookup", _mentions_customer, _answer_customer),
    Rule("wine_lookup", _mentions_wine, _answer_wine),
    Rule("inventory_listing", _wants_listing, _list_inventory),
)


class QueryResolver:
    """Evaluates rules in order and falls back to a help message.

    Args:
        email_intents: When False the email-draft rule is left out and
            queries mentioning "email"/"send"/"message" are handled by the
            remaining rules.
        rules: Override the rule list entirely.
    """

    def __init__(
        self,
        email_intents: bool = True,
        rules: Sequence[Rule] | None = None,
    ) -> None:
        if rules is None:
            rules = DEFAULT_RULES
        if not email_intents:
            rules = tuple(rule for rule in rules if rule is not EMAIL_RULE)
        self.rules: tuple[Rule, ...] = tuple(rules)

    @property
    def rule_names(self) -> list[str]:
        return [rule.name for rule in self.rules]

    def resolve(self, query: str, inventory: Sequence[WineRecord]) -> ResolverResult:
        """Answer a query against an inventory snapshot.

        Never raises; anything unmatched gets the help message.
        """
        ctx = QueryContext(text=(query or "").lower(), inventory=tuple(inventory))
        for rule in self.rules:
            if rule.applies(ctx):
                logger.debug("Query matched rule %s", rule.name)
                return rule.respond(ctx)
        return TextAnswer(HELP_MESSAGE)


_default_resolver = QueryResolver()


def resolve(query: str, inventory: Sequence[WineRecord]) -> ResolverResult:
    """Resolve a query with the default rule set."""
    return _default_resolver.resolve(query, inventory)
