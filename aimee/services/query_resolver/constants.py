"""Keyword tables and response templates for the query resolver."""

# Intent keywords, all lower-case and matched as substrings
EMAIL_KEYWORDS = ("email", "send", "message")
DATE_KEYWORDS = ("when", "date")
STOCK_KEYWORDS = ("inventory", "stock", "how many", "how much", "bottles")
PRICE_KEYWORDS = ("price", "cost")
ORDER_KEYWORDS = ("ordered", "customer", "who", "last")
TYPE_KEYWORDS = ("type", "style")
LISTING_KEYWORDS = ("show", "all", "list")

# Known customer fragments, checked in this order before any inventory scan
KNOWN_RECIPIENTS = (
    ("thompson", "Thompson Restaurant"),
    ("johnson", "Johnson Winery"),
    ("westport", "Westport Spirits"),
)
DEFAULT_RECIPIENT = "Wine Room"

# Email content intents, checked in this order
FOLLOW_UP_KEYWORDS = ("follow up", "followup")
DELIVERY_KEYWORDS = ("delivery", "shipment")
RESTOCK_KEYWORDS = ("reorder", "stock")
EVENT_KEYWORDS = ("tasting", "event")

FOLLOW_UP_TEMPLATE = (
    "Hi {recipient},\n\n"
    "I wanted to follow up on your recent order and make sure everything "
    "arrived in perfect condition. Please let me know if there is anything "
    "else we can do for you.\n\n"
    "Best regards,\nAimee"
)
DELIVERY_TEMPLATE = (
    "Hi {recipient},\n\n"
    "I wanted to let you know that your upcoming delivery has been delayed. "
    "We expect the shipment to arrive within the next few days and will "
    "confirm the new delivery date as soon as we have it. We apologize for "
    "the inconvenience.\n\n"
    "Best regards,\nAimee"
)
RESTOCK_TEMPLATE = (
    "Hi {recipient},\n\n"
    "Our records show it may be time to reorder. Several of the wines you "
    "have purchased are back in stock and we would be happy to reserve "
    "bottles for you. Just reply with the quantities you need.\n\n"
    "Best regards,\nAimee"
)
EVENT_TEMPLATE = (
    "Hi {recipient},\n\n"
    "We would love to invite you to our upcoming wine tasting event, where "
    "we will be pouring some of our newest arrivals. Please let me know if "
    "you would like to reserve a spot.\n\n"
    "Best regards,\nAimee"
)
GENERIC_TEMPLATE = (
    "Hi {recipient},\n\n"
    "I hope all is well. I wanted to check in and see if there is anything "
    "you need from our current wine selection.\n\n"
    "Best regards,\nAimee"
)

EMAIL_SUMMARY = "Email draft ready to send to {recipient}."

# Text answers
CUSTOMER_ORDER_DATE = "{customer} last ordered {wine} on {date}."
CUSTOMER_ORDER = "{customer} last ordered {wine}."
WINE_STOCK = "We have {inventory} bottles of {wine} in stock."
WINE_PRICE = "{wine} is priced at {price} per bottle."
WINE_TYPE = "{wine} is a {wine_type}."
WINE_SUMMARY = "{wine}: {inventory} bottles at {price} (last ordered by {customer})"
LISTING_INTRO = "Here's our current wine inventory: "
LISTING_ITEM = "{wine} ({inventory} bottles at {price})"

HELP_MESSAGE = (
    "I can help you with wine inventory, prices, customer orders, and "
    "drafting customer emails. Try asking \"How many bottles of Pinot Noir "
    "do we have?\", \"What did Westport order?\", \"Show all wines\" or "
    "\"Send an email to Johnson about reorder\"."
)
