"""Query resolver package for answering inventory questions."""

from .email_intent import extract_recipient, generate_email_content
from .resolver import (
    DEFAULT_RULES,
    EmailDraft,
    QueryResolver,
    ResolverResult,
    Rule,
    TextAnswer,
    resolve,
)

__all__ = [
    "DEFAULT_RULES",
    "EmailDraft",
    "QueryResolver",
    "ResolverResult",
    "Rule",
    "TextAnswer",
    "extract_recipient",
    "generate_email_content",
    "resolve",
]
