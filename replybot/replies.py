"""Reply templates, one per policy decision."""
from __future__ import annotations

import re
from typing import Callable, Dict, Optional

from .categories import KNOWN_CATEGORIES
from .links import LinkBuilder
from .policy import (
    AskForBudget,
    AskForCategory,
    AskForCategoryAndBudget,
    ReplyDecision,
    SuggestFallback,
    SuggestTopN,
)

DISCLOSURE_LINE = "Note: ye affiliate link hai, isse aapko koi extra cost nahi lagti."
REFINE_LINE = "Category ya budget badalna ho toh reply karke batayein 🙂"

_INDIAN_GROUPING_RE = re.compile(r"(\d)(?=(\d{2})+$)")


def format_inr(amount: int) -> str:
    """Format ``amount`` with Indian digit grouping: 150000 -> ``₹1,50,000``."""
    digits = str(int(amount))
    if len(digits) <= 3:
        return f"₹{digits}"
    head = _INDIAN_GROUPING_RE.sub(r"\1,", digits[:-3])
    return f"₹{head},{digits[-3:]}"


def _footer() -> str:
    return f"\n\n{DISCLOSURE_LINE}\n{REFINE_LINE}"


def _budget_text(budget: Optional[int]) -> str:
    return f"approx {format_inr(budget)}" if budget is not None else "aapke budget"


def ask_category_and_budget(decision: AskForCategoryAndBudget, links: LinkBuilder) -> str:
    return (
        "Aap kya kharidna chahte hain aur aapka budget kitna hai?\n"
        'Jaise: "phone 15000 ke under" ya "earphones under 2k".' + _footer()
    )


def ask_category(decision: AskForCategory, links: LinkBuilder) -> str:
    options = ", ".join(category.value for category in KNOWN_CATEGORIES)
    lines = [f'Aapki requirement: "{decision.need}"']
    if decision.budget is not None:
        lines.append(f"Budget: {_budget_text(decision.budget)}")
    lines.append(f"Kaunsi category chahiye? Options: {options}.")
    return "\n".join(lines) + _footer()


def ask_budget(decision: AskForBudget, links: LinkBuilder) -> str:
    return (
        f'Aapki requirement: "{decision.need}" ({decision.category.value})\n'
        'Aapka budget kitna hai? Jaise ₹5k–10k, ₹10k–15k, ₹15k–25k ya ₹25k se upar.\n'
        'Likhne ka tareeka: "under 15000", "20k ke under" ya "1.5 lakh".' + _footer()
    )


def suggest_top_n(decision: SuggestTopN, links: LinkBuilder) -> str:
    lines = [
        f'Aapki requirement: "{decision.need}"',
        f"Budget: {_budget_text(decision.budget)} ke hisaab se top {len(decision.picks)} options:",
    ]
    for idx, pick in enumerate(decision.picks, start=1):
        lines.append("")
        lines.append(f"{idx}. {pick.display_name} – {pick.reason_phrase}")
        lines.append(links.search_link(pick.display_name, decision.budget))
    return "\n".join(lines) + _footer()


def suggest_fallback(decision: SuggestFallback, links: LinkBuilder) -> str:
    if decision.product_ref:
        link = links.product_link(decision.product_ref)
        intro = "ye raha product ka direct link:"
    else:
        link = links.search_link(decision.need, decision.budget)
        intro = "ye Amazon par best options ke liye search link hai:"
    return (
        f'Aapki requirement: "{decision.need}"\n'
        f"Aur budget: {_budget_text(decision.budget)} ke hisaab se,\n"
        f"{intro}\n"
        f"{link}\n\n"
        "Is link se aap latest price, offer aur reviews real-time check kar sakte hain." + _footer()
    )


TEMPLATES: Dict[type, Callable[..., str]] = {
    AskForCategoryAndBudget: ask_category_and_budget,
    AskForCategory: ask_category,
    AskForBudget: ask_budget,
    SuggestTopN: suggest_top_n,
    SuggestFallback: suggest_fallback,
}


def primary_link(decision: ReplyDecision, links: LinkBuilder) -> Optional[str]:
    """The first link a reply carries; ``None`` for clarifying questions."""
    if isinstance(decision, SuggestTopN) and decision.picks:
        return links.search_link(decision.picks[0].display_name, decision.budget)
    if isinstance(decision, SuggestFallback):
        if decision.product_ref:
            return links.product_link(decision.product_ref)
        return links.search_link(decision.need, decision.budget)
    return None


def compose_reply(decision: ReplyDecision, links: LinkBuilder) -> str:
    template = TEMPLATES[type(decision)]
    return template(decision, links)
