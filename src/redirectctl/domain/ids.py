"""Rule identifiers — mapping display ids back to RuleSet positions.

Rules carry no stored id. The CLI shows ``rule-<index>`` and accepts any
string containing a digit run (``3``, ``rule-3``, ``deleteRuleButton-3``).
"""

from __future__ import annotations

import re

RULE_ID_PREFIX = "rule-"

_DIGIT_RUN = re.compile(r"[0-9]+")


def format_rule_id(index: int) -> str:
    """Display identifier for the rule at *index*."""
    return f"{RULE_ID_PREFIX}{index}"


def parse_trailing_index(identifier: str) -> int | None:
    """Extract the first run of digits in *identifier* as an index.

    Returns None when *identifier* holds no digits, or when the digit run is
    too long to convert. A None result must abort a delete without touching
    the RuleSet.

    Examples:
        >>> parse_trailing_index("deleteRuleButton-999")
        999
        >>> parse_trailing_index("deleteRuleButton-") is None
        True
    """
    match = _DIGIT_RUN.search(identifier)
    if match is None:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # Digit run longer than the interpreter's int conversion limit.
        return None
