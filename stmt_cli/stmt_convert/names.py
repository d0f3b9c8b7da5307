"""Counterparty name extraction from transaction descriptions.

Descriptions printed by Thai banks usually carry the counterparty after a
personal title (``นาย``, ``นางสาว``, ``MR.``) or a corporate prefix
(``บริษัท``, ``หจก.``). The first person title found wins; company prefixes
are only consulted when no title matches.
"""

from __future__ import annotations

import re

# ``นาง`` must not swallow the first half of ``นางสาว``.
_PERSON_RE = re.compile(
    r"(นาย|นาง(?!สาว)|นางสาว|น\.ส\.|(?<![A-Za-z])(?:MRS|MR|MS)\.?)\s+(\S.*)",
    re.IGNORECASE,
)

# Name ends at end of string or where another field label starts.
_NAME_END_RE = re.compile(r"^([ก-๙a-zA-Z\s.]+?)(?:\s*$|\s*(?:NOTE|DESC))")

_COMPANY_RE = re.compile(
    r"(บริษัท|บจก\.|บมจ\.|หจก\.|ห้างหุ้นส่วนจำกัด|ห้างหุ้นส่วน|สหกรณ์|มูลนิธิ|สมาคม)\s+(\S.*)"
)


def extract_name(description: str) -> str:
    """Return the counterparty named in ``description`` or ``""``."""

    if not description or not isinstance(description, str):
        return ""

    person = _PERSON_RE.search(description)
    if person:
        title = person.group(1)
        rest = person.group(2).strip()
        tight = _NAME_END_RE.match(rest)
        if tight and tight.group(1).strip():
            return f"{title} {tight.group(1).strip()}"
        return f"{title} {rest}"

    company = _COMPANY_RE.search(description)
    if company:
        return f"{company.group(1)} {company.group(2).strip()}"

    return ""
