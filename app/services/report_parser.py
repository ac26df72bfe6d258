"""
app/services/report_parser.py

Parses the free-text report produced by the intake model. The report is a
loose markdown document whose sections start with a ``###`` marker:

    ### Confirmed Details
    - Location: Austin
    - Target: female, 25-34
    ### Missing Critical Info
    - Budget
    ### Follow-up Questions
    1. What is your budget?

Parsing never fails: sections that are absent or unreadable come back empty.
"""

import logging
import re
from typing import Dict, List, Optional

from app.schemas.parsed_report import ParsedReport, ReportSections

logger = logging.getLogger(__name__)

SECTION_MARKER = "###"
CONFIRMED_TITLE = "Confirmed Details"
MISSING_TITLE = "Missing Critical Info"
QUESTIONS_TITLE = "Follow-up Questions"

_ITEM_SPLIT = re.compile(r"^[ \t]*-", re.MULTILINE)
_NUMBERED = re.compile(r"^\d+\.\s*")


# ---- Utility helpers ----
def _section_block(text: str, title: str) -> Optional[str]:
    """Body of the titled section, up to the next marker or end of text."""
    pattern = (
        re.escape(SECTION_MARKER)
        + r"[ \t]*"
        + re.escape(title)
        + r"[^\n]*\n(.*?)(?="
        + re.escape(SECTION_MARKER)
        + r"|\Z)"
    )
    match = re.search(pattern, text, flags=re.DOTALL | re.IGNORECASE)
    if not match:
        return None
    return match.group(1)

def _dash_items(block: str) -> List[str]:
    items = []
    for item in _ITEM_SPLIT.split(block):
        item = item.strip()
        if item:
            items.append(item)
    return items

def _confirmed(block: str) -> Dict[str, str]:
    confirmed: Dict[str, str] = {}
    for item in _dash_items(block):
        key, _, value = item.partition(":")
        key = key.strip()
        if not key:
            continue
        confirmed[key.lower()] = value.strip()
    return confirmed

def _questions(block: str) -> List[str]:
    questions = []
    for line in block.split("\n"):
        line = line.strip()
        if _NUMBERED.match(line):
            questions.append(_NUMBERED.sub("", line, count=1).strip())
    return questions


# ---- Public API ----
def format_for_display(text: str) -> str:
    return text.replace(SECTION_MARKER, "\n" + SECTION_MARKER).strip()

def parse_report(text: Optional[str]) -> ParsedReport:
    """
    Split the report into confirmed facts, missing items and follow-up questions.
    Accepts None or non-string input and treats it as an empty report.
    """
    if not isinstance(text, str):
        text = ""
    display = format_for_display(text)
    text = text.replace("\r\n", "\n")
    sections = ReportSections()

    block = _section_block(text, CONFIRMED_TITLE)
    if block is not None:
        sections.confirmed = _confirmed(block)

    block = _section_block(text, MISSING_TITLE)
    if block is not None:
        sections.missing = _dash_items(block)

    block = _section_block(text, QUESTIONS_TITLE)
    if block is not None:
        sections.questions = _questions(block)

    logger.debug(
        "Parsed report: %d confirmed, %d missing, %d questions",
        len(sections.confirmed), len(sections.missing), len(sections.questions),
    )
    return ParsedReport(display=display, data=sections)
