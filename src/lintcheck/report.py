"""Lint report loading.

The report is the XML written by the Android/Gradle lint task::

    <issues format="6" by="lint 8.2.0">
        <issue id="HardcodedText" severity="Error" summary="..." message="..."
               explanation="...">
            <location file="/work/app/src/main/res/layout/main.xml" line="22" column="9"/>
        </issue>
    </issues>

Required fields are checked once here so the transformer only ever sees
typed records.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from .errors import ReportNotFoundError, ReportParseError
from .models import Issue, LintReport, Location

ROOT_TAG = "issues"
ISSUE_TAG = "issue"
LOCATION_TAG = "location"


def _coerce_line(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    stripped = value.strip()
    if not (stripped.isascii() and stripped.isdigit()):
        return None
    return int(stripped)


def _parse_location(element: ET.Element, issue_id: str) -> Location:
    file = element.get("file")
    if not file:
        raise ReportParseError(f"Location of issue '{issue_id}' is missing the 'file' attribute")
    return Location(file=file, line=_coerce_line(element.get("line")))


def _parse_issue(element: ET.Element, index: int) -> Issue:
    issue_id = (element.get("id") or "").strip()
    if not issue_id:
        raise ReportParseError(f"Issue #{index + 1} is missing the 'id' attribute")
    locations = tuple(
        _parse_location(child, issue_id) for child in element.findall(LOCATION_TAG)
    )
    return Issue(
        id=issue_id,
        summary=element.get("summary", ""),
        severity=element.get("severity", ""),
        message=element.get("message", ""),
        explanation=element.get("explanation", ""),
        locations=locations,
    )


def parse_report(data: Union[str, bytes]) -> LintReport:
    """Parse a lint XML document into a `LintReport`."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ReportParseError(f"Malformed lint report: {exc}") from exc

    if root.tag != ROOT_TAG:
        raise ReportParseError(f"Expected <{ROOT_TAG}> root element, found <{root.tag}>")

    elements = root.findall(ISSUE_TAG)
    if not elements:
        raise ReportParseError(f"Lint report has no <{ISSUE_TAG}> elements under <{ROOT_TAG}>")

    issues = tuple(_parse_issue(element, index) for index, element in enumerate(elements))
    return LintReport(issues=issues)


def load_report(path: Union[str, Path]) -> LintReport:
    report_path = Path(path)
    try:
        data = report_path.read_bytes()
    except OSError as exc:
        raise ReportNotFoundError(f"Cannot read lint report '{report_path}': {exc}") from exc
    return parse_report(data)
