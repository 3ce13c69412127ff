from __future__ import annotations

from lintcheck.models import Annotation, Verdict


def test_annotation_payload_format() -> None:
    annotation = Annotation(
        path="app/Main.java",
        start_line=42,
        end_line=42,
        annotation_level="failure",
        message="Unsafe call",
        title="[NewApi] Calling new methods on older versions",
        raw_details="Explanation",
    )
    payload = annotation.to_payload()

    assert payload == {
        "path": "app/Main.java",
        "start_line": 42,
        "end_line": 42,
        "annotation_level": "failure",
        "message": "Unsafe call",
        "title": "[NewApi] Calling new methods on older versions",
        "raw_details": "Explanation",
    }


def test_annotation_payload_omits_empty_optional_fields() -> None:
    annotation = Annotation(
        path="a.xml", start_line=1, end_line=1, annotation_level="warning", message="m"
    )
    payload = annotation.to_payload()

    assert "title" not in payload
    assert "raw_details" not in payload


def test_empty_verdict_passes() -> None:
    verdict = Verdict(title="Lint Report")

    assert verdict.failed is False
    assert verdict.conclusion == "success"
    assert verdict.to_output() == {
        "conclusion": "success",
        "output": {"title": "Lint Report", "summary": "0 error(s) found", "annotations": []},
    }


def test_verdict_fails_with_warnings_only() -> None:
    warning = Annotation(
        path="a.xml", start_line=3, end_line=3, annotation_level="warning", message="m"
    )
    verdict = Verdict(title="Lint Report", annotations=(warning, warning))

    assert verdict.failed is True
    assert verdict.conclusion == "failure"
    assert verdict.summary == "2 error(s) found"
    assert verdict.level_counts() == {"failure": 0, "warning": 2}
