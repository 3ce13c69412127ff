from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import FrozenSet, Iterator, Optional

from .constants import DEFAULT_REPORT_TITLE, Limits
from .formatting import wrap_text
from .logging import LintLogger
from .models import Annotation, AnnotationLevel, Issue, LintReport, Location, Verdict


@dataclass(frozen=True)
class TransformOptions:
    """Knobs for turning a lint report into check-run annotations.

    `wrap_width` has no default: callers decide whether messages are wrapped
    (`None` or `0` leaves them untouched).
    """

    wrap_width: Optional[int]
    workspace_root: str = ""
    exclude: FrozenSet[str] = frozenset()
    only: FrozenSet[str] = frozenset()
    max_annotations: int = Limits.MAX_ANNOTATIONS
    report_title: str = DEFAULT_REPORT_TITLE

    def accepts(self, issue_id: str) -> bool:
        if self.only and issue_id not in self.only:
            return False
        return issue_id not in self.exclude


def severity_to_level(severity: Optional[str]) -> AnnotationLevel:
    """Only lint's "Warning" stays a warning; every other severity blocks."""
    return "warning" if severity == "Warning" else "failure"


def strip_workspace_root(path: str, workspace_root: str) -> str:
    root = (workspace_root or "").rstrip("/")
    if not root:
        return path
    prefix = f"{root}/"
    if path.startswith(prefix):
        return path[len(prefix):]
    return path


def _title(issue: Issue) -> str:
    summary = issue.summary.strip()
    return f"[{issue.id}] {summary}" if summary else f"[{issue.id}]"


def build_annotation(issue: Issue, location: Location, options: TransformOptions) -> Annotation:
    if location.line is None:
        raise ValueError(f"location {location.file} of issue {issue.id} has no line")
    # GitHub rejects annotations with an empty message.
    message = issue.message or issue.summary or issue.id
    return Annotation(
        path=strip_workspace_root(location.file, options.workspace_root),
        start_line=location.line,
        end_line=location.line,
        annotation_level=severity_to_level(issue.severity),
        message=wrap_text(message, options.wrap_width),
        title=_title(issue),
        raw_details=wrap_text(issue.explanation, options.wrap_width),
    )


def iter_annotations(
    report: LintReport,
    options: TransformOptions,
    logger: Optional[LintLogger] = None,
) -> Iterator[Annotation]:
    """Lazily yield annotations in document order, uncapped."""
    for issue in report.issues:
        if not options.accepts(issue.id):
            if logger:
                logger.info("Skipping filtered issue", issue_id=issue.id)
            continue
        for location in issue.locations:
            if location.line is None:
                if logger:
                    logger.debug(
                        "Skipping location without line number",
                        issue_id=issue.id,
                        file=location.file,
                    )
                continue
            annotation = build_annotation(issue, location, options)
            if logger:
                logger.debug(
                    "Annotation",
                    issue_id=issue.id,
                    path=annotation.path,
                    line=annotation.start_line,
                    level=annotation.annotation_level,
                )
            yield annotation


def transform(
    report: LintReport,
    options: TransformOptions,
    logger: Optional[LintLogger] = None,
) -> Verdict:
    """Filter, map and cap a lint report into a check-run verdict."""
    limit = max(options.max_annotations, 0)
    candidates = iter_annotations(report, options, logger)
    annotations = tuple(islice(candidates, limit))
    if logger and limit and len(annotations) == limit:
        logger.warning("Annotation limit reached", max_annotations=limit)
    return Verdict(title=options.report_title, annotations=annotations)
