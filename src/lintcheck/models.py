from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple

AnnotationLevel = Literal["warning", "failure"]
Conclusion = Literal["success", "failure"]


@dataclass(frozen=True)
class Location:
    file: str
    line: Optional[int] = None


@dataclass(frozen=True)
class Issue:
    id: str
    summary: str = ""
    severity: str = ""
    message: str = ""
    explanation: str = ""
    locations: Tuple[Location, ...] = ()


@dataclass(frozen=True)
class LintReport:
    issues: Tuple[Issue, ...] = ()

    def __len__(self) -> int:
        return len(self.issues)


@dataclass(frozen=True)
class Annotation:
    path: str
    start_line: int
    end_line: int
    annotation_level: AnnotationLevel
    message: str
    title: str = ""
    raw_details: str = ""

    def to_payload(self) -> Dict[str, Any]:
        """Shape accepted by the check-runs API `output.annotations` field."""
        payload: Dict[str, Any] = {
            "path": self.path,
            "start_line": self.start_line,
            "end_line": self.end_line,
            "annotation_level": self.annotation_level,
            "message": self.message,
        }
        if self.title:
            payload["title"] = self.title
        if self.raw_details:
            payload["raw_details"] = self.raw_details
        return payload


@dataclass(frozen=True)
class Verdict:
    title: str
    annotations: Tuple[Annotation, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.annotations)

    @property
    def failed(self) -> bool:
        return self.count > 0

    @property
    def conclusion(self) -> Conclusion:
        return "failure" if self.failed else "success"

    @property
    def summary(self) -> str:
        return f"{self.count} error(s) found"

    def level_counts(self) -> Dict[str, int]:
        counts = {"failure": 0, "warning": 0}
        for annotation in self.annotations:
            counts[annotation.annotation_level] += 1
        return counts

    def to_output(self) -> Dict[str, Any]:
        annotations: List[Dict[str, Any]] = [a.to_payload() for a in self.annotations]
        return {
            "conclusion": self.conclusion,
            "output": {
                "title": self.title,
                "summary": self.summary,
                "annotations": annotations,
            },
        }
