from __future__ import annotations

import os
from typing import Optional

from ..constants import Limits
from ..formatting import format_int, truncate
from ..models import Verdict


def write_step_summary(
    verdict: Verdict,
    check_name: str,
    *,
    check_run_url: Optional[str] = None,
) -> None:
    """
    Write GitHub Actions Step Summary.

    This appears in the job summary, providing quick visibility
    without opening the check run.
    """
    summary_path = os.environ.get("GITHUB_STEP_SUMMARY")
    if not summary_path:
        return

    status_icon = "❌" if verdict.failed else "✅"
    counts = verdict.level_counts()

    md = [
        f"## {check_name}: {status_icon} {verdict.conclusion.upper()}",
        "",
        f"**{verdict.title}:** {verdict.summary}",
        "",
        "| Level | Count |",
        "|-------|------:|",
        f"| failure | {format_int(counts['failure'])} |",
        f"| warning | {format_int(counts['warning'])} |",
        "",
    ]

    if verdict.annotations:
        md.append("### First Annotations")
        md.append("")
        for annotation in verdict.annotations[: Limits.MAX_SUMMARY_ANNOTATIONS]:
            message = truncate(" ".join(annotation.message.split()), 200)
            md.append(
                f"- **{annotation.annotation_level}** "
                f"`{annotation.path}:{annotation.start_line}` · {message}"
            )
        md.append("")

    if check_run_url:
        md.append(f"[View check run]({check_run_url})")
        md.append("")

    with open(summary_path, "a", encoding="utf-8") as summary_file:
        summary_file.write("\n".join(md))
