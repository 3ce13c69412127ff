from __future__ import annotations

import os
from typing import Optional

from ..models import Verdict


def write_github_outputs(verdict: Verdict, check_run_url: Optional[str] = None) -> None:
    """Write GitHub Actions outputs."""
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        return

    with open(output_path, "a", encoding="utf-8") as f:
        f.write(f"conclusion={verdict.conclusion}\n")
        f.write(f"annotation_count={verdict.count}\n")
        if check_run_url:
            f.write(f"check_run_url={check_run_url}\n")
