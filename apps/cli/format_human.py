"""Human-readable run summaries for CLI output."""

from __future__ import annotations

from collections import Counter

from core.orchestrator.models import GenerationReport
from core.sources.index import SpecIndex


def render_generation_summary(report: GenerationReport) -> str:
    """Render one-screen summary of a generation run."""

    lines: list[str] = []
    lines.append("generation_summary:")
    lines.append(f"family={report.family} versions={','.join(str(v) for v in report.versions)}")
    if report.title:
        lines.append(f"title={report.title}")

    shapes: Counter[str] = Counter(item.shape for item in report.properties)
    lifetimes = sum(1 for item in report.properties if item.needs_lifetime)
    lines.append(
        f"properties={len(report.properties)} enum={shapes['enum']} "
        f"struct={shapes['struct']} lifetime={lifetimes}"
    )

    skipped = report.skipped_documents
    if skipped:
        skipped_text = ", ".join(f"{item.version}:{item.outcome}" for item in skipped)
        lines.append(f"skipped_documents: {skipped_text}")
    else:
        lines.append("skipped_documents: none")

    lines.append(f"action={report.action}")
    if report.output_path is not None:
        lines.append(f"output={report.output_path}")
    return "\n".join(lines)


def render_property_table(report: GenerationReport) -> str:
    """Render one line per classified property, aligned on the name column."""

    if not report.properties:
        return "no properties"

    width = max(len(item.name) for item in report.properties)
    lines = []
    for item in report.properties:
        lifetime = "'a" if item.needs_lifetime else "-"
        lines.append(
            f"{item.name.ljust(width)}  {item.shape:<6}  {lifetime:<2}  "
            f"v{item.version}  {item.generated_name}"
        )
    return "\n".join(lines)


def render_family_index(index: SpecIndex) -> str:
    if not index:
        return "no families"
    width = max(len(family) for family in index)
    return "\n".join(
        f"{family.ljust(width)}  {', '.join(str(version) for version in versions)}"
        for family, versions in index.items()
    )
