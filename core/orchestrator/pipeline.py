"""Orchestration pipeline for one family's value generation run."""

from __future__ import annotations

from core.classify.classifier import classify_family
from core.classify.models import FamilyClassification, VersionDocument
from core.emit.rust_module import render_module
from core.emit.writer import module_dir, remove_module, write_module
from core.extract.property_tables import extract_properties
from core.orchestrator.models import (
    DocumentSummary,
    GenerationAction,
    GenerationReport,
    PropertySummary,
)
from core.overrides.models import OverrideTables
from core.sources.cache import TextCache
from core.sources.documents import resolve_document
from core.sources.index import resolve_index, versions_for
from core.sources.remote import SpecSourceClient
from core.sources.settings import GeneratorSettings


def run_generation(
    family: str,
    *,
    cache: TextCache,
    client: SpecSourceClient,
    settings: GeneratorSettings,
    tables: OverrideTables,
    write: bool = True,
) -> GenerationReport:
    """Execute index -> documents -> extract -> classify -> emit for one family.

    Raises:
        UnknownFamilyError: family is empty or not in the spec index.
        SourceFetchError: a remote read failed on a cache miss.
    """

    index = resolve_index(cache, client, settings)
    versions = versions_for(index, family)

    documents: list[VersionDocument] = []
    for version in versions:
        url = settings.document_url(family, version)
        html = resolve_document(cache, client, settings, family, version)
        documents.append(
            VersionDocument(version=version, url=url, result=extract_properties(html, source=url))
        )

    classification = classify_family(family, documents, tables)
    module_text = render_module(classification)

    action: GenerationAction
    output_path: str | None = None
    if not write:
        action = "dry_run"
    elif module_text:
        output_path = str(write_module(settings.out_root, family, module_text))
        action = "written"
    else:
        removed = remove_module(settings.out_root, family)
        output_path = str(module_dir(settings.out_root, family))
        action = "removed" if removed else "unchanged"

    return GenerationReport(
        family=family,
        versions=list(versions),
        url=classification.url,
        title=classification.title,
        documents=[_document_summary(document) for document in documents],
        properties=_property_summaries(classification),
        action=action,
        output_path=output_path,
        module_text=module_text,
    )


def _document_summary(document: VersionDocument) -> DocumentSummary:
    return DocumentSummary(
        version=document.version,
        url=document.url,
        outcome=document.result.outcome,
        record_count=len(document.result.records),
        index_table_count=document.result.index_table_count,
    )


def _property_summaries(classification: FamilyClassification) -> list[PropertySummary]:
    return [
        PropertySummary(
            name=item.record.name,
            generated_name=item.classified.generated_name,
            shape=item.classified.shape,
            needs_lifetime=item.classified.needs_lifetime,
            version=item.record.version,
            value=item.value,
        )
        for item in classification.properties
    ]
