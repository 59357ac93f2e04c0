import itertools
import json

import pytest

from sdk_doc_index.diagnostics import DiagnosticKind
from sdk_doc_index.mapping import build_service_map, index_metadata
from sdk_doc_index.metadata import parse_metadata
from sdk_doc_index.models import OTHER_SERVICE, MetadataRecord


def record(package, service="", hide=""):
    return MetadataRecord(Package=package, ServiceName=service, Hide=hide)


def test_shared_service_and_unmatched_artifact():
    metadata = [record("A", "Storage"), record("B", "Storage")]
    service_map, diagnostics = build_service_map(metadata, ["A", "B", "C"])
    assert service_map == {"A": "Storage", "B": "Storage", "C": "Other"}
    assert diagnostics.subjects(DiagnosticKind.MISSING_SERVICE_NAME) == ["C"]
    assert len(diagnostics) == 1


def test_service_name_is_trimmed():
    service_map, diagnostics = build_service_map([record("X", "  Compute  ")], ["X"])
    assert service_map == {"X": "Compute"}
    assert len(diagnostics) == 0


@pytest.mark.parametrize("service", ["", "   "])
def test_blank_service_name_falls_back_to_other(service):
    service_map, diagnostics = build_service_map([record("X", service)], ["X"])
    assert service_map == {"X": OTHER_SERVICE}
    assert diagnostics.subjects(DiagnosticKind.MISSING_SERVICE_NAME) == ["X"]


def test_hidden_artifact_is_excluded():
    service_map, diagnostics = build_service_map(
        [record("H", "Core", hide="true")], ["H"]
    )
    assert service_map == {}
    assert diagnostics.subjects(DiagnosticKind.HIDDEN_ARTIFACT) == ["H"]
    assert not diagnostics.by_kind(DiagnosticKind.MISSING_SERVICE_NAME)


@pytest.mark.parametrize("hide", ["True", "TRUE", "1", "yes", " true"])
def test_hide_requires_exact_lowercase_true(hide):
    service_map, _ = build_service_map([record("H", "Core", hide=hide)], ["H"])
    assert service_map == {"H": "Core"}


def test_only_first_match_decides_visibility():
    metadata = [record("P", "First"), record("P", "Second", hide="true")]
    service_map, diagnostics = build_service_map(metadata, ["P"])
    assert service_map == {"P": "First"}
    assert diagnostics.subjects(DiagnosticKind.AMBIGUOUS_METADATA) == ["P"]

    metadata = [record("P", "First", hide="true"), record("P", "Second")]
    service_map, diagnostics = build_service_map(metadata, ["P"])
    assert service_map == {}
    assert not diagnostics.by_kind(DiagnosticKind.AMBIGUOUS_METADATA)


def test_ambiguous_metadata_uses_first_match():
    metadata = [record("P", "Storage"), record("P", "Compute"), record("Q", "Core")]
    service_map, diagnostics = build_service_map(metadata, ["P", "Q"])
    assert service_map == {"P": "Storage", "Q": "Core"}
    assert diagnostics.subjects(DiagnosticKind.AMBIGUOUS_METADATA) == ["P"]


def test_ambiguous_and_missing_service_name_both_reported():
    metadata = [record("P", ""), record("P", "Compute")]
    service_map, diagnostics = build_service_map(metadata, ["P"])
    assert service_map == {"P": OTHER_SERVICE}
    assert [d.kind for d in diagnostics] == [
        DiagnosticKind.AMBIGUOUS_METADATA,
        DiagnosticKind.MISSING_SERVICE_NAME,
    ]


def test_package_match_is_exact():
    service_map, _ = build_service_map([record("azure.core", "Core")], ["Azure.Core"])
    assert service_map == {"Azure.Core": OTHER_SERVICE}


def test_duplicate_artifacts_are_idempotent():
    metadata = [record("A", "Storage")]
    service_map, diagnostics = build_service_map(metadata, ["A", "C", "A", "C"])
    assert service_map == {"A": "Storage", "C": OTHER_SERVICE}
    assert diagnostics.subjects(DiagnosticKind.MISSING_SERVICE_NAME) == ["C"]


def _serialize(service_map, diagnostics):
    return json.dumps(
        {
            "map": list(service_map.items()),
            "diagnostics": [[d.kind.value, d.subject, d.message] for d in diagnostics],
        }
    ).encode("utf-8")


def test_mapping_is_deterministic(metadata_csv):
    metadata = parse_metadata(metadata_csv)
    artifacts = [
        "Azure.Storage.Blobs",
        "Azure.Core.Experimental",
        "Azure.Unknown",
        "Azure.Storage.Queues",
    ]
    first = _serialize(*build_service_map(metadata, artifacts))
    second = _serialize(*build_service_map(metadata, artifacts))
    assert first == second


def test_duplicate_permutations_give_identical_output():
    metadata = [record("A", "Storage"), record("A", "Compute"), record("B", "")]
    base = ["A", "B", "C"]
    outputs = set()
    for extra in itertools.permutations(["A", "B", "C"]):
        # duplicates appended after the first occurrence of every name
        outputs.add(_serialize(*build_service_map(metadata, base + list(extra))))
    assert len(outputs) == 1


def test_index_metadata_preserves_catalog_order():
    metadata = [record("P", "1"), record("Q", "x"), record("P", "2")]
    index = index_metadata(metadata)
    assert [r.service_name for r in index["P"]] == ["1", "2"]


def test_inputs_are_not_mutated():
    metadata = [record("A", "Storage")]
    artifacts = ["A", "B"]
    build_service_map(metadata, artifacts)
    assert artifacts == ["A", "B"]
    assert metadata == [record("A", "Storage")]
