"""Tests for the email attachment value type."""

from __future__ import annotations

import pytest

from msg_catalog.core.errors import ValidationError
from msg_catalog.core.models import File


def test_file_trims_name_and_type() -> None:
    file = File("  Report ", " pdf ")

    assert file.name == "Report"
    assert file.file_type == "pdf"
    assert str(file) == "File {name='Report', type='pdf'}"


def test_file_equality_ignores_case_on_both_fields() -> None:
    assert File("Doc", "pdf") == File("DOC", "PDF")
    assert hash(File("Doc", "pdf")) == hash(File("doc", "Pdf"))
    assert File("Doc", "pdf") != File("Doc", "txt")
    assert File("Doc", "pdf") != File("Doc2", "pdf")
    assert File("Doc", "pdf") != "Doc.pdf"


@pytest.mark.parametrize(
    ("name", "file_type"),
    [("", "pdf"), ("   ", "pdf"), (None, "pdf"), ("Doc", ""), ("Doc", None)],
)
def test_file_rejects_blank_fields(name: str | None, file_type: str | None) -> None:
    with pytest.raises(ValidationError):
        File(name, file_type)  # type: ignore[arg-type]
