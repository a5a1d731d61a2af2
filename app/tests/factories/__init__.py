"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_pairs_document,
    make_records_document,
    make_template,
    make_translation_table,
    write_records_file,
    write_translation_file,
)

__all__ = [
    "make_pairs_document",
    "make_records_document",
    "make_template",
    "make_translation_table",
    "write_records_file",
    "write_translation_file",
]
