"""Shared fixtures for core unit tests"""

import pytest

from mdtailor.core.models import FieldSchema


SAMPLE_DOC = """\
---
title: Hello
author: Jane
---
# Hi
- one
- two
"""


@pytest.fixture(name="fields")
def fields_fixture():
    return [
        FieldSchema(name="title", kind="string", required=True),
        FieldSchema(name="author", kind="string", required=True),
    ]


@pytest.fixture(name="all_kinds")
def all_kinds_fixture():
    """One optional field per kind."""
    return [
        FieldSchema(name="title", kind="string", required=False),
        FieldSchema(name="count", kind="number", required=False),
        FieldSchema(name="draft", kind="boolean", required=False),
        FieldSchema(name="date", kind="date", required=False),
        FieldSchema(name="tags", kind="array", required=False),
        FieldSchema(name="extra", kind="unknown", required=False),
    ]


@pytest.fixture(name="sample_doc")
def sample_doc_fixture():
    return SAMPLE_DOC
