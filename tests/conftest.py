"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_document_loader
from api.main import app
from core.fx_rates import parse_ecb_document

SAMPLE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<gesmes:Envelope xmlns:gesmes="http://www.gesmes.org/xml/2002-08-01" xmlns="http://www.ecb.int/vocabulary/2002-08-01/eurofxref">
    <gesmes:subject>Reference rates</gesmes:subject>
    <gesmes:Sender>
        <gesmes:name>European Central Bank</gesmes:name>
    </gesmes:Sender>
    <Cube>
        <Cube time="2024-01-03">
            <Cube currency="USD" rate="1.0919"/>
            <Cube currency="JPY" rate="155.52"/>
            <Cube currency="GBP" rate="0.86518"/>
        </Cube>
        <Cube time="2024-01-02">
            <Cube currency="USD" rate="1.10"/>
            <Cube currency="JPY" rate="156.33"/>
            <Cube currency="GBP" rate="0.85"/>
        </Cube>
        <Cube time="2023-12-29">
            <Cube currency="USD" rate="1.25"/>
            <Cube currency="JPY" rate="156.33"/>
            <Cube currency="GBP" rate="0.8691"/>
            <Cube currency="CHF" rate="0.926"/>
        </Cube>
    </Cube>
</gesmes:Envelope>
"""


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


@pytest.fixture
def sample_root():
    return parse_ecb_document(SAMPLE_XML)


@pytest.fixture
def document_calls():
    """Count of document loads made by the API under test."""
    return []


@pytest.fixture
def client(document_calls):
    def load():
        document_calls.append(1)
        return parse_ecb_document(SAMPLE_XML)

    app.dependency_overrides[get_document_loader] = lambda: load
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
