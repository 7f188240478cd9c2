"""Shared test fixtures for permstable."""

import pytest

from permstable.model import Action, Catalog, Endpoint, Resource

HOST_DOCUMENT = "A\nBEGIN TABLE\nold\nEND TABLE\nB"


@pytest.fixture
def sample_catalog():
    return Catalog(resources=[
        Resource(
            type="X",
            scopes=["Global"],
            endpoints=[
                Endpoint(
                    path="/x",
                    params={"Type": "x"},
                    actions=[
                        Action(
                            name="list",
                            description="List xs",
                            examples=["type=<type>;actions=list"],
                        ),
                    ],
                ),
            ],
        ),
    ])


@pytest.fixture
def host_document(tmp_path):
    path = tmp_path / "resource-table.mdx"
    path.write_text(HOST_DOCUMENT)
    return path
