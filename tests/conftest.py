"""
Pytest configuration and fixtures for reference closure tests.
"""

import json
import pytest
import yaml
from pathlib import Path
import sys

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from refclosure.closure.taxonomy import EdgeTaxonomy
from refclosure.closure.engine import ClosureEngine


@pytest.fixture(scope="session")
def taxonomy():
    """Load the packaged edge kind configuration"""
    return EdgeTaxonomy()


@pytest.fixture(scope="function")
def engine(taxonomy):
    """Create a closure engine for each test"""
    return ClosureEngine(taxonomy)


@pytest.fixture
def typedoc_project():
    """
    A small TypeDoc project with one module.

    Category "Auth" reaches signIn -> its signature -> the input parameter ->
    SignInInput -> its username property. Category "Storage" points at id 40,
    which does not exist. "Unused" is never referenced.
    """
    return {
        "id": 0,
        "name": "sample",
        "kind": 1,
        "children": [
            {
                "id": 1,
                "name": "aws-amplify",
                "kind": 2,
                "children": [
                    {
                        "id": 10,
                        "name": "signIn",
                        "kind": 64,
                        "signatures": [
                            {
                                "id": 11,
                                "name": "signIn",
                                "kind": 4096,
                                "parameters": [
                                    {
                                        "id": 12,
                                        "name": "input",
                                        "kind": 32768,
                                        "type": {"type": "reference", "target": 20, "name": "SignInInput"}
                                    }
                                ],
                                "type": {"type": "intrinsic", "name": "void"}
                            }
                        ]
                    },
                    {
                        "id": 20,
                        "name": "SignInInput",
                        "kind": 256,
                        "children": [
                            {
                                "id": 22,
                                "name": "username",
                                "kind": 1024,
                                "type": {"type": "intrinsic", "name": "string"}
                            }
                        ]
                    },
                    {"id": 30, "name": "Unused", "kind": 64}
                ],
                "categories": [
                    {"title": "Auth", "children": [10]},
                    {"title": "Storage", "children": [40]}
                ]
            }
        ]
    }


@pytest.fixture
def categories_file(tmp_path):
    """Package categories config for the sample project"""
    path = tmp_path / "package_categories.yaml"
    path.write_text(yaml.safe_dump({
        "packages": {
            "sample-js": {
                "root_package": "aws-amplify",
                "categories": {"auth": "Auth", "storage": "Storage"},
                "sub_categories": {"missing": "Missing"}
            }
        }
    }, sort_keys=False))
    return path


@pytest.fixture
def references_root(tmp_path, typedoc_project):
    """Directory laid out as <root>/sample-js/docs/reference.json"""
    root = tmp_path / "checkouts"
    docs = root / "sample-js" / "docs"
    docs.mkdir(parents=True)
    (docs / "reference.json").write_text(json.dumps(typedoc_project))
    return root
