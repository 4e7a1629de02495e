"""Test configuration and fixtures for treetrim."""

import pytest

SIMPLE_TREE = "root\n├── a\n│   └── b\n└── c\n"

PROJECT_TREE = """my-project
├── build
│   ├── lib
│   │   └── core.o
│   └── main.o
├── node_modules
│   ├── left-pad
│   │   └── index.js
│   └── nodeX
├── src
│   ├── build
│   │   └── script.sh
│   ├── main.py
│   └── utils
│       └── helpers.py
└── README.md
"""


@pytest.fixture
def simple_tree_text():
    """A minimal three-level tree."""
    return SIMPLE_TREE


@pytest.fixture
def project_tree_text():
    """A realistic project tree with build output and dependencies."""
    return PROJECT_TREE
