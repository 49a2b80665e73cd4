from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'services.document_parser'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


@pytest.fixture(autouse=True)
def _fresh_settings():
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


SAMPLE_DOCUMENT = """\
= Tech Companies in Bangladesh

A list of software companies. Contributions welcome via https://github.com/example/repo[GitHub].

[options="header"]
|===
| Company Name | Office Location | Technologies | Web Presence

|Brain Station 23
|Plot 02, Bir Uttam A.K. Khandakar Road,
Mohakhali C/A, Dhaka 1212
|Java, PHP, Python, React, .NET
|https://brainstation-23.com[Website]
https://www.facebook.com/brainstation23[Facebook] https://www.linkedin.com/company/brain-station-23[LinkedIn]

|Cefalo
|Gulshan 1, Dhaka
|Java, Kotlin, React
|https://www.cefalo.com[Website]

|
|Nowhere
|Go
|https://nameless.example[Website]

|Anchorblock Technology
|Banani, Dhaka
|Go, React, , Node.js
|===

Maintained by volunteers, see https://example.org/about[About].
"""


@pytest.fixture
def sample_document() -> str:
    return SAMPLE_DOCUMENT
