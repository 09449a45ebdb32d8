"""
Pytest configuration and shared fixtures for all tests.

Provides sample corpora written to a temporary docs directory and settings
pointing at them, so lookups never touch the real documentation files.
"""
import logging
import os

import pytest

from backend.app.services.lookup import DocsLookup
from shared.config import Settings


TAURI_CORPUS = """\
Tauri llms.txt
# Introduction
Tauri is a framework for building tiny, fast binaries for all major desktop platforms.

Developers can integrate any front-end framework that compiles to HTML, JS and CSS.
# Commands
Commands let the frontend invoke Rust functions.

## Defining commands
Use the #[tauri::command] attribute to expose a function.
# Security
The capability system restricts which windows can use which permissions.

Plugins ship their own default permission sets.
"""

SVELTE_CORPUS = """\
# Overview
Svelte is a UI framework that uses a compiler.
# Runes
Runes such as $state control reactivity.

Use $derived for computed values.
# Start of SvelteKit documentation
# Routing
SvelteKit uses a filesystem-based router.

Each +page.svelte file defines a page.
# Loading data
A load function runs before the page renders.
"""


@pytest.fixture
def tauri_corpus():
    return TAURI_CORPUS


@pytest.fixture
def svelte_corpus():
    return SVELTE_CORPUS


@pytest.fixture
def docs_dir(tmp_path):
    """Temporary docs directory holding the Tauri and Svelte corpora."""
    (tmp_path / "TAURIllms.txt").write_text(TAURI_CORPUS, encoding="utf-8")
    (tmp_path / "SVELTEllms-full.txt").write_text(SVELTE_CORPUS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def test_settings(docs_dir):
    return Settings(
        app_env="test",
        docs_dir=str(docs_dir),
        tauri_docs_path=str(docs_dir / "TAURIllms.txt"),
        svelte_docs_path=str(docs_dir / "SVELTEllms-full.txt"),
        docs_rs_base_url="https://docs.rs",
    )


@pytest.fixture
def missing_settings(tmp_path):
    """Settings whose corpus files do not exist."""
    return Settings(
        app_env="test",
        tauri_docs_path=str(tmp_path / "missing" / "TAURIllms.txt"),
        svelte_docs_path=str(tmp_path / "missing" / "SVELTEllms-full.txt"),
    )


@pytest.fixture
def test_logger():
    return logging.getLogger("dev-docs-test")


@pytest.fixture
def lookup(test_settings, test_logger):
    return DocsLookup(test_settings, logger=test_logger)


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Set up test environment before each test."""
    os.environ["APP_ENV"] = "test"
    yield


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
