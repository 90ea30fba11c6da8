"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from tdl_editor.config import EditorConfig
from tdl_editor.generator import GenerationRequest
from tdl_editor.session import EditorSession


@pytest.fixture
def report_request() -> GenerationRequest:
    """A builder request using every field."""
    return GenerationRequest(
        kind="Report",
        name="My Report",
        use_clause="DSP Report",
        attributes="Form : F1\n\nTitle : T1",
    )


@pytest.fixture
def session() -> EditorSession:
    """A fresh session with default settings."""
    return EditorSession(EditorConfig())


@pytest.fixture
def clipboard(monkeypatch) -> list:
    """Capture clipboard writes instead of touching the real clipboard."""
    copied = []
    monkeypatch.setattr("tdl_editor.output.pyperclip.copy", copied.append)
    return copied


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
