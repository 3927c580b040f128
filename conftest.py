import pytest
from docthread.test_utils.workspace import WorkspaceFactory


@pytest.fixture
def workspace_factory(tmp_path, monkeypatch):
    # A clean workspace per test, with the working directory inside it
    factory = WorkspaceFactory(tmp_path)
    monkeypatch.chdir(tmp_path)
    return factory
