# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path
import pytest

from tsvtable.logging.init import reset_logging


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """encoding: utf-8
strict: true
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "tsvtable.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def people_tsv() -> str:
    return "Name\tAge\tHeight\nFrank Freeman\t45\t5,6\nMario Rossi\t25\t4,89"


@pytest.fixture()
def write_people_tsv(temp_workdir: Path, people_tsv: str) -> Path:
    f = temp_workdir / "data" / "people.tsv"
    f.write_bytes(people_tsv.encode("utf-8"))
    return f


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()
