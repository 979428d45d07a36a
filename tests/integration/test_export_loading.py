from pathlib import Path
from typing import Any

import orjson
import pytest

from animate_library.__main__ import main
from animate_library.library import Library, SchemaError, Stage
from animate_library.settings import AppSettings


@pytest.fixture
def export_file(tmp_path: Path, sample_document: dict[str, Any]) -> Path:
    path = tmp_path / "project.json"
    path.write_bytes(orjson.dumps(sample_document))
    return path


def test_library_from_file(export_file: Path):
    library = Library.from_file(export_file)
    assert isinstance(library.stage, Stage)
    assert library.stage.framerate == 24
    assert [s.name for s in library.shapes] == ["MC_2", "MC_3"]


def test_from_file_rejects_invalid_json(tmp_path: Path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SchemaError, match="Invalid JSON"):
        Library.from_file(path)


def test_from_file_missing_file(tmp_path: Path):
    with pytest.raises(SchemaError, match="Cannot read"):
        Library.from_file(tmp_path / "missing.json")


def test_cli_builds_library(export_file: Path, app_settings: AppSettings, capsys: pytest.CaptureFixture[str]):
    assert main([str(export_file), "--profile", "pytest", "--dump-meta"]) == 0
    assert 'stageName: "MC"' in capsys.readouterr().out
    assert AppSettings(profile="pytest").last_export_path == export_file.resolve()


def test_cli_writes_shapes(export_file: Path, app_settings: AppSettings, tmp_path: Path):
    shapes_out = tmp_path / "shapes.json"
    assert main([str(export_file), "--profile", "pytest", "--shapes-out", str(shapes_out)]) == 0
    text = shapes_out.read_text(encoding="utf-8")
    assert '"MC_2"' in text
    assert '"MC_3": [' in text


def test_cli_reports_schema_errors(tmp_path: Path, app_settings: AppSettings):
    path = tmp_path / "bad.json"
    path.write_bytes(orjson.dumps({"Bitmaps": []}))
    assert main([str(path), "--profile", "pytest"]) == 1


def test_cli_strict_duplicate_ids(tmp_path: Path, app_settings: AppSettings, document_factory: Any):
    path = tmp_path / "dupes.json"
    doc = document_factory(bitmaps=[{"assetId": 1}], texts=[{"assetId": 1}])
    path.write_bytes(orjson.dumps(doc))
    assert main([str(path), "--profile", "pytest"]) == 0
    assert main([str(path), "--profile", "pytest", "--strict"]) == 1


def test_cli_rejects_non_numeric_framerate(tmp_path: Path, app_settings: AppSettings, document_factory: Any):
    path = tmp_path / "framerate.json"
    doc = document_factory(timelines=[{"assetId": 1, "type": "stage", "totalFrames": 1}])
    doc["_meta"]["framerate"] = "fast"
    path.write_bytes(orjson.dumps(doc))
    assert main([str(path), "--profile", "pytest"]) == 1
