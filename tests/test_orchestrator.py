from __future__ import annotations

import json

import pytest

from typeshape.core.exceptions import ConnectorError
from typeshape.models.pipeline_config import PipelineConfig
from typeshape.models.render_options import RenderOptions
from typeshape.orchestrator import DeclarationOrchestrator, read_type_from_data_file


def _write_samples(path, samples):
    path.write_text(json.dumps(samples), encoding="utf-8")
    return path


def test_run_writes_declaration_and_reports_result(tmp_path):
    input_path = _write_samples(tmp_path / "data.json", [{"a": 1}, {"b": "x"}])
    output_path = tmp_path / "out" / "data.d.ts"

    result = DeclarationOrchestrator(run_id="run-1").run(
        {"input_path": str(input_path), "output_path": str(output_path)}
    )

    expected = "export type Data = {\n\ta? : number,\n\tb? : string\n};"
    assert result["status"] == "success"
    assert result["run_id"] == "run-1"
    assert result["sample_count"] == 2
    assert result["declaration"] == expected
    assert result["sink"]["target_location"] == str(output_path)
    assert result["sink"]["bytes_written"] == len(expected.encode("utf-8"))
    assert output_path.read_text(encoding="utf-8") == expected


def test_run_accepts_pipeline_config_with_render_options(tmp_path):
    input_path = _write_samples(tmp_path / "data.json", [[1], ["x"]])
    output_path = tmp_path / "types.ts"
    cfg = PipelineConfig(
        input_path=str(input_path),
        output_path=str(output_path),
        render=RenderOptions(type_name="Rows", export=False),
    )

    DeclarationOrchestrator().run(cfg)

    assert output_path.read_text(encoding="utf-8") == "type Rows = (number | string)[];"


def test_run_generates_run_id_when_missing():
    assert DeclarationOrchestrator().run_id != DeclarationOrchestrator().run_id
    assert DeclarationOrchestrator(run_id=7).run_id == "7"


def test_run_overwrites_existing_output(tmp_path):
    input_path = _write_samples(tmp_path / "data.json", ["x"])
    output_path = tmp_path / "data.d.ts"
    output_path.write_text("old content that is much longer than the new one", encoding="utf-8")

    read_type_from_data_file(input_path, output_path)

    assert output_path.read_text(encoding="utf-8") == "export type Data = string;"


def test_read_type_from_data_file_returns_declaration(tmp_path):
    input_path = _write_samples(tmp_path / "data.json", [{"a": None}])
    output_path = tmp_path / "data.d.ts"

    declaration = read_type_from_data_file(input_path, output_path, RenderOptions(unknown_marker="any"))

    assert declaration == "export type Data = {\n\ta : any\n};"
    assert output_path.read_text(encoding="utf-8") == declaration


def test_non_array_input_raises_connector_error(tmp_path):
    input_path = _write_samples(tmp_path / "data.json", {"a": 1})
    with pytest.raises(ConnectorError):
        read_type_from_data_file(input_path, tmp_path / "out.d.ts")
    assert not (tmp_path / "out.d.ts").exists()


def test_malformed_json_propagates_parse_error(tmp_path):
    input_path = tmp_path / "data.json"
    input_path.write_text("[{", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        read_type_from_data_file(input_path, tmp_path / "out.d.ts")


def test_missing_input_propagates_io_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_type_from_data_file(tmp_path / "missing.json", tmp_path / "out.d.ts")


def test_invalid_config_is_rejected():
    with pytest.raises(ValueError):
        DeclarationOrchestrator().run({"input_path": "x.json"})
