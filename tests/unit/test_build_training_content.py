"""
Unit tests for the training content build script.
"""

import importlib.util
import json
from pathlib import Path

import pytest

BUILD_SCRIPT = Path(__file__).parents[2] / "scripts" / "build_training_content.py"


@pytest.fixture
def build_script():
    spec = importlib.util.spec_from_file_location("build_training_content", BUILD_SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestBuildTrainingContent:
    """Test cases for pre-rendering units to JSON."""

    def test_writes_one_file_per_unit(self, build_script, manual_dir, tmp_path):
        output_dir = tmp_path / "processed"

        written = build_script.build_training_content(manual_dir, output_dir)

        assert sorted(path.name for path in written) == [
            "module_1_unit_1.json",
            "module_1_unit_2.json",
            "module_2_unit_1.json",
        ]
        payload = json.loads((output_dir / "module_1_unit_1.json").read_text(encoding="utf-8"))
        assert payload["success"] is True
        assert payload["unit"]["title"] == "Welcome to the Team"
        assert payload["unit"]["reflection"] == [
            "What does hospitality mean to you?",
            "Which value resonates most?",
        ]

    def test_main_rejects_missing_directory(self, build_script, tmp_path):
        assert build_script.main(["--modules-dir", str(tmp_path / "missing")]) == 1

    def test_main_builds(self, build_script, manual_dir, tmp_path):
        output_dir = tmp_path / "out"

        assert build_script.main(["--modules-dir", str(manual_dir), "--out-destination", str(output_dir)]) == 0
        assert (output_dir / "module_2_unit_1.json").exists()
