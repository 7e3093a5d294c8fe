"""End-to-end tests for process_input and the command line."""

from pathlib import Path

import pytest
from martian_robots import MalformedGridSpec, MalformedRobotSpec, process_input
from martian_robots.main import main

SAMPLE_DIR = Path(__file__).parent / "sample_data"

INPUT = "5 3\n1 1 E\nRFRFRFRF\n3 2 N\nFRRFLLFFRRFLL\n0 3 W\nLLFFFLFLFL"
OUTPUT = "1 1 E\n3 3 N LOST\n2 3 S"


def sample_pairs():
    pairs = []
    for input_file in sorted(SAMPLE_DIR.glob("input*.txt")):
        output_file = input_file.with_name(input_file.name.replace("input", "output"))
        pairs.append(pytest.param(input_file, output_file, id=input_file.stem))
    return pairs


class TestProcessInput:
    """Tests for process_input."""

    def test_with_whitespace(self):
        assert process_input(INPUT) == OUTPUT

    def test_without_whitespace(self):
        assert process_input(INPUT.replace(" ", "")) == OUTPUT

    def test_mixed_spacing(self):
        assert process_input("5 3\n1 1E\nRFRFRFRF") == "1 1 E"
        assert process_input("53\n32 N\nFRRFLLFFRRFLL") == "3 3 N LOST"

    @pytest.mark.parametrize("input_file,output_file", sample_pairs())
    def test_sample_files(self, input_file, output_file):
        assert process_input(input_file.read_text()) == output_file.read_text()

    def test_malformed_grid(self):
        with pytest.raises(MalformedGridSpec):
            process_input("536\n11E\nRFRFRFRF")

    def test_malformed_position(self):
        with pytest.raises(MalformedRobotSpec):
            process_input("53\n11\nRFRFRFRF")


class TestMain:
    """Tests for the CLI entry point."""

    def test_reads_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", _FakeStdin(INPUT + "\n\n"))

        assert main([]) == 0
        captured = capsys.readouterr()
        assert captured.out == OUTPUT + "\n"

    def test_reads_input_file(self, capsys):
        assert main(["--input", str(SAMPLE_DIR / "input1.txt")]) == 0
        assert capsys.readouterr().out == OUTPUT + "\n"

    def test_malformed_input_writes_nothing_to_stdout(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", _FakeStdin("536\n11E\nRFRFRFRF"))

        assert main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error:" in captured.err

    def test_missing_input_file(self, tmp_path, capsys):
        assert main(["--input", str(tmp_path / "nope.txt")]) == 1
        assert capsys.readouterr().out == ""

    def test_undecodable_input_file(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"\xff\xfe 3\n")

        assert main(["--input", str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error:" in captured.err

    def test_directory_as_input(self, tmp_path, capsys):
        assert main(["--input", str(tmp_path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error:" in captured.err

    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "nope.yaml")]) == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_exports(self, tmp_path, capsys):
        out_dir = tmp_path / "out"
        code = main([
            "--input", str(SAMPLE_DIR / "input1.txt"),
            "--out-dir", str(out_dir),
            "--csv", "--snapshot", "--gif", "--report",
        ])

        assert code == 0
        captured = capsys.readouterr()
        assert captured.out == OUTPUT + "\n"
        assert "MARTIAN ROBOTS SIMULATION REPORT" in captured.err
        assert (out_dir / "simulation_log.csv").exists()
        assert (out_dir / "final_state.png").exists()
        assert (out_dir / "simulation.gif").exists()

    def test_config_file_enables_csv(self, tmp_path, capsys):
        config_path = tmp_path / "run.yaml"
        config_path.write_text(
            f"export:\n  csv: true\nout_dir: {tmp_path / 'from_config'}\n"
        )

        code = main(["--config", str(config_path),
                     "--input", str(SAMPLE_DIR / "input1.txt")])

        assert code == 0
        assert (tmp_path / "from_config" / "simulation_log.csv").exists()
        assert capsys.readouterr().out == OUTPUT + "\n"


class _FakeStdin:
    def __init__(self, text):
        self._text = text

    def read(self):
        return self._text
