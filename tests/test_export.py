"""Tests for configuration loading and the export package."""

import csv

import pytest
from martian_robots.config import default_config, load_config
from martian_robots.export import CSVWriter, Reporter, Visualizer
from martian_robots.model.engine import SimulationEngine
from martian_robots.parser import parse_input

INPUT = "5 3\n1 1 E\nRFRFRFRF\n3 2 N\nFRRFLLFFRRFLL\n0 3 W\nLLFFFLFLFL"


def run_states():
    area, robots = parse_input(INPUT)
    engine = SimulationEngine(area, robots)
    states = []
    while not engine.is_finished():
        states.append(engine.step())
    return area, states


class TestConfig:
    """Tests for config loading."""

    def test_defaults(self):
        config = default_config()

        assert not config.export.csv
        assert not config.export.gif
        assert config.logging.level == 'WARNING'
        assert config.input_path is None

    def test_load_full(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text(
            "export:\n"
            "  csv: true\n"
            "  gif: true\n"
            "  gif_fps: 5\n"
            "logging:\n"
            "  level: debug\n"
            "input: robots.txt\n"
            "out_dir: results\n"
        )

        config = load_config(path)

        assert config.export.csv
        assert config.export.gif
        assert config.export.gif_fps == 5
        assert not config.export.snapshot
        assert config.logging.level == 'DEBUG'
        assert str(config.input_path) == "robots.txt"
        assert str(config.out_dir) == "results"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path) == default_config()

    def test_unknown_log_level(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("logging:\n  level: LOUD\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_bad_fps(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("export:\n  gif_fps: 0\n")

        with pytest.raises(ValueError):
            load_config(path)


class TestCSVWriter:
    """Tests for CSVWriter."""

    def test_writes_one_row_per_robot(self, tmp_path):
        _, states = run_states()
        path = tmp_path / "log" / "simulation_log.csv"

        with CSVWriter(path) as writer:
            for state in states:
                writer.append(state)

        assert writer.rows_written == 3
        assert not writer.is_open

        with open(path, newline='') as f:
            rows = list(csv.DictReader(f))

        assert [(r['step'], r['x'], r['y'], r['orientation'], r['lost'], r['scents'])
                for r in rows] == [
            ('1', '1', '1', 'E', 'False', '0'),
            ('2', '3', '3', 'N', 'True', '1'),
            ('3', '2', '3', 'S', 'False', '1'),
        ]


class TestVisualizer:
    """Tests for Visualizer."""

    def test_snapshot(self, tmp_path):
        area, states = run_states()
        path = tmp_path / "final_state.png"

        Visualizer(area).save_snapshot(states[-1], path)

        assert path.exists()
        assert path.stat().st_size > 0

    def test_gif(self, tmp_path):
        area, states = run_states()
        visualizer = Visualizer(area)
        for state in states:
            visualizer.buffer_frame(state)

        path = tmp_path / "simulation.gif"
        visualizer.generate_gif(path, fps=2)

        assert len(visualizer.frames) == 3
        assert path.exists()

    def test_gif_without_frames_writes_nothing(self, tmp_path):
        area, _ = run_states()
        path = tmp_path / "simulation.gif"

        Visualizer(area).generate_gif(path)

        assert not path.exists()


class TestReporter:
    """Tests for Reporter."""

    def test_summary(self, tmp_path):
        _, states = run_states()
        reporter = Reporter("<stdin>")
        for state in states:
            reporter.update(state)

        report = reporter.generate_summary(states[-1], tmp_path, False, True, False)

        assert "Robots Lost:           1 (33.3%)" in report
        assert "Robots Saved by Scent: 1" in report
        assert "(3, 3)" in report
        assert "CSV Log:    (disabled)" in report
