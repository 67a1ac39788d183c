"""Tests for the command line entry point."""

from pathlib import Path

import pytest

from trimsheet.main import EXIT_DATA_ERROR, EXIT_NO_RESULT, EXIT_OK, main, parse_args

EXAMPLE_PLAN = Path(__file__).parent.parent / "examples" / "tc-jra.yaml"

BASELINE_ARGS = ["baseline", "--aircraft", "A321-231", "--tail", "TC-JRA",
                 "--cockpit", "2", "--cabin", "6", "--water", "100"]


@pytest.fixture
def plan_file(tmp_path: Path) -> Path:
    path = tmp_path / "plan.yaml"
    path.write_text(
        "configuration:\n"
        "  aircraft: A321-231\n"
        "  tail: TC-JRA\n"
        "  cockpit: 2\n"
        "  cabin: 6\n"
        "  pantry: A\n"
        "  water: 100\n"
        "eic:\n"
        "  weight: 0\n"
        "zones:\n"
        "  paxA: {passengers: 25}\n"
    )
    return path


class TestParseArgs:
    """Tests for argument parsing."""

    def test_subcommand_is_required(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])

    def test_radioactive_defaults(self) -> None:
        args = parse_args(["radioactive", "--aircraft", "B737", "--compartment", "4",
                           "--ti", "3.2", "--box", "30"])
        assert args.unit == "cm"
        assert args.data_dir is None


class TestMain:
    """Tests for running commands end to end."""

    def test_baseline(self, log_dir, capsys) -> None:
        assert main(BASELINE_ARGS + ["--pantry", "a"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "Basic weight: 49100 kg" in out
        assert "DOI: 46.10" in out

    def test_baseline_not_found(self, log_dir, capsys) -> None:
        assert main(BASELINE_ARGS + ["--pantry", "Z"]) == EXIT_NO_RESULT
        assert "No matching configuration" in capsys.readouterr().out

    def test_trim_line(self, log_dir, plan_file, capsys) -> None:
        assert main(["trim-line", str(plan_file)]) == EXIT_OK

        out = capsys.readouterr().out
        assert "Passengers: 25 (2100 kg)" in out
        assert "ZFW: 51200 kg" in out
        assert "Final index: 41.10" in out
        assert out.rstrip().endswith("411,1000")

    def test_trim_line_example_plan(self, log_dir, capsys) -> None:
        assert main(["trim-line", str(EXAMPLE_PLAN)]) == EXIT_OK
        assert "Trim line: 461,100" in capsys.readouterr().out

    def test_trim_line_unknown_chart(self, log_dir, plan_file, capsys) -> None:
        plan_file.write_text(plan_file.read_text() + "chart: B737\n")

        assert main(["trim-line", str(plan_file)]) == EXIT_NO_RESULT
        assert "No balance chart configured for B737" in capsys.readouterr().out

    def test_trim_line_missing_plan(self, log_dir, tmp_path, capsys) -> None:
        assert main(["trim-line", str(tmp_path / "none.yaml")]) == EXIT_DATA_ERROR
        assert "not found" in capsys.readouterr().err

    def test_radioactive(self, log_dir, capsys) -> None:
        code = main(["radioactive", "--aircraft", "B737", "--compartment", "4",
                     "--ti", "3.2", "--box", "30cm"])

        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "required space 115 cm" in out
        assert out.count("does not clear") == 2

    def test_radioactive_notes(self, log_dir, capsys) -> None:
        main(["radioactive", "--aircraft", "A350", "--compartment", "5", "--ti", "1", "--box", "0.2",
              "--unit", "m"])
        assert "Note: Not to be loaded in positions 52 and 53" in capsys.readouterr().out

    def test_radioactive_invalid_box(self, log_dir, capsys) -> None:
        code = main(["radioactive", "--aircraft", "B737", "--compartment", "4",
                     "--ti", "3.2", "--box", "tall"])

        assert code == EXIT_NO_RESULT
        assert "Invalid box height" in capsys.readouterr().out

    def test_water_index(self, log_dir, capsys) -> None:
        assert main(["water-index", "--family", "B737", "--percent", "%50", "--tail", "JFC"]) == EXIT_OK
        assert "B737-800 50%: -118 kg / -1.7" in capsys.readouterr().out

    def test_water_index_incomplete_tail(self, log_dir, capsys) -> None:
        assert main(["water-index", "--family", "B737", "--percent", "50", "--tail", "JF"]) == EXIT_NO_RESULT
        assert "needs 3 characters" in capsys.readouterr().out

    def test_water_index_infinite_percent(self, log_dir, capsys) -> None:
        assert main(["water-index", "--family", "B737", "--percent", "inf", "--tail", "JFC"]) == EXIT_NO_RESULT
        assert "Invalid water percentage" in capsys.readouterr().out

    def test_malformed_data_dir(self, log_dir, tmp_path, capsys) -> None:
        data_dir = tmp_path / "data"
        data_dir.mkdir()
        (data_dir / "charts.yaml").write_text("charts: [")

        assert main(["--data-dir", str(data_dir)] + BASELINE_ARGS) == EXIT_DATA_ERROR

    def test_empty_data_dir_finds_nothing(self, log_dir, tmp_path, capsys) -> None:
        assert main(["--data-dir", str(tmp_path)] + BASELINE_ARGS) == EXIT_NO_RESULT
