"""Integration tests for CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from histfit.cli.app import app
from histfit.io.histograms import read_first_histogram


@pytest.fixture
def runner():
    return CliRunner()


class TestCLIBasics:
    """Help, version, init and info."""

    def test_app_no_args(self, runner):
        result = runner.invoke(app, [])
        assert result.exit_code in [0, 2]
        assert "Usage" in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "histfit" in result.output.lower()

    def test_help_lists_commands(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ["generate", "fit", "trials", "compare", "pvalue", "scan", "init", "info"]:
            assert command in result.output

    def test_info_command(self, runner):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "HistFit" in result.output
        assert "NumPy" in result.output
        assert "SciPy" in result.output

    def test_init_command_creates_file(self, runner, tmp_path):
        config_path = tmp_path / "histfit.toml"
        result = runner.invoke(app, ["init", str(config_path)])
        assert result.exit_code == 0
        content = config_path.read_text()
        for section in ["[generation]", "[fitting]", "[study]", "[toys]", "[scan]", "[output]"]:
            assert section in content

    def test_init_command_no_overwrite(self, runner, tmp_path):
        config_path = tmp_path / "histfit.toml"
        config_path.write_text("# existing config")
        result = runner.invoke(app, ["init", str(config_path)])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert config_path.read_text() == "# existing config"

    def test_init_command_force_overwrite(self, runner, tmp_path):
        config_path = tmp_path / "histfit.toml"
        config_path.write_text("# existing config")
        result = runner.invoke(app, ["init", str(config_path), "--force"])
        assert result.exit_code == 0
        assert "[fitting]" in config_path.read_text()


class TestWorkflow:
    """generate -> fit -> pvalue -> scan, plus the trial studies."""

    @pytest.fixture
    def histo(self, runner, tmp_path):
        path = tmp_path / "histo.root"
        result = runner.invoke(app, ["generate", str(path), "--entries", "500", "--seed", "1"])
        assert result.exit_code == 0, result.output
        return path

    def test_generate(self, histo):
        assert histo.exists()

    def test_generate_entries_from_config(self, runner, sample_config_file, tmp_path):
        path = tmp_path / "configured.root"
        result = runner.invoke(app, ["generate", str(path), "--config", str(sample_config_file)])
        assert result.exit_code == 0, result.output
        hist = read_first_histogram(path)
        # study.entries = 200 in the configuration
        assert hist.entries == 200

    def test_generate_entries_option_wins(self, runner, sample_config_file, tmp_path):
        path = tmp_path / "override.root"
        result = runner.invoke(
            app, ["generate", str(path), "--config", str(sample_config_file), "-n", "50"]
        )
        assert result.exit_code == 0, result.output
        assert read_first_histogram(path).entries == 50

    def test_fit_chi2(self, runner, histo):
        result = runner.invoke(app, ["fit", str(histo)])
        assert result.exit_code == 0, result.output
        assert "mean" in result.output
        assert "chi2" in result.output

    def test_fit_likelihood(self, runner, histo):
        result = runner.invoke(app, ["fit", str(histo), "--method", "likelihood"])
        assert result.exit_code == 0, result.output
        assert "likelihood" in result.output

    def test_fit_rejects_unknown_method(self, runner, histo):
        result = runner.invoke(app, ["fit", str(histo), "--method", "bayes"])
        assert result.exit_code != 0
        assert "bayes" in result.output

    def test_pvalue(self, runner, histo, tmp_path):
        result = runner.invoke(
            app,
            ["pvalue", str(histo), "--toys", "50", "--seed", "2", "--output-dir", str(tmp_path)],
        )
        assert result.exit_code == 0, result.output
        assert "Data NLL" in result.output
        assert "p-value" in result.output
        assert (tmp_path / "result3.pdf").exists()
        summary = json.loads((tmp_path / "result3.json").read_text())
        assert summary["n_toys"] == 50

    def test_scan(self, runner, histo, tmp_path):
        result = runner.invoke(app, ["scan", str(histo), "--output-dir", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "results4_1k_nll.pdf").exists()
        assert (tmp_path / "results4_1k_chi2.pdf").exists()

    def test_trials(self, runner, tmp_path):
        result = runner.invoke(
            app,
            ["trials", "--trials", "5", "--entries", "200", "--seed", "1", "-d", str(tmp_path)],
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "result1.pdf").exists()
        assert (tmp_path / "result1.csv").exists()

    def test_compare(self, runner, tmp_path):
        result = runner.invoke(
            app,
            ["compare", "--trials", "5", "--entries", "200", "--seed", "1", "-d", str(tmp_path)],
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "result2.pdf").exists()

    def test_config_file(self, runner, sample_config_file, tmp_path):
        out_dir = tmp_path / "Results"
        result = runner.invoke(
            app,
            ["trials", "--config", str(sample_config_file), "--trials", "3", "-d", str(out_dir)],
        )
        assert result.exit_code == 0, result.output
        assert (out_dir / "result1.pdf").exists()
        # save_csv = false in the configuration
        assert not (out_dir / "result1.csv").exists()
        summary = json.loads((out_dir / "result1.json").read_text())
        assert summary["method"] == "likelihood"
        assert summary["trials"] == 3
        assert summary["seed"] == 3

    def test_log_file(self, runner, histo, tmp_path):
        log_path = tmp_path / "fit.log"
        result = runner.invoke(app, ["fit", str(histo), "--log-file", str(log_path)])
        assert result.exit_code == 0, result.output
        content = log_path.read_text()
        assert "session started" in content
        assert "[fitting]" in content

    def test_quiet_sends_status_to_log_only(self, runner, histo, tmp_path):
        log_path = tmp_path / "quiet.log"
        result = runner.invoke(
            app, ["fit", str(histo), "--quiet", "--log-file", str(log_path)]
        )
        assert result.exit_code == 0, result.output
        assert "Fitting a Gaussian" not in result.output
        assert "[ACTION] Fitting a Gaussian (chi2)..." in log_path.read_text()


class TestErrors:
    """I/O and configuration failures exit with code 1."""

    def test_missing_input(self, runner, tmp_path):
        result = runner.invoke(app, ["pvalue", str(tmp_path / "nope.root"), "-d", str(tmp_path)])
        assert result.exit_code == 1
        assert "cannot open file" in result.output

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(app, ["trials", "--config", str(tmp_path / "missing.toml")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_invalid_config(self, runner, tmp_path):
        path = tmp_path / "bad.toml"
        path.write_text("[fitting]\nmethod = 'bayes'\n")
        result = runner.invoke(app, ["trials", "--config", str(path)])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
