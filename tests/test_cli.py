"""
Tests for the command-line interface.
"""

import json
import logging
import pytest
from click.testing import CliRunner

from oligoprop import __version__
from oligoprop.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestAnalyze:
    """Tests for the analyze command."""

    def test_text_output(self, runner, sample_sequences):
        """Test the default text report."""
        result = runner.invoke(cli, ["analyze", sample_sequences["primer"]])
        assert result.exit_code == 0
        assert "GC content" in result.output
        assert "Melting temperature" in result.output
        assert "santalucia_1998" in result.output

    def test_ambiguous_shows_delta(self, runner, sample_sequences):
        """Test ambiguous values are printed with ±."""
        result = runner.invoke(cli, ["analyze", sample_sequences["ambiguous"]])
        assert result.exit_code == 0
        assert "±" in result.output

    def test_json_output(self, runner, sample_sequences):
        """Test JSON output parses."""
        result = runner.invoke(
            cli, ["analyze", sample_sequences["ambiguous"], "--format", "json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["sequence"] == "ACGTAGAGGACGTN"
        assert data["counts"]["N"] == 1
        assert set(data["thermo"]) == {
            "breslauer_1986", "santalucia_1996", "santalucia_1998", "sugimoto_1996"
        }

    def test_tsv_output(self, runner, sample_sequences):
        """Test TSV output has a header and 20 rows."""
        result = runner.invoke(cli, ["analyze", sample_sequences["primer"], "-f", "tsv"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0].split("\t") == ["property", "method", "value", "delta"]
        assert len(lines) == 21

    def test_options(self, runner, sample_sequences):
        """Test --salt reaches the salt-adjusted Tm."""
        result = runner.invoke(
            cli,
            ["analyze", sample_sequences["primer"], "--salt", "1", "-f", "json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["melting_temps"]["salt_adjusted"]["value"] == pytest.approx(80.0)

    def test_hairpin_options(self, runner, sample_sequences):
        """Test --hp-loop changes hairpin detection."""
        args = ["analyze", sample_sequences["hairpin"], "-f", "json"]
        assert json.loads(runner.invoke(cli, args).output)["hairpins"]
        result = runner.invoke(cli, args + ["--hp-loop", "4"])
        assert json.loads(result.output)["hairpins"] == []

    def test_output_file(self, runner, sample_sequences, temp_dir):
        """Test -o writes a file and refuses to overwrite without --force."""
        out = temp_dir / "sub" / "props.json"
        args = ["analyze", sample_sequences["primer"], "-f", "json", "-o", str(out)]

        result = runner.invoke(cli, args)
        assert result.exit_code == 0
        assert json.loads(out.read_text())["sequence"] == sample_sequences["primer"]

        result = runner.invoke(cli, args)
        assert result.exit_code == 1
        assert "already exists" in result.output

        result = runner.invoke(cli, args + ["--force"])
        assert result.exit_code == 0

    def test_config_file(self, runner, sample_sequences, sample_config):
        """Test options are read from a YAML config."""
        result = runner.invoke(
            cli,
            ["analyze", sample_sequences["primer"], "-c", str(sample_config), "-f", "json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        plain = json.loads(
            runner.invoke(cli, ["analyze", sample_sequences["primer"], "-f", "json"]).output
        )
        assert data["thermo"]["santalucia_1998"]["delta_g"] != \
            plain["thermo"]["santalucia_1998"]["delta_g"]

    def test_command_line_overrides_config(self, runner, sample_sequences, sample_config):
        """Test command-line options win over the config file."""
        result = runner.invoke(
            cli,
            [
                "analyze", sample_sequences["primer"],
                "-c", str(sample_config), "--salt", "1", "-f", "json",
            ],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["melting_temps"]["salt_adjusted"]["value"] == pytest.approx(80.0)

    def test_bad_config_file(self, runner, sample_sequences, temp_dir):
        """Test an unknown config option exits with status 1."""
        bad = temp_dir / "bad.yaml"
        bad.write_text("magnesium: 0.002\n")
        result = runner.invoke(cli, ["analyze", sample_sequences["primer"], "-c", str(bad)])
        assert result.exit_code == 1
        assert "magnesium" in result.output

    def test_invalid_symbol(self, runner):
        """Test an invalid sequence exits with status 1."""
        result = runner.invoke(cli, ["analyze", "ACGU"])
        assert result.exit_code == 1
        assert "U" in result.output

    def test_invalid_salt(self, runner, sample_sequences):
        """Test a negative salt exits with status 1."""
        result = runner.invoke(cli, ["analyze", sample_sequences["primer"], "--salt", "-1"])
        assert result.exit_code == 1
        assert "salt" in result.output

    def test_short_sequence_warning(self, runner):
        """Test the short-sequence advisory is printed exactly once."""
        result = runner.invoke(cli, ["analyze", "ACGT"])
        assert result.exit_code == 0
        assert result.output.count("below 8") == 1

    def test_quiet_hides_warning(self, runner):
        """Test --quiet suppresses the advisory."""
        result = runner.invoke(cli, ["-q", "analyze", "ACGT"])
        assert result.exit_code == 0
        assert "below 8" not in result.output


class TestGroup:
    """Tests for the command group itself."""

    def test_version(self, runner):
        """Test --version prints the version."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_info(self, runner):
        """Test the info command lists dependencies."""
        result = runner.invoke(cli, ["info"])
        assert result.exit_code == 0
        assert "oligoprop version" in result.output
        assert "numpy" in result.output

    def test_command_prefix(self, runner, sample_sequences):
        """Test commands can be shortened to a unique prefix."""
        result = runner.invoke(cli, ["an", sample_sequences["primer"]])
        assert result.exit_code == 0
        assert "GC content" in result.output

    def test_package_logger_is_silent_by_default(self):
        """Test library log records never fall through to the last-resort handler."""
        logger = logging.getLogger("oligoprop")
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_unknown_command(self, runner):
        """Test an unknown command fails."""
        result = runner.invoke(cli, ["zzz"])
        assert result.exit_code != 0
