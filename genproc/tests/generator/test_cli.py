"""Tests for CLI interface."""

import os
from pathlib import Path

from click.testing import CliRunner

from genproc.generator.cli import cli

EXAMPLE = """package example

/* +NetMsg+ 25 */
type Example struct {
    Count int // +export+
    Label string
}
"""


def describe_cli():
    def generates_handlers_under_root(expect, tmp_path):
        (tmp_path / "example.go").write_text(EXAMPLE)

        runner = CliRunner()
        result = runner.invoke(cli, [str(tmp_path)])

        expect(result.exit_code) == 0
        expect((tmp_path / "msgExample.go").is_file()) == True
        expect("Handlers written" in result.output) == True

    def defaults_to_current_directory(expect):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("example.go").write_text(EXAMPLE)

            result = runner.invoke(cli, [])

            expect(result.exit_code) == 0
            expect(os.path.isfile("msgExample.go")) == True

    def fails_on_unparsable_source(expect, tmp_path):
        (tmp_path / "broken.go").write_text("package broken\n\nfunc main() {\n")

        runner = CliRunner()
        result = runner.invoke(cli, [str(tmp_path)])

        expect(result.exit_code) == 1
        expect("cannot parse source" in result.output) == True

    def survives_missing_root(expect, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, [str(tmp_path / "missing")])

        expect(result.exit_code) == 0
        expect("Files scanned" in result.output) == True

    def rejects_extra_arguments(expect, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, [str(tmp_path), "extra"])

        expect(result.exit_code) != 0

    def shows_help(expect):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        expect(result.exit_code) == 0
        expect("ROOT" in result.output) == True
