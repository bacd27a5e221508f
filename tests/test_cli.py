from __future__ import annotations

import warnings

from slugify_advanced import __version__
from slugify_advanced.cli import cli


def test_cli_prints_one_slug_per_argument(cli_runner):
    result = cli_runner.invoke(cli, ["Hello World!", "für Straße"])

    assert result.exit_code == 0
    assert result.output == "hello-world\nfuer-strasse\n"


def test_cli_reads_standard_input_without_arguments(cli_runner):
    result = cli_runner.invoke(cli, [], input="Crème brûlée\nÆther & Œuvre\n")

    assert result.exit_code == 0
    assert result.output == "creme-brulee\naether-oeuvre\n"


def test_cli_reads_standard_input_without_deprecation_warnings(cli_runner):
    with warnings.catch_warnings():
        warnings.filterwarnings("error", message=".*get_text_stream.*")
        result = cli_runner.invoke(cli, ["--separator", "_"], input="Hello World\n")

    assert result.exit_code == 0
    assert result.output == "hello_world\n"


def test_cli_applies_options(cli_runner):
    result = cli_runner.invoke(
        cli,
        [
            "--separator",
            "_",
            "--no-lowercase",
            "--remove-stop-words",
            "The quick brown fox",
        ],
    )

    assert result.exit_code == 0
    assert result.output == "quick_brown_fox\n"


def test_cli_strict_and_max_length(cli_runner):
    result = cli_runner.invoke(cli, ["--strict", "--max-length", "8", "foo_bar baz"])

    assert result.exit_code == 0
    assert result.output == "foo-bar\n"


def test_cli_no_locale(cli_runner):
    result = cli_runner.invoke(cli, ["--no-locale", "für straße"])

    assert result.exit_code == 0
    assert result.output == "fur-strasse\n"


def test_cli_custom_stop_words_replace_default_list(cli_runner):
    result = cli_runner.invoke(cli, ["--stop-word", "bar", "--stop-word", "qux", "the foo bar qux"])

    assert result.exit_code == 0
    assert result.output == "the-foo\n"


def test_cli_custom_replacements(cli_runner):
    result = cli_runner.invoke(cli, ["--replace", "&=and", "--replace", "@=at", "Fish & Chips @ home"])

    assert result.exit_code == 0
    assert result.output == "fish-and-chips-at-home\n"


def test_cli_rejects_malformed_replacement(cli_runner):
    result = cli_runner.invoke(cli, ["--replace", "no-equals-sign", "text"])

    assert result.exit_code != 0
    assert "FIND=REPLACE" in result.output


def test_cli_rejects_non_integer_max_length(cli_runner):
    result = cli_runner.invoke(cli, ["--max-length", "long", "text"])

    assert result.exit_code != 0


def test_cli_prints_empty_line_for_blank_input(cli_runner):
    result = cli_runner.invoke(cli, ["   "])

    assert result.exit_code == 0
    assert result.output == "\n"


def test_cli_version(cli_runner):
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
