from click.testing import CliRunner

from shamir_recover import config
from shamir_recover.cli import cli


def test_recover_single_file(mixed_base_document, write_shares):
    path = write_shares(mixed_base_document)
    result = CliRunner().invoke(cli, ["recover", str(path)])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Secret: 3"


def test_recover_show_points(mixed_base_document, write_shares):
    path = write_shares(mixed_base_document)
    result = CliRunner().invoke(cli, ["recover", "--show-points", str(path)])
    assert result.exit_code == 0, result.output
    assert "k (minimum needed): 3" in result.output
    assert "Polynomial degree: 2" in result.output
    assert "selected" in result.output
    lines = result.output.splitlines()
    row_39 = next(line for line in lines if line.split()[:2] == ["6", "39"])
    assert "yes" not in row_39
    assert result.output.rstrip().endswith("Secret: 3")


def test_recover_output_base(write_shares):
    path = write_shares({"keys": {"n": 1, "k": 1}, "1": {"base": "16", "value": "ff"}})
    result = CliRunner().invoke(cli, ["recover", "--output-base", "2", str(path)])
    assert result.exit_code == 0, result.output
    assert "Secret: 11111111" in result.output


def test_recover_keeps_going_after_a_bad_file(mixed_base_document, write_shares):
    good = write_shares(mixed_base_document, "good.json")
    mixed_base_document["keys"]["k"] = 7
    bad = write_shares(mixed_base_document, "bad.json")
    missing = good.parent / "missing.json"

    result = CliRunner().invoke(cli, ["recover", str(bad), str(good), str(missing)])
    assert result.exit_code == 1
    assert f"{good}: 3" in result.output
    assert f"{bad}: InsufficientPoints" in result.output
    assert f"{missing}: FileNotFoundError" in result.output


def test_recover_inconsistent_shares(write_shares):
    document = {
        "keys": {"n": 2, "k": 2},
        "1": {"base": "10", "value": "0"},
        "3": {"base": "10", "value": "1"},
    }
    path = write_shares(document)
    result = CliRunner().invoke(cli, ["recover", str(path)])
    assert result.exit_code == 1
    assert "NonExactDivision" in result.output
    assert "Secret" not in result.output


def test_decode_command():
    runner = CliRunner()
    result = runner.invoke(cli, ["decode", "111", "--base", "2"])
    assert result.exit_code == 0
    assert result.output.strip() == "7"

    result = runner.invoke(cli, ["decode", "255", "--base", "10", "--output-base", "16"])
    assert result.output.strip() == "ff"


def test_decode_command_rejects_bad_digit():
    result = CliRunner().invoke(cli, ["decode", "g", "--base", "16"])
    assert result.exit_code == 1
    assert "InvalidDigit" in result.output


def test_log_level_option(mixed_base_document, write_shares):
    path = write_shares(mixed_base_document)
    result = CliRunner().invoke(cli, ["--log-level", "debug", "recover", str(path)])
    assert result.exit_code == 0, result.output
    assert "Secret: 3" in result.output


def test_show_points_with_huge_value(write_shares):
    digits = "f" * 4000
    path = write_shares({"keys": {"n": 1, "k": 1}, "1": {"base": "16", "value": digits}})
    result = CliRunner().invoke(cli, ["recover", "--show-points", "--output-base", "16", str(path)])
    assert result.exit_code == 0, result.output
    assert f"Secret: {digits}" in result.output
    assert result.output.count(digits) == 2


def test_recover_non_utf8_file_is_reported(mixed_base_document, write_shares):
    good = write_shares(mixed_base_document, "good.json")
    bad = write_shares("{}", "bad.json")
    bad.write_bytes(b"\xff\xfe{}")

    result = CliRunner().invoke(cli, ["recover", str(bad), str(good)])
    assert result.exit_code == 1
    assert f"{bad}: ShareFormatError" in result.output
    assert f"{good}: 3" in result.output


def test_decode_output_base_is_range_checked():
    result = CliRunner().invoke(cli, ["decode", "7", "--base", "10", "--output-base", "99"])
    assert result.exit_code == 2


def test_decode_output_base_defaults_to_settings(monkeypatch):
    monkeypatch.setattr(config, "settings", config.Settings(output_base=2))
    result = CliRunner().invoke(cli, ["decode", "7", "--base", "10"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "111"
