import json

from typer.testing import CliRunner

from nestform.main import cli

runner = CliRunner()

BODY = (
    "student[name]=Vic"
    "&student[courses][][name]=AP+US+History"
    "&student[courses][][topic]=History"
    "&student[courses][][name]=AP+Human+Geography"
    "&student[courses][][topic]=History"
)


def test_version():
    result = runner.invoke(cli, ["version"])
    assert result.exit_code == 0
    assert "1.0.0" in result.output


def test_decode_prints_json():
    result = runner.invoke(cli, ["decode", BODY])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["root"] == {"name": "Vic"}
    assert [child["name"] for child in payload["children"]] == ["AP US History", "AP Human Geography"]


def test_decode_with_other_keys():
    result = runner.invoke(
        cli,
        ["decode", "pirate[name]=Anne&pirate[ships][0][name]=Revenge", "--root-key", "pirate",
         "--group-key", "ships", "--indexing", "explicit"],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["children"] == [{"name": "Revenge"}]


def test_decode_malformed_exits_with_error():
    result = runner.invoke(cli, ["decode", "student[unknown][deeply][nested]=x"])

    assert result.exit_code == 2
    assert "Malformed field path" in result.output


def test_decode_unknown_indexing_exits_with_error():
    result = runner.invoke(cli, ["decode", BODY, "--indexing", "sparse"])
    assert result.exit_code == 2


def test_enroll_accumulates_submissions():
    result = runner.invoke(cli, ["enroll", BODY, "student[name]=Joe&student[grade]=9"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert [s["name"] for s in payload["students"]] == ["Vic", "Joe"]
    assert [s["id"] for s in payload["students"]] == [1, 2]
    assert len(payload["courses"]) == 2


def test_fields_lists_input_names():
    result = runner.invoke(cli, ["fields", "--children", "1"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "student[name]",
        "student[grade]",
        "student[courses][][name]",
        "student[courses][][topic]",
    ]


def test_fields_explicit():
    result = runner.invoke(cli, ["fields", "--children", "2", "--explicit", "--root-field", "name",
                                 "--child-field", "name"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "student[name]",
        "student[courses][0][name]",
        "student[courses][1][name]",
    ]
