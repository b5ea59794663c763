import json

from nearmatch.cli import build_parser, main


def test_distance_command_reports_radius_verdict(capsys):
    assert main(["distance", "0", "0", "0", "0.004"]) == 0
    out = capsys.readouterr().out
    assert "within" in out
    assert "500 m" in out


def test_distance_command_json(capsys):
    assert main(["distance", "0", "0", "0", "0.006", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["within_radius"] is False
    assert 660 < data["distance_m"] < 670


def test_serve_parser_defaults():
    args = build_parser().parse_args(["serve", "--port", "9000"])
    assert args.port == 9000
    assert args.host is None
