"""Tests for krabby.cli – argument handling and exit codes."""
import pytest
from krabby.cli import build_parser, main


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"language": "en", "shiny_rate": 0.0}')
    return str(path)


class TestParser:
    def test_random_defaults(self):
        args = build_parser().parse_args(["random"])
        assert args.generations == "1-9"
        assert not args.no_variant
        assert args.padding_left == 0

    def test_name_defaults(self):
        args = build_parser().parse_args(["name", "pikachu"])
        assert args.form == "regular"
        assert not args.shiny

    def test_negative_padding_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["name", "pikachu", "--padding-left", "-2"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestMain:
    def test_list(self, config_path, capsys):
        assert main(["--config", config_path, "list", "1"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert "mewtwo" in out
        assert "wooper" not in out

    def test_name(self, config_path, capsys):
        assert main(["--config", config_path, "name", "mewtwo", "--form", "mega-x", "-s"]) == 0
        assert capsys.readouterr().out.startswith("Mewtwo (mega-x)\n\n")

    def test_random(self, config_path, capsys):
        assert main(["--config", config_path, "random", "2", "--no-variant", "--no-title"]) == 0
        assert capsys.readouterr().out.startswith("\n")

    def test_invalid_form(self, config_path, capsys):
        assert main(["--config", config_path, "name", "pikachu", "-f", "mega"]) == 1
        err = capsys.readouterr().err
        assert "Invalid form `mega` for pokemon `pikachu`" in err

    def test_invalid_pokemon(self, config_path, capsys):
        assert main(["--config", config_path, "name", "missingno"]) == 1
        assert "Invalid pokemon `missingno`" in capsys.readouterr().err

    def test_invalid_generation(self, config_path, capsys):
        assert main(["--config", config_path, "random", "10"]) == 1
        assert "Invalid generations `10`" in capsys.readouterr().err

    def test_bad_config(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text('{"shiny_rate": "often"}')
        assert main(["--config", str(path), "list"]) == 1
        assert "Configuration error" in capsys.readouterr().err
