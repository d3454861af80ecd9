"""Тесты для CLI

Покрытие:
- auto / expr / base режимы
- JSON payload (проходит контракты)
- Код возврата и сообщение в stderr при ошибке
"""

import json
import logging

from fuzzycal.cli import main


class TestCli:
    """python -m fuzzycal"""

    def test_expression_auto(self, capsys) -> None:
        assert main(["0xff", "+", "42"]) == 0
        out = capsys.readouterr().out
        assert "Dec: 297" in out
        assert "Hex: 0x129" in out

    def test_base_mode_with_target(self, capsys) -> None:
        assert main(["--mode", "base", "FF -> dec"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Target: 255"
        assert "Hex: 0xFF" in lines

    def test_expr_mode(self, capsys) -> None:
        assert main(["--mode", "expr", "2^10"]) == 0
        assert "Dec: 1024" in capsys.readouterr().out

    def test_json_numeral(self, capsys) -> None:
        assert main(["--json", "16#FF"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["kind"] == "numeral"
        assert payload["conversion"]["dec"] == "255"
        assert payload["items"][0] == {"label": "0xFF", "description": "Hex"}

    def test_json_expression(self, capsys) -> None:
        assert main(["--json", "(2+3*4)/5"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["kind"] == "expression"
        assert "conversion" not in payload
        assert payload["items"] == [{"label": "2.8", "description": "Dec (float or large)"}]

    def test_ignored_input(self, capsys) -> None:
        assert main(["foo"]) == 1
        assert "cannot classify input" in capsys.readouterr().err

    def test_evaluation_error(self, capsys) -> None:
        assert main(["--mode", "expr", "1/0"]) == 1
        assert capsys.readouterr().err.startswith("error:")

    def test_conversion_error(self, capsys) -> None:
        assert main(["--mode", "base", "xyz"]) == 1
        assert "Unrecognized number format" in capsys.readouterr().err

    def test_verbose_logs_ignored_target_tag(self, capsys, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="fuzzycal")
        assert main(["-v", "--mode", "base", "FF -> foo"]) == 0
        assert "Dec: 255" in capsys.readouterr().out
        assert "unrecognized target base tag" in caplog.text

    def test_signed_numeral_is_not_an_option(self, capsys) -> None:
        assert main(["-0b1010"]) == 0
        assert "Dec: -10" in capsys.readouterr().out.splitlines()

    def test_signed_numeral_with_options_after(self, capsys) -> None:
        assert main(["-0b1010", "--mode", "base", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["input"] == "-0b1010"
        assert payload["conversion"]["dec"] == "-10"

    def test_signed_expression(self, capsys) -> None:
        assert main(["-(2+3)"]) == 0
        assert "Dec: -5" in capsys.readouterr().out

    def test_explicit_separator(self, capsys) -> None:
        assert main(["--json", "--", "-0b1010"]) == 0
        assert json.loads(capsys.readouterr().out)["kind"] == "numeral"

    def test_huge_numeral(self, capsys) -> None:
        assert main(["--mode", "base", "0x" + "f" * 4000]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Hex: 0x" + "F" * 4000
