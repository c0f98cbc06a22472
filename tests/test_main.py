"""Tests for the command-line entry point."""

import logging
import sys

import pytest

import main


class TestPickMode:
    """``--pick X Y`` prints the color details and exits."""

    def test_pick_prints_detail_lines(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["main.py", "--pick", "862", "400"])
        main.main()
        out = capsys.readouterr().out.splitlines()
        assert out == ["H: 0, S: 100%, L: 50%", "R: 255, G: 0, B: 0", "#FF0000"]

    def test_pick_honours_canvas_options(self, monkeypatch, capsys):
        monkeypatch.setattr(
            sys, "argv", ["main.py", "--width", "200", "--height", "200", "--scale", "1", "--pick", "200", "100"]
        )
        main.main()
        assert capsys.readouterr().out.splitlines()[-1] == "#FF0000"

    def test_pick_outside_prints_white(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["main.py", "--pick", "0", "0"])
        main.main()
        assert capsys.readouterr().out.splitlines()[-1] == "#FFFFFF"

    def test_invalid_scale_is_a_usage_error(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["main.py", "--scale", "0", "--pick", "1", "1"])
        with pytest.raises(SystemExit) as exc_info:
            main.main()
        assert exc_info.value.code == 2


class TestWebMode:
    """``--web`` hands the CLI log level to the backend."""

    def test_log_level_is_passed_to_the_app(self, monkeypatch):
        pytest.importorskip("fastapi")
        uvicorn = pytest.importorskip("uvicorn")

        served = {}

        def fake_run(app, host, port):
            served["port"] = port
            served["backend_level"] = logging.getLogger("backend").getEffectiveLevel()

        monkeypatch.setattr(uvicorn, "run", fake_run)
        monkeypatch.setattr(sys, "argv", ["main.py", "--web", "--port", "9001", "--log-level", "DEBUG"])
        try:
            main.main()
        finally:
            logging.getLogger("backend").setLevel(logging.INFO)

        assert served == {"port": 9001, "backend_level": logging.DEBUG}
