"""Tests for ToastSettings and command-line handling."""

import sys

import pytest

from toastpos.__main__ import build_parser, settings_from_args
from toastpos.config.settings import ToastSettings


class TestToastSettings:
    def test_defaults(self):
        s = ToastSettings()
        assert s.notification_titles == ("新しい通知", "New notification")
        assert s.class_markers == ("Toast", "Notification")
        assert (s.min_width, s.max_width, s.min_height, s.max_height) == (200, 600, 50, 400)
        assert (s.margin, s.target_y, s.tolerance) == (10, 10, 50)
        assert s.poll_interval == 0.5
        assert s.settle_delay == 0.1

    def test_replace_ignores_none(self):
        s = ToastSettings().replace(margin=None, tolerance=20)
        assert s.margin == 10
        assert s.tolerance == 20

    def test_replace_returns_new_object(self):
        base = ToastSettings()
        assert base.replace(margin=3) is not base
        assert base.margin == 10

    @pytest.mark.parametrize("overrides", [
        {"poll_interval": -1},
        {"settle_delay": -0.1},
        {"tolerance": 0},
        {"margin": -5},
        {"min_width": 700},
        {"min_height": 500},
        {"max_valid_width": 0},
    ])
    def test_validate_rejects(self, overrides):
        with pytest.raises(ValueError):
            ToastSettings().replace(**overrides).validate()

    def test_validate_accepts_defaults(self):
        s = ToastSettings()
        assert s.validate() is s


class TestCommandLine:
    def test_no_arguments_gives_defaults(self):
        args = build_parser().parse_args([])
        assert settings_from_args(args) == ToastSettings()
        assert not args.no_tray

    def test_overrides(self):
        args = build_parser().parse_args([
            "--margin", "20", "--top", "40", "--tolerance", "15",
            "--interval", "1.5", "--settle", "0",
            "--title", "Neue Benachrichtigung", "--title", "Nouvelle notification",
        ])
        s = settings_from_args(args)
        assert s.margin == 20
        assert s.target_y == 40
        assert s.tolerance == 15
        assert s.poll_interval == 1.5
        assert s.settle_delay == 0
        assert s.notification_titles == ("Neue Benachrichtigung", "Nouvelle notification")

    def test_invalid_value(self):
        args = build_parser().parse_args(["--tolerance", "0"])
        with pytest.raises(ValueError):
            settings_from_args(args)

    def test_flags(self):
        args = build_parser().parse_args(["--no-tray", "--debug", "--icon", "x.ico"])
        assert args.no_tray and args.debug
        assert args.icon == "x.ico"


class TestMain:
    def test_list_windows(self, desktop, settings, capsys):
        from toastpos.__main__ import list_windows
        from toastpos.core.rect import WindowRect

        desktop.add(1, WindowRect(0, 0, 300, 150), title="Build done", class_name="ToastWndClass")
        desktop.add(2, WindowRect(0, 0, 300, 150), title="Hidden", visible=False)

        list_windows(desktop, settings)

        out = capsys.readouterr().out
        assert "accepted: marker + toast size" in out
        assert "Build done" in out
        assert "Hidden" not in out

    @pytest.mark.skipif(sys.platform == "win32", reason="needs a non-Windows host")
    def test_main_refuses_non_windows(self):
        from toastpos.__main__ import main

        assert main(["--no-tray"]) == 1
