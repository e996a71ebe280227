"""Tests for Rich Console factory and theme."""

from io import StringIO

from hairstylex.output.console import HSX_THEME, create_console, get_output, style_for_kind


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_theme_styles_resolve(self) -> None:
        console = create_console()
        console.print("[hsx.ok]OK[/hsx.ok] [hsx.tag]vip[/hsx.tag]")
        assert "OK vip" in get_output(console)


class TestTheme:
    def test_every_kind_has_a_style(self) -> None:
        for kind in ("person", "client", "hairdresser"):
            style = style_for_kind(kind)
            assert style
            assert style in HSX_THEME.styles

    def test_unknown_kind(self) -> None:
        assert style_for_kind("robot") == ""
