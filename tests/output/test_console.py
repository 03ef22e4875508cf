"""Tests for the Rich console factory."""

from isoctl.output.console import DEFAULT_WIDTH, ISO_THEME, create_console, get_output, style_for


class TestCreateConsole:
    def test_default_width(self) -> None:
        assert create_console().width == DEFAULT_WIDTH == 100

    def test_custom_width(self) -> None:
        assert create_console(width=60).width == 60

    def test_theme_styles_registered(self) -> None:
        for name in ("iso.ok", "iso.error", "iso.warning", "iso.op", "iso.code"):
            assert name in ISO_THEME.styles

    def test_captures_output(self) -> None:
        console = create_console(no_color=True)
        console.print("2020-W09-7")
        assert get_output(console) == "2020-W09-7\n"

    def test_themed_markup(self) -> None:
        console = create_console(no_color=True)
        console.print("[iso.ok]OK[/iso.ok]")
        assert get_output(console) == "OK\n"


class TestStyleFor:
    def test_iso_text_fields(self) -> None:
        assert style_for("text", "2020-W09-7") == "iso.text"
        assert style_for("canonical", "PT1H0M0S") == "iso.text"

    def test_date_field(self) -> None:
        assert style_for("date", "2020-01-01") == "iso.date"

    def test_numbers(self) -> None:
        assert style_for("weeks", 53) == "iso.number"
        assert style_for("total_seconds", 1.5) == "iso.number"

    def test_fallback(self) -> None:
        assert style_for("name", "Saturday") == "iso.value"
        assert style_for("flag", True) == "iso.value"

    def test_all_styles_in_theme(self) -> None:
        for key, value in [("text", ""), ("date", ""), ("weeks", 1), ("name", "")]:
            assert style_for(key, value) in ISO_THEME.styles
