"""Error hierarchy and message formatting."""

from mansite.errors import (
    ConfigError,
    MansiteError,
    ParseError,
    ResourceError,
    ResourceOpenError,
    ResourceReadError,
)


class TestParseErrorFormatting:
    def test_message_only(self) -> None:
        err = ParseError("bad structure")
        assert str(err) == "bad structure"
        assert err.lineno is None
        assert err.source_file is None

    def test_with_line_number(self) -> None:
        err = ParseError("bad structure", lineno=4)
        assert str(err) == "4: bad structure"

    def test_with_source_file(self) -> None:
        err = ParseError("bad structure", lineno=4, source_file="ls.1")
        assert str(err) == "ls.1:4: bad structure"
        assert err.message == "bad structure"

    def test_source_file_without_line(self) -> None:
        assert str(ParseError("x", source_file="ls.1")) == "ls.1: x"


class TestResourceErrors:
    def test_open_message(self) -> None:
        err = ResourceOpenError("index.1", "No such file or directory")
        assert str(err) == "while trying to open file 'index.1': No such file or directory"
        assert err.path == "index.1"
        assert err.reason == "No such file or directory"

    def test_read_message(self) -> None:
        err = ResourceReadError("theme.css", "Input/output error")
        assert str(err) == "while trying to read file 'theme.css': Input/output error"

    def test_hierarchy(self) -> None:
        assert issubclass(ResourceOpenError, ResourceError)
        assert issubclass(ResourceReadError, ResourceError)
        assert not issubclass(ResourceOpenError, ResourceReadError)
        for cls in (ParseError, ResourceError, ConfigError):
            assert issubclass(cls, MansiteError)


class TestConfigError:
    def test_format(self) -> None:
        err = ConfigError("accent_hue", "expected a number")
        assert str(err) == "Config 'accent_hue': expected a number"
        assert err.key == "accent_hue"
