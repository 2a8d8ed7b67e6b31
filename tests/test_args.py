"""
Tests for task option schemas and argument validation.
"""

import pytest

from jabu.args import (
    ArgumentValidationError,
    InvalidArgError,
    Options,
    ParOption,
    ParOptionBuilder,
    ParsedArguments,
)


def _option(name, **kwargs):
    return ParOption(name=name, **kwargs)


class TestParOption:
    """Tests for ParOption and its builder."""

    def test_short_defaults_to_first_letter(self):
        assert _option("main-class").short == "m"

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            ParOption(name="")

    def test_required_and_default_are_exclusive(self):
        with pytest.raises(ValueError):
            ParOption(name="x", required=True, default_value="1")

    def test_display_name(self):
        assert _option("output-type", has_arg=True).display_name() == \
            "--output-type:{value}, -o:{value}"
        assert _option("local").display_name() == "--local, -l"

    def test_builder_required_clears_default(self):
        option = ParOptionBuilder().name("key").default_value("x").required(True).build()
        assert option.required
        assert option.default_value is None

    def test_builder_default_clears_required(self):
        option = ParOptionBuilder().name("key").required(True).default_value("x").build()
        assert not option.required
        assert option.default_value == "x"

    def test_builder_fields(self):
        option = (ParOptionBuilder()
                  .name("author-key").short("k")
                  .description("Credential")
                  .has_arg(True)
                  .build())
        assert option == ParOption("author-key", "k", "Credential", True, False, None)


class TestOptions:
    """Tests for the Options container."""

    def test_add_rejects_name_collision(self):
        options = Options()
        assert options.add_option(_option("visibility"))
        assert not options.add_option(_option("visibility", short="x"))
        assert len(options) == 1

    def test_add_rejects_short_collision(self):
        options = Options([_option("visibility")])
        assert not options.add_option(_option("verbose"))

    def test_lookup(self):
        options = Options([_option("main-class", has_arg=True)])
        assert options.has_option_with_name("main-class")
        assert options.get("main-class").has_arg
        assert options.get("other") is None
        assert [o.name for o in options] == ["main-class"]


class TestParsedArguments:
    """Tests for parsing raw arguments."""

    def test_parse_options_and_positionals(self):
        parsed = ParsedArguments.from_args(["--flag", "--key:value", "pos", "--empty:"])
        assert parsed.options == {"flag": None, "key": "value", "empty": ""}
        assert parsed.arg_list == ["pos"]

    def test_value_may_contain_colons(self):
        parsed = ParsedArguments.from_args(["--url:http://host:8080"])
        assert parsed.get_option_value("url") == "http://host:8080"

    def test_double_dash_stops_parsing(self):
        parsed = ParsedArguments.from_args(["a", "--", "--not-an-option", "b"])
        assert parsed.options == {}
        assert parsed.arg_list == ["a", "--not-an-option", "b"]

    def test_help_requested(self):
        assert ParsedArguments.from_args(["--help"]).help_requested
        assert not ParsedArguments.from_args(["help"]).help_requested


class TestValidation:
    """Tests for ParsedArguments.validate()."""

    def test_defaults_are_filled(self):
        options = Options([_option("visibility", has_arg=True, default_value="private")])
        parsed = ParsedArguments.with_options([], options)
        assert parsed.get_option_value("visibility") == "private"

    def test_given_value_beats_default(self):
        options = Options([_option("visibility", has_arg=True, default_value="private")])
        parsed = ParsedArguments.with_options(["--visibility:public"], options)
        assert parsed.get_option_value("visibility") == "public"

    def test_all_errors_are_collected(self):
        options = Options([
            _option("author-key", has_arg=True, required=True),
            _option("output-type", has_arg=True),
        ])
        with pytest.raises(ArgumentValidationError) as exc_info:
            ParsedArguments.with_options(["--output-type", "--bogus"], options)

        assert exc_info.value.errors == {
            InvalidArgError.missing_option("author-key"),
            InvalidArgError.missing_option_argument("output-type"),
            InvalidArgError.unrecognized_option("bogus"),
        }

    def test_help_is_never_unrecognized(self):
        options = Options([_option("main-class", has_arg=True)])
        parsed = ParsedArguments.with_options(["--help"], options)
        assert parsed.help_requested

    def test_flag_without_value_is_valid(self):
        options = Options([_option("local")])
        parsed = ParsedArguments.with_options(["--local"], options)
        assert parsed.has_option("local")

    def test_error_messages(self):
        assert str(InvalidArgError.missing_option("k")) == "Option 'k' not specified."
        assert str(InvalidArgError.unrecognized_option("k")) == "Unrecognized option 'k'"
        assert "bad level" in str(InvalidArgError.invalid_option_value("v", "bad level"))
