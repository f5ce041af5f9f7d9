import logging

from propreg.core.compat import CompatibilityData
from propreg.core.types import create_property_data_type_resolver, resolve_data_types
from propreg.core.types.models import LENGTH, data_type, string_literal


def test_expands_known_data_types_and_keeps_unknown():
    definitions = {"length-percentage": [LENGTH, data_type("percentage")]}

    resolved = resolve_data_types([data_type("length-percentage"), string_literal("auto")], definitions.get)

    assert resolved == [LENGTH, data_type("percentage"), string_literal("auto")]


def test_without_resolver_types_are_unchanged():
    assert resolve_data_types([data_type("color")]) == [data_type("color")]


def test_recursive_definitions_terminate():
    definitions = {
        "a": [data_type("b")],
        "b": [data_type("a"), string_literal("x")],
    }

    assert resolve_data_types([data_type("a")], definitions.get) == [data_type("a"), string_literal("x")]


def test_expansion_removes_duplicates():
    definitions = {"line-width": [LENGTH, string_literal("thin")]}

    resolved = resolve_data_types([LENGTH, data_type("line-width")], definitions.get)

    assert resolved == [LENGTH, string_literal("thin")]


def test_property_resolver_applies_property_keyword_compat(feature):
    syntaxes = {"display-inside": "flow | flex | grid"}
    display = feature(
        {"chrome": {"version_added": "1"}},
        flex=feature({"chrome": [{"version_added": "29"}, {"alternative_name": "-webkit-flex", "version_added": "21"}]}),
        grid=feature({"chrome": {"version_added": False}}),
    )

    resolver = create_property_data_type_resolver(syntaxes, CompatibilityData.empty(), display)

    assert resolver("display-inside") == [
        string_literal("flow"),
        string_literal("flex"),
        string_literal("-webkit-flex"),
    ]
    assert resolver("unknown") is None


def test_property_resolver_applies_type_compat(feature):
    syntaxes = {"display-box": "contents | none"}
    compat = CompatibilityData(
        {
            "css": {
                "types": {
                    "display-box": feature(
                        {"chrome": {"version_added": "1"}},
                        contents=feature({"chrome": {"version_added": False}}),
                    )
                }
            }
        }
    )

    resolver = create_property_data_type_resolver(syntaxes, compat)

    assert resolver("display-box") == [string_literal("none")]


def test_property_resolver_keeps_unparsable_data_types(caplog):
    resolver = create_property_data_type_resolver({"broken": "a $ b"}, CompatibilityData.empty())

    with caplog.at_level(logging.WARNING, logger="propreg.types"):
        assert resolver("broken") is None
        assert resolve_data_types([data_type("broken")], resolver) == [data_type("broken")]

    assert "broken" in caplog.text
