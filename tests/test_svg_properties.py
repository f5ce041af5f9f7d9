from propreg.core.compat import CompatibilityData
from propreg.core.properties import build_svg_properties
from propreg.core.types.models import NUMBER, STRING, data_type, string_literal


def test_svg_records_are_plain_canonical_records(build_store):
    store = build_store(svg={"fill-rule": {"syntax": "nonzero | evenodd"}})

    (record,) = build_svg_properties(store, CompatibilityData.empty()).values()

    assert record.canonical_name == "fill-rule"
    assert not record.vendor_prefixed
    assert not record.shorthand
    assert not record.obsolete
    assert record.types == (string_literal("nonzero"), string_literal("evenodd"))


def test_entries_without_syntax_are_skipped(build_store):
    store = build_store(svg={"clip": {}, "color-profile": {"syntax": None}, "kerning": {"syntax": "auto | <number>"}})

    registry = build_svg_properties(store, CompatibilityData.empty())

    assert list(registry) == ["kerning"]
    assert registry["kerning"].types == (string_literal("auto"), NUMBER)


def test_data_types_are_resolved_through_syntaxes(build_store):
    store = build_store(
        syntaxes={"paint": "none | <color> | context-fill", "color": {"syntax": "<hex-color> | currentcolor"}},
        svg={"stroke": {"syntax": "<paint>"}},
    )

    registry = build_svg_properties(store, CompatibilityData.empty())

    assert registry["stroke"].types == (
        string_literal("none"),
        data_type("hex-color"),
        string_literal("currentcolor"),
        string_literal("context-fill"),
    )


def test_property_compat_narrows_svg_keywords(build_store, build_compat, feature):
    store = build_store(
        syntaxes={"paint": "none | <url> [ none | <color> ]? | context-fill"},
        svg={"fill": {"syntax": "<paint>"}, "stroke": {"syntax": "<paint>"}},
    )
    compat = build_compat(
        {
            "fill": feature(
                {"chrome": {"version_added": "1"}},
                **{"context-fill": feature({"firefox": {"version_added": "preview"}})},
            )
        }
    )

    registry = build_svg_properties(store, compat)

    assert registry["fill"].types == (string_literal("none"), data_type("url"), STRING)
    assert string_literal("context-fill") in registry["stroke"].types


def test_svg_build_order_follows_source(build_store):
    store = build_store(svg={"text-anchor": {"syntax": "start | end"}, "fill-rule": {"syntax": "nonzero"}})

    assert list(build_svg_properties(store, CompatibilityData.empty())) == ["text-anchor", "fill-rule"]
