import pytest

from propreg.core.properties import PropertyRecord, filter_missing_properties, is_vendor_property, merge_recurrent
from propreg.core.types.models import LENGTH, STRING


@pytest.mark.parametrize(
    "name,vendor",
    [("-webkit-appearance", True), ("-ms-user-select", True), ("appearance", False), ("--*", True)],
)
def test_is_vendor_property(name, vendor):
    assert is_vendor_property(name) is vendor


def test_filter_missing_properties_keeps_order():
    properties = {"-webkit-line-clamp": {}, "color": {}}
    assert filter_missing_properties(["-moz-line-clamp", "-webkit-line-clamp", "-o-line-clamp"], properties) == [
        "-moz-line-clamp",
        "-o-line-clamp",
    ]


def _record(canonical, obsolete=False, **kwargs):
    return PropertyRecord(canonical_name=canonical, obsolete=obsolete, **kwargs)


def test_absent_name_takes_candidate():
    candidate = _record("foo")
    assert merge_recurrent("foo", {}, candidate) is candidate


@pytest.mark.parametrize(
    "existing,new,expected",
    [(False, False, False), (False, True, False), (True, False, False), (True, True, True)],
)
def test_obsolete_only_when_all_writes_agree(existing, new, expected):
    registry = {"-x-foo": _record("foo", obsolete=existing)}
    merged = merge_recurrent("-x-foo", registry, _record("foo", obsolete=new))
    assert merged.obsolete is expected


def test_first_write_keeps_identity_and_types():
    warnings = []
    registry = {"-x-shared": _record("a", shorthand=True, types=(LENGTH,))}

    merged = merge_recurrent(
        "-x-shared",
        registry,
        _record("b", shorthand=False, types=(STRING,)),
        warn=lambda msg, *args: warnings.append(msg % args),
    )

    assert merged.canonical_name == "a"
    assert merged.shorthand
    assert merged.types == (LENGTH,)
    assert warnings == ["Property `-x-shared` resolved by `a` was duplicated by `b`"]


def test_same_canonical_does_not_warn():
    warnings = []
    registry = {"-webkit-foo": _record("foo")}

    merge_recurrent("-webkit-foo", registry, _record("foo"), warn=warnings.append)

    assert warnings == []


def test_vendor_flag_follows_the_key():
    # A record stored under a key it was not created for still reports the key's prefix.
    registry = {"-webkit-foo": _record("foo", vendor_prefixed=False)}
    merged = merge_recurrent("-webkit-foo", registry, _record("foo"))
    assert merged.vendor_prefixed


def test_merge_is_idempotent():
    record = _record("foo", obsolete=True, types=(LENGTH,))
    registry = {"foo": record}

    assert merge_recurrent("foo", registry, record) == record


def test_merge_does_not_mutate_registry():
    record = _record("foo", obsolete=True)
    registry = {"foo": record}

    merge_recurrent("foo", registry, _record("foo"))

    assert registry["foo"] is record
    assert record.obsolete
