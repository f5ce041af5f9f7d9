import pytest
from fastapi.testclient import TestClient

from propreg.api.main import create_app
from propreg.core.compat import CompatibilityData
from propreg.core.data import PropertyDataStore
from propreg.core.properties import load_registries
from propreg.core.settings import Settings


def _feature(support, *, deprecated=False, **subfeatures):
    return {
        "__compat": {
            "support": support,
            "status": {"experimental": False, "standard_track": True, "deprecated": deprecated},
        },
        **subfeatures,
    }


ADDED = {"chrome": {"version_added": "1"}, "firefox": {"version_added": "1"}}
NEVER_ADDED = {"chrome": {"version_added": False}, "firefox": {"version_added": False}}


@pytest.fixture()
def feature():
    """feature(support, deprecated=False, **keyword_subfeatures) -> BCD feature node"""
    return _feature


@pytest.fixture()
def global_keywords():
    return _feature(
        ADDED,
        initial=_feature(ADDED),
        inherit=_feature(ADDED),
        unset=_feature(ADDED),
    )


@pytest.fixture()
def build_store():
    def _build(properties=None, syntaxes=None, svg=None):
        raw = {"all": {"syntax": "initial | inherit | unset", "computed": ["every property"]}}
        raw.update(properties or {})
        return PropertyDataStore.from_raw(
            properties=raw,
            syntaxes=syntaxes or {},
            svg_properties=svg or {},
        )

    return _build


@pytest.fixture()
def build_compat(global_keywords):
    def _build(properties=None, types=None):
        all_types = {"global_keywords": global_keywords}
        all_types.update(types or {})
        return CompatibilityData({"css": {"properties": properties or {}, "types": all_types}})

    return _build


@pytest.fixture(scope="session")
def bundled_registries():
    # Packaged sample data; independent of PROPREG_* variables in the environment
    return load_registries(Settings())


@pytest.fixture()
def client(bundled_registries):
    return TestClient(create_app(bundled_registries))
