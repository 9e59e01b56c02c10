"""Tests for pinned resolutions."""

import pytest

from packageinfo import version as ver
from packageinfo import version_spec as vs
from packageinfo.errors import DecodeError, InvalidResolutionKey, InvalidResolutionValue
from packageinfo.req import Req
from packageinfo.resolutions import Resolutions
from packageinfo.source import Github
from packageinfo.version import NpmVersion, OpamVersion, SourceVersion


class TestResolutionsFromMapping:
    """Key and value parsing."""

    def test_plain_names(self):
        res = Resolutions.from_mapping({"lodash": "4.17.21", "react": "github:facebook/react#abc"})
        assert res.find("lodash") == ver.parse("4.17.21")
        assert res.find("react") == SourceVersion(Github("facebook", "react", "abc"))

    def test_package_path_key_uses_last_name(self):
        res = Resolutions.from_mapping({"webpack/**/@babel/core": "7.0.0"})
        assert res.find("@babel/core") == ver.parse("7.0.0")
        assert "webpack" not in res

    def test_opam_name_defaults_to_opam(self):
        res = Resolutions.from_mapping({"@opam/dune": "3.0.0"})
        assert isinstance(res.find("@opam/dune"), OpamVersion)

    def test_opam_name_with_explicit_prefix(self):
        res = Resolutions.from_mapping({"@opam/dune": "opam:3.0.0", "@opam/lwt": "path:./lwt"})
        assert res.find("@opam/dune") == ver.parse("opam:3.0.0")
        assert res.find("@opam/lwt") == ver.parse("path:./lwt")

    def test_npm_name_stays_npm(self):
        assert isinstance(Resolutions.from_mapping({"dune": "3.0.0"}).find("dune"), NpmVersion)

    def test_last_write_wins(self):
        res = Resolutions.from_mapping({"a/lodash": "1.0.0", "b/lodash": "2.0.0"})
        assert res.find("lodash") == ver.parse("2.0.0")
        assert len(res) == 1

    @pytest.mark.parametrize("key", ["", "a//b", "@scope", "a/**"])
    def test_invalid_key(self, key):
        with pytest.raises(InvalidResolutionKey) as exc:
            Resolutions.from_mapping({key: "1.0.0"})
        assert exc.value.raw == key

    def test_invalid_value(self):
        with pytest.raises(InvalidResolutionValue) as exc:
            Resolutions.from_mapping({"lodash": "github:no-slash"})
        assert exc.value.raw == "github:no-slash"


class TestResolutionsApply:
    """Pinning requirements."""

    def test_apply_replaces_spec(self):
        res = Resolutions.from_mapping({"lodash": "4.17.21"})
        pinned = res.apply(Req.make("lodash", "^3.0.0"))
        assert pinned == Req("lodash", vs.of_version(ver.parse("4.17.21")))
        assert pinned.spec.matches(ver.parse("4.17.21"))

    def test_apply_missing(self):
        assert Resolutions.empty().apply(Req.make("lodash", "*")) is None

    @pytest.mark.parametrize("value", ["1.2.3", "github:a/b#c", "path:./x"])
    def test_pinned_resolution_satisfies_itself(self, value):
        res = Resolutions.from_mapping({"pkg": value})
        pinned = res.apply(Req.make("pkg", "*"))
        assert vs.matches(pinned.spec, res.find("pkg"))

    def test_pinned_opam_resolution_satisfies_itself(self):
        res = Resolutions.from_mapping({"@opam/dune": "3.0.0"})
        pinned = res.apply(Req.make("@opam/dune", "*"))
        assert vs.matches(pinned.spec, ver.parse("opam:3.0.0"))


class TestResolutionsJson:
    """Object encoding keyed by package name."""

    def test_entries_sorted(self):
        res = Resolutions.from_mapping({"z": "1.0.0", "a": "2.0.0"})
        assert [name for name, _ in res.entries()] == ["a", "z"]

    def test_round_trip(self):
        res = Resolutions.from_json({"lodash": "4.17.21", "@opam/dune": "3.0.0"})
        encoded = res.to_json()
        assert encoded == {"@opam/dune": "opam:3.0.0", "lodash": "4.17.21"}
        assert Resolutions.from_json(encoded) == res

    def test_not_an_object(self):
        with pytest.raises(DecodeError):
            Resolutions.from_json("lodash")

    def test_non_string_value(self):
        with pytest.raises(DecodeError):
            Resolutions.from_json({"lodash": 1})
