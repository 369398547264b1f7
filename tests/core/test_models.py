"""Tests for core data models."""

import dataclasses
import json
from pathlib import Path

import pytest

from browserware.core.models import (
    Browser,
    BrowserFamily,
    BrowserId,
    BrowserVariant,
    ChromiumChannel,
    FirefoxChannel,
    VariantType,
    WebKitChannel,
    browsers_to_json,
)

ALL_VARIANTS = (
    [BrowserVariant.chromium(c) for c in ChromiumChannel]
    + [BrowserVariant.firefox(c) for c in FirefoxChannel]
    + [BrowserVariant.webkit(c) for c in WebKitChannel]
    + [BrowserVariant.single(f) for f in BrowserFamily]
)


class TestChannels:
    """Tests for channel canonical names."""

    def test_chromium_channel_names(self):
        """Chromium channels use lowercase canonical names."""
        assert [c.value for c in ChromiumChannel] == ["stable", "beta", "dev", "canary"]

    def test_firefox_channel_names(self):
        """Firefox channels include nightly and esr."""
        assert [c.value for c in FirefoxChannel] == ["stable", "beta", "dev", "nightly", "esr"]

    def test_webkit_channel_names(self):
        """Technology preview is kebab-cased."""
        assert WebKitChannel.TECHNOLOGY_PREVIEW.value == "technology-preview"
        assert str(WebKitChannel.STABLE) == "stable"

    def test_family_display(self):
        """BrowserFamily displays as its lowercase name."""
        assert str(BrowserFamily.CHROMIUM) == "chromium"
        assert str(BrowserFamily.FIREFOX) == "firefox"


class TestBrowserVariant:
    """Tests for BrowserVariant."""

    @pytest.mark.parametrize("variant", ALL_VARIANTS, ids=lambda v: f"{v.type.value}-{v.value.value}")
    def test_family_is_total(self, variant):
        """Every variant maps to the family implied by its tag."""
        expected = {
            VariantType.CHROMIUM: BrowserFamily.CHROMIUM,
            VariantType.FIREFOX: BrowserFamily.FIREFOX,
            VariantType.WEBKIT: BrowserFamily.WEBKIT,
        }.get(variant.type, variant.value)
        assert variant.family is expected

    def test_single_uses_its_family(self):
        """Single(f) belongs to family f."""
        assert BrowserVariant.single(BrowserFamily.CHROMIUM).family is BrowserFamily.CHROMIUM
        assert BrowserVariant.single(BrowserFamily.OTHER).family is BrowserFamily.OTHER

    def test_canonical_names(self):
        """canonical_name is the channel, and single-channel is stable."""
        assert BrowserVariant.chromium(ChromiumChannel.CANARY).canonical_name == "canary"
        assert BrowserVariant.firefox(FirefoxChannel.NIGHTLY).canonical_name == "nightly"
        assert (
            BrowserVariant.webkit(WebKitChannel.TECHNOLOGY_PREVIEW).canonical_name
            == "technology-preview"
        )
        assert BrowserVariant.single(BrowserFamily.CHROMIUM).canonical_name == "stable"

    def test_display(self):
        """str() of a variant is its canonical name."""
        assert str(BrowserVariant.chromium()) == "stable"
        assert str(BrowserVariant.firefox(FirefoxChannel.ESR)) == "esr"

    def test_default_is_single_other(self):
        """Default variant is Single(other)."""
        assert BrowserVariant.default() == BrowserVariant.single(BrowserFamily.OTHER)

    def test_rejects_mismatched_channel(self):
        """A channel from another engine is rejected."""
        with pytest.raises(ValueError):
            BrowserVariant(VariantType.CHROMIUM, FirefoxChannel.NIGHTLY)

    def test_is_hashable(self):
        """Variants can be used as dict keys."""
        counts = {BrowserVariant.chromium(): 1}
        assert counts[BrowserVariant.chromium(ChromiumChannel.STABLE)] == 1

    def test_serialized_shape(self):
        """Variants serialize as {type, value}."""
        assert BrowserVariant.webkit(WebKitChannel.TECHNOLOGY_PREVIEW).to_dict() == {
            "type": "WebKit",
            "value": "technology-preview",
        }
        assert BrowserVariant.single(BrowserFamily.FIREFOX).to_dict() == {
            "type": "Single",
            "value": "firefox",
        }

    @pytest.mark.parametrize("variant", ALL_VARIANTS, ids=lambda v: f"{v.type.value}-{v.value.value}")
    def test_round_trip(self, variant):
        """Serializing then deserializing yields an equal variant."""
        restored = BrowserVariant.from_dict(json.loads(json.dumps(variant.to_dict())))
        assert restored == variant

    def test_from_dict_rejects_unknown_channel(self):
        """Unknown channel names are rejected."""
        with pytest.raises(ValueError):
            BrowserVariant.from_dict({"type": "Firefox", "value": "canary"})


class TestBrowser:
    """Tests for Browser dataclass."""

    def test_instantiation_defaults(self):
        """Browser defaults to Single(other) with no version or bundle id."""
        browser = Browser(id=BrowserId("foo"), name="Foo")

        assert browser.variant == BrowserVariant.default()
        assert browser.family is BrowserFamily.OTHER
        assert browser.version is None
        assert browser.executable is None
        assert browser.bundle_id is None

    def test_is_frozen(self):
        """Browser should be immutable."""
        browser = Browser(id=BrowserId("foo"), name="Foo")
        with pytest.raises(dataclasses.FrozenInstanceError):
            browser.name = "Bar"  # type: ignore

    def test_builder_returns_new_instances(self):
        """with_* helpers leave the original untouched."""
        base = Browser(id=BrowserId("chrome"), name="Google Chrome", executable=Path("/usr/bin/chrome"))
        built = base.with_variant(BrowserVariant.chromium(ChromiumChannel.CANARY)).with_version("120.0.0")

        assert built.family is BrowserFamily.CHROMIUM
        assert built.version == "120.0.0"
        assert base.version is None
        assert base.family is BrowserFamily.OTHER

    def test_family_derived_from_variant(self):
        """family follows the variant, including single-channel browsers."""
        arc = Browser(
            id=BrowserId("arc"),
            name="Arc",
            variant=BrowserVariant.single(BrowserFamily.CHROMIUM),
        )
        assert arc.family is BrowserFamily.CHROMIUM

    def test_to_dict_shape(self, sample_browser_data):
        """Browser serializes to the interchange shape."""
        browser = Browser.from_dict(sample_browser_data)
        assert browser.to_dict() == sample_browser_data

    def test_to_dict_omits_missing_bundle_id(self):
        """bundle_id is omitted and version is null when absent."""
        data = Browser(id=BrowserId("firefox"), name="Firefox", executable=Path("/usr/bin/firefox")).to_dict()

        assert "bundle_id" not in data
        assert data["version"] is None
        assert data["executable"] == "/usr/bin/firefox"

    def test_unresolved_executable_serializes_empty(self):
        """An unresolved executable round-trips through an empty string."""
        browser = Browser(id=BrowserId("x"), name="X")
        assert browser.to_dict()["executable"] == ""
        assert Browser.from_dict(browser.to_dict()) == browser

    def test_json_round_trip(self, sample_browser_data):
        """Browser survives a JSON round trip."""
        browser = Browser.from_dict(sample_browser_data)
        assert Browser.from_json(browser.to_json()) == browser

    def test_round_trip_without_optionals(self):
        """Round trip holds for browsers missing optional fields."""
        browser = Browser(
            id=BrowserId("librewolf"),
            name="LibreWolf",
            variant=BrowserVariant.single(BrowserFamily.FIREFOX),
            executable=Path("/usr/bin/librewolf"),
        )
        assert Browser.from_dict(browser.to_dict()) == browser

    def test_browsers_to_json(self, sample_browser_data):
        """A list of browsers serializes to a JSON array."""
        browser = Browser.from_dict(sample_browser_data)
        assert json.loads(browsers_to_json([browser])) == [sample_browser_data]
