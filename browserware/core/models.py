"""Core data models for browserware."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import NewType, Optional, Union

BrowserId = NewType("BrowserId", str)


class BrowserFamily(str, Enum):
    """Rendering engine family of a browser."""

    CHROMIUM = "chromium"
    FIREFOX = "firefox"
    WEBKIT = "webkit"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


class ChromiumChannel(str, Enum):
    """Release channels of Chromium-based browsers."""

    STABLE = "stable"
    BETA = "beta"
    DEV = "dev"
    CANARY = "canary"

    def __str__(self) -> str:
        return self.value


class FirefoxChannel(str, Enum):
    """Release channels of Firefox-based browsers."""

    STABLE = "stable"
    BETA = "beta"
    DEV = "dev"
    NIGHTLY = "nightly"
    ESR = "esr"

    def __str__(self) -> str:
        return self.value


class WebKitChannel(str, Enum):
    """Release channels of WebKit-based browsers."""

    STABLE = "stable"
    TECHNOLOGY_PREVIEW = "technology-preview"

    def __str__(self) -> str:
        return self.value


class VariantType(str, Enum):
    """Tag of a BrowserVariant, as written in serialized output."""

    CHROMIUM = "Chromium"
    FIREFOX = "Firefox"
    WEBKIT = "WebKit"
    SINGLE = "Single"


Channel = Union[ChromiumChannel, FirefoxChannel, WebKitChannel, BrowserFamily]

# Value enum carried by each variant tag
_VALUE_TYPES: dict[VariantType, type] = {
    VariantType.CHROMIUM: ChromiumChannel,
    VariantType.FIREFOX: FirefoxChannel,
    VariantType.WEBKIT: WebKitChannel,
    VariantType.SINGLE: BrowserFamily,
}

_TAG_FAMILIES = {
    VariantType.CHROMIUM: BrowserFamily.CHROMIUM,
    VariantType.FIREFOX: BrowserFamily.FIREFOX,
    VariantType.WEBKIT: BrowserFamily.WEBKIT,
}


@dataclass(frozen=True)
class BrowserVariant:
    """
    Engine family plus release channel of a browser installation.

    A tagged union: ``Chromium(channel)``, ``Firefox(channel)``,
    ``WebKit(channel)``, or ``Single(family)`` for browsers that ship a
    single release line.
    """

    type: VariantType
    value: Channel

    def __post_init__(self) -> None:
        expected = _VALUE_TYPES[self.type]
        if not isinstance(self.value, expected):
            raise ValueError(
                f"{self.type.value} variant requires a {expected.__name__}, "
                f"got {self.value!r}"
            )

    @classmethod
    def chromium(cls, channel: ChromiumChannel = ChromiumChannel.STABLE) -> BrowserVariant:
        return cls(VariantType.CHROMIUM, channel)

    @classmethod
    def firefox(cls, channel: FirefoxChannel = FirefoxChannel.STABLE) -> BrowserVariant:
        return cls(VariantType.FIREFOX, channel)

    @classmethod
    def webkit(cls, channel: WebKitChannel = WebKitChannel.STABLE) -> BrowserVariant:
        return cls(VariantType.WEBKIT, channel)

    @classmethod
    def single(cls, family: BrowserFamily = BrowserFamily.OTHER) -> BrowserVariant:
        return cls(VariantType.SINGLE, family)

    @classmethod
    def default(cls) -> BrowserVariant:
        """Variant used for browsers with no known metadata."""
        return cls.single(BrowserFamily.OTHER)

    @property
    def family(self) -> BrowserFamily:
        """Engine family implied by the variant tag."""
        if self.type is VariantType.SINGLE:
            return self.value  # type: ignore[return-value]
        return _TAG_FAMILIES[self.type]

    @property
    def canonical_name(self) -> str:
        """Channel name; single-channel browsers are always "stable"."""
        if self.type is VariantType.SINGLE:
            return "stable"
        return self.value.value

    def __str__(self) -> str:
        return self.canonical_name

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"type": self.type.value, "value": self.value.value}

    @classmethod
    def from_dict(cls, data: dict) -> BrowserVariant:
        """Create instance from dictionary."""
        variant_type = VariantType(data["type"])
        value = _VALUE_TYPES[variant_type](data["value"])
        return cls(variant_type, value)


@dataclass(frozen=True)
class Browser:
    """
    A browser installation detected on this machine.

    Instances are immutable; the ``with_*`` helpers return modified copies.
    ``executable`` is None when the platform could not resolve it and
    ``version`` is best-effort.
    """

    id: BrowserId
    name: str
    variant: BrowserVariant = field(default_factory=BrowserVariant.default)
    version: Optional[str] = None
    executable: Optional[Path] = None
    bundle_id: Optional[str] = None  # macOS CFBundleIdentifier

    @property
    def family(self) -> BrowserFamily:
        return self.variant.family

    def with_variant(self, variant: BrowserVariant) -> Browser:
        return replace(self, variant=variant)

    def with_version(self, version: Optional[str]) -> Browser:
        return replace(self, version=version)

    def with_bundle_id(self, bundle_id: Optional[str]) -> Browser:
        return replace(self, bundle_id=bundle_id)

    def with_executable(self, executable: Optional[Path]) -> Browser:
        return replace(self, executable=executable)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = {
            "id": str(self.id),
            "name": self.name,
            "variant": self.variant.to_dict(),
            "version": self.version,
            "executable": str(self.executable) if self.executable else "",
        }
        if self.bundle_id is not None:
            data["bundle_id"] = self.bundle_id
        return data

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> Browser:
        """Create instance from dictionary."""
        return cls(
            id=BrowserId(data["id"]),
            name=data["name"],
            variant=BrowserVariant.from_dict(data["variant"]),
            version=data.get("version"),
            executable=Path(data["executable"]) if data.get("executable") else None,
            bundle_id=data.get("bundle_id"),
        )

    @classmethod
    def from_json(cls, json_str: str) -> Browser:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


def browsers_to_json(browsers: list[Browser], indent: int = 2) -> str:
    """Serialize a list of browsers to a JSON array."""
    return json.dumps([b.to_dict() for b in browsers], indent=indent)
