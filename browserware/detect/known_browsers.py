"""
Known browser registry for metadata enrichment.

The registry is not the list of browsers to detect. Platform resolvers
enumerate whatever the OS reports as a web handler and look each candidate
up here to attach a canonical id, display name and variant. Candidates with
no entry are still reported, with derived metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from browserware.core.models import (
    Browser,
    BrowserFamily,
    BrowserId,
    BrowserVariant,
    ChromiumChannel,
    FirefoxChannel,
    WebKitChannel,
)


@dataclass(frozen=True)
class BrowserMeta:
    """Static metadata and platform identifiers for a known browser."""

    id: str  # Canonical id used in configuration, e.g. "firefox-nightly"
    name: str  # Display name
    variant: BrowserVariant
    macos_bundle_ids: tuple[str, ...] = ()  # CFBundleIdentifier values
    windows_registry_keys: tuple[str, ...] = ()  # Subkeys of Clients\StartMenuInternet
    linux_desktop_ids: tuple[str, ...] = ()  # Desktop file basenames, no extension

    @property
    def available_on_macos(self) -> bool:
        return bool(self.macos_bundle_ids)

    @property
    def available_on_windows(self) -> bool:
        return bool(self.windows_registry_keys)

    @property
    def available_on_linux(self) -> bool:
        return bool(self.linux_desktop_ids)

    @property
    def family(self) -> BrowserFamily:
        return self.variant.family

    def to_browser(self, executable: Optional[Path] = None) -> Browser:
        """Build a Browser carrying this entry's id, name and variant."""
        return Browser(
            id=BrowserId(self.id),
            name=self.name,
            variant=self.variant,
            executable=executable,
        )


KNOWN_BROWSERS: tuple[BrowserMeta, ...] = (
    # Google Chrome
    BrowserMeta(
        id="chrome",
        name="Google Chrome",
        variant=BrowserVariant.chromium(ChromiumChannel.STABLE),
        macos_bundle_ids=("com.google.Chrome",),
        windows_registry_keys=("Google Chrome",),
        linux_desktop_ids=("google-chrome", "google-chrome-stable"),
    ),
    BrowserMeta(
        id="chrome-beta",
        name="Google Chrome Beta",
        variant=BrowserVariant.chromium(ChromiumChannel.BETA),
        macos_bundle_ids=("com.google.Chrome.beta",),
        windows_registry_keys=("Google Chrome Beta",),
        linux_desktop_ids=("google-chrome-beta",),
    ),
    BrowserMeta(
        id="chrome-dev",
        name="Google Chrome Dev",
        variant=BrowserVariant.chromium(ChromiumChannel.DEV),
        macos_bundle_ids=("com.google.Chrome.dev",),
        windows_registry_keys=("Google Chrome Dev",),
        linux_desktop_ids=("google-chrome-unstable",),
    ),
    BrowserMeta(
        id="chrome-canary",
        name="Google Chrome Canary",
        variant=BrowserVariant.chromium(ChromiumChannel.CANARY),
        macos_bundle_ids=("com.google.Chrome.canary",),
        windows_registry_keys=("Google Chrome Canary",),
    ),
    # Microsoft Edge
    BrowserMeta(
        id="edge",
        name="Microsoft Edge",
        variant=BrowserVariant.chromium(ChromiumChannel.STABLE),
        macos_bundle_ids=("com.microsoft.edgemac",),
        windows_registry_keys=("Microsoft Edge",),
        linux_desktop_ids=("microsoft-edge", "microsoft-edge-stable"),
    ),
    BrowserMeta(
        id="edge-beta",
        name="Microsoft Edge Beta",
        variant=BrowserVariant.chromium(ChromiumChannel.BETA),
        macos_bundle_ids=("com.microsoft.edgemac.Beta",),
        windows_registry_keys=("Microsoft Edge Beta",),
        linux_desktop_ids=("microsoft-edge-beta",),
    ),
    BrowserMeta(
        id="edge-dev",
        name="Microsoft Edge Dev",
        variant=BrowserVariant.chromium(ChromiumChannel.DEV),
        macos_bundle_ids=("com.microsoft.edgemac.Dev",),
        windows_registry_keys=("Microsoft Edge Dev",),
        linux_desktop_ids=("microsoft-edge-dev",),
    ),
    BrowserMeta(
        id="edge-canary",
        name="Microsoft Edge Canary",
        variant=BrowserVariant.chromium(ChromiumChannel.CANARY),
        macos_bundle_ids=("com.microsoft.edgemac.Canary",),
        windows_registry_keys=("Microsoft Edge Canary",),
    ),
    # Brave
    BrowserMeta(
        id="brave",
        name="Brave Browser",
        variant=BrowserVariant.chromium(ChromiumChannel.STABLE),
        macos_bundle_ids=("com.brave.Browser",),
        windows_registry_keys=("BraveSoftware Brave-Browser",),
        linux_desktop_ids=("brave-browser", "brave", "com.brave.Browser"),
    ),
    BrowserMeta(
        id="brave-beta",
        name="Brave Browser Beta",
        variant=BrowserVariant.chromium(ChromiumChannel.BETA),
        macos_bundle_ids=("com.brave.Browser.beta",),
        windows_registry_keys=("BraveSoftware Brave-Browser-Beta",),
        linux_desktop_ids=("brave-browser-beta",),
    ),
    BrowserMeta(
        id="brave-nightly",
        name="Brave Browser Nightly",
        variant=BrowserVariant.chromium(ChromiumChannel.CANARY),
        macos_bundle_ids=("com.brave.Browser.nightly",),
        windows_registry_keys=("BraveSoftware Brave-Browser-Nightly",),
        linux_desktop_ids=("brave-browser-nightly",),
    ),
    # Arc
    BrowserMeta(
        id="arc",
        name="Arc",
        variant=BrowserVariant.single(BrowserFamily.CHROMIUM),
        macos_bundle_ids=("company.thebrowser.Browser",),
        windows_registry_keys=("Arc",),
    ),
    # Vivaldi
    BrowserMeta(
        id="vivaldi",
        name="Vivaldi",
        variant=BrowserVariant.chromium(ChromiumChannel.STABLE),
        macos_bundle_ids=("com.vivaldi.Vivaldi",),
        windows_registry_keys=("Vivaldi",),
        linux_desktop_ids=("vivaldi", "vivaldi-stable"),
    ),
    BrowserMeta(
        id="vivaldi-snapshot",
        name="Vivaldi Snapshot",
        variant=BrowserVariant.chromium(ChromiumChannel.DEV),
        macos_bundle_ids=("com.vivaldi.Vivaldi.snapshot",),
        windows_registry_keys=("Vivaldi Snapshot",),
        linux_desktop_ids=("vivaldi-snapshot",),
    ),
    # Opera
    BrowserMeta(
        id="opera",
        name="Opera",
        variant=BrowserVariant.chromium(ChromiumChannel.STABLE),
        macos_bundle_ids=("com.operasoftware.Opera",),
        windows_registry_keys=("Opera Stable",),
        linux_desktop_ids=("opera",),
    ),
    BrowserMeta(
        id="opera-beta",
        name="Opera Beta",
        variant=BrowserVariant.chromium(ChromiumChannel.BETA),
        macos_bundle_ids=("com.operasoftware.OperaNext",),
        windows_registry_keys=("Opera Beta",),
        linux_desktop_ids=("opera-beta",),
    ),
    BrowserMeta(
        id="opera-developer",
        name="Opera Developer",
        variant=BrowserVariant.chromium(ChromiumChannel.DEV),
        macos_bundle_ids=("com.operasoftware.OperaDeveloper",),
        windows_registry_keys=("Opera Developer",),
        linux_desktop_ids=("opera-developer",),
    ),
    BrowserMeta(
        id="opera-gx",
        name="Opera GX",
        variant=BrowserVariant.single(BrowserFamily.CHROMIUM),
        macos_bundle_ids=("com.operasoftware.OperaGX",),
        windows_registry_keys=("Opera GX Stable",),
    ),
    # Chromium
    BrowserMeta(
        id="chromium",
        name="Chromium",
        variant=BrowserVariant.chromium(ChromiumChannel.STABLE),
        macos_bundle_ids=("org.chromium.Chromium",),
        windows_registry_keys=("Chromium",),
        linux_desktop_ids=("chromium", "chromium-browser", "org.chromium.Chromium"),
    ),
    # Mozilla Firefox
    BrowserMeta(
        id="firefox",
        name="Firefox",
        variant=BrowserVariant.firefox(FirefoxChannel.STABLE),
        macos_bundle_ids=("org.mozilla.firefox",),
        windows_registry_keys=("Firefox",),
        linux_desktop_ids=("firefox", "firefox_firefox", "org.mozilla.firefox"),
    ),
    BrowserMeta(
        id="firefox-beta",
        name="Firefox Beta",
        variant=BrowserVariant.firefox(FirefoxChannel.BETA),
        macos_bundle_ids=("org.mozilla.firefoxbeta",),
        windows_registry_keys=("Firefox Beta",),
        linux_desktop_ids=("firefox-beta",),
    ),
    BrowserMeta(
        id="firefox-dev",
        name="Firefox Developer Edition",
        variant=BrowserVariant.firefox(FirefoxChannel.DEV),
        macos_bundle_ids=("org.mozilla.firefoxdeveloperedition",),
        windows_registry_keys=("Firefox Developer Edition",),
        linux_desktop_ids=("firefox-developer-edition", "firefoxdeveloperedition"),
    ),
    BrowserMeta(
        id="firefox-nightly",
        name="Firefox Nightly",
        variant=BrowserVariant.firefox(FirefoxChannel.NIGHTLY),
        macos_bundle_ids=("org.mozilla.nightly",),
        windows_registry_keys=("Firefox Nightly",),
        linux_desktop_ids=("firefox-nightly",),
    ),
    BrowserMeta(
        id="firefox-esr",
        name="Firefox ESR",
        variant=BrowserVariant.firefox(FirefoxChannel.ESR),
        macos_bundle_ids=("org.mozilla.firefoxesr",),
        windows_registry_keys=("Firefox ESR",),
        linux_desktop_ids=("firefox-esr",),
    ),
    # Firefox forks
    BrowserMeta(
        id="librewolf",
        name="LibreWolf",
        variant=BrowserVariant.single(BrowserFamily.FIREFOX),
        macos_bundle_ids=("io.gitlab.LibreWolf",),
        windows_registry_keys=("LibreWolf",),
        linux_desktop_ids=("librewolf", "io.gitlab.librewolf"),
    ),
    BrowserMeta(
        id="waterfox",
        name="Waterfox",
        variant=BrowserVariant.single(BrowserFamily.FIREFOX),
        macos_bundle_ids=("net.waterfox.waterfox",),
        windows_registry_keys=("Waterfox",),
        linux_desktop_ids=("waterfox", "waterfox-current"),
    ),
    BrowserMeta(
        id="floorp",
        name="Floorp",
        variant=BrowserVariant.single(BrowserFamily.FIREFOX),
        macos_bundle_ids=("one.ablaze.floorp",),
        windows_registry_keys=("Floorp",),
        linux_desktop_ids=("floorp", "one.ablaze.floorp"),
    ),
    # Safari (macOS only)
    BrowserMeta(
        id="safari",
        name="Safari",
        variant=BrowserVariant.webkit(WebKitChannel.STABLE),
        macos_bundle_ids=("com.apple.Safari",),
    ),
    BrowserMeta(
        id="safari-preview",
        name="Safari Technology Preview",
        variant=BrowserVariant.webkit(WebKitChannel.TECHNOLOGY_PREVIEW),
        macos_bundle_ids=("com.apple.SafariTechnologyPreview",),
    ),
    # GNOME Web (Linux only)
    BrowserMeta(
        id="gnome-web",
        name="GNOME Web",
        variant=BrowserVariant.single(BrowserFamily.WEBKIT),
        linux_desktop_ids=("org.gnome.Epiphany", "epiphany", "epiphany-browser"),
    ),
)


def find_by_id(browser_id: str) -> Optional[BrowserMeta]:
    """Find browser metadata by canonical id (e.g. "chrome")."""
    for meta in KNOWN_BROWSERS:
        if meta.id == browser_id:
            return meta
    return None


def find_by_bundle_id(bundle_id: str) -> Optional[BrowserMeta]:
    """Find browser metadata by macOS bundle identifier."""
    for meta in KNOWN_BROWSERS:
        if bundle_id in meta.macos_bundle_ids:
            return meta
    return None


def find_by_registry_key(key: str) -> Optional[BrowserMeta]:
    """Find browser metadata by Windows StartMenuInternet key name."""
    for meta in KNOWN_BROWSERS:
        if key in meta.windows_registry_keys:
            return meta
    return None


def find_by_desktop_id(desktop_id: str) -> Optional[BrowserMeta]:
    """Find browser metadata by Linux desktop file basename."""
    for meta in KNOWN_BROWSERS:
        if desktop_id in meta.linux_desktop_ids:
            return meta
    return None
