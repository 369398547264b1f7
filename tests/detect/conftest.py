"""Test fixtures for detection modules."""

import plistlib
from pathlib import Path
from typing import Optional

import pytest

from browserware.core.models import Browser, BrowserFamily, BrowserId, BrowserVariant, ChromiumChannel, FirefoxChannel


FIREFOX_DESKTOP = (
    "[Desktop Entry]\n"
    "Version=1.0\n"
    "Name=Firefox Web Browser\n"
    "Name[de]=Firefox-Webbrowser\n"
    "Exec=/usr/bin/firefox %u\n"
    "Type=Application\n"
    "MimeType=text/html;text/xml;application/xhtml+xml;x-scheme-handler/http;x-scheme-handler/https;\n"
    "Categories=GNOME;GTK;Network;WebBrowser;\n"
    "\n"
    "[Desktop Action new-window]\n"
    "Name=Open a New Window\n"
    "Exec=/usr/bin/firefox -new-window\n"
)

CHROME_DESKTOP = (
    "[Desktop Entry]\n"
    "Name=Google Chrome\n"
    "Exec=/usr/bin/google-chrome-stable %U\n"
    "MimeType=x-scheme-handler/http;x-scheme-handler/https;\n"
    "Categories=Network;WebBrowser;\n"
)

UNKNOWN_BROWSER_DESKTOP = (
    "# Third-party browser\n"
    "[Desktop Entry]\n"
    "Name=Nyxt\n"
    "Exec=env GDK_BACKEND=x11 /opt/nyxt/bin/nyxt %U\n"
    "Categories=Network;WebBrowser;\n"
)

EDITOR_DESKTOP = (
    "[Desktop Entry]\n"
    "Name=Text Editor\n"
    "Exec=/usr/bin/gedit %U\n"
    "MimeType=text/plain;\n"
    "Categories=Utility;TextEditor;\n"
)


def write_desktop(directory: Path, desktop_id: str, content: str) -> Path:
    """Write a desktop file into a directory."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{desktop_id}.desktop"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def applications_dir(tmp_path: Path) -> Path:
    """Create an applications directory with browsers and a non-browser."""
    apps = tmp_path / "share" / "applications"
    write_desktop(apps, "firefox", FIREFOX_DESKTOP)
    write_desktop(apps, "google-chrome", CHROME_DESKTOP)
    write_desktop(apps, "nyxt", UNKNOWN_BROWSER_DESKTOP)
    write_desktop(apps, "org.gnome.gedit", EDITOR_DESKTOP)
    (apps / "README").write_text("not a desktop file")
    return apps


def make_app_bundle(
    root: Path,
    name: str,
    info: Optional[dict] = None,
    executable: Optional[str] = None,
) -> Path:
    """Create a minimal macOS application bundle."""
    app_path = root / f"{name}.app"
    macos_dir = app_path / "Contents" / "MacOS"
    macos_dir.mkdir(parents=True)

    if info is not None:
        with open(app_path / "Contents" / "Info.plist", "wb") as f:
            plistlib.dump(info, f)

    if executable is not None:
        (macos_dir / executable).write_bytes(b"")

    return app_path


class FakeLaunchServices:
    """Stands in for LaunchServicesClient with canned answers."""

    def __init__(
        self,
        handlers: Optional[list[str]] = None,
        paths: Optional[dict[str, Path]] = None,
        default: Optional[str] = None,
    ) -> None:
        self.handlers = handlers or []
        self.paths = paths or {}
        self.default = default
        self.queried_schemes: list[str] = []

    def all_handlers(self, scheme: str) -> list[str]:
        self.queried_schemes.append(scheme)
        return list(self.handlers)

    def default_handler(self, scheme: str) -> Optional[str]:
        self.queried_schemes.append(scheme)
        return self.default

    def application_path(self, bundle_id: str) -> Optional[Path]:
        return self.paths.get(bundle_id)


class FakeRegistry:
    """Stands in for RegistryReader over an in-memory key tree."""

    def __init__(self, values: Optional[dict] = None) -> None:
        # {(hive, path): {value_name: data}}
        self.values = values or {}

    def subkeys(self, hive: str, path: str) -> list[str]:
        prefix = path.lower() + "\\"
        names = []
        for key_hive, key_path in self.values:
            if key_hive != hive or not key_path.lower().startswith(prefix):
                continue
            child = key_path[len(prefix):].split("\\")[0]
            if child not in names:
                names.append(child)
        return names

    def value(self, hive: str, path: str, name: str = "") -> Optional[str]:
        for (key_hive, key_path), values in self.values.items():
            if key_hive == hive and key_path.lower() == path.lower():
                return values.get(name)
        return None


@pytest.fixture
def mixed_browsers() -> list[Browser]:
    """A fixed detection result spanning all families."""
    return [
        Browser(BrowserId("chrome"), "Google Chrome", BrowserVariant.chromium()),
        Browser(BrowserId("firefox"), "Firefox", BrowserVariant.firefox()),
        Browser(BrowserId("arc"), "Arc", BrowserVariant.single(BrowserFamily.CHROMIUM)),
        Browser(BrowserId("safari"), "Safari", BrowserVariant.webkit()),
        Browser(BrowserId("nyxt"), "Nyxt"),
        Browser(BrowserId("chrome-canary"), "Google Chrome Canary", BrowserVariant.chromium(ChromiumChannel.CANARY)),
        Browser(BrowserId("firefox-nightly"), "Firefox Nightly", BrowserVariant.firefox(FirefoxChannel.NIGHTLY)),
    ]


@pytest.fixture
def desktop_writer():
    """Return a helper that writes desktop files."""
    return write_desktop


@pytest.fixture
def bundle_factory(tmp_path: Path):
    """Return a helper that creates app bundles under a fake /Applications."""
    applications = tmp_path / "Applications"

    def factory(name: str, info: Optional[dict] = None, executable: Optional[str] = None) -> Path:
        return make_app_bundle(applications, name, info, executable)

    return factory


@pytest.fixture
def fake_launch_services():
    """Return the FakeLaunchServices class."""
    return FakeLaunchServices


@pytest.fixture
def fake_registry():
    """Return the FakeRegistry class."""
    return FakeRegistry
