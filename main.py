"""Entry point for browserware.

Initializes logging, loads configuration, and prints the detected browsers
and the default browser as JSON.
"""

import json
import logging
import sys

from browserware.core.config import ConfigError, ConfigManager, DetectionSettings
from browserware.core.logging_config import setup_logging
from browserware.detect.detector import BrowserDetector

logger = logging.getLogger(__name__)


def _load_settings() -> DetectionSettings:
    """Load detection settings, falling back to defaults on a bad config file."""
    try:
        return ConfigManager().detection_settings()
    except (ConfigError, OSError) as e:
        logger.warning("Using default settings, configuration not loaded: %s", e)
        return DetectionSettings()


def main(argv: list[str] | None = None) -> int:
    """
    Application entry point.

    Returns:
        Exit code (0 for success)
    """
    argv = sys.argv[1:] if argv is None else argv

    # Initialize logging
    setup_logging(debug_mode="--debug" in argv)

    detector = BrowserDetector(settings=_load_settings())
    browsers = detector.detect_browsers()
    default = detector.detect_default_browser()

    report = {
        "browsers": [b.to_dict() for b in browsers],
        "default": default.id if default else None,
    }
    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
