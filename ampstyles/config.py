"""Configuration constants and paths for AmpStyles."""

import os
from pathlib import Path

# Stylesheet sources - relative to the directory the tool is run from
SOURCE_DIR = Path(os.getenv("AMPSTYLES_SOURCE_DIR", "_sass"))
ENTRY_GLOB = "**/site.scss"

# Any of these changing triggers a rebuild in watch mode
WATCH_GLOB = "*.scss"

OUTPUT_DIR = Path(os.getenv("AMPSTYLES_OUTPUT_DIR", Path("assets") / "css"))

# libsass output style
OUTPUT_STYLE = "compressed"

# Output file names produced by the media split
SITE_FILENAME = "site.css"
AMP_FILENAME = "amp.css"

# Minification stage is off unless asked for
MINIFY = os.getenv("AMPSTYLES_MINIFY", "").lower() in ("1", "true", "yes")

# Quiet period before a watch-triggered rebuild starts
DEBOUNCE_SECONDS = float(os.getenv("AMPSTYLES_DEBOUNCE", "0.2"))

LOG_LEVEL = os.getenv("AMPSTYLES_LOG_LEVEL", "INFO")
