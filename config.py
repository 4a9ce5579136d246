"""Runtime configuration.

Values come from the environment (a local .env is honoured) and can be
overridden by command-line flags in main.py.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

DEFAULT_TICK_RATE_MS = 250
DEFAULT_LAYOUT = "tabs"


@dataclass
class Settings:
    # Loop cadence
    tick_rate_ms: int = field(
        default_factory=lambda: int(os.getenv("FLUX_TICK_RATE_MS", DEFAULT_TICK_RATE_MS))
    )

    # Which of the two screens to draw: "tabs" or "inventory"
    layout: str = field(default_factory=lambda: os.getenv("FLUX_LAYOUT", DEFAULT_LAYOUT))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("FLUX_LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("FLUX_LOG_FILE") or None)

    @property
    def tick_rate(self) -> float:
        """Tick interval in seconds."""
        return self.tick_rate_ms / 1000.0


def get_settings() -> Settings:
    """Return a new Settings instance read from the current environment."""
    return Settings()
