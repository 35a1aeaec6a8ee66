"""
Startup configuration.

The dataset source comes from the ``file`` parameter: the --file option,
else the MAPPING_AUDIT_FILE environment variable, else /mappings.json. It is
resolved once when the application starts.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping

from mapping_audit.data_formats import DEFAULT_TIMEOUT
from mapping_audit.session import DEFAULT_ACTUAL_KEY, DEFAULT_EXPECTED_KEY

DEFAULT_SOURCE = "/mappings.json"

ENV_SOURCE = "MAPPING_AUDIT_FILE"
ENV_BASE_URL = "MAPPING_AUDIT_BASE_URL"
ENV_TIMEOUT = "MAPPING_AUDIT_TIMEOUT"
ENV_LOG_FILE = "MAPPING_AUDIT_LOG_FILE"


def _parse_timeout(raw: str | None) -> float:
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


@dataclass(frozen=True)
class AuditConfig:
    """Settings for one viewer session.

    Attributes:
        source: URL or path loaded at startup and on reload.
        base_url: Base URL that relative sources are fetched from.
        timeout: HTTP timeout in seconds.
        expected_key: Initially selected expected-title field.
        actual_key: Initially selected matched-title field.
        browse_dir: Directory offered by the file picker.
        verbosity: Logging verbosity (number of -v flags).
        log_file: Optional log file path.
    """

    source: str = DEFAULT_SOURCE
    base_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    expected_key: str = DEFAULT_EXPECTED_KEY
    actual_key: str = DEFAULT_ACTUAL_KEY
    browse_dir: str = "."
    verbosity: int = 0
    log_file: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AuditConfig":
        """Build a config from environment variables.

        Args:
            environ: Environment mapping (os.environ if None).

        Returns:
            A config with environment values applied over the defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            source=env.get(ENV_SOURCE) or DEFAULT_SOURCE,
            base_url=env.get(ENV_BASE_URL) or None,
            timeout=_parse_timeout(env.get(ENV_TIMEOUT)),
            log_file=env.get(ENV_LOG_FILE) or None,
        )

    def with_overrides(self, **overrides: object) -> "AuditConfig":
        """Return a copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)
