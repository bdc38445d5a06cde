"""Runtime configuration for modtrace."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from modtrace.codes import OutputFormat

DEFAULT_MIN_RATIO = 0.9


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class TraceConfig:
    """Options for a single trace run.

    Attributes:
        min_ratio: Suggestions are offered for names whose prefix match
            ratio against an unknown name is strictly above this value.
        verbose: Stream path-search trace lines to stderr.
        output_format: "text" (edge lines) or "json" (full result).
    """
    min_ratio: float = DEFAULT_MIN_RATIO
    verbose: bool = False
    output_format: OutputFormat = OutputFormat.TEXT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TraceConfig":
        """Build a config from MODTRACE_* environment variables."""
        env = os.environ if environ is None else environ
        config = cls()
        raw_ratio = env.get("MODTRACE_MIN_RATIO")
        if raw_ratio:
            try:
                config.min_ratio = float(raw_ratio)
            except ValueError:
                raise ValueError(f"MODTRACE_MIN_RATIO must be a number, got {raw_ratio!r}") from None
        config.verbose = _env_flag(env.get("MODTRACE_VERBOSE"))
        return config
