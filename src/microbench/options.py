"""Benchmark options and their configuration sources.

Options are built once per benchmark, from (in increasing priority):
- Built-in defaults
- A YAML configuration file
- The BENCHMARK_VERBOSE environment variable
- Explicit keyword overrides (e.g. command-line flags)
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

VERBOSE_ENV_VAR = "BENCHMARK_VERBOSE"


class ConfigError(ValueError):
    """Raised when a configuration file cannot be turned into Options."""


@dataclass(frozen=True)
class Options:
    """Knobs controlling a benchmark run.

    Values are not validated: inconsistent settings (e.g. `min_samples`
    above `max_samples`) are resolved by the sampler's stop conditions.

    Attributes:
        iterations: Operation invocations per timed batch.
        warmup_iterations: Untimed invocations before measurement starts.
        min_samples: Minimum batches before the RSD target may stop the run.
        max_samples: Hard cap on the number of batches.
        max_rsd: Relative standard deviation (percent) to stop at.
        max_duration: Time budget in seconds for measurement, or None.
        verbose: Emit diagnostics at INFO level.
    """

    iterations: int = 1000
    warmup_iterations: int = 10
    min_samples: int = 3
    max_samples: int = 50
    max_rsd: float = 5.0
    max_duration: float | None = 5.0
    verbose: bool = False

    def replace(self, **changes: Any) -> Options:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(Options))


def read_config_file(path: Path | str) -> dict[str, Any]:
    """Read option values from a YAML file.

    Args:
        path: Path to a YAML mapping whose keys are Options field names.

    Returns:
        Dictionary of option values (empty for an empty file).

    Raises:
        ConfigError: If the file is not a mapping or has unknown keys.
    """
    with Path(path).open() as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"{path}: expected a mapping of options")

    unknown = sorted(set(data) - FIELD_NAMES)
    if unknown:
        raise ConfigError(f"{path}: unknown option(s): {', '.join(unknown)}")

    return dict(data)


def load_options(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> Options:
    """Build Options from defaults, a config file, environment and overrides.

    Args:
        path: Optional YAML configuration file.
        environ: Environment mapping (default: `os.environ`).
        **overrides: Field values taking precedence; None values are ignored.

    Returns:
        The resulting Options.

    Raises:
        ConfigError: If the config file is invalid or an override is unknown.
    """
    values: dict[str, Any] = {}
    if path is not None:
        values.update(read_config_file(path))

    environ = os.environ if environ is None else environ
    if VERBOSE_ENV_VAR in environ:
        values["verbose"] = True

    unknown = sorted(set(overrides) - FIELD_NAMES)
    if unknown:
        raise ConfigError(f"unknown option(s): {', '.join(unknown)}")
    values.update({k: v for k, v in overrides.items() if v is not None})

    return Options(**values)
