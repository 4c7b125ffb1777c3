"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w

from histfit.core.domain.config import HistFitConfig
from histfit.core.shared.exceptions import ConfigError


def load_config(path: Path) -> HistFitConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        HistFitConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the file is not valid TOML.
        pydantic.ValidationError: If the configuration is invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        raise ConfigError(msg) from e

    return HistFitConfig.model_validate(data)


def save_config(config: HistFitConfig, path: Path) -> None:
    """Save configuration to a TOML file (unset optional values are omitted)."""
    data = config.model_dump(mode="json", exclude_none=True)

    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config() -> str:
    """Generate a default configuration file as a string."""
    return """# HistFit Configuration File
# Generated automatically - edit as needed

[generation]
mean = 50.0      # mean of the generated Gaussian
sigma = 10.0     # width of the generated Gaussian
n_bins = 100
low = 0.0
high = 100.0

[fitting]
method = "chi2"   # chi2 (Neyman least squares) or likelihood (binned Poisson)
integral = false  # compare with the bin-averaged model instead of the bin center

[study]
trials = 10000         # histograms fitted by 'histfit trials'
entries = 1000         # entries per histogram
compare_trials = 1000  # trials per method for 'histfit compare'
compare_entries = 10
# seed = 12345         # uncomment for reproducible runs

[toys]
n_toys = 10000
# seed = 12345

[scan]
n_points = 200
nll_width = 2.0        # likelihood scan half-width in units of the std dev
chi2_center = 50.0
chi2_half_width = 3.0

[output]
directory = "."
save_csv = true
save_json = true
log_format = "text"    # text or json
"""
