"""Configuration models for HistFit."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from histfit.core.shared.constants import (
    DEFAULT_COMPARE_ENTRIES,
    DEFAULT_COMPARE_TRIALS,
    DEFAULT_ENTRIES,
    DEFAULT_HIGH,
    DEFAULT_LOW,
    DEFAULT_MEAN,
    DEFAULT_N_BINS,
    DEFAULT_N_TOYS,
    DEFAULT_SIGMA,
    DEFAULT_TRIALS,
    SCAN_CHI2_CENTER,
    SCAN_CHI2_HALF_WIDTH,
    SCAN_N_POINTS,
    SCAN_NLL_WIDTH,
)

FitMethod = Literal["chi2", "likelihood"]
LogFormat = Literal["text", "json"]


class GenerationConfig(BaseModel):
    """Gaussian sample and binning used for generated histograms.

    Example:
        [generation]
        mean = 50.0
        sigma = 10.0
        n_bins = 100
        low = 0.0
        high = 100.0
    """

    model_config = ConfigDict(extra="forbid")

    mean: float = Field(default=DEFAULT_MEAN, description="Mean of the generated Gaussian.")
    sigma: Annotated[float, Field(gt=0)] = Field(
        default=DEFAULT_SIGMA,
        description="Standard deviation of the generated Gaussian.",
    )
    n_bins: Annotated[int, Field(gt=0)] = Field(
        default=DEFAULT_N_BINS,
        description="Number of uniform bins.",
    )
    low: float = Field(default=DEFAULT_LOW, description="Lower edge of the first bin.")
    high: float = Field(default=DEFAULT_HIGH, description="Upper edge of the last bin.")

    @model_validator(mode="after")
    def check_range(self) -> "GenerationConfig":
        """Reject empty or inverted histogram ranges."""
        if self.high <= self.low:
            msg = f"Histogram range is empty: low={self.low}, high={self.high}"
            raise ValueError(msg)
        return self


class FitConfig(BaseModel):
    """How the Gaussian model is fitted to a histogram."""

    model_config = ConfigDict(extra="forbid")

    method: FitMethod = Field(
        default="chi2",
        description="chi2 (Neyman least squares) or likelihood (binned Poisson).",
    )
    integral: bool = Field(
        default=False,
        description="Use the bin-averaged model instead of its value at the bin center.",
    )


class StudyConfig(BaseModel):
    """Repeated generate-and-fit studies."""

    model_config = ConfigDict(extra="forbid")

    trials: Annotated[int, Field(gt=0)] = Field(
        default=DEFAULT_TRIALS,
        description="Number of independent histograms fitted by 'trials'.",
    )
    entries: Annotated[int, Field(ge=0)] = Field(
        default=DEFAULT_ENTRIES,
        description="Entries per histogram for 'trials'.",
    )
    compare_trials: Annotated[int, Field(gt=0)] = Field(
        default=DEFAULT_COMPARE_TRIALS,
        description="Number of trials per method for 'compare'.",
    )
    compare_entries: Annotated[int, Field(ge=0)] = Field(
        default=DEFAULT_COMPARE_ENTRIES,
        description="Entries per histogram for 'compare'.",
    )
    seed: Annotated[int, Field(ge=0)] | None = Field(
        default=None,
        description="Random seed. None draws fresh entropy on every run.",
    )


class ToyConfig(BaseModel):
    """Toy Monte Carlo goodness-of-fit settings."""

    model_config = ConfigDict(extra="forbid")

    n_toys: Annotated[int, Field(gt=0)] = Field(
        default=DEFAULT_N_TOYS,
        description="Number of Poisson pseudo-experiments.",
    )
    seed: Annotated[int, Field(ge=0)] | None = Field(default=None, description="Random seed.")


class ScanConfig(BaseModel):
    """Mean scans of the likelihood and chi-square."""

    model_config = ConfigDict(extra="forbid")

    n_points: Annotated[int, Field(ge=2)] = Field(
        default=SCAN_N_POINTS,
        description="Number of scan points per curve.",
    )
    nll_width: Annotated[float, Field(gt=0)] = Field(
        default=SCAN_NLL_WIDTH,
        description="Likelihood scan half-width in units of the histogram std dev.",
    )
    chi2_center: float = Field(
        default=SCAN_CHI2_CENTER,
        description="Center of the chi-square scan.",
    )
    chi2_half_width: Annotated[float, Field(gt=0)] = Field(
        default=SCAN_CHI2_HALF_WIDTH,
        description="Half-width of the chi-square scan.",
    )


class OutputConfig(BaseModel):
    """Output file generation."""

    model_config = ConfigDict(extra="forbid")

    directory: Path = Field(default=Path("."), description="Directory for generated files.")
    save_csv: bool = Field(default=True, description="Write per-fit records as CSV.")
    save_json: bool = Field(default=True, description="Write a JSON summary of results.")
    log_format: LogFormat = Field(
        default="text",
        description="Format for log file: text (human-readable) or json (structured).",
    )


class HistFitConfig(BaseModel):
    """Top-level HistFit configuration.

    Example TOML configuration:
        [generation]
        mean = 50.0
        sigma = 10.0

        [fitting]
        method = "likelihood"

        [study]
        trials = 5000
        seed = 1

        [toys]
        n_toys = 10000

        [scan]
        chi2_center = 50.0

        [output]
        directory = "results"
    """

    model_config = ConfigDict(extra="forbid")

    generation: GenerationConfig = Field(default_factory=GenerationConfig)
    fitting: FitConfig = Field(default_factory=FitConfig)
    study: StudyConfig = Field(default_factory=StudyConfig)
    toys: ToyConfig = Field(default_factory=ToyConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


__all__ = [
    "FitConfig",
    "FitMethod",
    "GenerationConfig",
    "HistFitConfig",
    "LogFormat",
    "OutputConfig",
    "ScanConfig",
    "StudyConfig",
    "ToyConfig",
]
