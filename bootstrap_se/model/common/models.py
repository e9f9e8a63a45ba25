"""
Common Pydantic models for standard error results
"""

from pydantic import BaseModel, Field, field_validator, ConfigDict
import numpy as np


class BootstrapSEResult(BaseModel):
    """Bootstrap results

    Stores the standard errors of the bootstrap distributions of the sample
    mean and sample median.
    """

    se_mean: float = Field(ge=0.0, description="Standard error of the mean")
    se_median: float = Field(ge=0.0, description="Standard error of the median")
    n_bootstrap: int = Field(ge=2, description="Number of bootstrap resamples")
    sample_size: int = Field(ge=1, description="Size of each resample")

    @field_validator("se_mean", "se_median")
    @classmethod
    def validate_finite(cls, v):
        """Reject NaN and infinity"""
        if np.isnan(v) or np.isinf(v):
            raise ValueError(f"standard error must be finite, got {v}")
        return v

    def as_tuple(self) -> tuple:
        """(se_mean, se_median)"""
        return self.se_mean, self.se_median

    model_config = ConfigDict(frozen=True)


class SampleSizeResult(BaseModel):
    """Results for one sample size

    clt_se_mean, se_mean and se_median are standard errors of distributions
    of n_clt_samples or n_bootstrap statistics, so they shrink as those
    counts grow. The *_sd_* fields are the standard deviations of the same
    distributions (SE times the square root of the count). They estimate
    the sampling variability of one statistic and are on the same scale
    as the closed-form sigma / sqrt(n).
    """

    sample_size: int = Field(ge=1, description="Sample size n")
    clt_se_mean: float = Field(ge=0.0, description="Empirical CLT SE of the mean")
    se_mean: float = Field(ge=0.0, description="Bootstrap SE of the mean")
    se_median: float = Field(ge=0.0, description="Bootstrap SE of the median")
    theoretical_se_mean: float = Field(ge=0.0, description="sigma / sqrt(n)")
    clt_sd_mean: float = Field(ge=0.0, description="SD of the CLT sample means")
    bootstrap_sd_mean: float = Field(ge=0.0, description="SD of the bootstrap means")
    bootstrap_sd_median: float = Field(
        ge=0.0, description="SD of the bootstrap medians"
    )

    model_config = ConfigDict(frozen=True)
