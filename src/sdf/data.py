"""Record 2: the height values, together with the header they depend on."""

import math
from collections.abc import Callable
from functools import partial
from typing import Final

import numpy as np
from numpy.typing import NDArray
from returns.result import Result, safe

from container_models.scan_configuration import ScanConfiguration
from utils.logger import FailureLevel, log_railway_function

from .data_types import FloatSamples, IntSamples, SdfArtifact, ZDataType
from .encoding import format_height, render_section
from .exceptions import LengthMismatchError, MissingDataError, SdfValidationError
from .header import build_header
from .settings import get_settings

BAD_SAMPLE: Final[str] = "BAD"  # ISO 25178-71 clause 5.3.2
RELAXED_BAD_SAMPLE: Final[str] = "NaN"
INT32_RANGE: Final = np.iinfo(np.int32)


@safe(exceptions=(SdfValidationError,))
def _validate_samples(
    samples: FloatSamples | IntSamples | None, config: ScanConfiguration
) -> NDArray:
    """Flatten the samples (row major) and check them against the scan dimensions."""
    if samples is None:
        raise MissingDataError("No topography data supplied")
    values = np.ravel(np.asarray(samples))
    if values.size != config.expected_sample_count:
        raise LengthMismatchError(config.expected_sample_count, values.size)
    return values


def _render_main_section(
    values: NDArray,
    config: ScanConfiguration,
    z_data_type: ZDataType,
    render_sample: Callable[[float | int], str],
) -> Result[SdfArtifact, SdfValidationError]:
    return build_header(config, z_data_type).map(
        lambda header: SdfArtifact(
            header=header,
            data=render_section([render_sample(value) for value in values.tolist()]),
            z_data_type=z_data_type,
        )
    )


def _float_sample(value: float, bad_sample: str, decimals: int) -> str:
    if not math.isfinite(value):
        return bad_sample
    return format_height(value, decimals)


def _as_float(values: NDArray) -> NDArray[np.float64]:
    return values.astype(np.float64)


def _as_integer(values: NDArray) -> NDArray[np.integer]:
    if not np.issubdtype(values.dtype, np.integer):
        raise TypeError(f"Expected integer height values, got {values.dtype}")
    if int(values.min()) < INT32_RANGE.min or int(values.max()) > INT32_RANGE.max:
        raise TypeError(
            f"Integer height values must fit in 32 bits, got range "
            f"[{values.min()}, {values.max()}]"
        )
    return values


@log_railway_function(
    "Failed to encode floating point topography data",
    "Successfully encoded floating point topography data",
    FailureLevel.WARNING,
)
def encode_float_data(
    samples: FloatSamples | None,
    config: ScanConfiguration,
    decimals: int | None = None,
) -> Result[SdfArtifact, SdfValidationError]:
    """
    Render Record 1 and Record 2 from height values in meters (m).

    Heights are written in micrometers with a fixed number of decimals. Missing
    measurements (NaN) are written as `BAD`, or as `NaN` in relaxed mode.

    :param samples: The height values, ordered profile by profile.
    :param config: The scan configuration.
    :param decimals: Number of decimals, defaults to the `z_decimals` setting.
    :returns: Success with the main section, or Failure with the validation error.
    """
    if decimals is None:
        decimals = get_settings().z_decimals
    render_sample = partial(
        _float_sample,
        bad_sample=RELAXED_BAD_SAMPLE if config.relaxed else BAD_SAMPLE,
        decimals=decimals,
    )
    return (
        _validate_samples(samples, config)
        .map(_as_float)
        .bind(
            partial(
                _render_main_section,
                config=config,
                z_data_type=ZDataType.DOUBLE,
                render_sample=render_sample,
            )
        )
    )


@log_railway_function(
    "Failed to encode integer topography data",
    "Successfully encoded integer topography data",
    FailureLevel.WARNING,
)
def encode_int_data(
    samples: IntSamples | None, config: ScanConfiguration
) -> Result[SdfArtifact, SdfValidationError]:
    """
    Render Record 1 and Record 2 from integer height values in micrometers (um).

    The values are written unmodified.

    :param samples: The height values, ordered profile by profile.
    :param config: The scan configuration.
    :returns: Success with the main section, or Failure with the validation error.
    :raises TypeError: If the samples are not integers or do not fit in 32 bits.
    """
    return (
        _validate_samples(samples, config)
        .map(_as_integer)
        .bind(
            partial(
                _render_main_section,
                config=config,
                z_data_type=ZDataType.INT32,
                render_sample=str,
            )
        )
    )
