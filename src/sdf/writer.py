from functools import partial
from operator import attrgetter
from pathlib import Path
from typing import Final

from returns.io import impure_safe
from returns.result import Result

from container_models.scan_configuration import ScanConfiguration
from utils.logger import log_railway_function

from .data import encode_float_data, encode_int_data
from .data_types import FloatSamples, IntSamples, SdfArtifact, TrailerEntries
from .exceptions import SdfValidationError
from .settings import get_settings
from .trailer import attach_trailer, build_trailer

DEFAULT_EXTENSION: Final[str] = ".sdf"


def render_sdf(
    samples: FloatSamples | IntSamples | None,
    config: ScanConfiguration,
    trailer_entries: TrailerEntries | None = None,
    *,
    with_trailer: bool = False,
    integer: bool = False,
    decimals: int | None = None,
) -> Result[SdfArtifact, SdfValidationError]:
    """
    Render a complete surface data file in one go.

    A trailer is appended when `trailer_entries` are given or `with_trailer` is set.

    :param samples: Height values in meters, or in micrometers when `integer` is set.
    :param config: The scan configuration.
    :param trailer_entries: Optional key/value annotations for Record 3.
    :param with_trailer: Append a trailer even without entries.
    :param integer: Encode the samples as integer micrometers.
    :param decimals: Number of decimals of floating point heights.
    :returns: Success with the artifact, or Failure with the validation error.
    """
    main_section = (
        encode_int_data(samples, config)
        if integer
        else encode_float_data(samples, config, decimals)
    )
    if trailer_entries is None and not with_trailer:
        return main_section
    return main_section.map(
        partial(attach_trailer, trailer=build_trailer(trailer_entries, config))
    )


def get_file_content(result: Result[SdfArtifact, SdfValidationError]) -> str:
    """Return the rendered file, or an empty string if it could not be rendered."""
    return result.map(attrgetter("content")).value_or("")


@log_railway_function(
    "Failed to write SDF file",
    "Successfully written SDF file",
)
@impure_safe
def save_sdf(
    artifact: SdfArtifact,
    output_path: Path | str,
    force_default_extension: bool | None = None,
) -> Path:
    """Save a rendered surface data file to disk.

    Args:
        artifact: The rendered file
        output_path: Where to save the file
        force_default_extension: Replace the extension by ".sdf", defaults to the setting

    Returns:
        IOResult[Path, Exception]: IOSuccess(Path) on success, IOFailure(Exception) on error
    """
    output_path = Path(output_path)
    if force_default_extension is None:
        force_default_extension = get_settings().force_default_extension
    if force_default_extension:
        output_path = output_path.with_suffix(DEFAULT_EXTENSION)
    output_path.write_text(artifact.content, encoding="utf-8", newline="")
    return output_path
