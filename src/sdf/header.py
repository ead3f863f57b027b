"""Record 1: the file header."""

from typing import Final

from loguru import logger
from returns.result import safe

from container_models.scan_configuration import ScanConfiguration

from .data_types import ZDataType
from .encoding import escape, format_date, format_scale, header_line, render_section
from .exceptions import DimensionLimitError, SdfValidationError

MAX_MANUFACTURER_ID_LENGTH: Final[int] = 10

# fixed entries, ISO 25178-71 clauses 5.2.7 to 5.2.11; z is always stored in micrometers
Z_SCALE: Final[str] = "1E-06"
Z_RESOLUTION: Final[int] = -1
COMPRESSION: Final[int] = 0
CHECK_TYPE: Final[int] = 0


def _manufacturer_id(config: ScanConfiguration) -> str:
    if config.relaxed:
        return config.manufacturer_id
    if len(config.manufacturer_id) > MAX_MANUFACTURER_ID_LENGTH:
        logger.warning(
            f"Manufacturer id '{config.manufacturer_id}' is longer than "
            f"{MAX_MANUFACTURER_ID_LENGTH} characters"
        )
    return escape(config.manufacturer_id)


def header_lines(config: ScanConfiguration, z_data_type: ZDataType) -> list[str]:
    """
    Render the lines of Record 1, without the section delimiter.

    :param config: A configuration that passed validation.
    :param z_data_type: The data type of the height values.
    :returns: The 13 header lines.
    """
    return [
        config.dialect.signature,
        header_line("ManufacID", _manufacturer_id(config)),
        header_line("CreateDate", format_date(config.creation_date)),
        header_line("ModDate", format_date(config.modification_date)),
        header_line("NumPoints", config.points_per_profile),
        header_line("NumProfiles", config.number_of_profiles),
        header_line("Xscale", format_scale(config.scale_x)),
        header_line("Yscale", format_scale(config.scale_y)),
        header_line("Zscale", Z_SCALE),
        header_line("Zresolution", Z_RESOLUTION),
        header_line("Compression", COMPRESSION),
        header_line("DataType", z_data_type.value),
        header_line("CheckType", CHECK_TYPE),
    ]


@safe(exceptions=(SdfValidationError,))
def build_header(config: ScanConfiguration, z_data_type: ZDataType) -> str:
    """
    Render Record 1 of a surface data file.

    Single profile scans are written with a profile spacing of zero. Unless the
    configuration is relaxed, scans with more than 65535 points per profile or
    profiles are rejected.

    :param config: The scan configuration.
    :param z_data_type: The data type of the height values.
    :returns: Success with the header text, or Failure with a `DimensionLimitError`.
    """
    config = config.normalized()
    if config.exceeds_field_limit and not config.relaxed:
        raise DimensionLimitError(
            f"Scan of {config.points_per_profile} x {config.number_of_profiles} "
            f"points exceeds the 16-bit limits of the {config.dialect} header"
        )
    return render_section(header_lines(config, z_data_type))
