"""
Writers for surface data files according to ISO 25178-71 and the legacy BCR format.

A surface data file consists of three records, each terminated by a line holding
a single "*":

1. **Record 1** (header): scan dimensions, spacings, dates and the data type
2. **Record 2** (data): one height value per line, in micrometers
3. **Record 3** (trailer, optional): free-form key/value annotations

Railway Integration
-------------------
The encoders return Result containers instead of raising. A Failure holds an
`SdfValidationError` whose `kind` names the reason (missing data, length
mismatch, oversized dimensions). `save_sdf` returns an IOResult.

Notes
-----
- Floating point heights are expected in meters (m), integer heights in micrometers (um)
- Single profile scans are always written with a profile spacing of zero
- Unless relaxed, reserved characters in free text are escaped
"""

from .data import encode_float_data, encode_int_data
from .data_types import MissingTrailer, SdfArtifact, ZDataType
from .encoding import escape
from .exceptions import (
    DimensionLimitError,
    LengthMismatchError,
    MissingDataError,
    SdfValidationError,
    ValidationFailure,
)
from .header import build_header
from .trailer import attach_trailer, build_trailer
from .writer import get_file_content, render_sdf, save_sdf

__all__ = (
    "attach_trailer",
    "build_header",
    "build_trailer",
    "DimensionLimitError",
    "encode_float_data",
    "encode_int_data",
    "escape",
    "get_file_content",
    "LengthMismatchError",
    "MissingDataError",
    "MissingTrailer",
    "render_sdf",
    "save_sdf",
    "SdfArtifact",
    "SdfValidationError",
    "ValidationFailure",
    "ZDataType",
)
