from collections.abc import Mapping, Sequence
from enum import IntEnum, StrEnum

import numpy as np
from numpy.typing import NDArray

from container_models.base import FrozenBaseModel

type FloatSamples = Sequence[float] | NDArray[np.floating]
type IntSamples = Sequence[int] | NDArray[np.integer]
type TrailerEntries = Mapping[str, str]


class ZDataType(IntEnum):
    """Allowed data types of the height values, ISO 25178-71 clause 5.2.10."""

    INT16 = 5  # defined by the format, not written by any encoder
    INT32 = 6
    DOUBLE = 7


class MissingTrailer(StrEnum):
    """What to render when a trailer is prepared without any entries."""

    DELIMITER_ONLY = "delimiter_only"
    OMIT = "omit"


class SdfArtifact(FrozenBaseModel):
    """
    A rendered surface data file.

    Holds the text of Record 1 (header), Record 2 (data) and the optional
    Record 3 (trailer). Every section ends with its own delimiter line.
    """

    header: str
    data: str
    trailer: str | None = None
    z_data_type: ZDataType

    @property
    def content(self) -> str:
        """The complete file content."""
        return self.header + self.data + (self.trailer or "")
