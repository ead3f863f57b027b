import datetime as dt
from enum import StrEnum
from typing import Final

from pydantic import Field

from .base import ConfigBaseModel

# NumPoints and NumProfiles are historically stored as unsigned 16-bit fields
MAX_FIELD_VALUE: Final[int] = 65535


class Dialect(StrEnum):
    """Textual variant of the surface data file."""

    BCR = "BCR"
    ISO = "ISO"

    @property
    def signature(self) -> str:
        """The first line of Record 1."""
        return f"a{self.value}-1.0"


def _utc_now() -> dt.datetime:
    return dt.datetime.now(tz=dt.UTC)


class ScanConfiguration(ConfigBaseModel):
    """
    Metadata of a single areal (or profile) scan, used to render Record 1.

    Spacings are expressed in meters (m). The configuration is set by the caller
    before encoding and is never mutated by the writer; values derived from it
    (e.g. a zero profile spacing for single profiles) are computed on a copy.
    """

    dialect: Dialect = Field(
        default=Dialect.BCR, description="legacy BCR or ISO 25178-71 dialect"
    )
    relaxed: bool = Field(
        default=False,
        description="lift the 16-bit dimension limit, allow long manufacturer ids "
        "and write NaN instead of BAD",
    )
    manufacturer_id: str = Field(default="", description="instrument identifier")
    creation_date: dt.datetime = Field(..., description="the scan's creation date")
    modification_date: dt.datetime = Field(
        default_factory=_utc_now, description="the scan's modification date"
    )
    points_per_profile: int = Field(..., gt=0, description="number of points per profile")
    number_of_profiles: int = Field(..., gt=0, description="number of profiles")
    scale_x: float = Field(..., gt=0.0, description="point spacing in meters (m)")
    scale_y: float = Field(..., ge=0.0, description="profile spacing in meters (m)")

    @property
    def expected_sample_count(self) -> int:
        """The number of height values a data array for this scan must hold."""
        return self.points_per_profile * self.number_of_profiles

    @property
    def is_single_profile(self) -> bool:
        return self.number_of_profiles == 1

    @property
    def exceeds_field_limit(self) -> bool:
        """Whether a dimension does not fit in the format's 16-bit header fields."""
        return (
            self.points_per_profile > MAX_FIELD_VALUE
            or self.number_of_profiles > MAX_FIELD_VALUE
        )

    def normalized(self) -> "ScanConfiguration":
        """Return a copy with the profile spacing forced to zero for single profiles."""
        if self.is_single_profile and self.scale_y != 0.0:
            return self.model_copy(update={"scale_y": 0.0})
        return self
