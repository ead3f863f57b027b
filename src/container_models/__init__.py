from .base import ConfigBaseModel, FrozenBaseModel
from .scan_configuration import Dialect, ScanConfiguration

__all__ = (
    "ConfigBaseModel",
    "Dialect",
    "FrozenBaseModel",
    "ScanConfiguration",
)
