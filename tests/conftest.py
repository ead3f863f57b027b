import datetime as dt
import logging
import math

import pytest
from loguru import logger

from container_models.scan_configuration import Dialect, ScanConfiguration
from sdf.settings import get_settings


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make sure every test reads the settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def config() -> ScanConfiguration:
    """A 2 x 2 scan in the legacy dialect."""
    return ScanConfiguration(
        manufacturer_id="NFI",
        creation_date=dt.datetime(2017, 3, 9, 14, 5),
        modification_date=dt.datetime(2020, 11, 23, 8, 30),
        points_per_profile=2,
        number_of_profiles=2,
        scale_x=1e-6,
        scale_y=1e-6,
    )


@pytest.fixture
def iso_config(config: ScanConfiguration) -> ScanConfiguration:
    return config.model_copy(update={"dialect": Dialect.ISO})


@pytest.fixture
def relaxed_config(config: ScanConfiguration) -> ScanConfiguration:
    return config.model_copy(update={"relaxed": True})


@pytest.fixture
def float_samples() -> list[float]:
    return [0.0, math.nan, 2e-6, 3e-6]
