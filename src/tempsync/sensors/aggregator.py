"""Reduce all temperature sensors of the host to a single value."""

import logging
import math
from collections.abc import Iterator

from tempsync.models import Reading

from .protocols import FeatureKind, SensorBackend

logger = logging.getLogger(__name__)

# Aggregate reported when no sensor produced a reading
NO_DATA = 0.0


class TemperatureAggregator:
    """
    Scan every chip of a sensor backend and keep the hottest reading.

    Only features of kind TEMPERATURE are considered, and within them only
    sub-features that decode as a temperature input (thresholds such as
    max/crit are ignored). Any chip, feature or sub-feature that fails is
    skipped and the scan carries on, so `sample()` never raises.
    """

    def __init__(self, backend: SensorBackend):
        self.backend = backend

    def readings(self) -> Iterator[Reading]:
        """Yield every valid temperature-input reading of this poll."""
        try:
            chips = list(self.backend.chips())
        except Exception as e:
            logger.debug(f"Couldn't enumerate chips of {self.backend.name}: {e}")
            return

        for chip in chips:
            try:
                features = list(chip.features())
            except Exception as e:
                logger.debug(f"Skipping chip {chip.name}: {e}")
                continue

            for feature in features:
                if feature.kind is not FeatureKind.TEMPERATURE:
                    continue
                yield from self._feature_readings(chip.name, feature)

    def _feature_readings(self, chip_name: str, feature) -> Iterator[Reading]:
        try:
            sub_features = list(feature.sub_features())
        except Exception as e:
            logger.debug(f"Skipping feature {chip_name}/{feature.name}: {e}")
            return

        for sub_feature in sub_features:
            try:
                typed = sub_feature.read()
            except Exception as e:
                logger.debug(f"Unreadable {chip_name}/{sub_feature.name}: {e}")
                continue

            if not typed.is_temperature_input:
                continue
            # NaN and infinities are sensor faults
            if not math.isfinite(typed.value):
                logger.debug(f"Discarding non-finite {chip_name}/{sub_feature.name}: {typed.value}")
                continue

            yield Reading(chip=chip_name, feature=feature.name, value=typed.value)

    def sample(self) -> float:
        """Return the hottest temperature of this poll, or NO_DATA."""
        hottest = NO_DATA
        seen = False
        for reading in self.readings():
            if not seen or reading.value > hottest:
                hottest = reading.value
                seen = True
        return hottest
