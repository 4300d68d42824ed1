"""Use case for turning holiday layers into wheel activities."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Tuple

from yearwheel.domain.entities import Activity, Layer
from yearwheel.domain.holidays import norwegian_holidays, public_holidays_to_activities
from yearwheel.domain.ports import HolidayPort
from yearwheel.domain.time_axis import as_date

log = logging.getLogger(__name__)

STATIC_FALLBACK_COUNTRY = "NO"


@dataclass
class LoadHolidayActivities:
    """Fetch public holidays for every holiday layer and map them to activities."""

    holiday_port: HolidayPort

    def __call__(self, layers: Iterable[Layer], today: date) -> Tuple[Activity, ...]:
        """Load holidays for ``today``'s year and the next one.

        Args:
            layers: Layers of the current snapshot; only ``holidays`` layers
                with a country code are considered.
            today: Reference date choosing which years to load.

        Returns:
            Tuple of holiday activities, grouped by layer in input order.

        Side Effects:
            Network I/O through ``holiday_port``.

        Usage:
            A failing feed never blocks rendering. Norway falls back to the
            static calendar; other countries are skipped with a warning.
        """
        year = as_date(today).year
        years = (year, year + 1)
        activities: List[Activity] = []
        for layer in layers:
            if not layer.is_holiday_layer:
                continue
            country = layer.holiday_country_code or ""
            try:
                for target_year in years:
                    holidays = self.holiday_port.fetch_public_holidays(country, target_year)
                    activities.extend(public_holidays_to_activities(holidays, layer.id, layer.color))
            except Exception as exc:
                if country == STATIC_FALLBACK_COUNTRY:
                    log.warning("Holiday feed failed for %s (%s); using static calendar.", country, exc)
                    activities = [item for item in activities if item.layer_id != layer.id]
                    for target_year in years:
                        activities.extend(
                            public_holidays_to_activities(
                                norwegian_holidays(target_year), layer.id, layer.color
                            )
                        )
                else:
                    log.warning("Holiday feed failed for %s (%s); skipping layer %s.", country, exc, layer.id)
                    activities = [item for item in activities if item.layer_id != layer.id]
        return tuple(activities)


__all__ = ["LoadHolidayActivities"]
