"""
Data aggregation module.

Groups time series points by UTC calendar day and reduces them.
"""

import logging
import statistics
from typing import Dict, List, Optional, Sequence

from ..core.date_utils import DateUtils
from ..core.exceptions import MalformedResponseError
from ..models import TimeSeriesPoint, DailyAggregate


class DailyAggregator:
    """Calculate daily aggregates from time series points."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize daily aggregator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def modal_value(values: Sequence[float]) -> Optional[float]:
        """
        Most frequent value; ties go to the value seen first.

        Returns:
            The mode, or None for an empty sequence
        """
        counts: Dict[float, int] = {}
        for value in values:
            counts[value] = counts.get(value, 0) + 1
        if not counts:
            return None
        # dicts keep first-seen order and max() keeps the first maximum
        return max(counts, key=lambda v: counts[v])

    def aggregate_by_day(
        self,
        points: Sequence[TimeSeriesPoint],
        field: str,
        category_field: Optional[str] = None
    ) -> List[DailyAggregate]:
        """
        Group points by the UTC date of their timestamp and reduce each day.

        Null values are left out of min/max/mean. A day where every value is
        null is omitted. The result is not truncated.

        Args:
            points: Time series points (any order)
            field: Field to reduce (lowercase parameter name)
            category_field: Optional categorical field (e.g. weather symbol) for the mode

        Returns:
            One DailyAggregate per date with data, ascending by date
        """
        field = field.lower()
        category_field = category_field.lower() if category_field else None

        day_values: Dict[str, List[float]] = {}
        day_categories: Dict[str, List[float]] = {}

        ordered = sorted(points, key=lambda p: p.timestamp_millis)
        for point in ordered:
            date_key = DateUtils.utc_date_key(point.time)
            day_values.setdefault(date_key, [])
            day_categories.setdefault(date_key, [])

            value = point.get(field)
            if value is not None:
                day_values[date_key].append(value)

            if category_field:
                category = point.get(category_field)
                if category is not None:
                    day_categories[date_key].append(category)

        aggregates = []
        for date_key in sorted(day_values):
            values = day_values[date_key]
            if not values:
                self.logger.debug(f"No valid '{field}' values on {date_key}; skipping day")
                continue

            aggregates.append(DailyAggregate(
                date=date_key,
                min=min(values),
                max=max(values),
                mean=statistics.mean(values),
                count=len(values),
                modal_category=self.modal_value(day_categories[date_key]) if category_field else None
            ))

        self.logger.info(f"Aggregated '{field}' into {len(aggregates)} days")
        return aggregates

    def daily_mean(self, points: Sequence[TimeSeriesPoint], field: str) -> float:
        """
        Mean of all non-null values of a field.

        Raises:
            MalformedResponseError: If there is no valid value
        """
        values = [p.get(field.lower()) for p in points]
        valid = [v for v in values if v is not None]
        if not valid:
            raise MalformedResponseError(f"No valid '{field}' values available")
        return statistics.mean(valid)
