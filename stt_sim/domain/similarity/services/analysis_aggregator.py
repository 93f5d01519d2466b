"""
Domain Service: Analysis Aggregator

Reduces any named-metric map to its extremes, mean and variance.
"""

from typing import Mapping

from ..entities import AnalysisSummary, MetricExtremum, round_metric


class AnalysisAggregator:
    """
    Pure reducer over a metric map.

    Ties for highest/lowest go to the lexicographically smallest metric
    name, so the result does not depend on map iteration order.
    """

    def analyze(self, similarities: Mapping[str, float]) -> AnalysisSummary:
        """
        Summarize a metric map.

        Returns:
            AnalysisSummary; all fields None for an empty map
        """
        if not similarities:
            return AnalysisSummary()

        items = sorted(similarities.items())
        highest_name, highest_value = max(items, key=lambda item: item[1])
        lowest_name, lowest_value = min(items, key=lambda item: item[1])

        values = [value for _, value in items]
        average = sum(values) / len(values)
        variance = sum((value - average) ** 2 for value in values) / len(values)

        return AnalysisSummary(
            highest=MetricExtremum(method=highest_name, value=highest_value),
            lowest=MetricExtremum(method=lowest_name, value=lowest_value),
            average=average,
            variance=round_metric(variance),
        )
