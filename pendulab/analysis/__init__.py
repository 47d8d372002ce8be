"""Analysis of the simulated trajectory."""

from pendulab.analysis.period import PeriodEstimator

__all__ = ["PeriodEstimator"]
