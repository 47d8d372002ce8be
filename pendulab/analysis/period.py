"""Measured oscillation period from ascending zero-crossings of the angle."""

from typing import Any, Dict, Optional

from pendulab.core.component import SimComponent
from pendulab.core.state import PeriodMeasurement


class PeriodEstimator(SimComponent):
    """
    Measures the period from the simulated trajectory alone.

    Only ascending crossings (angle goes from < 0 to >= 0) are counted,
    one per cycle. The crossing instant is placed inside the step by linear
    interpolation. The first crossing fixes the reference time t0; each
    later crossing reports the average period over all cycles since t0,
    which smooths interpolation noise but reacts slowly to parameter edits.
    """

    def __init__(self) -> None:
        self._measurement = PeriodMeasurement()

    @property
    def measurement(self) -> PeriodMeasurement:
        return self._measurement

    @property
    def period(self) -> Optional[float]:
        """Running average period, None until two crossings have been seen."""
        return self._measurement.period

    def reset(self) -> None:
        self._measurement = PeriodMeasurement()

    def step(
        self,
        *,
        angle_before: float,
        angle_after: float,
        elapsed_time: float,
        dt: float,
    ) -> Optional[float]:
        """
        Feed one integration step.

        Args:
            angle_before: angle at the start of the step
            angle_after: angle at the end of the step
            elapsed_time: simulation time at the start of the step
            dt: step size

        Returns:
            The updated period if this step completed a cycle, else None.
        """
        if not (angle_after >= 0 and angle_before < 0):
            return None
        m = self._measurement
        crossing_time = elapsed_time + dt * angle_before / (angle_before - angle_after)
        period = None
        if m.crossing_count == 0:
            m.first_crossing_time = crossing_time
        else:
            period = (crossing_time - m.first_crossing_time) / m.crossing_count
            m.last_measured_period = period
        m.crossing_count += 1
        return period

    def state_dict(self) -> Dict[str, Any]:
        m = self._measurement
        return {
            "crossing_count": m.crossing_count,
            "first_crossing_time": m.first_crossing_time,
            "last_measured_period": m.last_measured_period,
        }
