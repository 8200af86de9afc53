"""A registry of sensors keyed by their identifiers."""

from __future__ import annotations

from labkit.sensors import Sensor


class SensorManager:
    """Holds sensors by identifier; iteration is in identifier order."""

    def __init__(self) -> None:
        self._sensors: dict[str, Sensor] = {}

    def add_sensor(self, sensor: Sensor) -> bool:
        """Register ``sensor``; return False if its identifier is already taken."""
        if sensor.sensor_id in self._sensors:
            return False
        self._sensors[sensor.sensor_id] = sensor
        return True

    def remove_sensor(self, sensor_id: str) -> bool:
        """Remove the sensor with ``sensor_id``; return whether one was removed."""
        return self._sensors.pop(sensor_id, None) is not None

    def get_sensor(self, sensor_id: str) -> Sensor | None:
        """Return the sensor with ``sensor_id``, or None if there is none."""
        return self._sensors.get(sensor_id)

    def sensors(self) -> list[Sensor]:
        """Return every registered sensor, ordered by identifier."""
        return [self._sensors[key] for key in sorted(self._sensors)]

    def read_sensors(self) -> dict[str, float]:
        """Read every sensor and return the readings keyed by identifier."""
        return {key: self._sensors[key].read() for key in sorted(self._sensors)}

    def __len__(self) -> int:
        return len(self._sensors)

    def __contains__(self, sensor_id: object) -> bool:
        return sensor_id in self._sensors