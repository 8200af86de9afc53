import random

import pytest

from labkit.sensors import DistanceSensor, PressureSensor, Sensor, TemperatureSensor


@pytest.mark.parametrize(
    "cls, low, high",
    [
        (TemperatureSensor, 20.0, 40.0),
        (DistanceSensor, 0.0, 100.0),
        (PressureSensor, 950.0, 1050.0),
    ],
)
def test_readings_stay_in_range(cls, low, high):
    sensor = cls("S1", random.Random(42))
    for _ in range(200):
        reading = sensor.read()
        assert low <= reading < high


def test_five_readings_from_each_sensor():
    temp = TemperatureSensor("TempSensor1")
    dist = DistanceSensor("DistSensor1")
    pres = PressureSensor("PressureSensor1")
    for _ in range(5):
        assert 20.0 <= temp.read() < 40.0
        assert 0.0 <= dist.read() < 100.0
        assert 950.0 <= pres.read() < 1050.0


def test_sensor_id_is_kept():
    assert TemperatureSensor("TempSensor1").sensor_id == "TempSensor1"
    assert PressureSensor("PressureSensor1").sensor_id == "PressureSensor1"


def test_last_reading_starts_at_zero():
    assert DistanceSensor("d").last_reading == 0.0


def test_last_reading_tracks_read():
    sensor = TemperatureSensor("t", random.Random(1))
    first = sensor.read()
    assert sensor.last_reading == first
    second = sensor.read()
    assert sensor.last_reading == second


def test_same_seed_gives_same_sequence():
    a = PressureSensor("a", random.Random(7))
    b = PressureSensor("b", random.Random(7))
    assert [a.read() for _ in range(10)] == [b.read() for _ in range(10)]


def test_readings_vary():
    sensor = DistanceSensor("d", random.Random(3))
    readings = {sensor.read() for _ in range(20)}
    assert len(readings) > 1


def test_base_sensor_is_abstract():
    with pytest.raises(TypeError):
        Sensor("x")


def test_sensor_id_is_read_only():
    sensor = TemperatureSensor("t")
    with pytest.raises(AttributeError):
        sensor.sensor_id = "other"
    assert sensor.sensor_id == "t"