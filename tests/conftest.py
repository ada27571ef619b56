import json

import pytest

from meterview.emit import BufferEmitter, ChannelBuffers, ChannelEmitter


def make_line(payload, date="2024-01-01", time="12:00:00"):
    """Build a 10-field trace line around a payload (dict or raw string)."""
    if not isinstance(payload, str):
        payload = json.dumps(payload, separators=(",", ":"))
    return " ".join([date, time, "X", "X", "X", "X", "X", "X", "X", payload])


def sampled(value, measurand=None, phase=None, **extra):
    sv = {"value": value}
    if measurand is not None:
        sv["measurand"] = measurand
    if phase is not None:
        sv["phase"] = phase
    sv.update(extra)
    return sv


def meter_values(*sampled_values, timestamp="2024-01-01T12:00:00Z", **extra):
    payload = {"meterValue": [{"timestamp": timestamp, "sampledValue": list(sampled_values)}]}
    payload.update(extra)
    return payload


class RecordingEmitter(ChannelEmitter):
    """Keeps every call for assertions."""

    def __init__(self):
        self.calls = []

    def begin_record(self, timestamp):
        self.calls.append(("begin", timestamp))

    def write_channel(self, name, value):
        self.calls.append(("write", name, value))

    @property
    def records(self):
        """[(timestamp, {name: value}), ...]"""
        out = []
        for call in self.calls:
            if call[0] == "begin":
                out.append((call[1], {}))
            else:
                out[-1][1][call[1]] = call[2]
        return out


@pytest.fixture
def recorder():
    return RecordingEmitter()


@pytest.fixture
def buffer_emitter():
    return BufferEmitter(ChannelBuffers())
