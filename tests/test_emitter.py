import logging
from datetime import datetime, timezone

import numpy as np
import pytest

from meterview.core.channels import ALL_CHANNELS, Channel, ChannelBundle
from meterview.emit import BufferEmitter, ChannelBuffers, LoggingEmitter, MultiEmitter

from conftest import RecordingEmitter

T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def bundle(**values):
    b = ChannelBundle()
    for name, value in values.items():
        setattr(b, name, value)
    return b


def test_emit_writes_every_channel_in_order():
    recorder = RecordingEmitter()
    recorder.emit(T0, bundle(voltage_l1=230.0))
    assert recorder.calls[0] == ("begin", T0)
    assert [call[1] for call in recorder.calls[1:]] == [c.value for c in ALL_CHANNELS]


def test_buffer_emitter_collects_records(buffer_emitter):
    buffer_emitter.emit(T0, bundle(voltage_l1=230.0, power_active_import_l1=1000.0))
    buffer_emitter.emit(T0, bundle(voltage_l1=231.0, power_active_import_l2=500.0))

    buffers = buffer_emitter.buffers
    assert len(buffers) == 2
    assert buffers.timestamps == [T0.timestamp(), T0.timestamp()]
    assert buffers.get_channel(Channel.VOLTAGE_L1) == [230.0, 231.0]
    assert buffers.get_channel("power/active/import/sum") == [1000.0, 500.0]


def test_write_before_begin_is_an_error(buffer_emitter):
    with pytest.raises(RuntimeError):
        buffer_emitter.write_channel("voltage/L1", 1.0)


def test_multi_emitter_fans_out(buffer_emitter):
    recorder = RecordingEmitter()
    MultiEmitter(recorder, buffer_emitter).emit(T0, bundle(current_offered=32.0))
    assert len(buffer_emitter.buffers) == 1
    assert recorder.records[0][1]["current/offered"] == 32.0


def test_logging_emitter(caplog):
    with caplog.at_level(logging.INFO, logger="meterview.emit.emitter"):
        LoggingEmitter().emit(T0, bundle(voltage_l2=229.5))
    assert "2024-01-01T12:00:00+00:00 voltage/L2=229.5" in caplog.text
    assert len(caplog.records) == len(ALL_CHANNELS)


def test_buffers_missing_channels_default_to_zero():
    buffers = ChannelBuffers()
    buffers.append(1.0, {"voltage/L1": 230.0})
    assert buffers.get_channel(Channel.VOLTAGE_L2) == [0.0]


def test_buffers_derive_sum_channel():
    buffers = ChannelBuffers()
    buffers.append(1.0, {
        "power/active/import/L1": 1000.0,
        "power/active/import/L2": 500.0,
        "power/active/import/L3": 250.0,
    })
    buffers.append(2.0, {"power/active/import/L2": 400.0})
    assert buffers.get_channel(Channel.POWER_ACTIVE_IMPORT_SUM) == [1750.0, 400.0]


def test_buffers_accept_matching_sum():
    buffers = ChannelBuffers()
    buffers.append(1.0, {"power/active/import/L1": 100.0, "power/active/import/sum": 100.0})
    assert buffers.get_channel(Channel.POWER_ACTIVE_IMPORT_SUM) == [100.0]


def test_buffers_reject_inconsistent_sum():
    buffers = ChannelBuffers()
    with pytest.raises(ValueError, match="power/active/import/sum"):
        buffers.append(1.0, {"power/active/import/L1": 100.0, "power/active/import/sum": 5.0})
    assert buffers.is_empty


def test_buffers_reject_unknown_channels():
    with pytest.raises(ValueError, match="bogus"):
        ChannelBuffers().append(1.0, {"bogus": 1.0})


def test_buffers_arrays_and_clear():
    buffers = ChannelBuffers()
    assert buffers.is_empty
    assert buffers.get_time_range() == (0.0, 0.0)

    buffers.append(10.0, {"voltage/L1": 1.0})
    buffers.append(20.0, {"voltage/L1": 2.0})
    ts, values = buffers.get_arrays()
    np.testing.assert_array_equal(ts, [10.0, 20.0])
    np.testing.assert_array_equal(values[Channel.VOLTAGE_L1], [1.0, 2.0])
    assert buffers.get_time_range() == (10.0, 20.0)

    buffers.append(30.0, {"voltage/L1": 3.0})
    ts, values = buffers.get_arrays()
    assert len(ts) == 3

    buffers.clear()
    assert len(buffers) == 0
    ts, values = buffers.get_arrays()
    assert len(ts) == 0
