import itertools
import json

import pytest

from meterview.core.channels import ALL_CHANNELS, Channel, ChannelBundle
from meterview.trace.decoder import decode_meter_values
from meterview.trace.extractor import channel_for, extract_channels
from meterview.trace.models import Measurand, Phase

from conftest import meter_values, sampled


def extract(*values):
    return extract_channels(decode_meter_values(json.dumps(meter_values(*values))))


def test_channel_table():
    assert channel_for(Measurand.CURRENT_IMPORT, Phase.L1) is Channel.CURRENT_IMPORT_L1
    assert channel_for(Measurand.CURRENT_IMPORT, Phase.L2) is Channel.CURRENT_IMPORT_L2
    assert channel_for(Measurand.CURRENT_IMPORT, Phase.L3) is None
    assert channel_for(Measurand.CURRENT_IMPORT, None) is None
    assert channel_for(Measurand.CURRENT_OFFERED, None) is Channel.CURRENT_OFFERED
    assert channel_for(Measurand.CURRENT_OFFERED, Phase.L3) is Channel.CURRENT_OFFERED
    assert channel_for(Measurand.POWER_OFFERED, Phase.OTHER) is Channel.POWER_OFFERED
    assert channel_for(Measurand.POWER_ACTIVE_IMPORT, Phase.L3) is Channel.POWER_ACTIVE_IMPORT_L3
    assert channel_for(Measurand.POWER_ACTIVE_IMPORT, None) is None
    assert channel_for(Measurand.VOLTAGE, Phase.L2) is Channel.VOLTAGE_L2
    assert channel_for(Measurand.VOLTAGE, Phase.OTHER) is None
    assert channel_for(Measurand.OTHER, Phase.L1) is None
    assert channel_for(None, Phase.L1) is None


def test_every_measurand_is_handled():
    for measurand, phase in itertools.product(list(Measurand) + [None], list(Phase) + [None]):
        channel_for(measurand, phase)


def test_voltage_example():
    bundle = extract(sampled("10.5", "Voltage", "L1"))
    channels = bundle.to_dict()
    assert channels["voltage/L1"] == 10.5
    for name, value in channels.items():
        if name != "voltage/L1":
            assert value == 0.0
    assert channels["power/active/import/sum"] == 0.0


def test_all_channels_present_in_order():
    bundle = extract()
    assert list(bundle.to_dict()) == [c.value for c in ALL_CHANNELS]
    assert len(bundle.to_dict()) == 11


def test_unparsable_value_defaults_to_zero():
    bundle = extract(
        sampled("abc", "Voltage", "L1"),
        sampled("230", "Voltage", "L2"),
    )
    assert bundle.voltage_l1 == 0.0
    assert bundle.voltage_l2 == 230.0


@pytest.mark.parametrize("raw", ["1_000", " 5 ", "5 ", "\t5", "", "0x10", "1,5", "--1"])
def test_loose_number_spellings_default_to_zero(raw):
    assert extract(sampled(raw, "Voltage", "L1")).voltage_l1 == 0.0


@pytest.mark.parametrize("raw, expected", [
    ("230", 230.0),
    ("-1.5", -1.5),
    ("+2", 2.0),
    (".5", 0.5),
    ("7.", 7.0),
    ("1e3", 1000.0),
    ("2.5E-1", 0.25),
])
def test_decimal_and_exponent_spellings(raw, expected):
    assert extract(sampled(raw, "Voltage", "L1")).voltage_l1 == expected


def test_numeric_json_values_are_accepted():
    bundle = extract(sampled(16, "Current.Offered"))
    assert bundle.current_offered == 16.0


def test_last_write_wins():
    bundle = extract(
        sampled("1.0", "Current.Import", "L1"),
        sampled("2.0", "Current.Import", "L1"),
    )
    assert bundle.current_import_l1 == 2.0


def test_last_write_wins_across_meter_values():
    payload = {"meterValue": [
        {"timestamp": "2024-01-01T12:00:00Z", "sampledValue": [sampled("7", "Power.Offered")]},
        {"timestamp": "2024-01-01T12:00:10Z", "sampledValue": [sampled("9", "Power.Offered")]},
    ]}
    bundle = extract_channels(decode_meter_values(json.dumps(payload)))
    assert bundle.power_offered == 9.0


@pytest.mark.parametrize("present", list(itertools.product([True, False], repeat=3)))
def test_sum_of_active_import_phases(present):
    phase_values = {"L1": 1000.5, "L2": 2000.25, "L3": 3000.125}
    values = [
        sampled(str(phase_values[phase]), "Power.Active.Import", phase)
        for phase, is_present in zip(("L1", "L2", "L3"), present) if is_present
    ]
    bundle = extract(*values)
    expected = sum(
        phase_values[phase] for phase, is_present in zip(("L1", "L2", "L3"), present) if is_present
    )
    assert bundle.power_active_import_sum == expected
    assert bundle.to_dict()["power/active/import/sum"] == (
        bundle.power_active_import_l1 + bundle.power_active_import_l2 + bundle.power_active_import_l3
    )


def test_ignored_sampled_values():
    bundle = extract(
        sampled("5000", "Energy.Active.Import.Register"),
        sampled("16", "Current.Import"),
        sampled("16", "Current.Import", "L3"),
        sampled("230", "Voltage"),
        sampled("1000", "Power.Active.Import"),
        sampled("80", "SoC"),
    )
    assert bundle == ChannelBundle()


def test_extraction_is_idempotent():
    message = decode_meter_values(json.dumps(meter_values(
        sampled("230", "Voltage", "L1"),
        sampled("16", "Current.Import", "L1"),
        sampled("3680", "Power.Active.Import", "L1"),
    )))
    assert extract_channels(message) == extract_channels(message)


def test_sum_channel_is_read_only():
    with pytest.raises(ValueError):
        ChannelBundle().set(Channel.POWER_ACTIVE_IMPORT_SUM, 1.0)
