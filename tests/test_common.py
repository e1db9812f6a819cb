# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import pytest

from cmm_module.classes import ReadingParseError
from cmm_module.classes.snmp import SnmpValue
from cmm_module.common import (
    parse_health_code,
    parse_temperature,
    parse_fan_speed,
    parse_installed,
    parse_power_module_state,
    parse_string,
    fahrenheit_to_celsius,
    HEALTH_CRITICAL,
    HEALTH_SYSTEM_LEVEL_ERROR,
    HEALTH_OK,
    PM_STATE_UNKNOWN,
    PM_STATE_GOOD,
    PM_STATE_WARNING,
    PM_STATE_NOT_AVAILABLE,
)


class TestHealthCode:

    @pytest.mark.parametrize("raw_value, expected", [
        (0, HEALTH_CRITICAL),
        (255, HEALTH_OK),
        (4, HEALTH_SYSTEM_LEVEL_ERROR),
    ])
    def test_known_codes(self, raw_value, expected):
        assert parse_health_code(SnmpValue("INTEGER", raw_value)) == expected

    def test_code_2_resolves_to_system_level_error(self):
        # documented as "nonCritical", effective behaviour is system level error
        assert parse_health_code(SnmpValue("INTEGER", 2)) == HEALTH_SYSTEM_LEVEL_ERROR

    @pytest.mark.parametrize("raw_value", [1, 3, 254, -1])
    def test_unknown_code_is_a_query_failure(self, raw_value):
        with pytest.raises(ReadingParseError, match="unknown value"):
            parse_health_code(SnmpValue("INTEGER", raw_value))

    def test_string_value_is_rejected(self):
        with pytest.raises(ReadingParseError):
            parse_health_code(SnmpValue("STRING", "255"))


class TestTemperature:

    @pytest.mark.parametrize("raw_value, expected", [
        ("22.50 Centigrade", 22.5),
        ('"22.50 Centigrade"', 22.5),
        ("25 Centigrade", 25.0),
        ("-3.25 Centigrade", -3.25),
        ("98.60 Fahrenheit", 37.0),
        ("'50.00 Fahrenheit'", 10.0),
    ])
    def test_parse(self, raw_value, expected):
        assert parse_temperature(SnmpValue("STRING", raw_value)) == pytest.approx(expected)

    def test_32_fahrenheit_is_nudged_to_33(self):
        assert parse_temperature(SnmpValue("STRING", "32.00 Fahrenheit")) == 0.56
        assert fahrenheit_to_celsius(32) == fahrenheit_to_celsius(33)

    @pytest.mark.parametrize("raw_value", ["", "Centigrade", "22.50", "22.50 Kelvin", "n/a", "22,5 Centigrade",
                                           "22.50 Centigrade extra"])
    def test_unparseable(self, raw_value):
        with pytest.raises(ReadingParseError, match="ambient temperature"):
            parse_temperature(SnmpValue("STRING", raw_value))

    def test_integer_value_is_rejected(self):
        with pytest.raises(ReadingParseError):
            parse_temperature(SnmpValue("INTEGER", 22))


class TestFanSpeed:

    def test_parse(self):
        assert parse_fan_speed(SnmpValue("STRING", "45% of maximum"), 1) == 45
        assert parse_fan_speed(SnmpValue("STRING", '" 100% of maximum"'), 1) == 100

    @pytest.mark.parametrize("raw_value", ["45%", "45.5% of maximum", "offline", "4500 RPM"])
    def test_unparseable(self, raw_value):
        with pytest.raises(ReadingParseError, match="fan 7"):
            parse_fan_speed(SnmpValue("STRING", raw_value), 7)


class TestPowerModule:

    def test_installed(self):
        assert parse_installed(SnmpValue("INTEGER", 1)) is True
        assert parse_installed(SnmpValue("INTEGER", 0)) is False

    @pytest.mark.parametrize("raw_value", [2, -1, 255])
    def test_installed_rejects_unknown_values(self, raw_value):
        with pytest.raises(ReadingParseError, match=f"existence of power module 4, unknown value: {raw_value}"):
            parse_installed(SnmpValue("INTEGER", raw_value), 4)

    @pytest.mark.parametrize("raw_value, expected", [
        (0, PM_STATE_UNKNOWN),
        (1, PM_STATE_GOOD),
        (2, PM_STATE_WARNING),
        (3, PM_STATE_NOT_AVAILABLE),
        (17, PM_STATE_UNKNOWN),
    ])
    def test_state(self, raw_value, expected):
        assert parse_power_module_state(SnmpValue("INTEGER", raw_value)) == expected

    def test_state_needs_integer(self):
        with pytest.raises(ReadingParseError, match="power module 3"):
            parse_power_module_state(SnmpValue("STRING", "Good"), 3)


def test_parse_string_strips_quotes():
    assert parse_string(SnmpValue("STRING", '"06CDA1B" '), "serial") == "06CDA1B"

# EOF
