# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import re

from cmm_module.classes import ReadingParseError

# CMM health codes
HEALTH_CRITICAL = "Critical"
HEALTH_NON_CRITICAL = "NonCritical"
HEALTH_SYSTEM_LEVEL_ERROR = "SystemLevelError"
HEALTH_OK = "OK"
HEALTH_UNKNOWN = "Unknown"

# raw systemHealthStat values. 2 is documented as "nonCritical" but
# always ended up as system level error in the checks this plugin replaces.
# 4 is documented as "systemLevel".
health_code_map = {
    0: HEALTH_CRITICAL,
    2: HEALTH_SYSTEM_LEVEL_ERROR,
    4: HEALTH_SYSTEM_LEVEL_ERROR,
    255: HEALTH_OK
}

# power module states
PM_STATE_UNKNOWN = "Unknown"
PM_STATE_GOOD = "Good"
PM_STATE_WARNING = "Warning"
PM_STATE_NOT_AVAILABLE = "NotAvailable"
PM_STATE_NOT_INSTALLED = "NotInstalled"

power_module_state_map = {
    0: PM_STATE_UNKNOWN,
    1: PM_STATE_GOOD,
    2: PM_STATE_WARNING,
    3: PM_STATE_NOT_AVAILABLE
}

temperature_pattern = re.compile(r"^(-?\d+(?:\.\d+)?)\s*(Centigrade|Fahrenheit)$")
fan_speed_pattern = re.compile(r"^(\d+)%\s+of\s+maximum$")


def strip_quotes(text):

    return f"{text}".replace('"', "").replace("'", "").strip()


def expect_kind(snmp_value, kind, description):

    if snmp_value is None or snmp_value.kind != kind:
        raise ReadingParseError(f"Unable to parse {description}, expected {kind} value but got: {snmp_value}")

    return snmp_value.value


def parse_health_code(snmp_value):
    """
        map the raw CMM system health integer to a health code

        Parameters
        ----------
        snmp_value: SnmpValue
            INTEGER value of systemHealthStat

        Returns
        -------
        str
            one of the HEALTH_* codes

        Raises
        ------
        ReadingParseError
            if the value is not an INTEGER or not a known health code
    """

    raw_value = expect_kind(snmp_value, "INTEGER", "CMM health status")

    health_code = health_code_map.get(raw_value, HEALTH_UNKNOWN)

    if health_code == HEALTH_UNKNOWN:
        raise ReadingParseError(f"Unable to parse CMM health status, unknown value: {raw_value}")

    return health_code


def fahrenheit_to_celsius(value):

    # exactly 32°F gets nudged to 33°F
    if value == 32:
        value = 33

    return round((value - 32) * 5 / 9, 2)


def parse_temperature(snmp_value):
    """
        parse a temperature string like '24.50 Centigrade' or '"76.10 Fahrenheit"'

        Returns
        -------
        float
            temperature in Celsius
    """

    raw_value = strip_quotes(expect_kind(snmp_value, "STRING", "ambient temperature"))

    match = temperature_pattern.match(raw_value)
    if match is None:
        raise ReadingParseError(f"Unable to parse ambient temperature: '{raw_value}'")

    reading = float(match.group(1))

    if match.group(2) == "Fahrenheit":
        return fahrenheit_to_celsius(reading)

    return reading


def parse_fan_speed(snmp_value, fan_id=None):
    """
        parse a fan speed string like '45% of maximum' and return the percentage as int
    """

    raw_value = strip_quotes(expect_kind(snmp_value, "STRING", f"speed of fan {fan_id}"))

    match = fan_speed_pattern.match(raw_value)
    if match is None:
        raise ReadingParseError(f"Unable to parse speed of fan {fan_id}: '{raw_value}'")

    return int(match.group(1))


def parse_installed(snmp_value, module_id=None):

    raw_value = expect_kind(snmp_value, "INTEGER", f"existence of power module {module_id}")

    if raw_value not in [0, 1]:
        raise ReadingParseError(f"Unable to parse existence of power module {module_id}, unknown value: {raw_value}")

    return raw_value == 1


def parse_power_module_state(snmp_value, module_id=None):

    raw_value = expect_kind(snmp_value, "INTEGER", f"state of power module {module_id}")

    return power_module_state_map.get(raw_value, PM_STATE_UNKNOWN)


def parse_string(snmp_value, description):

    return strip_quotes(expect_kind(snmp_value, "STRING", description))

# EOF
