# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import logging

from cmm_module import cmm_oid_base
from cmm_module.classes.inventory import Temperature
from cmm_module.classes.plugin import Finding
from cmm_module.common import parse_temperature

# frontPanelTemp, ambient temperature at the chassis front
ambient_temp_oid = f"{cmm_oid_base}.2.1.5.1.0"

ambient_temp_warning = 28
ambient_temp_critical = 30
ambient_temp_min = 10

log = logging.getLogger(__name__)


def get_ambient_temp(plugin_object, readings):

    current_temp = parse_temperature(plugin_object.snmp.get(ambient_temp_oid))

    log.debug(f"Ambient temperature: {current_temp} °C")

    readings.add(Temperature(id=1, name="ambient", reading=current_temp))

    plugin_object.add_perf_data("ambient_temp", current_temp, warning=f"{ambient_temp_min}:{ambient_temp_warning}",
                                critical=f":{ambient_temp_critical}")


def evaluate_ambient_temp(readings):
    """
        thresholds are checked top down and the first match wins.
        Overheating gets two levels, too cold only a warning.
    """

    current_temp = readings.get_one(Temperature).reading

    if current_temp > ambient_temp_critical:
        return Finding("CRITICAL", "Temp", f"Ambient temperature {current_temp} °C is too high, "
                                           f"air conditioning may have failed, consider shutdown")

    if current_temp > ambient_temp_warning:
        return Finding("WARNING", "Temp", f"Ambient temperature {current_temp} °C is too high, "
                                          f"air conditioning may have failed, consider shutdown")

    if current_temp < ambient_temp_min:
        return Finding("WARNING", "Temp", f"Ambient temperature {current_temp} °C is unreasonably cold, "
                                          f"check air conditioning")

    return Finding("OK", "Temp", f"Ambient temperature {current_temp} °C is in good condition")

# EOF
