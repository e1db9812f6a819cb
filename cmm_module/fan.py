# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import logging

from cmm_module import cmm_oid_base, fan_slots
from cmm_module.classes.inventory import Fan
from cmm_module.classes.plugin import Finding
from cmm_module.common import parse_fan_speed

# chassisFanSpeed, indexed by fan slot
fan_speed_oid = f"{cmm_oid_base}.2.3.50.1.4"

fan_speed_max = 90
fan_speed_min = 10

log = logging.getLogger(__name__)


def get_fans(plugin_object, readings):

    for fan_id in fan_slots:

        fan_speed = parse_fan_speed(plugin_object.snmp.get(f"{fan_speed_oid}.{fan_id}"), fan_id)

        log.debug(f"Fan {fan_id} speed: {fan_speed}%")

        readings.add(Fan(id=fan_id, reading=fan_speed))

        plugin_object.add_perf_data(f"fan_{fan_id}", fan_speed, perf_uom="%",
                                    warning=f"{fan_speed_min}:{fan_speed_max}")


def evaluate_fans(readings):

    fans = readings.get(Fan)

    for fan in fans:

        if fan.reading > fan_speed_max:
            return Finding("WARNING", "Fan", f"Fan {fan.id} speed {fan.reading}% is unusually high, "
                                             f"check fan status and ambient temperature")

        if fan.reading < fan_speed_min:
            return Finding("WARNING", "Fan", f"Fan {fan.id} speed {fan.reading}% is unusually low, "
                                             f"check fan status and ambient temperature")

    return Finding("OK", "Fan", f"All fans ({len(fans)}) are in good condition")

# EOF
