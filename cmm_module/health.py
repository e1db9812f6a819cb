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
from cmm_module.classes.inventory import Manager
from cmm_module.classes.plugin import Finding
from cmm_module.common import parse_health_code, HEALTH_CRITICAL, HEALTH_NON_CRITICAL, HEALTH_SYSTEM_LEVEL_ERROR, \
    HEALTH_OK

# systemHealthStat
health_oid = f"{cmm_oid_base}.2.7.1.0"

log = logging.getLogger(__name__)


def get_cmm_health(plugin_object, readings):

    health_status = parse_health_code(plugin_object.snmp.get(health_oid))

    log.debug(f"CMM health status: {health_status}")

    readings.add(Manager(id=1, health_status=health_status))


def evaluate_cmm_health(readings):

    health_status = readings.get_one(Manager).health_status

    if health_status == HEALTH_CRITICAL:
        return Finding("CRITICAL", "Health", "CMM reports a critical system health status")

    if health_status == HEALTH_NON_CRITICAL:
        return Finding("WARNING", "Health", "CMM reports a non critical system health error")

    if health_status == HEALTH_SYSTEM_LEVEL_ERROR:
        return Finding("WARNING", "Health", "CMM reports a system level error")

    if health_status == HEALTH_OK:
        return Finding("OK", "Health", "CMM system health is OK")

    raise ValueError(f"unresolved CMM health status '{health_status}'")

# EOF
