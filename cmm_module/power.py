# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import logging

from cmm_module import cmm_oid_base, power_module_slots
from cmm_module.classes.inventory import PowerModule
from cmm_module.classes.plugin import Finding
from cmm_module.common import parse_installed, parse_power_module_state, PM_STATE_GOOD, PM_STATE_NOT_INSTALLED

# powerModuleExists and powerModuleState, indexed by power module slot
power_module_exists_oid = f"{cmm_oid_base}.2.4.1.1.2"
power_module_state_oid = f"{cmm_oid_base}.2.4.1.1.3"

log = logging.getLogger(__name__)


def get_power_modules(plugin_object, readings):

    for module_id in power_module_slots:

        installed = parse_installed(plugin_object.snmp.get(f"{power_module_exists_oid}.{module_id}"), module_id)

        if installed is True:
            state = parse_power_module_state(plugin_object.snmp.get(f"{power_module_state_oid}.{module_id}"),
                                             module_id)
        else:
            state = PM_STATE_NOT_INSTALLED

        log.debug(f"Power module {module_id} installed: {installed}, state: {state}")

        readings.add(PowerModule(id=module_id, installed=installed, operation_status=state))


def evaluate_power_modules(readings):

    installed_modules = [x for x in readings.get(PowerModule) if x.installed is True]

    for power_module in installed_modules:

        if power_module.operation_status != PM_STATE_GOOD:
            return Finding("WARNING", "Power", f"Power module {power_module.id} state is "
                                               f"{power_module.operation_status}, please investigate")

    return Finding("OK", "Power", f"All power modules ({len(installed_modules)}) are in good condition")

# EOF
