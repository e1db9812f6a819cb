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
from cmm_module.classes.inventory import Chassi
from cmm_module.common import parse_string

# bladeCenterVpd machine type, machine model and serial number
machine_type_oid = f"{cmm_oid_base}.2.21.1.1.1.0"
machine_model_oid = f"{cmm_oid_base}.2.21.1.1.2.0"
machine_serial_oid = f"{cmm_oid_base}.2.21.1.1.3.0"

# mmMainApplVpd revision of the active CMM
cmm_firmware_oid = f"{cmm_oid_base}.2.21.3.1.1.3.1"

log = logging.getLogger(__name__)


def get_chassis_info(plugin_object, readings):
    """
        model, serial and firmware are only part of the output text,
        they never change the check status
    """

    machine_type = parse_string(plugin_object.snmp.get(machine_type_oid), "chassis machine type")
    machine_model = parse_string(plugin_object.snmp.get(machine_model_oid), "chassis machine model")
    serial = parse_string(plugin_object.snmp.get(machine_serial_oid), "chassis serial number")

    log.debug(f"Chassis model: {machine_type}-{machine_model}, serial: {serial}")

    firmware = parse_string(plugin_object.snmp.get(cmm_firmware_oid), "CMM firmware version")

    log.debug(f"CMM firmware: {firmware}")

    readings.add(Chassi(id=1, model=f"{machine_type}-{machine_model}", serial=serial, firmware=firmware))

# EOF
