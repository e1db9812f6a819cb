# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import subprocess

import pytest

from cmm_module import fan_slots, power_module_slots
from cmm_module.classes import SnmpQueryError
from cmm_module.classes.snmp import SnmpValue
from cmm_module.fan import fan_speed_oid
from cmm_module.firmware import machine_type_oid, machine_model_oid, machine_serial_oid, cmm_firmware_oid
from cmm_module.health import health_oid
from cmm_module.power import power_module_exists_oid, power_module_state_oid
from cmm_module.temp import ambient_temp_oid


class FakeSnmpConnection:
    """answers GET requests from a fixed OID table and records every request"""

    def __init__(self, values):
        self.values = dict(values)
        self.requested = list()

    def get(self, oid):
        self.requested.append(oid)
        if oid not in self.values:
            raise SnmpQueryError(f"no response from 'cmm.example.com' for OID '{oid}': No SNMP response received "
                                 f"before timeout")
        return self.values[oid]


def healthy_chassis_values():

    values = {
        health_oid: SnmpValue("INTEGER", 255),
        ambient_temp_oid: SnmpValue("STRING", '"22.50 Centigrade"'),
        machine_type_oid: SnmpValue("STRING", '"8721"'),
        machine_model_oid: SnmpValue("STRING", '"HC1"'),
        machine_serial_oid: SnmpValue("STRING", '"06CDA1B"'),
        cmm_firmware_oid: SnmpValue("STRING", '"1AON28B"'),
    }

    for fan_id in fan_slots:
        values[f"{fan_speed_oid}.{fan_id}"] = SnmpValue("STRING", f"{40 + fan_id}% of maximum")

    for module_id in power_module_slots:
        values[f"{power_module_exists_oid}.{module_id}"] = SnmpValue("INTEGER", 1)
        values[f"{power_module_state_oid}.{module_id}"] = SnmpValue("INTEGER", 1)

    return values


def ping_runner(returncode=0, output=""):

    def runner(command, **kwargs):
        return subprocess.CompletedProcess(command, returncode, stdout=output)

    return runner


@pytest.fixture
def chassis_values():
    return healthy_chassis_values()


@pytest.fixture
def fake_snmp(chassis_values):
    return FakeSnmpConnection(chassis_values)


@pytest.fixture
def host_reachable():
    def check(host):
        return None
    return check

# EOF
