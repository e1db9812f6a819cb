#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

description = """
This is a monitoring plugin to check the health status of an
IBM/Lenovo PureFlex chassis via its Chassis Management Module (CMM).
It checks ambient temperature, fans, power modules and the overall
CMM health and reports chassis model, serial and CMM firmware.
"""

__version__ = "1.0.0"
__version_date__ = "2026-10-18"
__author__ = "Ricardo Bartels <ricardo@bitchbrothers.com>"
__description__ = "Check PureFlex CMM Plugin"
__license__ = "MIT"

import logging
import sys

from cmm_module.args import parse_command_line
from cmm_module.classes import CMMCheckError
from cmm_module.classes.inventory import ChassisReadings
from cmm_module.classes.plugin import PluginData
from cmm_module.classes.snmp import SnmpConnection
from cmm_module.reachability import check_reachability
from cmm_module.health import get_cmm_health, evaluate_cmm_health
from cmm_module.temp import get_ambient_temp, evaluate_ambient_temp
from cmm_module.firmware import get_chassis_info
from cmm_module.fan import get_fans, evaluate_fans
from cmm_module.power import get_power_modules, evaluate_power_modules

# order in which problems are reported, first one which is not OK wins
evaluation_order = [
    evaluate_ambient_temp,
    evaluate_fans,
    evaluate_power_modules,
    evaluate_cmm_health
]


class CheckCMM:

    def __init__(self, args=None, snmp_connection=None, reachability_check=check_reachability):
        self.args = parse_command_line(description, __version__, __version_date__, args)
        self.snmp_connection = snmp_connection
        self.reachability_check = reachability_check

    def collect(self, plugin):

        readings = ChassisReadings()

        self.reachability_check(self.args.host)

        if plugin.snmp is None:
            plugin.snmp = SnmpConnection(self.args)

        get_cmm_health(plugin, readings)
        get_ambient_temp(plugin, readings)
        get_chassis_info(plugin, readings)
        get_fans(plugin, readings)
        get_power_modules(plugin, readings)

        return readings

    def main(self):
        if self.args.verbose:
            # initialize logger
            logging.basicConfig(level="DEBUG", stream=sys.stdout, format='%(asctime)s - %(levelname)s: %(message)s')

            # only interested in our own requests
            logging.getLogger("pysnmp").setLevel(logging.WARNING)
            logging.getLogger("asyncio").setLevel(logging.WARNING)

        # initialize plugin object
        plugin = PluginData(self.args, snmp_connection=self.snmp_connection)

        try:
            readings = self.collect(plugin)
        except CMMCheckError as e:
            plugin.exit_on_error(f"{e}")

        plugin.do_exit((evaluate(readings) for evaluate in evaluation_order), readings)


def main():
    CheckCMM().main()

if __name__ == "__main__":
    main()

# EOF
