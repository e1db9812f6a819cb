# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import sys

from cmm_module.classes import plugin_status_types
from cmm_module.classes.inventory import Manager, Temperature, Fan, PowerModule, Chassi

check_name = "CMM"


class Finding:

    state = "OK"
    command = None
    text = None

    def __init__(self, state="OK", command=None, text=None):

        if state not in list(plugin_status_types.keys()):
            raise Exception(f"Status '{state}' is invalid, needs to be one of these: %s" %
                            list(plugin_status_types.keys()))

        self.state = state
        self.command = command
        self.text = text

    def is_ok(self):

        return self.state == "OK"

    def __eq__(self, other):
        if not isinstance(other, Finding):
            return NotImplemented
        return (self.state, self.command, self.text) == (other.state, other.command, other.text)

    def __repr__(self):
        return f"Finding(state={self.state!r}, command={self.command!r}, text={self.text!r})"


class PluginData:
    """
        collects everything needed to print the final plugin output line

        There is exactly one output line. All findings are passed in the
        order in which they have to be evaluated and the first finding
        which is not OK determines state and text of the output.
    """

    cli_args = None
    snmp = None

    def __init__(self, cli_args=None, snmp_connection=None):

        if cli_args is None:
            raise Exception("No args passed to PluginData()")

        self.cli_args = cli_args
        self.snmp = snmp_connection
        self.__perf_data = list()

    @staticmethod
    def format_output_line(state, text):

        return f"{check_name} {state} - {text}"

    def exit_on_error(self, text):

        print(self.format_output_line("UNKNOWN", text))
        sys.exit(plugin_status_types["UNKNOWN"])

    @staticmethod
    def select_finding(findings):
        """
            return the first finding which is not OK or None if all are OK
        """

        for finding in findings:
            if finding is None:
                continue

            if not isinstance(finding, Finding):
                raise ValueError(f"'{finding}' is not a Finding object")

            if finding.is_ok() is False:
                return finding

        return None

    @staticmethod
    def get_summary(readings):

        manager = readings.get_one(Manager)
        ambient = readings.get_one(Temperature)
        chassi = readings.get_one(Chassi)

        fan_text = " ".join([f"{x.id}:{x.reading}%" for x in readings.get(Fan)])
        power_module_text = " ".join([f"{x.id}:{x.operation_status}" for x in readings.get(PowerModule)])

        return f"CMM status: {manager.health_status}, " \
               f"ambient temp: {ambient.reading} °C, " \
               f"fans: {fan_text}, " \
               f"power modules: {power_module_text}, " \
               f"model: {chassi.model}, serial: {chassi.serial}, firmware: {chassi.firmware}"

    def add_perf_data(self, name, value, perf_uom=None, warning=None, critical=None):

        perf_string = "'%s'=%s" % (name.replace(" ", "_"), value)

        if perf_uom is not None:
            perf_string += perf_uom

        if critical is not None and warning is None:
            warning = ""

        if warning is not None:
            perf_string += ";%s" % str(warning)

        if critical is not None:
            perf_string += ";%s" % str(critical)

        self.__perf_data.append(perf_string)

    def return_output_data(self, findings, readings):
        """
            build the plugin output

            Parameters
            ----------
            findings: list
                Finding objects in evaluation order
            readings: ChassisReadings
                the fully resolved readings of this run

            Returns
            -------
            tuple
                state name and the output line
        """

        summary = self.get_summary(readings)
        finding = self.select_finding(findings)

        if finding is None:
            state = "OK"
            text = summary
        else:
            state = finding.state
            text = f"{finding.text}; {summary}"

        return_string = self.format_output_line(state, text)

        if getattr(self.cli_args, "perfdata", False) is True and len(self.__perf_data) > 0:
            return_string += "|" + " ".join(self.__perf_data)

        return state, return_string

    def do_exit(self, findings, readings):

        state, output = self.return_output_data(findings, readings)

        print(output)

        sys.exit(plugin_status_types[state])

# EOF
