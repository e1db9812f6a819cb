# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from cmm_module.classes import plugin_status_types
from cmm_module.classes.plugin import PluginData
from cmm_module.classes.snmp import default_conn_max_retries, default_conn_timeout, default_snmp_port, \
    default_community


class PluginArgumentParser(ArgumentParser):
    """
        argparse exits with 2 on errors which would be a CRITICAL for the
        monitoring system. Any usage error needs to end as UNKNOWN.
    """

    def error(self, message):
        # usage text gets folded into the single output line
        usage = " ".join(self.format_usage().split())
        print(PluginData.format_output_line("UNKNOWN", f"{message} ({usage})"))
        sys.exit(plugin_status_types["UNKNOWN"])


def parse_command_line(description: str, version: str, version_date: str, args=None):
    """parse command line arguments
    Also add current version and version date to description
    """

    # define command line options
    parser = PluginArgumentParser(
        description=f"{description}\nVersion: {version} ({version_date})",
        formatter_class=RawDescriptionHelpFormatter, add_help=False)

    group = parser.add_argument_group(title="mandatory arguments")
    group.add_argument("-H", "--host",
                       help="define the host name or address of the CMM to request")

    group = parser.add_argument_group(title="optional arguments")
    group.add_argument("-h", "--help", action='store_true',
                       help="show this help message and exit")
    group.add_argument("-c", "--community", default=default_community,
                       help=f"the SNMP community (default: {default_community})")
    group.add_argument("-p", "--port", type=int, default=default_snmp_port,
                       help=f"the SNMP port of the CMM (default: {default_snmp_port})")
    group.add_argument("-v", "--verbose", action='store_true',
                       help="print every request and the collected values before the check result")
    group.add_argument("-r", "--retries", type=int, default=default_conn_max_retries,
                       help=f"set number of maximum retries (default: {default_conn_max_retries})")
    group.add_argument("-t", "--timeout", type=int, default=default_conn_timeout,
                       help=f"set number of request timeout per try/retry (default: {default_conn_timeout})")
    group.add_argument("--perfdata", action='store_true',
                       help="append performance data for ambient temperature and fan speeds")

    result = parser.parse_args(args)

    if result.help:
        parser.print_help()
        print("")
        sys.exit(0)

    # need to check this our self otherwise it's not
    # possible to put the help command into an arguments group
    if result.host is None:
        parser.error("No remote host defined")

    return result

# EOF
