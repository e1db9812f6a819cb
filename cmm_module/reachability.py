# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import logging
import subprocess

from cmm_module.classes import ReachabilityError

default_ping_timeout = 1

# ping output fragments of the different failure reasons
name_resolution_errors = ["unknown host", "name or service not known", "temporary failure in name resolution",
                          "cannot resolve"]
routing_errors = ["network is unreachable", "no route to host", "destination host unreachable"]

log = logging.getLogger(__name__)


def check_reachability(host, timeout=default_ping_timeout, runner=subprocess.run):
    """
        send a single ping to the host

        Parameters
        ----------
        host: str
            host name or address of the CMM
        timeout: int
            seconds to wait for the reply
        runner: callable
            used to execute the ping command, same signature as subprocess.run

        Raises
        ------
        ReachabilityError
            with a message describing why the host is not reachable
    """

    command = ["ping", "-c", "1", "-W", str(timeout), host]

    log.debug(f"Checking reachability of '{host}': {' '.join(command)}")

    try:
        result = runner(command, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, universal_newlines=True)
    except FileNotFoundError:
        raise ReachabilityError("Unable to check reachability, ping command not found")
    except OSError as e:
        raise ReachabilityError(f"Unable to execute ping command: {e}")

    ping_output = f"{result.stdout or ''}".strip()

    log.debug(f"ping returned {result.returncode}: {ping_output}")

    if result.returncode == 0:
        return

    if any(x in ping_output.lower() for x in name_resolution_errors):
        raise ReachabilityError(f"Unable to resolve host name '{host}'")

    if any(x in ping_output.lower() for x in routing_errors):
        raise ReachabilityError(f"No route to host '{host}'")

    raise ReachabilityError(f"Host '{host}' is not reachable, no ping reply after {timeout}s (100% packet loss)")

# EOF
