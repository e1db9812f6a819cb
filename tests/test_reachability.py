# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import pytest

from cmm_module.classes import ReachabilityError
from cmm_module.reachability import check_reachability

from conftest import ping_runner


def test_reply_received():
    assert check_reachability("cmm.example.com", runner=ping_runner(0, "1 packets transmitted, 1 received")) is None


def test_single_ping_with_timeout():
    commands = list()

    def runner(command, **kwargs):
        commands.append(command)
        return ping_runner(0)(command, **kwargs)

    check_reachability("cmm.example.com", timeout=1, runner=runner)

    assert commands == [["ping", "-c", "1", "-W", "1", "cmm.example.com"]]


@pytest.mark.parametrize("returncode, ping_output, message", [
    (1, "1 packets transmitted, 0 received, 100% packet loss, time 0ms", "no ping reply"),
    (2, "ping: cmm.example.com: Name or service not known", "Unable to resolve host name 'cmm.example.com'"),
    (2, "ping: cmm.example.com: Temporary failure in name resolution", "Unable to resolve host name"),
    (2, "ping: connect: Network is unreachable", "No route to host 'cmm.example.com'"),
    (1, "From 10.0.0.1 icmp_seq=1 Destination Host Unreachable", "No route to host"),
])
def test_failure_reasons(returncode, ping_output, message):
    with pytest.raises(ReachabilityError, match=message):
        check_reachability("cmm.example.com", runner=ping_runner(returncode, ping_output))


def test_failure_messages_are_distinct():
    messages = set()
    for ping_output in ["100% packet loss", "unknown host", "No route to host"]:
        with pytest.raises(ReachabilityError) as error:
            check_reachability("cmm.example.com", runner=ping_runner(1, ping_output))
        messages.add(str(error.value))

    assert len(messages) == 3


def test_ping_not_installed():
    def runner(command, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", "ping")

    with pytest.raises(ReachabilityError, match="ping command not found"):
        check_reachability("cmm.example.com", runner=runner)

# EOF
