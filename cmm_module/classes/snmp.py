# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

import asyncio
import logging
from collections import namedtuple

from cmm_module.classes import SnmpQueryError

# import 3rd party modules
from pyasn1.type import univ
from pysnmp.error import PySnmpError
from pysnmp.hlapi.asyncio import (
    CommunityData,
    ContextData,
    ObjectIdentity,
    ObjectType,
    SnmpEngine,
    UdpTransportTarget,
    getCmd,
    nextCmd,
)
from pysnmp.proto.rfc1905 import EndOfMibView, NoSuchInstance, NoSuchObject

# defaults
default_conn_max_retries = 2
default_conn_timeout = 5
default_snmp_port = 161
default_community = "public"

log = logging.getLogger(__name__)

# the two value kinds a CMM returns
SnmpValue = namedtuple("SnmpValue", ["kind", "value"])


def convert_snmp_value(oid, value):
    """
        convert a pysnmp value object into a SnmpValue

        Parameters
        ----------
        oid: str
            OID the value was returned for, only used for error messages
        value: pyasn1 object
            the value as returned by pysnmp

        Returns
        -------
        SnmpValue
            with kind "INTEGER" or "STRING"
    """

    if value is None or isinstance(value, (NoSuchObject, NoSuchInstance, EndOfMibView)):
        raise SnmpQueryError(f"no such object for OID '{oid}'")

    if isinstance(value, univ.Integer):
        return SnmpValue("INTEGER", int(value))

    return SnmpValue("STRING", value.prettyPrint())


class SnmpConnection:

    host = None
    port = default_snmp_port
    community = default_community
    timeout = default_conn_timeout
    retries = default_conn_max_retries

    def __init__(self, cli_args=None):

        if cli_args is None:
            raise Exception("No args passed to SnmpConnection()")

        if cli_args.host is None:
            raise Exception("cli args host not set")

        self.host = cli_args.host
        self.port = cli_args.port
        self.community = cli_args.community
        self.timeout = cli_args.timeout
        self.retries = cli_args.retries

    async def _request(self, command, oid):

        # every request runs in its own event loop, the engine must not outlive it
        engine = SnmpEngine()

        try:
            return await command(
                engine,
                CommunityData(self.community),
                UdpTransportTarget((self.host, self.port), timeout=self.timeout, retries=self.retries),
                ContextData(),
                ObjectType(ObjectIdentity(oid))
            )
        finally:
            if engine.transportDispatcher is not None:
                engine.transportDispatcher.closeDispatcher()

    def get(self, oid):
        """
            request a single scalar value

            Parameters
            ----------
            oid: str
                the numeric OID to request

            Returns
            -------
            SnmpValue
                the returned value

            Raises
            ------
            SnmpQueryError
                if the request times out, the agent returns an error or no such object exists
        """

        log.debug(f"SNMP GET {self.host}: {oid}")

        try:
            error_indication, error_status, error_index, var_binds = asyncio.run(self._request(getCmd, oid))
        except PySnmpError as e:
            raise SnmpQueryError(f"request for OID '{oid}' to '{self.host}' failed: {e}")

        if error_indication:
            raise SnmpQueryError(f"no response from '{self.host}' for OID '{oid}': {error_indication}")

        if error_status:
            raise SnmpQueryError(f"request for OID '{oid}' returned error '{error_status.prettyPrint()}' "
                                 f"at index {error_index}")

        if len(var_binds) == 0:
            raise SnmpQueryError(f"empty response for OID '{oid}'")

        _, value = var_binds[0]

        result = convert_snmp_value(oid, value)

        log.debug(f"SNMP GET {self.host}: {oid} = {result.kind}: {result.value}")

        return result

    def walk(self, prefix):
        """
            enumerate all values below an OID prefix in agent order

            Parameters
            ----------
            prefix: str
                the numeric OID prefix to walk

            Returns
            -------
            list
                of (oid, SnmpValue) tuples
        """

        log.debug(f"SNMP WALK {self.host}: {prefix}")

        results = list()
        current_oid = prefix

        while True:
            try:
                error_indication, error_status, error_index, var_bind_table = \
                    asyncio.run(self._request(nextCmd, current_oid))
            except PySnmpError as e:
                raise SnmpQueryError(f"walk of '{prefix}' on '{self.host}' failed: {e}")

            if error_indication:
                raise SnmpQueryError(f"no response from '{self.host}' walking '{prefix}': {error_indication}")

            if error_status:
                raise SnmpQueryError(f"walk of '{prefix}' returned error '{error_status.prettyPrint()}' "
                                     f"at index {error_index}")

            rows = var_bind_table
            if len(rows) > 0 and isinstance(rows[0], ObjectType):
                rows = [rows]

            next_oid = None
            for row in rows:
                for name, value in row:
                    oid = str(name)
                    if not oid.startswith(f"{prefix}.") or isinstance(value, EndOfMibView):
                        return results

                    results.append((oid, convert_snmp_value(oid, value)))
                    next_oid = oid

            if next_oid is None:
                return results

            current_oid = next_oid

# EOF
