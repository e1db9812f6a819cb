# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

# define valid return status types
plugin_status_types = {
    "OK": 0,
    "WARNING": 1,
    "CRITICAL": 2,
    "UNKNOWN": 3
}


class CMMCheckError(Exception):
    """base class of all errors which end a check run with status UNKNOWN"""


class ReachabilityError(CMMCheckError):
    pass


class SnmpQueryError(CMMCheckError):
    pass


class ReadingParseError(CMMCheckError):
    pass
