# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

# fixed PureFlex chassis layout
fan_slots = range(1, 11)
power_module_slots = range(1, 7)

# IBM BladeCenter/PureFlex management module MIB root
cmm_oid_base = "1.3.6.1.4.1.2.3.51.2"

# EOF
