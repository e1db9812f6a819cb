# -*- coding: utf-8 -*-
#  Copyright (c) 2020 - 2025 Ricardo Bartels. All rights reserved.
#
#  check_cmm.py
#
#  This work is licensed under the terms of the MIT license.
#  For a copy, see file LICENSE.txt included in this
#  repository or visit: <https://opensource.org/licenses/MIT>.

from cmm_module.classes import ReadingParseError


# noinspection PyBroadException
class InventoryItem(object):
    """
        base class of all readings collected from a CMM

        Only attributes listed in "valid_attributes" can be set and
        values get converted to the defined type on assignment.
    """
    valid_attributes = None
    inventory_item_name = None
    id = None

    # informational items keep empty strings instead of treating them as unresolved
    keep_empty_strings = False

    def __init__(self, **kwargs):

        for attribute in self.valid_attributes.keys():
            super().__setattr__(attribute, None)

        for k, v in kwargs.items():
            setattr(self, k, v)

    def __setattr__(self, key, value):

        if key not in self.valid_attributes.keys():
            raise AttributeError("'%s' object has no attribute '%s'" % (self.__class__.__name__, key))

        value_type = self.valid_attributes.get(key)

        if value is None:
            super().__setattr__(key, value)
            return

        if value_type == str:
            value = f"{value}".strip()

            if len(value) == 0 and self.keep_empty_strings is False:
                value = None

        elif value_type in [int, float]:
            if not isinstance(value, value_type) or isinstance(value, bool):
                try:
                    value = value_type(f"{value}".strip())
                except Exception:
                    raise ReadingParseError(f"{self.__class__.__name__} attribute '{key}' "
                                            f"got invalid {value_type.__name__} value '{value}'")

        elif value_type == bool:
            value = True if value is True else False

        super().__setattr__(key, value)

    def get_missing_attributes(self):

        return [x for x in self.valid_attributes.keys() if getattr(self, x) is None]

    def is_complete(self):

        return len(self.get_missing_attributes()) == 0

    def __repr__(self):
        return f"{self.__class__.__name__}(%s)" % \
            ", ".join([f"{x}={getattr(self, x)!r}" for x in self.valid_attributes.keys()])


class Manager(InventoryItem):
    inventory_item_name = "manager"
    valid_attributes = {
        "health_status": str,
        "id": int,
    }


class Temperature(InventoryItem):
    inventory_item_name = "temperature"
    valid_attributes = {
        "id": int,
        "name": str,
        "reading": float,
    }


class Fan(InventoryItem):
    inventory_item_name = "fan"
    valid_attributes = {
        "id": int,
        "reading": int,
    }


class PowerModule(InventoryItem):
    inventory_item_name = "power_module"
    valid_attributes = {
        "id": int,
        "installed": bool,
        "operation_status": str,
    }


class Chassi(InventoryItem):
    inventory_item_name = "chassi"
    keep_empty_strings = True
    valid_attributes = {
        "firmware": str,
        "id": int,
        "model": str,
        "serial": str,
    }


class ChassisReadings(object):
    """
        result record of one check run

        Filled step by step by the query functions and afterwards
        handed to the evaluators and the reporter.
    """

    def __init__(self):
        self.base_structure = dict()

        for inventory_sub_class in InventoryItem.__subclasses__():
            if inventory_sub_class.inventory_item_name is None:
                raise AttributeError("The 'inventory_item_name' attribute for class '%s' is undefined." %
                                     inventory_sub_class.__name__)

            self.base_structure[inventory_sub_class.inventory_item_name] = list()

    def add(self, object_type):

        if not isinstance(object_type, InventoryItem):
            raise AttributeError("'%s' object not allowed to add to a '%s' class item." %
                                 (object_type.__class__.__name__, InventoryItem.__name__))

        if object_type.is_complete() is False:
            item_name = object_type.inventory_item_name.replace("_", " ")
            missing_attributes = ", ".join(object_type.get_missing_attributes())
            raise ReadingParseError(f"incomplete {item_name} reading, no value for: {missing_attributes}")

        for inv_item in self.base_structure[object_type.inventory_item_name]:
            if inv_item.id == object_type.id:
                raise AttributeError(f"Object id '{object_type.id}' for '{object_type.__class__.__name__}' "
                                     f"already used")

        self.base_structure[object_type.inventory_item_name].append(object_type)

    def get(self, class_name):

        if class_name not in InventoryItem.__subclasses__():
            raise AttributeError("'%s' object must be a sub class of '%s'." %
                                 (class_name.__name__, InventoryItem.__name__))

        return sorted(self.base_structure.get(class_name.inventory_item_name, list()), key=lambda x: x.id)

    def get_one(self, class_name):

        items = self.get(class_name)
        if len(items) == 0:
            return None

        return items[0]

# EOF
