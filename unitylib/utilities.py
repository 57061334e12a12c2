# -*- coding: utf-8 -*-

# Copyright (c) 2015 - 2016 EMC Corporation.
# All Rights Reserved.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

"""
 Utility functions for Unity API library
"""

from urllib.parse import quote

# Unity rejects names longer than this for filesystems and LUNs
NAME_MAX_LENGTH = 63


def encode_string(value, safe=''):
    """
    Url encode a string to ASCII in order to escape any characters not
     allowed :, /, ?, #, &, =.
    :param value: Value to encode
    :param safe: Characters that should not be quoted
    :return: Encoded string
    """

    # Replace special characters in string using the %xx escape
    return quote(value, safe)


def validate_id(value, label):
    """
    Raise ValueError if an identifier is empty
    :param value: Identifier value
    :param label: Human readable name of the identifier, used in the message
    :return: Nothing
    """

    if not value:
        raise ValueError('%s cannot be empty' % label)


def validate_name(name, label, max_length=NAME_MAX_LENGTH):
    """
    Raise ValueError if a resource name is empty or too long
    :param name: Resource name
    :param label: Resource type used in the error message
    :param max_length: Maximum number of characters allowed
    :return: Nothing
    """

    if not name:
        raise ValueError('%s name should not be empty.' % label)

    if len(name) > max_length:
        raise ValueError('%s name %s should not exceed %d characters.'
                         % (label, name, max_length))


def bool_str(value):
    """
    Render a boolean the way the Unity REST API expects it in string fields
    """

    return 'true' if value else 'false'


def eval_compat(enumarg):
    """
    Return the value of an enum member, or the argument itself when a plain
    value was passed
    """

    if hasattr(enumarg, 'value'):
        return enumarg.value
    else:
        return enumarg
