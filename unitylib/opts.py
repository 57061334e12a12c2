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
Configuration options of the Unity API library
"""

from oslo_config import cfg

from unitylib import httphelper

UNITY_GROUP = 'unity'

unity_opts = [
    cfg.StrOpt('rest_server_ip',
               default='',
               help='Unity management IP address or hostname'),
    cfg.PortOpt('rest_server_port',
                default=443,
                help='Unity management HTTPS port'),
    cfg.StrOpt('rest_server_username',
               default='',
               help='Unity REST API user'),
    cfg.StrOpt('rest_server_password',
               default='',
               secret=True,
               help='Unity REST API password'),
    cfg.BoolOpt('verify_server_certificate',
                default=False,
                help='Whether to verify the Unity SSL certificate'),
    cfg.StrOpt('server_certificate_path',
               default='',
               help='Path to the Unity SSL certificate or CA bundle'),
    cfg.FloatOpt('request_timeout',
                 default=httphelper.GW_REQ_TIMEOUT,
                 min=0,
                 help='Timeout in seconds of each Unity REST request'),
]


def register_opts(conf, group=UNITY_GROUP):
    conf.register_opts(unity_opts, group=group)


def list_opts():
    return [(UNITY_GROUP, unity_opts)]
