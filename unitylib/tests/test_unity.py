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
Unity entry object tests
"""

from unittest import TestCase

from oslo_config import cfg

import unitylib
from unitylib import filesystem
from unitylib import opts
from unitylib import storagepool
from unitylib import volume


class Test_Unity(TestCase):

    def test_accessors_share_executor(self):
        unity = unitylib.Unity(rest_server_ip='10.0.0.1',
                               rest_server_username='admin',
                               rest_server_password='secret')
        self.assertEqual(('10.0.0.1', '443'), unity.host_addr)
        self.assertIsInstance(unity.filesystem, filesystem.FilesystemAPI)
        self.assertIsInstance(unity.storage_pool, storagepool.StoragePoolAPI)
        self.assertIsInstance(unity.volume, volume.VolumeAPI)
        self.assertIs(unity.client, unity.filesystem.client)
        self.assertIs(unity.client, unity.storage_pool.client)
        self.assertIs(unity.client, unity.volume.client)
        self.assertFalse(unity.client.verify)

    def test_missing_address(self):
        self.assertRaises(ValueError, unitylib.Unity)

    def test_certificate_verification(self):
        unity = unitylib.Unity(rest_server_ip='10.0.0.1',
                               verify_server_certificate=True,
                               server_certificate_path='/etc/ssl/unity.pem')
        self.assertEqual('/etc/ssl/unity.pem', unity.client.verify)

        unity = unitylib.Unity(rest_server_ip='10.0.0.1',
                               verify_server_certificate=True,
                               server_certificate_path='relative.pem')
        self.assertIs(True, unity.client.verify)

    def test_from_config(self):
        conf = cfg.ConfigOpts()
        opts.register_opts(conf)
        conf(args=[])
        conf.set_override('rest_server_ip', '10.0.0.2', group='unity')
        conf.set_override('rest_server_port', 8443, group='unity')
        conf.set_override('rest_server_username', 'admin', group='unity')
        conf.set_override('request_timeout', 5.0, group='unity')

        unity = unitylib.Unity.from_config(conf)

        self.assertEqual(('10.0.0.2', '8443'), unity.host_addr)
        self.assertEqual('admin', unity.auth[0])
        self.assertEqual(5.0, unity.client.timeout)

    def test_list_opts(self):
        group, options = opts.list_opts()[0]
        self.assertEqual('unity', group)
        self.assertIn('rest_server_password',
                      [opt.name for opt in options])
