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
Unity API library tests against a live array
"""

import unitylib
from unitylib.tests.basetest import FunctionalBaseTest


class Test_System(FunctionalBaseTest):

    def test_pools(self):
        # every listed pool can be found again by id and by name
        for pool in self.unity.storage_pool.list_storage_pools():
            self.assertEqual(
                pool.id,
                self.unity.storage_pool.find_storage_pool_by_id(pool.id).id)
            self.assertEqual(
                pool.id,
                self.unity.storage_pool.find_storage_pool_by_name(
                    pool.name).id)

    def test_nas_server(self):
        nas = self.unity.filesystem.find_nas_server_by_id(self.nas_server)
        self.assertEqual(self.nas_server, nas.id)

    def test_licenses(self):
        info = self.unity.volume.is_feature_licensed(
            unitylib.LicenseFeature.THIN_PROVISIONING)
        self.assertEqual('THIN_PROVISIONING', info.id)


class Test_FilesystemLifecycle(FunctionalBaseTest):

    def test_create_share_and_delete_filesystem(self):
        fs_name = self._random_name()
        self.unity.filesystem.create_filesystem(
            fs_name, self.pool, 'unitylib functional test', self.nas_server,
            self.fs_size, is_thin_enabled=False)
        fs = self.unity.filesystem.find_filesystem_by_name(fs_name)
        self.assertEqual(fs_name, fs.name)

        share_name = fs_name + '-share'
        fs = self.unity.filesystem.create_nfs_share(
            share_name, '/', fs.id,
            unitylib.NFSShareDefaultAccess.READ_ONLY)
        share = self.unity.filesystem.find_nfs_share_by_name(share_name)
        self.assertIn(share.id, fs.nfs_share_ids)

        self.unity.filesystem.delete_nfs_share(fs.id, share.id)
        self.assertRaises(unitylib.NFSShareNotFound,
                          self.unity.filesystem.find_nfs_share_by_id,
                          share.id)

        self.unity.filesystem.delete_filesystem(fs.id)
        self.assertRaises(unitylib.FilesystemNotFound,
                          self.unity.filesystem.find_filesystem_by_id, fs.id)
