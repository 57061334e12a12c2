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
Storage pool accessor tests
"""

from unitylib import endpoints
from unitylib import exceptions
from unitylib import storagepool
from unitylib.tests.basetest import BaseTest, GET


class Test_StoragePool(BaseTest):

    def setUp(self):
        super(Test_StoragePool, self).setUp()
        self.pool_api = storagepool.StoragePoolAPI(self.client)

    def test_find_storage_pool_by_id(self):
        self.add_pool('pool_1', fast_vp_status=1)
        pool = self.pool_api.find_storage_pool_by_id('pool_1')
        self.assertEqual('pool_1', pool.id)
        self.assertTrue(pool.fast_vp_enabled)

    def test_fast_vp_disabled(self):
        self.add_pool('pool_2', fast_vp_status=0)
        pool = self.pool_api.find_storage_pool_by_id('pool_2')
        self.assertFalse(pool.fast_vp_enabled)

    def test_find_storage_pool_by_name(self):
        uri = ('/api/instances/pool/name:gold%20pool?fields=' +
               endpoints.STORAGE_POOL_DISPLAY_FIELDS)
        self.add_response(GET, uri, {'content': {'id': 'pool_3',
                                                 'name': 'gold pool'}})
        pool = self.pool_api.find_storage_pool_by_name('gold pool')
        self.assertEqual('pool_3', pool.id)
        self.assertFalse(pool.fast_vp_enabled)

    def test_find_storage_pool_not_found(self):
        self.assertRaises(exceptions.StoragePoolNotFound,
                          self.pool_api.find_storage_pool_by_id, 'pool_404')
        self.assertRaises(ValueError,
                          self.pool_api.find_storage_pool_by_name, '')
        self.assertEqual(1, self.client.execute.call_count)

    def test_list_storage_pools(self):
        uri = ('/api/types/pool/instances?fields=' +
               endpoints.STORAGE_POOL_DISPLAY_FIELDS)
        self.add_response(GET, uri, {'entries': [
            {'content': {'id': 'pool_1', 'name': 'a'}},
            {'content': {'id': 'pool_2', 'name': 'b'}}]})
        pools = self.pool_api.list_storage_pools()
        self.assertEqual(['a', 'b'], [p.name for p in pools])

    def test_list_storage_pools_empty(self):
        uri = ('/api/types/pool/instances?fields=' +
               endpoints.STORAGE_POOL_DISPLAY_FIELDS)
        self.add_response(GET, uri, {'entries': []})
        self.assertEqual([], self.pool_api.list_storage_pools())
