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
Unity storage pool operations
"""

import logging

from unitylib import apibase
from unitylib import endpoints
from unitylib import exceptions
from unitylib import models
from unitylib import utilities

LOG = logging.getLogger(__name__)


class StoragePoolAPI(apibase.APIBase):

    def find_storage_pool_by_id(self, pool_id):
        """
        Find a storage pool by its ID
        :param pool_id: Unity pool ID, e.g. pool_1
        :return: models.StoragePool
        """

        utilities.validate_id(pool_id, 'Storage Pool Id')
        return self._lookup(models.StoragePool, exceptions.StoragePoolNotFound,
                            self._find_by_id, 'pool', pool_id,
                            endpoints.STORAGE_POOL_DISPLAY_FIELDS)

    def find_storage_pool_by_name(self, pool_name):
        """
        Find a storage pool by its unique name
        :param pool_name: Unity pool name
        :return: models.StoragePool
        """

        utilities.validate_id(pool_name, 'Storage Pool Name')
        return self._lookup(models.StoragePool, exceptions.StoragePoolNotFound,
                            self._find_by_name, 'pool', pool_name,
                            endpoints.STORAGE_POOL_DISPLAY_FIELDS)

    def list_storage_pools(self):
        """
        Return every storage pool of the array
        :return: List of models.StoragePool
        """

        return [models.StoragePool(content) for content in
                self._list('pool', endpoints.STORAGE_POOL_DISPLAY_FIELDS)]
