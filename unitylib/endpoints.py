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
Unity REST API resource URIs and field selections.

Every URI the library talks to is declared here so the accessors only fill
in resource types, identifiers and field lists.
"""

API_LOGIN_URI = '/api/types/loginSessionInfo/instances'
API_LOGOUT_URI = '/api/types/loginSessionInfo/action/logout'

# %(resource type)s, %(id)s
API_GET_RESOURCE_URI = '/api/instances/%s/%s'
# %(resource type)s, %(id)s, %(fields)s
API_GET_RESOURCE_WITH_FIELDS_URI = '/api/instances/%s/%s?fields=%s'
# %(resource type)s, %(name)s, %(fields)s
API_GET_RESOURCE_BY_NAME_WITH_FIELDS_URI = \
    '/api/instances/%s/name:%s?fields=%s'
# %(resource type)s, %(fields)s
API_INSTANCES_WITH_FIELDS_URI = '/api/types/%s/instances?fields=%s'
# %(action)s
API_STORAGE_RESOURCE_ACTION_URI = '/api/types/storageResource/action/%s'
# %(storage resource id)s
API_MODIFY_FILESYSTEM_URI = \
    '/api/instances/storageResource/%s/action/modifyFilesystem'
API_MODIFY_LUN_URI = '/api/instances/storageResource/%s/action/modifyLun'

FILESYSTEM_DISPLAY_FIELDS = ','.join([
    'id', 'name', 'description', 'type', 'sizeTotal', 'sizeUsed',
    'sizeAllocated', 'isThinEnabled', 'isDataReductionEnabled', 'pool',
    'nasServer', 'storageResource', 'nfsShare', 'tieringPolicy',
    'hostIOSize', 'health'])

NFS_SHARE_DISPLAY_FIELDS = ','.join([
    'id', 'name', 'filesystem', 'readOnlyHosts', 'readWriteHosts',
    'readOnlyRootAccessHosts', 'rootAccessHosts', 'exportPaths'])

NAS_SERVER_DISPLAY_FIELDS = 'id,name,health,nfsServer'

STORAGE_POOL_DISPLAY_FIELDS = ','.join([
    'id', 'name', 'description', 'sizeFree', 'sizeTotal', 'sizeUsed',
    'sizeSubscribed', 'hasDataReductionEnabledLuns',
    'hasDataReductionEnabledFs', 'isFASTCacheEnabled', 'type', 'isAllFlash',
    'poolFastVP'])

LUN_DISPLAY_FIELDS = ','.join([
    'id', 'name', 'description', 'type', 'wwn', 'sizeTotal', 'sizeUsed',
    'sizeAllocated', 'hostAccess', 'pool', 'tieringPolicy', 'isThinEnabled',
    'isDataReductionEnabled'])

LICENSE_DISPLAY_FIELDS = 'id,name,isInstalled,isValid'
