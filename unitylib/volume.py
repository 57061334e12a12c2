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
Unity volume (LUN) operations and feature license lookups
"""

import enum
import logging

from unitylib import apibase
from unitylib import endpoints
from unitylib import exceptions
from unitylib import models
from unitylib import storagepool
from unitylib import utilities

LOG = logging.getLogger(__name__)


class LicenseFeature(enum.Enum):

    THIN_PROVISIONING = 'THIN_PROVISIONING'
    DATA_REDUCTION = 'DATA_REDUCTION'


class TieringPolicy(enum.IntEnum):

    """
    Unity FastVP tiering policies
    """

    AUTOTIER_HIGH = 0
    AUTOTIER = 1
    HIGHEST = 2
    LOWEST = 3
    NO_DATA_MOVEMENT = 4
    MIXED = 5


class VolumeAPI(apibase.APIBase):

    def is_feature_licensed(self, feature):
        """
        Return the license information of an array feature
        :param feature: LicenseFeature or license name
        :return: models.LicenseInfo
        """

        feature = utilities.eval_compat(feature)
        utilities.validate_id(feature, 'License feature')
        return models.LicenseInfo.from_response(self._find_by_id(
            'license', feature, endpoints.LICENSE_DISPLAY_FIELDS))

    def provisioning_params(self, is_thin_enabled, is_data_reduction_enabled,
                            resource_label):
        """
        Build the thin provisioning and data reduction fields of a create
        payload. A flag is only sent when its feature is licensed;
        requesting an unlicensed feature is an error.
        :param is_thin_enabled: Thin provisioning requested
        :param is_data_reduction_enabled: Data reduction requested
        :param resource_label: Resource type named in error messages
        :return: dict with isThinEnabled/isDataReductionEnabled
        """

        licenses = {}
        for feature in (LicenseFeature.THIN_PROVISIONING,
                        LicenseFeature.DATA_REDUCTION):
            try:
                licenses[feature] = self.is_feature_licensed(feature)
            except exceptions.Unauthorized:
                raise
            except exceptions.Error as err:
                LOG.debug('License lookup of %s failed: %s',
                          feature.value, err)
                raise exceptions.Error(
                    'Unable to get license info for feature: %s'
                    % feature.value) from err

        params = {}
        if licenses[LicenseFeature.THIN_PROVISIONING].usable:
            params['isThinEnabled'] = utilities.bool_str(is_thin_enabled)
        elif is_thin_enabled:
            raise exceptions.FeatureNotSupported(
                'Thin Provisioning is not supported on array and hence '
                'cannot create %s.' % resource_label)

        if licenses[LicenseFeature.DATA_REDUCTION].usable:
            params['isDataReductionEnabled'] = utilities.bool_str(
                is_data_reduction_enabled)
        elif is_data_reduction_enabled:
            raise exceptions.FeatureNotSupported(
                'Data Reduction is not supported on array and hence '
                'cannot create %s.' % resource_label)

        return params

    def find_volume_by_name(self, volume_name):
        """
        Find a volume by its unique name
        :param volume_name: Unity LUN name
        :return: models.Volume
        """

        utilities.validate_id(volume_name, 'Volume Name')
        return self._lookup(models.Volume, exceptions.VolumeNotFound,
                            self._find_by_name, 'lun', volume_name,
                            endpoints.LUN_DISPLAY_FIELDS)

    def find_volume_by_id(self, volume_id):
        """
        Find a volume by its ID
        :param volume_id: Unity LUN ID, e.g. sv_1
        :return: models.Volume
        """

        utilities.validate_id(volume_id, 'Volume Id')
        return self._lookup(models.Volume, exceptions.VolumeNotFound,
                            self._find_by_id, 'lun', volume_id,
                            endpoints.LUN_DISPLAY_FIELDS)

    def list_volumes(self):
        """
        Return every LUN of the array
        :return: List of models.Volume
        """

        return [models.Volume(content) for content in
                self._list('lun', endpoints.LUN_DISPLAY_FIELDS)]

    def create_lun(self, name, pool_id, description='', size=0,
                   tiering_policy=TieringPolicy.AUTOTIER_HIGH,
                   host_io_limit_id='', is_thin_enabled=True,
                   is_data_reduction_enabled=False):
        """
        Create a LUN in a storage pool.

        Names must be unique and contain at most 63 characters. Thin
        provisioning and data reduction may only be requested when their
        license is installed and valid. FastVP parameters are only sent
        when the pool has FastVP enabled.
        :param name: Name of the LUN
        :param pool_id: ID of the pool hosting the LUN
        :param description: Free text description
        :param size: Size in bytes
        :param tiering_policy: TieringPolicy applied when FastVP is enabled
        :param host_io_limit_id: ID of an I/O limit policy (optional)
        :param is_thin_enabled: Thin provision the LUN
        :param is_data_reduction_enabled: Enable data reduction
        :return: Decoded createLun response content
        """

        utilities.validate_name(name, 'volume')
        utilities.validate_id(pool_id, 'Storage Pool Id')

        pool = storagepool.StoragePoolAPI(self.client).find_storage_pool_by_id(
            pool_id)

        lun_params = {'pool': {'id': pool_id},
                      'size': int(size)}
        lun_params.update(self.provisioning_params(
            is_thin_enabled, is_data_reduction_enabled, 'Volume'))

        if pool.fast_vp_enabled:
            LOG.debug('FastVP is enabled')
            lun_params['fastVPParameters'] = {
                'tieringPolicy': int(tiering_policy)}
        else:
            LOG.debug('FastVP is not enabled')

        if host_io_limit_id:
            lun_params['ioLimitParameters'] = {
                'ioLimitPolicy': {'id': host_io_limit_id}}

        params = {'name': name, 'lunParameters': lun_params}
        if description:
            params['description'] = description

        r_uri = endpoints.API_STORAGE_RESOURCE_ACTION_URI % 'createLun'
        resp = self._post(r_uri, params=params) or {}
        LOG.debug('Created volume %s successfully', name)
        return resp.get('content', {})

    def delete_volume(self, volume_id):
        """
        Delete a LUN. The LUN must exist.
        :param volume_id: Unity LUN ID
        :return: Nothing
        """

        utilities.validate_id(volume_id, 'Volume Id')
        self.find_volume_by_id(volume_id)

        r_uri = endpoints.API_GET_RESOURCE_URI % ('storageResource',
                                                  volume_id)
        self._action('Delete Volume %s Failed.' % volume_id, self._delete,
                     r_uri)
        LOG.info('Delete Volume %s Successful', volume_id)

    def expand_volume(self, volume_id, new_size):
        """
        Increase the size of a LUN. Asking for the current size does
        nothing, asking for a smaller size is an error.
        :param volume_id: Unity LUN ID
        :param new_size: New size in bytes
        :return: Nothing
        """

        utilities.validate_id(volume_id, 'Volume Id')
        if new_size is None or int(new_size) <= 0:
            raise ValueError('New Volume size must be a positive number of '
                             'bytes')
        new_size = int(new_size)

        volume = self.find_volume_by_id(volume_id)

        if volume.size_total == new_size:
            LOG.info('New Volume size (%s) is same as existing Volume size',
                     new_size)
            return
        if new_size < volume.size_total:
            raise exceptions.SizeTooSmall(
                'Requested Volume size %s is smaller than existing Volume '
                'size %s' % (new_size, volume.size_total))

        params = {'lunParameters': {'size': new_size}}
        r_uri = endpoints.API_MODIFY_LUN_URI % volume_id
        self._action('Expand Volume %s Failed.' % volume_id, self._post,
                     r_uri, params=params)
        LOG.debug('Expanded volume %s to %s bytes', volume_id, new_size)
