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
Unity filesystem, NFS share and NAS server operations
"""

import enum
import logging

from unitylib import apibase
from unitylib import endpoints
from unitylib import exceptions
from unitylib import models
from unitylib import storagepool
from unitylib import utilities
from unitylib import volume

LOG = logging.getLogger(__name__)

FS_NAME_MAX_LENGTH = utilities.NAME_MAX_LENGTH
DEFAULT_HOST_IO_SIZE = 8192


class AccessType(enum.Enum):

    """
    Host access granted by an NFS share modify call
    """

    READ_ONLY = 'READ_ONLY'
    READ_WRITE = 'READ_WRITE'
    READ_ONLY_ROOT = 'READ_ONLY_ROOT'
    READ_WRITE_ROOT = 'READ_WRITE_ROOT'


class NFSShareDefaultAccess(enum.Enum):

    """
    Access granted to hosts not listed on an NFS share
    """

    NONE = '0'
    READ_ONLY = '1'
    READ_WRITE = '2'
    READ_ONLY_ROOT = '3'
    READ_WRITE_ROOT = '4'


class SupportedProtocol(enum.IntEnum):

    NFS = 0
    CIFS = 1
    MULTIPROTOCOL = 2


# NFS share parameter holding the host list of each access type
HOST_ACCESS_FIELDS = {
    AccessType.READ_ONLY: 'readOnlyHosts',
    AccessType.READ_WRITE: 'readWriteHosts',
    AccessType.READ_ONLY_ROOT: 'readOnlyRootAccessHosts',
    AccessType.READ_WRITE_ROOT: 'rootAccessHosts',
}


class FilesystemAPI(apibase.APIBase):

    """
    Filesystem, NFS share and NAS server accessor
    """

    def find_filesystem_by_name(self, filesystem_name):
        """
        Find the filesystem by its name
        :param filesystem_name: Unique filesystem name
        :return: models.Filesystem
        :raises FilesystemNotFound: if the lookup fails
        """

        utilities.validate_id(filesystem_name, 'Filesystem Name')
        return self._lookup(models.Filesystem, exceptions.FilesystemNotFound,
                            self._find_by_name, 'filesystem', filesystem_name,
                            endpoints.FILESYSTEM_DISPLAY_FIELDS)

    def find_filesystem_by_id(self, filesystem_id):
        """
        Find the filesystem by its ID
        :param filesystem_id: Unity filesystem ID, e.g. fs_1
        :return: models.Filesystem
        :raises FilesystemNotFound: if the lookup fails
        """

        utilities.validate_id(filesystem_id, 'Filesystem Id')
        return self._lookup(models.Filesystem, exceptions.FilesystemNotFound,
                            self._find_by_id, 'filesystem', filesystem_id,
                            endpoints.FILESYSTEM_DISPLAY_FIELDS)

    def list_filesystems(self):
        """
        Return every filesystem of the array
        :return: List of models.Filesystem
        """

        return [models.Filesystem(content) for content in
                self._list('filesystem', endpoints.FILESYSTEM_DISPLAY_FIELDS)]

    def create_filesystem(self, name, storage_pool, description, nas_server,
                          size,
                          tiering_policy=volume.TieringPolicy.AUTOTIER_HIGH,
                          host_io_size=DEFAULT_HOST_IO_SIZE,
                          supported_protocol=SupportedProtocol.NFS,
                          is_thin_enabled=True,
                          is_data_reduction_enabled=False):
        """
        Create a new filesystem on the array, exported over NFS only.

        The pool is looked up first, then the thin provisioning and data
        reduction licenses. Requesting an unlicensed feature fails without
        creating anything. The tiering policy is only sent when the pool
        has FastVP enabled.
        :param name: Filesystem name, at most 63 characters
        :param storage_pool: ID of the pool hosting the filesystem
        :param description: Free text description
        :param nas_server: ID of the NAS server serving the filesystem
        :param size: Size in bytes
        :param tiering_policy: volume.TieringPolicy
        :param host_io_size: Typical host I/O size in bytes
        :param supported_protocol: SupportedProtocol
        :param is_thin_enabled: Thin provision the filesystem
        :param is_data_reduction_enabled: Enable data reduction
        :return: models.Filesystem built from the createFilesystem response,
                 holding filesystem_id and storage_resource_id only
        """

        utilities.validate_name(name, 'filesystem', FS_NAME_MAX_LENGTH)
        utilities.validate_id(storage_pool, 'Storage Pool Id')
        utilities.validate_id(nas_server, 'NAS Server Id')

        pool = storagepool.StoragePoolAPI(self.client).find_storage_pool_by_id(
            storage_pool)
        volume_api = volume.VolumeAPI(self.client)

        fs_params = {
            'pool': {'id': storage_pool},
            'supportedProtocols': int(supported_protocol),
            'nasServer': {'id': nas_server},
            # NFS only, CIFS events stay disabled
            'fileEventSettings': {'isCIFSEnabled': False,
                                  'isNFSEnabled': True},
        }
        if size:
            fs_params['size'] = int(size)
        if host_io_size:
            fs_params['hostIOSize'] = int(host_io_size)

        fs_params.update(volume_api.provisioning_params(
            is_thin_enabled, is_data_reduction_enabled, 'Filesystem'))

        if pool.fast_vp_enabled:
            LOG.debug('FastVP is enabled')
            fs_params['fastVPParameters'] = {
                'tieringPolicy': int(tiering_policy)}
        else:
            LOG.debug('FastVP is not enabled')

        params = {'name': name, 'fsParameters': fs_params}
        if description:
            params['description'] = description

        r_uri = endpoints.API_STORAGE_RESOURCE_ACTION_URI % 'createFilesystem'
        resp = self._post(r_uri, params=params)
        LOG.debug('Created filesystem %s successfully', name)
        return models.Filesystem.from_response(resp)

    def delete_filesystem(self, filesystem_id):
        """
        Delete a filesystem by its ID. The filesystem must exist.
        :param filesystem_id: Unity filesystem ID
        :return: Nothing
        """

        utilities.validate_id(filesystem_id, 'Filesystem Id')
        filesystem = self.find_filesystem_by_id(filesystem_id)

        r_uri = endpoints.API_GET_RESOURCE_URI % (
            'storageResource', filesystem.storage_resource_id)
        self._action('Delete Filesystem %s Failed.' % filesystem_id,
                     self._delete, r_uri)
        LOG.debug('Delete Filesystem %s Successful', filesystem_id)

    def create_nfs_share(self, name, path, filesystem_id,
                         nfs_share_default_access=NFSShareDefaultAccess.NONE):
        """
        Create an NFS share on a filesystem
        :param name: Share name
        :param path: Path of the share within the filesystem
        :param filesystem_id: Unity filesystem ID
        :param nfs_share_default_access: NFSShareDefaultAccess or its value
        :return: models.Filesystem refreshed after the share creation
        """

        utilities.validate_id(filesystem_id, 'Filesystem Id')
        utilities.validate_id(name, 'NFS Share Name')
        utilities.validate_id(path, 'NFS Share Path')
        nfs_share_default_access = NFSShareDefaultAccess(
            nfs_share_default_access)

        filesystem = self.find_filesystem_by_id(filesystem_id)

        share_params = {'defaultAccess': nfs_share_default_access.value}
        params = {'nfsShareCreate': [{'name': name,
                                      'path': path,
                                      'nfsShareParameters': share_params}]}

        self._modify_filesystem(filesystem.storage_resource_id, params,
                                'Create NFS Share failed.')
        LOG.debug('Created NFS share %s on filesystem %s', name,
                  filesystem_id)

        return self.find_filesystem_by_id(filesystem_id)

    def find_nfs_share_by_name(self, nfs_share_name):
        """
        Find the NFS share by its name
        :param nfs_share_name: NFS share name
        :return: models.NFSShare
        """

        utilities.validate_id(nfs_share_name, 'NFS Share Name')
        return self._lookup(models.NFSShare, exceptions.NFSShareNotFound,
                            self._find_by_name, 'nfsShare', nfs_share_name,
                            endpoints.NFS_SHARE_DISPLAY_FIELDS)

    def find_nfs_share_by_id(self, nfs_share_id):
        """
        Find the NFS share by its ID
        :param nfs_share_id: Unity NFS share ID
        :return: models.NFSShare
        """

        utilities.validate_id(nfs_share_id, 'NFS Share Id')
        return self._lookup(models.NFSShare, exceptions.NFSShareNotFound,
                            self._find_by_id, 'nfsShare', nfs_share_id,
                            endpoints.NFS_SHARE_DISPLAY_FIELDS)

    def modify_nfs_share_host_access(self, filesystem_id, nfs_share_id,
                                     host_ids, access_type):
        """
        Replace the hosts granted one type of access on an NFS share.
        Only the host list of the given access type is sent.
        :param filesystem_id: Unity filesystem ID owning the share
        :param nfs_share_id: Unity NFS share ID
        :param host_ids: List of Unity host IDs
        :param access_type: AccessType or its name, e.g. 'READ_ONLY'
        :return: Nothing
        """

        utilities.validate_id(filesystem_id, 'Filesystem Id')
        utilities.validate_id(nfs_share_id, 'NFS Share Id')
        if host_ids is None or isinstance(host_ids, str):
            raise ValueError('Host Ids must be a list of host IDs')
        access_type = AccessType(access_type)

        filesystem = self.find_filesystem_by_id(filesystem_id)

        field = HOST_ACCESS_FIELDS[access_type]
        share_params = {field: [{'id': host_id} for host_id in host_ids]}
        params = {'nfsShareModify': [{'nfsShare': {'id': nfs_share_id},
                                      'nfsShareParameters': share_params}]}

        self._modify_filesystem(filesystem.storage_resource_id, params,
                                'Modify NFS Share failed.')
        LOG.debug('Modify NFS share: %s successful. Added host with access '
                  '%s', nfs_share_id, access_type.value)

    def delete_nfs_share(self, filesystem_id, nfs_share_id):
        """
        Delete an NFS share by its ID. Both the filesystem and the share
        must exist.
        :param filesystem_id: Unity filesystem ID owning the share
        :param nfs_share_id: Unity NFS share ID
        :return: Nothing
        """

        utilities.validate_id(filesystem_id, 'Filesystem Id')
        utilities.validate_id(nfs_share_id, 'NFS Share Id')

        filesystem = self.find_filesystem_by_id(filesystem_id)
        self.find_nfs_share_by_id(nfs_share_id)

        params = {'nfsShareDelete': [{'nfsShare': {'id': nfs_share_id}}]}
        self._modify_filesystem(filesystem.storage_resource_id, params,
                                'Delete NFS Share: %s Failed.' % nfs_share_id)
        LOG.info('Delete NFS Share: %s Successful', nfs_share_id)

    def find_nas_server_by_id(self, nas_server_id):
        """
        Find the NAS server by its ID
        :param nas_server_id: Unity NAS server ID, e.g. nas_1
        :return: models.NASServer
        """

        utilities.validate_id(nas_server_id, 'NAS Server Id')
        return self._lookup(models.NASServer, exceptions.NASServerNotFound,
                            self._find_by_id, 'nasServer', nas_server_id,
                            endpoints.NAS_SERVER_DISPLAY_FIELDS)

    def _modify_filesystem(self, resource_id, params, failure):
        r_uri = endpoints.API_MODIFY_FILESYSTEM_URI % resource_id
        self._action(failure, self._post, r_uri, params=params)
