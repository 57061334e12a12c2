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
Unity API library
"""

import logging
import os.path

from unitylib import filesystem
from unitylib import httphelper
from unitylib import opts
from unitylib import storagepool
from unitylib import volume

LOG = logging.getLogger(__name__)


class Unity(object):

    """
    Unity API class. Holds the shared executor and one accessor per
    resource family:

      unity.filesystem   filesystems, NFS shares, NAS servers
      unity.storage_pool storage pools
      unity.volume       volumes (LUNs) and licenses
    """

    def __init__(self, rest_server_ip='', rest_server_port=443,
                 rest_server_username='', rest_server_password='',
                 verify_server_certificate=False, server_certificate_path='',
                 request_timeout=httphelper.GW_REQ_TIMEOUT):
        """
        Create a Unity API object
        :param rest_server_ip: Unity management IP address or hostname
        :param rest_server_port: Unity management HTTPS port
        :param rest_server_username: REST API user
        :param rest_server_password: REST API password
        :param verify_server_certificate: Verify the array certificate
        :param server_certificate_path: Certificate or CA bundle path used
                                        when verifying
        :param request_timeout: Timeout in seconds of each request
        :return: Nothing
        """

        if not rest_server_ip:
            raise ValueError('Invalid rest_server_ip parameter, '
                             'rest_server_ip=%s' % rest_server_ip)

        self.host_addr = (rest_server_ip, str(rest_server_port))
        self.auth = (rest_server_username, rest_server_password)

        verify = self._get_verify(verify_server_certificate,
                                  server_certificate_path)
        self.client = httphelper.RestClient(self.host_addr, self.auth,
                                            verify=verify,
                                            timeout=request_timeout)

        self.filesystem = filesystem.FilesystemAPI(self.client)
        self.storage_pool = storagepool.StoragePoolAPI(self.client)
        self.volume = volume.VolumeAPI(self.client)

    @classmethod
    def from_config(cls, conf, group=opts.UNITY_GROUP):
        """
        Create a Unity API object from oslo.config options
        :param conf: oslo_config.cfg.ConfigOpts
        :param group: Option group holding the unity options
        :return: Unity object
        """

        opts.register_opts(conf, group)
        section = conf[group]
        return cls(rest_server_ip=section.rest_server_ip,
                   rest_server_port=section.rest_server_port,
                   rest_server_username=section.rest_server_username,
                   rest_server_password=section.rest_server_password,
                   verify_server_certificate=section.verify_server_certificate,
                   server_certificate_path=section.server_certificate_path,
                   request_timeout=section.request_timeout)

    def _get_verify(self, verify_server_certificate, server_certificate_path):
        """
        Value handed to requests for certificate verification: False, True
        or the absolute path of a certificate bundle
        """

        if not verify_server_certificate:
            return False

        if server_certificate_path and os.path.isabs(server_certificate_path):
            LOG.debug('Verifying Unity certificate with %s',
                      server_certificate_path)
            return server_certificate_path

        return True

    def logout(self):
        self.client.logout()
