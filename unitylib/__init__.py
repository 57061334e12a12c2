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

""" Dell EMC Unity API base library

This package provides a module for wrapping the Unity HTTP
RESTful API: filesystems, NFS shares, NAS servers, storage pools
and volumes.

This module is a stand alone module and may be used by any tool
to manage Unity storage resources.
"""

__version__ = '1.0.0'
__license__ = 'Apache License, Version 2.0'
__author__ = 'EMC Corporation'
__author_email__ = 'support@emc.com'

from .unity import Unity
from .filesystem import (AccessType,
                         NFSShareDefaultAccess,
                         SupportedProtocol,
                         )
from .volume import (LicenseFeature,
                     TieringPolicy,
                     )
from .exceptions import (Error,
                         Unauthorized,
                         HttpError,
                         NotFound,
                         FilesystemNotFound,
                         NFSShareNotFound,
                         NASServerNotFound,
                         StoragePoolNotFound,
                         VolumeNotFound,
                         FeatureNotSupported,
                         SizeTooSmall,
                         )

__all__ = ['Unity',
           'AccessType',
           'NFSShareDefaultAccess',
           'SupportedProtocol',
           'LicenseFeature',
           'TieringPolicy',
           'Error',
           'Unauthorized',
           'HttpError',
           'NotFound',
           'FilesystemNotFound',
           'NFSShareNotFound',
           'NASServerNotFound',
           'StoragePoolNotFound',
           'VolumeNotFound',
           'FeatureNotSupported',
           'SizeTooSmall',
           ]
