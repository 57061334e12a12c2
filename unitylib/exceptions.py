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
Exceptions raised by the Unity API library
"""


class Error(Exception):

    """
    Base class for all Unity API library errors
    """


class Unauthorized(Error):
    pass


class HttpError(Error):

    """
    Raised when the Unity REST server answers with a non 2xx status code
    """

    def __init__(self, message, status_code=None, error_code=None):
        super(HttpError, self).__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code

    def __str__(self):
        return '[%s] %s (error code %s)' % (self.status_code, self.message,
                                            self.error_code)


class NotFound(Error):

    """
    Base class for lookups that did not find the requested resource.
    Catch this to branch on "does not exist" regardless of resource type.
    """


class FilesystemNotFound(NotFound):

    def __init__(self, message='Unable to find filesystem'):
        super(FilesystemNotFound, self).__init__(message)


class NFSShareNotFound(NotFound):
    pass


class NASServerNotFound(NotFound):
    pass


class StoragePoolNotFound(NotFound):
    pass


class VolumeNotFound(NotFound):
    pass


class FeatureNotSupported(Error):
    pass


class SizeTooSmall(Error):
    pass
