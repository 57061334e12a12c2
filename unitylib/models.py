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
Unity resource representations.

Objects are built from the ``content`` member of a Unity instance response
and expose each JSON property as an attribute. They are never cached: every
accessor call fetches a fresh copy from the array.
"""


# instance attributes a JSON property must not overwrite
RESERVED_ATTRIBUTES = frozenset(['content'])


class _UnityResource(object):

    """
    Private base class representing a Unity resource instance
    """

    def __init__(self, content=None):
        """
        Create a Unity resource object
        :param content: JSON content of the Unity resource
        :return: Nothing
        """

        self.content = dict(content or {})
        # populate object based on JSON properties, properties defined on
        # the class (id, name, ...) and the backing dict are never replaced
        for k, v in self.content.items():
            if k not in RESERVED_ATTRIBUTES and not hasattr(type(self), k):
                setattr(self, k, v)

    @classmethod
    def from_response(cls, resp_json):
        """
        Build a resource from a full instance response ({"content": {...}})
        """

        return cls((resp_json or {}).get('content'))

    @property
    def id(self):
        return self.content.get('id')

    @property
    def name(self):
        return self.content.get('name')

    def get(self, key, default=None):
        return self.content.get(key, default)

    def __eq__(self, other):
        return (type(self) is type(other) and
                self.content == other.content)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        return '<%s id=%s name=%s>' % (type(self).__name__, self.id,
                                       self.name)


def _nested_id(content, key):
    value = content.get(key) or {}
    return value.get('id')


class Filesystem(_UnityResource):

    """
    A filesystem instance, or the result of a createFilesystem action.
    The latter only carries the new filesystem and storage resource ids
    so id and name are None there; use filesystem_id instead.
    """

    @property
    def filesystem_id(self):
        return self.id or _nested_id(self.content, 'filesystem')

    @property
    def storage_resource_id(self):
        """
        ID of the storage resource grouping the filesystem and its shares
        """
        return _nested_id(self.content, 'storageResource')

    @property
    def pool_id(self):
        return _nested_id(self.content, 'pool')

    @property
    def nas_server_id(self):
        return _nested_id(self.content, 'nasServer')

    @property
    def nfs_share_ids(self):
        return [share.get('id') for share in self.content.get('nfsShare', [])]


class NFSShare(_UnityResource):

    @property
    def filesystem_id(self):
        return _nested_id(self.content, 'filesystem')


class NASServer(_UnityResource):
    pass


class StoragePool(_UnityResource):

    @property
    def fast_vp_enabled(self):
        """
        FastVP tiering is enabled when the pool reports a non zero status
        """
        fast_vp = self.content.get('poolFastVP') or {}
        return fast_vp.get('status', 0) != 0


class Volume(_UnityResource):

    @property
    def pool_id(self):
        return _nested_id(self.content, 'pool')

    @property
    def size_total(self):
        return int(self.content.get('sizeTotal', 0))


class LicenseInfo(_UnityResource):

    @property
    def is_installed(self):
        return bool(self.content.get('isInstalled'))

    @property
    def is_valid(self):
        return bool(self.content.get('isValid'))

    @property
    def usable(self):
        return self.is_installed and self.is_valid
