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
Common plumbing for the Unity resource accessors
"""

import logging

from unitylib import endpoints
from unitylib import exceptions
from unitylib import httphelper
from unitylib import utilities

LOG = logging.getLogger(__name__)


class APIBase(object):

    """
    Base class of the per-resource accessors. Accessors hold no state
    besides the shared RestClient executor.
    """

    def __init__(self, client):
        """
        :param client: httphelper.RestClient (or any object with the same
                       execute(op, uri, data) method)
        """

        self.client = client

    def _get(self, r_uri):
        return self.client.execute(httphelper.HttpAction.GET, r_uri)

    def _post(self, r_uri, params=None):
        return self.client.execute(httphelper.HttpAction.POST, r_uri,
                                   data=params)

    def _delete(self, r_uri):
        return self.client.execute(httphelper.HttpAction.DELETE, r_uri)

    def _find_by_id(self, resource_type, resource_id, fields):
        r_uri = endpoints.API_GET_RESOURCE_WITH_FIELDS_URI % (
            resource_type, utilities.encode_string(resource_id), fields)
        return self._get(r_uri)

    def _find_by_name(self, resource_type, name, fields):
        r_uri = endpoints.API_GET_RESOURCE_BY_NAME_WITH_FIELDS_URI % (
            resource_type, utilities.encode_string(name, safe='/'), fields)
        return self._get(r_uri)

    def _list(self, resource_type, fields):
        r_uri = endpoints.API_INSTANCES_WITH_FIELDS_URI % (resource_type,
                                                           fields)
        resp = self._get(r_uri) or {}
        return [entry.get('content', {}) for entry in resp.get('entries', [])]

    def _lookup(self, model, not_found, lookup, *args):
        """
        Run a lookup and convert any array error into the resource specific
        not found error. Authentication failures are not lookups failing
        and are propagated unchanged.
        :param model: models class built from the response
        :param not_found: exceptions.NotFound subclass to raise
        :param lookup: Bound lookup method (_find_by_id or _find_by_name)
        :param args: Arguments of the lookup
        :return: Instance of model
        """

        try:
            return model.from_response(lookup(*args))
        except exceptions.Unauthorized:
            raise
        except exceptions.Error as err:
            LOG.debug('Unable to find %s %s Error: %s', args[0], args[1],
                      err)
            raise not_found('Unable to find %s %s. Error: %s'
                            % (args[0], args[1], err))

    def _action(self, failure, call, *args, **kwargs):
        """
        Run a modifying request and wrap array errors into an Error naming
        the failed operation. The original error is kept as __cause__ so
        its status and error codes stay reachable. Authentication failures
        are propagated unchanged.
        :param failure: Message prefix, e.g. 'Delete Volume sv_1 Failed.'
        :param call: Bound request method (_post or _delete)
        :return: Decoded response of call
        """

        try:
            return call(*args, **kwargs)
        except exceptions.Unauthorized:
            raise
        except exceptions.Error as err:
            raise exceptions.Error('%s Error: %s' % (failure, err)) from err
