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
 HTTP helper script for communicating with the Unity REST API
"""

import datetime
import enum
import functools
import json
import logging
import time

import requests
import urllib3

from unitylib import api_logging
from unitylib import endpoints
from unitylib import exceptions

logging.getLogger('requests').setLevel(logging.WARNING)
logging.getLogger('urllib3').setLevel(logging.WARNING)

LOG = logging.getLogger(__name__)

GW_REQ_TIMEOUT = 30.0
GW_REQ_RETRIES = 4
TOKEN_INACTIVITY_LIFETIME = 60 * 50  # 50 min, Unity idles sessions at 60

HEADER_CSRF_TOKEN = 'EMC-CSRF-TOKEN'
DEFAULT_HEADERS = {'Content-Type': 'application/json',
                   'Accept': 'application/json',
                   'X-EMC-REST-CLIENT': 'true'}


def _error_details(http_resp):
    """
    Extract the Unity error code and english message from an error
    response. Unity errors look like
    {"error": {"errorCode": N, "httpStatusCode": N,
               "messages": [{"en-US": "..."}]}}
    :param http_resp: HTTP response object
    :return: Tuple error code, message
    """

    try:
        error = http_resp.json().get('error') or {}
    except (ValueError, AttributeError):
        return None, http_resp.text

    messages = [m.get('en-US') for m in error.get('messages', [])
                if m.get('en-US')]
    return error.get('errorCode'), ' '.join(messages) or http_resp.text


def basicauth(func):
    """
    Decorator that will acquire a Unity login session (cookie and CSRF
    token) before the decorated request is performed.
    :param func: Function decorated
    :return: None
    """

    @functools.wraps(func)
    def auth(*args, **kwargs):
        """
        Check if Token is valid, if not log in and create a new Token
        """

        # get current Token or create a new Token
        token = kwargs.get('token') or Token()
        # get the ip/port address pair of the array
        addr = kwargs.get('host', ())
        # get current credentials
        httpauth = kwargs.get('auth', ())

        if not token.valid():  # token has expired get a new one
            token.session.cookies.clear()
            http_resp = request(op=HttpAction.GET, addr=addr,
                                uri=endpoints.API_LOGIN_URI, auth=httpauth,
                                session=token.session,
                                verify=kwargs.get('verify', False),
                                timeout=kwargs.get('timeout', GW_REQ_TIMEOUT))
            if http_resp.status_code != 200:
                _, message = _error_details(http_resp)
                raise exceptions.Unauthorized(
                    'Could not authenticate on Unity with: [%s] %s'
                    % (http_resp.status_code, message))
            token.token = http_resp.headers.get(HEADER_CSRF_TOKEN)
            LOG.debug('Token %x acquired', id(token))

        kwargs['token'] = token
        # call function/method this decorator wraps
        ret = func(*args, **kwargs)
        return ret

    return auth


@basicauth
def api_request(**kwargs):
    """
    Perform a Unity REST request using the login session held by the
    Token. On a 401 the Token is expired, a new session is acquired and the
    request is sent one more time.
    :param op: HttpAction GET, PUT, POST, DELETE
    :param uri: HTTP resource endpoint
    :param host: Unity management ip/port pair
    :param data: HTTP Payload (optional)
    :param auth: HTTP basic authentication credentials
    :param token: HTTP token (optional)
    :param verify: Certificate verification, bool or CA bundle path
    :param timeout: Request timeout in seconds
    :param retry: Re-authenticate and retry on 401 (default True)
    :return: HTTP response object
    """

    server_authtoken = kwargs.get('token')

    req = request(op=kwargs.get('op'), addr=kwargs.get('host'),
                  uri=kwargs.get('uri'), data=kwargs.get('data'),
                  headers={HEADER_CSRF_TOKEN: server_authtoken.token},
                  session=server_authtoken.session,
                  verify=kwargs.get('verify', False),
                  timeout=kwargs.get('timeout', GW_REQ_TIMEOUT))

    if req.status_code == 401 and kwargs.get('retry', True):
        _, message = _error_details(req)
        LOG.info('Auth error [%s] %s occured with request of %s on %s with '
                 'token %x. Trying to re-new the token and re-run the '
                 'request', req.status_code, message, kwargs.get('uri'),
                 kwargs.get('host'), id(server_authtoken))
        server_authtoken.expire()
        kwargs['retry'] = False
        return api_request(**kwargs)

    return req


def request(op, addr, uri, data=None, headers=None, auth=None, session=None,
            verify=False, timeout=GW_REQ_TIMEOUT):
    """
    Perform HTTP request
    :param op: HttpAction verb GET, PUT, POST, DELETE
    :param addr: ip, port pair of the Unity management interface
    :param uri: Request uri, may include a query string
    :param data: Request payload
    :param headers: Extra request headers
    :param auth: Basic authentication tuple (login requests only)
    :param session: requests.Session carrying the login cookie
    :param verify: Certificate verification, bool or CA bundle path
    :param timeout: Request timeout in seconds
    :return: HTTP response Object
    """

    u_prefix = 'https://'  # Unity only listens on https

    r_headers = dict(DEFAULT_HEADERS)
    r_headers.update(
        dict((k, v) for k, v in (headers or {}).items() if v is not None))

    # always remove slashes at beginning of uri
    uri = uri.lstrip('/')
    r_url = '%s%s:%s/%s' % (u_prefix, addr[0], addr[1], uri)

    body = None
    if data is not None:
        body = json.dumps(data)

    http_auth = None
    if auth:
        user, password = auth  # split up auth tuple
        http_auth = requests.auth.HTTPBasicAuth(user, password)

    session = session or new_session()
    prepared = session.prepare_request(
        requests.Request(op.value.upper(), r_url, data=body,
                         headers=r_headers, auth=http_auth))

    api_logging.log_request(prepared)
    try:
        http_resp = session.send(prepared, verify=verify, timeout=timeout)
    except requests.exceptions.RequestException as err:
        # error outside scope of HTTP status codes
        raise exceptions.Error('Error sending %s %s to Unity: %s'
                               % (op.value, r_url, err))
    api_logging.log_response(http_resp)

    LOG.debug('RESP: %s %s [%s] (elapsed %s)', op.value, r_url,
              http_resp.status_code, http_resp.elapsed)

    return http_resp


def new_session():
    session = requests.Session()
    session.mount('https://',
                  requests.adapters.HTTPAdapter(max_retries=GW_REQ_RETRIES))
    return session


class Singleton(type):
    """
    A singleton factory. A defined class behavior expected to be used
    as a metaclass
    """

    _klasses = {}

    def __call__(self, *args, **kwargs):
        """
        Callable used to check if the class is already instanced
        :param self:
        :param args: Class args
        :param kwargs: Class keyword args
        :return: Instance of class or a new instance of the class
        """

        if self not in self._klasses:
            self._klasses[self] = super(Singleton, self).__call__(*args,
                                                                  **kwargs)
        return self._klasses[self]


class Token(object):
    """
    Class represents a Unity login session: the CSRF token returned at
    login and the requests session carrying the login cookie
    """

    def __init__(self, http_token=None):
        """
        Create a Token instance
        :param http_token: CSRF token string if you want to reuse an
                           existing session
        :return: Unity session Token object
        """

        self._start_time = 0  # record when we created the token
        self._token = http_token
        if self._token:
            self._start_time = time.time()
        self._expired = not self._token
        self.session = new_session()
        LOG.debug('Initialize new %x token', id(self))

    def valid(self):
        if self._expired:
            return False

        if time.time() - self._start_time > TOKEN_INACTIVITY_LIFETIME:
            self._expired = True
            LOG.debug('Token %x is expired at %s',
                      id(self), datetime.datetime.now())

        return not self._expired

    def expire(self):
        self._expired = True
        LOG.debug('Token %x is forcedly expired', id(self))

    @property
    def token(self):
        """
        Token property getter
        """
        return self._token

    @token.setter
    def token(self, value):
        """
        Token property setter
        """

        self._token = value
        self._start_time = time.time()
        self._expired = False  # new token set expiry to false
        expire_datetime = (datetime.datetime.now() +
                           datetime.timedelta(
                               seconds=TOKEN_INACTIVITY_LIFETIME))
        LOG.debug('Token %x is set, expires at %s', id(self),
                  expire_datetime)


class TokenFactory(object, metaclass=Singleton):

    def __init__(self):
        self._tokens = {}

    def get_token(self, addr, auth):
        token_key = '%s@%s:%s' % (auth[0], addr[0], addr[1])
        if token_key not in self._tokens:
            LOG.debug('Creating new token for %s', token_key)
            self._tokens[token_key] = Token()
        token = self._tokens[token_key]
        LOG.debug('Use %x token for %s', id(token), token_key)
        return token


class HttpAction(enum.Enum):

    """
    Enumeration object to aid in setting op functions for HTTP requests
    """

    GET = 'get'
    PUT = 'put'
    POST = 'post'
    PATCH = 'patch'
    DELETE = 'delete'


class RestClient(object):

    """
    Shared executor for the Unity accessors. Every call is authenticated,
    retried once after re-authentication on a 401, and decoded from JSON.
    Non 2xx responses are raised as HttpError.
    """

    def __init__(self, host_addr, auth, verify=False,
                 timeout=GW_REQ_TIMEOUT, token=None):
        """
        :param host_addr: Tuple ip, port of the Unity management interface
        :param auth: Tuple username, password
        :param verify: Certificate verification, bool or CA bundle path
        :param timeout: Request timeout in seconds
        :param token: Token to use, shared per address/user by default
        """

        self.host_addr = host_addr
        self.auth = auth
        self.verify = verify
        self.timeout = timeout
        self.token = token or TokenFactory().get_token(host_addr, auth)

        if not verify:
            LOG.warning('Certificate verification is disabled for Unity '
                        '%s:%s', host_addr[0], host_addr[1])
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def execute(self, op, uri, data=None):
        """
        Perform an authenticated request and decode the JSON response
        :param op: HttpAction
        :param uri: Resource uri
        :param data: Payload serialized as JSON (optional)
        :return: Decoded JSON document or None for an empty body
        """

        http_resp = api_request(
            op=op, uri=uri, data=data, host=self.host_addr, auth=self.auth,
            token=self.token, verify=self.verify, timeout=self.timeout)

        if http_resp.status_code == 401:
            _, message = _error_details(http_resp)
            raise exceptions.Unauthorized(
                'Unity rejected %s %s after re-authentication: %s'
                % (op.value, uri, message))

        if not 200 <= http_resp.status_code < 300:
            error_code, message = _error_details(http_resp)
            raise exceptions.HttpError(message,
                                       status_code=http_resp.status_code,
                                       error_code=error_code)

        if not http_resp.text:
            return None

        try:
            return http_resp.json()
        except ValueError:
            raise exceptions.Error('Response of %s %s is not JSON: %s'
                                   % (op.value, uri, http_resp.text))

    def logout(self):
        """
        Close the Unity login session held by the token
        :return: Nothing
        """

        if not self.token.valid():
            return

        http_resp = request(op=HttpAction.POST, addr=self.host_addr,
                            uri=endpoints.API_LOGOUT_URI,
                            data={'localCleanupOnly': True},
                            headers={HEADER_CSRF_TOKEN: self.token.token},
                            session=self.token.session, verify=self.verify,
                            timeout=self.timeout)
        self.token.expire()
        self.token.session.cookies.clear()
        LOG.debug('Logged out of Unity %s:%s [%s]', self.host_addr[0],
                  self.host_addr[1], http_resp.status_code)
