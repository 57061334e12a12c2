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
 Diagnostic dumps of the HTTP traffic exchanged with the Unity REST server
"""

import io
import logging

LOG = logging.getLogger(__name__)

HEADER_KEY_CONTENT_TYPE = 'Content-Type'
HEADER_VAL_CONTENT_TYPE_BINARY_OCTET_STREAM = 'application/octet-stream'

# never written to the logs in clear text
SENSITIVE_HEADERS = ('authorization', 'cookie', 'set-cookie',
                     'emc-csrf-token')
MASK = '******'

REQUEST_BANNER = 'UNITYLIB HTTP REQUEST'
RESPONSE_BANNER = 'UNITYLIB HTTP RESPONSE'


def is_bin_octet_body(headers):
    return (headers.get(HEADER_KEY_CONTENT_TYPE) ==
            HEADER_VAL_CONTENT_TYPE_BINARY_OCTET_STREAM)


def _to_text(body):
    if body is None:
        return ''
    if isinstance(body, bytes):
        return body.decode('utf-8', 'replace')
    return body


def _header_lines(headers):
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            value = MASK
        yield '%s: %s' % (key, value)


def dump_request(req, body=True):
    """
    Render a prepared request the way it goes out on the wire
    :param req: requests.PreparedRequest
    :param body: Include the request body
    :return: String dump of the request
    """

    lines = ['%s %s HTTP/1.1' % (req.method, req.path_url)]
    lines.extend(_header_lines(req.headers))
    lines.append('')
    if body:
        lines.append(_to_text(req.body))
    return '\r\n'.join(lines)


def dump_response(resp, body=True):
    """
    Render a response with its status line, headers and body
    :param resp: requests.Response
    :param body: Include the response body
    :return: String dump of the response
    """

    lines = ['HTTP/1.1 %s %s' % (resp.status_code, resp.reason or '')]
    lines.extend(_header_lines(resp.headers))
    lines.append('')
    if body:
        lines.append(_to_text(resp.content))
    return '\r\n'.join(lines)


def write_indented_n(w, b, n):
    """
    Write every line of b to w indented by n spaces. Lines are separated by
    a single newline and no newline is written after the last one.
    :param w: Writable text stream
    :param b: Text or bytes to indent
    :param n: Number of spaces
    :return: Nothing
    """

    lines = _to_text(b).splitlines()
    if not lines:
        return
    w.write('\n'.join(' ' * n + line for line in lines))


def write_indented(w, b):
    """
    Indent all lines four spaces
    """
    write_indented_n(w, b, 4)


def _banner(w, title):
    w.write('\n')
    w.write('    -------------------------- ')
    w.write(title)
    w.write(' -------------------------\n')


def log_request(req):
    """
    Log an indented dump of a request at debug level. The body is left
    out for binary octet streams.
    :param req: requests.PreparedRequest
    :return: Nothing
    """

    if not LOG.isEnabledFor(logging.DEBUG):
        return

    w = io.StringIO()
    _banner(w, REQUEST_BANNER)
    write_indented(w, dump_request(req, not is_bin_octet_body(req.headers)))
    w.write('\n')
    LOG.debug(w.getvalue())


def log_response(resp):
    """
    Log an indented dump of a response at debug level. The body is left
    out for binary octet streams.
    :param resp: requests.Response
    :return: Nothing
    """

    if not LOG.isEnabledFor(logging.DEBUG):
        return

    w = io.StringIO()
    _banner(w, RESPONSE_BANNER)
    write_indented(w, dump_response(resp, not is_bin_octet_body(resp.headers)))
    w.write('\n')
    LOG.debug(w.getvalue())
