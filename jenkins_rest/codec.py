#!/usr/bin/env python
# Software License Agreement (BSD License)
#
# Copyright (c) 2015 Hewlett-Packard Development Company, L.P.
# All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions
# are met:
#
#  * Redistributions of source code must retain the above copyright
#    notice, this list of conditions and the following disclaimer.
#  * Redistributions in binary form must reproduce the above
#    copyright notice, this list of conditions and the following
#    disclaimer in the documentation and/or other materials provided
#    with the distribution.
#  * Neither the name of Willow Garage, Inc. nor the names of its
#    contributors may be used to endorse or promote products derived
#    from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
# 'AS IS' AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
# LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
# FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE
# COPYRIGHT OWNER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING,
# BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES;
# LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT
# LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN
# ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

'''
.. module:: jenkins_rest.codec
    :platform: Unix, Windows
    :synopsis: Encoding of request bodies and decoding of response bodies
'''

import json
from urllib.parse import quote, urlencode

from jenkins_rest.exceptions import BadDataException

DEFAULT_HEADERS = {'Content-Type': 'text/xml; charset=utf-8'}
FORM_HEADERS = {'Content-Type': 'application/x-www-form-urlencoded'}

BAD_DATA = 'returned bad data'


def encode_query(query):
    '''Encode ordered ``(key, value)`` pairs, spaces as ``%20``.'''
    return urlencode(query, safe='', quote_via=quote)


def encode_config(config_xml):
    '''Config XML is sent verbatim.

    :returns: ``(body, headers)``
    '''
    return config_xml.encode('utf-8'), dict(DEFAULT_HEADERS)


def encode_offline_cause(message):
    '''Form body rewriting the offline cause of a node already offline.

    The field order is the one the node's configure form submits.

    :returns: ``(body, headers)``
    '''
    echo = json.dumps({'offlineMessage': message}, separators=(',', ':'))
    body = encode_query([
        ('offlineMessage', message),
        ('json', echo),
        ('Submit', 'Update reason'),
    ])
    return body.encode('utf-8'), dict(FORM_HEADERS)


def decode_json(op, response):
    try:
        return json.loads(response.text)
    except ValueError:
        raise BadDataException(BAD_DATA, scope=op.scope,
                               status=response.status_code)


def decode_list(op, response):
    '''Decode a JSON object and return its ``op.field`` array.'''
    data = decode_json(op, response)
    try:
        items = data[op.field]
    except (KeyError, TypeError):
        raise BadDataException(BAD_DATA, scope=op.scope,
                               status=response.status_code)
    if not isinstance(items, list):
        raise BadDataException(BAD_DATA, scope=op.scope,
                               status=response.status_code)
    return items


def decode_text(op, response):
    # XML configs and console logs are handed back untouched
    return response.text
