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
.. module:: jenkins_rest.outcome
    :platform: Unix, Windows
    :synopsis: Turn raw HTTP responses into results or normalized failures
'''

import logging
import re
from urllib.parse import urlparse

from jenkins_rest import codec
from jenkins_rest import endpoints
from jenkins_rest.exceptions import ConflictException
from jenkins_rest.exceptions import JenkinsException
from jenkins_rest.exceptions import NotFoundException
from jenkins_rest.exceptions import OperationFailedException
from jenkins_rest.exceptions import ProtocolException

logger = logging.getLogger(__name__)

ERROR_HEADER = 'X-Error'

# location is a queue item, eg. "http://jenkins/queue/item/25/"
_IDENTIFIER = re.compile(r'/(\d+)/?$')

_DECODERS = {
    endpoints.JSON: codec.decode_json,
    endpoints.TEXT: codec.decode_text,
}


def describe(subject):
    '''Join the identifiers of a call into the text used in details.'''
    if subject is None:
        return None
    if isinstance(subject, (list, tuple)):
        return ' '.join(str(part) for part in subject)
    return str(subject)


def normalize(op, response, subject=None):
    '''Build the exception describing a response outside ``op.success``.

    :param op: Operation descriptor
    :param response: the response received, ``requests.Response``
    :param subject: identifiers of the call, ``str`` or ``tuple``
    :returns: :class:`JenkinsException` (not raised)
    '''
    status = response.status_code
    name = describe(subject)

    for refused, template in op.refuse:
        if status == refused:
            return OperationFailedException(template % name, scope=op.scope,
                                            status=status)

    if status == 404 and name is not None:
        return NotFoundException('%s not found' % name, scope=op.scope,
                                 status=status)

    error = response.headers.get(ERROR_HEADER)
    if error:
        return ConflictException(error, scope=op.scope, status=status)

    # Jenkins's funky authentication means its nigh impossible to
    # distinguish errors.
    if status in (401, 403, 500):
        return JenkinsException(
            'possibly authentication failed [%d]: %s'
            % (status, getattr(response, 'reason', None) or ''),
            scope=op.scope, status=status)

    return JenkinsException('unexpected status code: %d' % status,
                            scope=op.scope, status=status)


def probe(op, response):
    '''Existence probe: 200 is ``True``, 404 is ``False``.'''
    if response.status_code == 200:
        return True
    if response.status_code == 404:
        return False
    raise ProtocolException('unexpected status code: %d' % response.status_code,
                            scope=op.scope, status=response.status_code)


def extract_identifier(op, response):
    '''Return the positive integer at the end of the ``Location`` header.'''
    location = response.headers.get('Location')
    if not location:
        raise ProtocolException("Header 'Location' not found in response",
                                scope=op.scope, status=response.status_code)

    match = _IDENTIFIER.search(urlparse(location).path)
    if match is None or int(match.group(1)) <= 0:
        raise ProtocolException('no identifier in location: %s' % location,
                                scope=op.scope, status=response.status_code)
    return int(match.group(1))


def interpret(op, response, subject=None):
    '''Map a response to the operation's typed result or raise.

    :param op: Operation descriptor
    :param response: the response received, ``requests.Response``
    :param subject: identifiers of the call, used in failure details
    :returns: ``bool`` for probes, ``int`` for location identifiers,
        decoded JSON, text or ``None`` depending on ``op.payload``
    '''
    if op.method == 'HEAD':
        return probe(op, response)

    if response.status_code not in op.success:
        error = normalize(op, response, subject)
        logger.debug('%s failed: %s', op.scope, error.detail)
        raise error

    if op.payload == endpoints.LOCATION:
        return extract_identifier(op, response)
    if op.payload == endpoints.JSON and op.field:
        return codec.decode_list(op, response)
    if op.payload in _DECODERS:
        return _DECODERS[op.payload](op, response)
    return None
