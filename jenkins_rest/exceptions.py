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
.. module:: jenkins_rest.exceptions
    :platform: Unix, Windows
    :synopsis: Normalized failures raised by the resource facades
'''


class JenkinsException(Exception):
    '''General exception type for jenkins-API-related failures.

    Every failure carries the ``family.operation`` scope it was raised from
    and a human readable detail.

    :param detail: What went wrong, ``str``
    :param scope: Operation scope, e.g. ``job.get``, ``str``
    :param status: HTTP status code of the offending response, ``int``
    '''

    def __init__(self, detail='', scope=None, status=None):
        super(JenkinsException, self).__init__(detail)
        self.detail = detail
        self.scope = scope
        self.status = status

    def __str__(self):
        if self.scope:
            return 'jenkins: %s: %s' % (self.scope, self.detail)
        return self.detail


class NotFoundException(JenkinsException):
    '''A special exception to call out the case of receiving a 404.'''
    pass


class BadDataException(JenkinsException):
    '''The request succeeded but its body could not be decoded.'''
    pass


class ConflictException(JenkinsException):
    '''The server rejected the request and said why in a header.'''
    pass


class OperationFailedException(JenkinsException):
    '''The server answered, but not the way a successful side effect does.'''
    pass


class UnsupportedException(JenkinsException):
    '''The operation is never allowed for the given target.'''
    pass


class ProtocolException(JenkinsException):
    '''A response that does not have the shape the operation relies on.'''
    pass


class TransportException(JenkinsException):
    '''A connection-level failure; no HTTP response was received.'''
    pass


class TimeoutException(TransportException):
    '''A special exception to call out in the case of a socket timeout.'''
