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
.. module:: jenkins_rest.result
    :platform: Unix, Windows
    :synopsis: Success-or-failure envelope around a facade call
'''

from jenkins_rest.exceptions import JenkinsException

_MISSING = object()


class Result(object):
    '''Exactly one of ``value`` or ``error`` is meaningful.

    ``error`` is the normalized :class:`JenkinsException` of a failed call
    and ``None`` on success; ``value`` is whatever the call returned (which
    may itself be ``None`` for operations without a payload).
    '''

    __slots__ = ('value', 'error')

    def __init__(self, value=_MISSING, error=None):
        if value is _MISSING:
            if error is None:
                raise ValueError('a result holds a value or an error')
            value = None
        elif error is not None:
            raise ValueError('a result holds a value or an error, not both')
        self.value = value
        self.error = error

    @classmethod
    def capture(cls, func, *args, **kwargs):
        '''Run a facade call and wrap its outcome.

        Example::

            >>> result = Result.capture(server.job.get, 'my-job')
            >>> if result.ok:
            ...     print(result.value['url'])
        '''
        try:
            return cls(value=func(*args, **kwargs))
        except JenkinsException as e:
            return cls(error=e)

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return '<Result value=%r>' % (self.value,)
        return '<Result error=%r>' % (str(self.error),)
