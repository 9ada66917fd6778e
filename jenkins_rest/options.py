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
.. module:: jenkins_rest.options
    :platform: Unix, Windows
    :synopsis: Recognized options of each operation family
'''

import logging

from jenkins_rest import endpoints

logger = logging.getLogger(__name__)


class Options(object):
    '''The keys an operation recognizes, with their defaults.

    Options are accepted as a mapping, as keyword arguments or both
    (keywords win). Unknown keys are ignored and ``None`` means "use the
    default".
    '''

    def __init__(self, **defaults):
        self.defaults = defaults

    def resolve(self, options=None, **kwargs):
        '''Return a complete ``dict`` of option values.

        :param options: Caller supplied options, ``dict`` or ``None``
        :raises ValueError: when ``depth`` is not a non-negative integer
        '''
        given = dict(options or {})
        given.update(kwargs)

        values = dict(self.defaults)
        for key, value in given.items():
            if key not in self.defaults:
                logger.debug('ignoring unrecognized option %r', key)
                continue
            if value is not None:
                values[key] = value

        if 'depth' in values:
            values['depth'] = _depth(values['depth'])
        return values


def _depth(value):
    if isinstance(value, bool):
        raise ValueError('depth must be a non-negative integer: %r' % value)
    try:
        depth = int(value)
    except (TypeError, ValueError):
        raise ValueError('depth must be a non-negative integer: %r' % value)
    if depth < 0:
        raise ValueError('depth must be a non-negative integer: %r' % value)
    return depth


DETAIL = Options(depth=0)

BUILD = Options(token=None, parameters=None)

NODE_CREATE = Options(
    numExecutors=2,
    nodeDescription=None,
    remoteFS='/var/lib/jenkins',
    labels=None,
    exclusive=False,
    launcher=endpoints.LAUNCHER_JNLP,
    launcher_params=None,
)
