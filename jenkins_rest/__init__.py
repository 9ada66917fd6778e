#!/usr/bin/env python
# Software License Agreement (BSD License)
#
# Copyright (c) 2010, Willow Garage, Inc.
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
#
# Authors:
# Ken Conley <kwc@willowgarage.com>
# James Page <james.page@canonical.com>
# Tully Foote <tfoote@willowgarage.com>
# Matthew Gertner <matthew.gertner@gmail.com>

'''
.. module:: jenkins_rest
    :platform: Unix, Windows
    :synopsis: Python API to interact with Jenkins
    :noindex:

A :class:`Jenkins` handle exposes four namespaces, ``job``, ``build``,
``node`` and ``queue``. Every operation either returns its typed result or
raises a :class:`JenkinsException` whose message reads
``jenkins: <family>.<operation>: <detail>``.

Example::

    >>> server = jenkins_rest.Jenkins('http://localhost:8080', 'me', 'secret')
    >>> queue_id = server.job.build('my-job', parameters={'branch': 'main'})
    >>> server.queue.item(queue_id)['why']
'''

import logging
from logging import NullHandler

from jenkins_rest.endpoints import LAUNCHER_COMMAND  # noqa: F401
from jenkins_rest.endpoints import LAUNCHER_JNLP  # noqa: F401
from jenkins_rest.endpoints import LAUNCHER_SSH  # noqa: F401
from jenkins_rest.endpoints import LAUNCHER_WINDOWS_SERVICE  # noqa: F401
from jenkins_rest.exceptions import BadDataException  # noqa: F401
from jenkins_rest.exceptions import ConflictException  # noqa: F401
from jenkins_rest.exceptions import JenkinsException  # noqa: F401
from jenkins_rest.exceptions import NotFoundException  # noqa: F401
from jenkins_rest.exceptions import OperationFailedException  # noqa: F401
from jenkins_rest.exceptions import ProtocolException  # noqa: F401
from jenkins_rest.exceptions import TimeoutException  # noqa: F401
from jenkins_rest.exceptions import TransportException  # noqa: F401
from jenkins_rest.exceptions import UnsupportedException  # noqa: F401
from jenkins_rest import resources
from jenkins_rest.result import Result
from jenkins_rest.transport import Transport

# Set default logging handler to avoid "No handler found" warnings.
logging.getLogger(__name__).addHandler(NullHandler())


class Jenkins(object):

    def __init__(self, url, username=None, password=None, timeout=None,
                 crumb=False, transport=None):
        '''Create handle to Jenkins instance.

        All operations will raise :class:`JenkinsException` on failure.

        :param url: URL of Jenkins server, ``str``
        :param username: Server username, ``str``
        :param password: Server password, ``str``
        :param timeout: Server connection timeout in secs (default: not set), ``int``
        :param crumb: Send a CSRF crumb with each request, ``bool``
        :param transport: Object with a :meth:`Transport.send` compatible
            method, used instead of the default ``requests`` transport
        '''
        if transport is None:
            transport = Transport(url, username, password, timeout, crumb)
        self.transport = transport

        self.job = resources.Job(transport)
        self.build = resources.Build(transport)
        self.node = resources.Node(transport)
        self.queue = resources.Queue(transport)

    def submit(self, executor, func, *args, **kwargs):
        '''Run an operation on ``executor`` and get a future of its
        :class:`Result`.

        Timeouts and cancellation are those of the returned future.

        Example::

            >>> with ThreadPoolExecutor() as executor:
            ...     future = server.submit(executor, server.job.exists, 'x')
            ...     future.result(timeout=30).value
            True

        :param executor: a ``concurrent.futures.Executor``
        :param func: one of this handle's operations
        :returns: ``concurrent.futures.Future``
        '''
        return executor.submit(Result.capture, func, *args, **kwargs)
