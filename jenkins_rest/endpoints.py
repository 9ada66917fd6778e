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
.. module:: jenkins_rest.endpoints
    :platform: Unix, Windows
    :synopsis: Jenkins REST operations and the paths and queries they use
'''

import collections
import json
from urllib.parse import quote

from jenkins_rest.exceptions import UnsupportedException

# How the success payload of an operation is obtained
JSON = 'json'
TEXT = 'text'
LOCATION = 'location'

OK = frozenset([200])
SUCCESS = frozenset(range(200, 300))
REDIRECT = frozenset([302])
ACCEPTED = frozenset([200, 302])
CREATED = frozenset([200, 201, 302])
QUEUED = frozenset([201, 302])

MASTER = 'master'
MASTER_SEGMENT = '(master)'

DOT_SEGMENTS = ('.', '..')

NODE_TYPE = 'hudson.slaves.DumbSlave$DescriptorImpl'
LAUNCHER_SSH = 'hudson.plugins.sshslaves.SSHLauncher'
LAUNCHER_COMMAND = 'hudson.slaves.CommandLauncher'
LAUNCHER_JNLP = 'hudson.slaves.JNLPLauncher'
LAUNCHER_WINDOWS_SERVICE = 'hudson.os.windows.ManagedWindowsServiceLauncher'


class Operation(collections.namedtuple(
        'Operation',
        'family name method path success payload field refuse')):
    '''Static description of one remote operation.

    ``path`` is a ``%``-template over the encoded ``job``, ``folder``,
    ``node`` and ``number`` variables. ``payload`` says where a successful
    response keeps its value (``JSON``, ``TEXT``, ``LOCATION`` or ``None``),
    ``field`` names the array a list operation returns and ``refuse`` maps
    statuses that signal a silent failure to a detail template.
    '''
    __slots__ = ()

    @property
    def scope(self):
        return '%s.%s' % (self.family, self.name)


def _operation(family, name, method, path, success=OK, payload=None,
               field=None, refuse=()):
    return Operation(family, name, method, path, frozenset(success), payload,
                     field, tuple(refuse))


# job
JOB_BUILD = _operation('job', 'build', 'POST', '%(job)s/build', QUEUED,
                       LOCATION)
JOB_BUILD_WITH_PARAMS = _operation('job', 'build', 'POST',
                                   '%(job)s/buildWithParameters', QUEUED,
                                   LOCATION)
JOB_CONFIG = _operation('job', 'config', 'GET', '%(job)s/config.xml',
                        payload=TEXT)
JOB_RECONFIG = _operation('job', 'config', 'POST', '%(job)s/config.xml',
                          SUCCESS)
JOB_COPY = _operation('job', 'copy', 'POST', '%(folder)screateItem', CREATED)
JOB_CREATE = _operation('job', 'create', 'POST', '%(folder)screateItem',
                        CREATED)
JOB_DESTROY = _operation('job', 'destroy', 'POST', '%(job)s/doDelete',
                         REDIRECT, refuse=[(200, 'failed to delete: %s')])
JOB_DISABLE = _operation('job', 'disable', 'POST', '%(job)s/disable',
                         ACCEPTED)
JOB_ENABLE = _operation('job', 'enable', 'POST', '%(job)s/enable', ACCEPTED)
JOB_EXISTS = _operation('job', 'exists', 'HEAD', '%(job)s/api/json')
JOB_GET = _operation('job', 'get', 'GET', '%(job)s/api/json', payload=JSON)
JOB_LIST = _operation('job', 'list', 'GET', 'api/json', payload=JSON,
                      field='jobs')

# build
BUILD_GET = _operation('build', 'get', 'GET', '%(job)s/%(number)d/api/json',
                       payload=JSON)
BUILD_STOP = _operation('build', 'stop', 'POST', '%(job)s/%(number)d/stop',
                        ACCEPTED)
BUILD_LOG = _operation('build', 'log', 'GET', '%(job)s/%(number)d/consoleText',
                       payload=TEXT)

# node
NODE_CONFIG = _operation('node', 'config', 'GET', 'computer/%(node)s/config.xml',
                         payload=TEXT)
NODE_RECONFIG = _operation('node', 'config', 'POST',
                           'computer/%(node)s/config.xml', SUCCESS)
NODE_CREATE = _operation('node', 'create', 'POST', 'computer/doCreateItem',
                         CREATED)
NODE_DESTROY = _operation('node', 'destroy', 'POST', 'computer/%(node)s/doDelete',
                          REDIRECT, refuse=[(200, 'failed to delete: %s')])
NODE_DISABLE_STATE = _operation('node', 'disable', 'GET',
                                'computer/%(node)s/api/json', payload=JSON)
NODE_DISABLE = _operation('node', 'disable', 'POST',
                          'computer/%(node)s/toggleOffline', ACCEPTED)
NODE_CHANGE_CAUSE = _operation('node', 'disable', 'POST',
                               'computer/%(node)s/changeOfflineCause', ACCEPTED)
NODE_ENABLE_STATE = _operation('node', 'enable', 'GET',
                               'computer/%(node)s/api/json', payload=JSON)
NODE_ENABLE = _operation('node', 'enable', 'POST',
                         'computer/%(node)s/toggleOffline', ACCEPTED)
NODE_EXISTS = _operation('node', 'exists', 'HEAD', 'computer/%(node)s/api/json')
NODE_GET = _operation('node', 'get', 'GET', 'computer/%(node)s/api/json',
                      payload=JSON)
NODE_LIST = _operation('node', 'list', 'GET', 'computer/api/json',
                       payload=JSON, field='computer')

# queue
QUEUE_LIST = _operation('queue', 'list', 'GET', 'queue/api/json',
                        payload=JSON, field='items')
QUEUE_GET = _operation('queue', 'get', 'GET', 'queue/api/json', payload=JSON)
QUEUE_ITEM = _operation('queue', 'item', 'GET',
                        'queue/item/%(number)d/api/json', payload=JSON)
QUEUE_CANCEL = _operation('queue', 'cancel', 'POST',
                          'queue/items/%(number)d/cancelQueue', SUCCESS)


def quote_segment(value):
    '''Percent-encode a single path segment, ``/`` included.'''
    return quote(str(value), safe='')


def job_folder(name):
    '''Split a job name into its encoded folder url and short name.

    Folder jobs (cloudbees folder plugin) are addressed as ``folder/job``.

    :param name: Job name, ``str``
    :returns: Tuple [ 'folder path for Request', 'Name of job without folder path' ]
    '''
    a_path = name.split('/')
    short_name = a_path[-1]
    folder_url = ''.join('job/%s/' % quote_segment(part)
                         for part in a_path[:-1])
    return folder_url, short_name


def job_url(name):
    folder_url, short_name = job_folder(name)
    return '%sjob/%s' % (folder_url, quote_segment(short_name))


def node_url(name):
    '''The path segment for a node; ``master`` is the built-in node.'''
    if name == MASTER:
        return MASTER_SEGMENT
    return quote_segment(name)


def build_path(op, job=None, node=None, number=None):
    '''Fill an operation's path template.

    :param op: Operation descriptor, :class:`Operation`
    :param job: Job name (may include folders), ``str``
    :param node: Node name, ``str``
    :param number: Build or queue number, ``int``
    :returns: path relative to the server root, ``str``
    :throws: :class:`UnsupportedException` for a ``.`` or ``..`` name, which
        url resolution would collapse into a different resource
    '''
    segments = job.split('/') if job is not None else []
    if node is not None:
        segments.append(node)
    for segment in segments:
        if segment in DOT_SEGMENTS:
            raise UnsupportedException('invalid name: %s' % segment,
                                       scope=op.scope)

    variables = {}
    if job is not None:
        variables['job'] = job_url(job)
        variables['folder'] = job_folder(job)[0]
    if node is not None:
        variables['node'] = node_url(node)
    if number is not None:
        variables['number'] = int(number)
    return op.path % variables


def depth_query(depth):
    return [('depth', depth)]


def build_query(parameters=None, token=None):
    '''Choose the build endpoint and its query.

    A non-empty ``parameters`` mapping switches to ``buildWithParameters``
    and is sent in mapping order; ``token`` always comes last.

    :returns: ``(Operation, [(key, value)])``
    '''
    query = []
    op = JOB_BUILD
    if parameters:
        op = JOB_BUILD_WITH_PARAMS
        query.extend(parameters.items())
    if token:
        query.append(('token', token))
    return op, query


def create_query(name):
    return [('name', job_folder(name)[1])]


def copy_query(from_name, to_name):
    return [('name', job_folder(to_name)[1]),
            ('from', job_folder(from_name)[1]),
            ('mode', 'copy')]


def toggle_offline_query(message):
    return [('offlineMessage', message or '')]


def node_create_query(name, options):
    '''Query for ``computer/doCreateItem``.

    :param name: name of node to create, ``str``
    :param options: resolved node create options, ``dict``
    '''
    launcher_params = dict(options['launcher_params'] or {})
    launcher_params['stapler-class'] = options['launcher']

    inner_params = {
        'name': name,
        'nodeDescription': options['nodeDescription'],
        'numExecutors': options['numExecutors'],
        'remoteFS': options['remoteFS'],
        'labelString': options['labels'],
        'mode': 'EXCLUSIVE' if options['exclusive'] else 'NORMAL',
        'type': NODE_TYPE,
        'retentionStrategy': {
            'stapler-class': 'hudson.slaves.RetentionStrategy$Always'
        },
        'nodeProperties': {'stapler-class-bag': 'true'},
        'launcher': launcher_params
    }

    return [('name', name),
            ('type', NODE_TYPE),
            ('json', json.dumps(inner_params, sort_keys=True))]
