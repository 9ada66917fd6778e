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
.. module:: jenkins_rest.resources
    :platform: Unix, Windows
    :synopsis: The job, build, node and queue namespaces of a Jenkins handle
'''

import logging

from jenkins_rest import codec
from jenkins_rest import endpoints
from jenkins_rest import options as opts
from jenkins_rest import outcome
from jenkins_rest.exceptions import BadDataException
from jenkins_rest.exceptions import JenkinsException
from jenkins_rest.exceptions import UnsupportedException

logger = logging.getLogger(__name__)

ONLINE = 'online'
OFFLINE = 'offline'


class Resource(object):
    '''Shared plumbing: send an operation, interpret what comes back.'''

    def __init__(self, transport):
        self.transport = transport

    def _send(self, op, path, query=None, body=None, headers=None):
        try:
            return self.transport.send(op.method, path, query, body, headers)
        except JenkinsException as e:
            if e.scope:
                raise
            raise e.__class__(e.detail, scope=op.scope, status=e.status) from e

    def _call(self, op, subject, path, query=None, body=None, headers=None):
        response = self._send(op, path, query, body, headers)
        return outcome.interpret(op, response, subject)

    def _reconfig(self, read_op, write_op, subject, path, config_xml):
        '''Post a new config; a callable is applied to the current one.'''
        if callable(config_xml):
            config_xml = config_xml(self._call(read_op, subject, path))
        body, headers = codec.encode_config(config_xml)
        self._call(write_op, subject, path, body=body, headers=headers)


class Job(Resource):

    def build(self, name, options=None, **kwargs):
        '''Trigger build job.

        This method returns a queue item number that you can pass to
        :meth:`Queue.item`. The build number is only known once Jenkins
        has taken the item off the queue; polling for it is up to the
        caller.

        :param name: Name of Jenkins job, ``str``
        :param options: ``token`` and ``parameters`` (``dict``), ``dict``
        :returns: ``int`` queue item
        '''
        values = opts.BUILD.resolve(options, **kwargs)
        op, query = endpoints.build_query(values['parameters'],
                                          values['token'])
        return self._call(op, name, endpoints.build_path(op, job=name), query)

    def config(self, name, config_xml=None):
        '''Get or change the configuration of an existing job.

        :param name: Name of Jenkins job, ``str``
        :param config_xml: New XML configuration, ``str``, or a callable
            turning the current configuration into the new one
        :returns: job configuration (XML format) when reading
        '''
        path = endpoints.build_path(endpoints.JOB_CONFIG, job=name)
        if config_xml is None:
            return self._call(endpoints.JOB_CONFIG, name, path)
        self._reconfig(endpoints.JOB_CONFIG, endpoints.JOB_RECONFIG, name,
                       path, config_xml)

    def copy(self, name, new_name):
        '''Copy a Jenkins job.

        :param name: Name of Jenkins job to copy from, ``str``
        :param new_name: Name of Jenkins job to copy to, ``str``
        :throws: :class:`UnsupportedException` whenever the source and
            destination folder are not the same
        '''
        op = endpoints.JOB_COPY
        if endpoints.job_folder(name)[0] != endpoints.job_folder(new_name)[0]:
            raise UnsupportedException('source and destination folder must '
                                       'be the same', scope=op.scope)
        self._call(op, new_name, endpoints.build_path(op, job=new_name),
                   endpoints.copy_query(name, new_name))

    def create(self, name, config_xml):
        '''Create a new Jenkins job.

        A refusal, e.g. an existing job of that name, is reported with the
        reason the server gives.

        :param name: Name of Jenkins job, ``str``
        :param config_xml: config file text, ``str``
        '''
        op = endpoints.JOB_CREATE
        body, headers = codec.encode_config(config_xml)
        self._call(op, name, endpoints.build_path(op, job=name),
                   endpoints.create_query(name), body, headers)

    def destroy(self, name):
        '''Delete Jenkins job permanently.

        :param name: Name of Jenkins job, ``str``
        '''
        op = endpoints.JOB_DESTROY
        self._call(op, name, endpoints.build_path(op, job=name))

    def disable(self, name):
        op = endpoints.JOB_DISABLE
        self._call(op, name, endpoints.build_path(op, job=name))

    def enable(self, name):
        op = endpoints.JOB_ENABLE
        self._call(op, name, endpoints.build_path(op, job=name))

    def exists(self, name):
        '''Check whether a job exists

        :param name: Name of Jenkins job, ``str``
        :returns: ``True`` if Jenkins job exists
        '''
        op = endpoints.JOB_EXISTS
        return self._call(op, name, endpoints.build_path(op, job=name),
                          endpoints.depth_query(0))

    def get(self, name, options=None, **kwargs):
        '''Get job information dictionary.

        :param name: Job name, ``str``
        :param options: ``depth``, ``dict``
        :returns: dictionary of job information
        '''
        op = endpoints.JOB_GET
        values = opts.DETAIL.resolve(options, **kwargs)
        return self._call(op, name, endpoints.build_path(op, job=name),
                          endpoints.depth_query(values['depth']))

    def list(self):
        ''':returns: list of job dictionaries, ``[dict]``'''
        op = endpoints.JOB_LIST
        return self._call(op, None, endpoints.build_path(op))


class Build(Resource):

    def get(self, name, number, options=None, **kwargs):
        '''Get build information dictionary.

        :param name: Job name, ``str``
        :param number: Build number, ``int``
        :param options: ``depth``, ``dict``
        :returns: dictionary of build information, ``dict``
        '''
        op = endpoints.BUILD_GET
        values = opts.DETAIL.resolve(options, **kwargs)
        return self._call(op, (name, number),
                          endpoints.build_path(op, job=name, number=number),
                          endpoints.depth_query(values['depth']))

    def stop(self, name, number):
        '''Stop a running Jenkins build.

        :param name: Name of Jenkins job, ``str``
        :param number: Jenkins build number for the job, ``int``
        '''
        op = endpoints.BUILD_STOP
        self._call(op, (name, number),
                   endpoints.build_path(op, job=name, number=number))

    def log(self, name, number):
        '''Get build console text.

        :param name: Job name, ``str``
        :param number: Build number, ``int``
        :returns: Build console output,  ``str``
        '''
        op = endpoints.BUILD_LOG
        return self._call(op, (name, number),
                          endpoints.build_path(op, job=name, number=number))


def node_state(info):
    '''Offline state of a node from its information dictionary.'''
    if info.get('temporarilyOffline'):
        return OFFLINE
    return ONLINE


# What to send to reach the wanted state from the current one. Toggling is
# not idempotent, so the current state has to be read first.
_DISABLE_TRANSITIONS = {
    ONLINE: endpoints.NODE_DISABLE,
    OFFLINE: endpoints.NODE_CHANGE_CAUSE,
}

_ENABLE_TRANSITIONS = {
    ONLINE: None,
    OFFLINE: endpoints.NODE_ENABLE,
}


class Node(Resource):

    def _path(self, op, name):
        return endpoints.build_path(op, node=name)

    def _state(self, op, name):
        info = self._call(op, name, self._path(op, name),
                          endpoints.depth_query(0))
        if not isinstance(info, dict):
            raise BadDataException(codec.BAD_DATA, scope=op.scope)
        return node_state(info)

    def config(self, name, config_xml=None):
        '''Get or change the configuration for a node.

        The built-in ``master`` node can be read but never reconfigured.

        :param name: Jenkins node name, ``str``
        :param config_xml: New XML configuration, ``str``, or a callable
            turning the current configuration into the new one
        '''
        op = endpoints.NODE_CONFIG
        if config_xml is None:
            return self._call(op, name, self._path(op, name))
        if name == endpoints.MASTER:
            raise UnsupportedException('master not supported',
                                       scope=endpoints.NODE_RECONFIG.scope)
        self._reconfig(op, endpoints.NODE_RECONFIG, name,
                       self._path(op, name), config_xml)

    def create(self, name, options=None, **kwargs):
        '''Create a node

        :param name: name of node to create, ``str``
        :param options: ``numExecutors``, ``nodeDescription``, ``remoteFS``,
            ``labels``, ``exclusive``, ``launcher`` and ``launcher_params``,
            ``dict``
        '''
        op = endpoints.NODE_CREATE
        values = opts.NODE_CREATE.resolve(options, **kwargs)
        self._call(op, name, endpoints.build_path(op),
                   endpoints.node_create_query(name, values))

    def destroy(self, name):
        op = endpoints.NODE_DESTROY
        self._call(op, name, self._path(op, name))

    def disable(self, name, message=''):
        '''Take a node offline, or change why it is offline.

        :param name: Jenkins node name, ``str``
        :param message: Offline message, ``str``
        '''
        state = self._state(endpoints.NODE_DISABLE_STATE, name)
        op = _DISABLE_TRANSITIONS[state]
        logger.debug('node[%s] is %s, sending %s', name, state, op.path)
        path = self._path(op, name)
        if state == OFFLINE:
            body, headers = codec.encode_offline_cause(message)
            self._call(op, name, path, body=body, headers=headers)
        else:
            self._call(op, name, path, endpoints.toggle_offline_query(message))

    def enable(self, name):
        '''Bring an offline node back online; online nodes are left alone.

        :param name: Jenkins node name, ``str``
        '''
        state = self._state(endpoints.NODE_ENABLE_STATE, name)
        op = _ENABLE_TRANSITIONS[state]
        if op is None:
            logger.debug('node[%s] is already online', name)
            return
        self._call(op, name, self._path(op, name),
                   endpoints.toggle_offline_query(''))

    def exists(self, name):
        '''Check whether a node exists

        :param name: Name of Jenkins node, ``str``
        :returns: ``True`` if Jenkins node exists
        '''
        op = endpoints.NODE_EXISTS
        return self._call(op, name, self._path(op, name),
                          endpoints.depth_query(0))

    def get(self, name, options=None, **kwargs):
        op = endpoints.NODE_GET
        values = opts.DETAIL.resolve(options, **kwargs)
        return self._call(op, name, self._path(op, name),
                          endpoints.depth_query(values['depth']))

    def list(self, options=None, **kwargs):
        op = endpoints.NODE_LIST
        values = opts.DETAIL.resolve(options, **kwargs)
        return self._call(op, None, endpoints.build_path(op),
                          endpoints.depth_query(values['depth']))


class Queue(Resource):

    def list(self, options=None, **kwargs):
        ''':returns: list of queued item dictionaries, ``[dict]``'''
        op = endpoints.QUEUE_LIST
        values = opts.DETAIL.resolve(options, **kwargs)
        return self._call(op, None, endpoints.build_path(op),
                          endpoints.depth_query(values['depth']))

    def get(self, options=None, **kwargs):
        op = endpoints.QUEUE_GET
        values = opts.DETAIL.resolve(options, **kwargs)
        return self._call(op, None, endpoints.build_path(op),
                          endpoints.depth_query(values['depth']))

    def item(self, number, options=None, **kwargs):
        '''Get information about a queued item (to-be-created job).

        The returned dict will have a "why" key if the queued item is still
        waiting for an executor.

        The returned dict will have an "executable" key if the queued item is
        running on an executor, or has completed running. Use this to
        determine the job number / URL.

        :param number: queue number, ``int``
        :returns: dictionary of queued information, ``dict``
        '''
        op = endpoints.QUEUE_ITEM
        values = opts.DETAIL.resolve(options, **kwargs)
        return self._call(op, number, endpoints.build_path(op, number=number),
                          endpoints.depth_query(values['depth']))

    def cancel(self, number):
        '''Cancel a queued build.

        :param number: queue item number, ``int``
        '''
        op = endpoints.QUEUE_CANCEL
        self._call(op, None, endpoints.build_path(op, number=number),
                   body=b'')
