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
.. module:: jenkins_rest.transport
    :platform: Unix, Windows
    :synopsis: requests based HTTP transport for the Jenkins facades
'''

import logging
import os
import threading
from urllib.parse import urljoin

import requests
import requests.exceptions as req_exc
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from jenkins_rest import codec
from jenkins_rest.exceptions import JenkinsException
from jenkins_rest.exceptions import ProtocolException
from jenkins_rest.exceptions import TimeoutException
from jenkins_rest.exceptions import TransportException

logger = logging.getLogger(__name__)

CRUMB_URL = 'crumbIssuer/api/json'


class WrappedSession(requests.Session):
    """A wrapper for requests.Session to override 'verify' property, ignoring REQUESTS_CA_BUNDLE environment variable.

    This is a workaround for https://github.com/kennethreitz/requests/issues/3829
    """

    def merge_environment_settings(self, url, proxies, stream, verify, *args,
                                   **kwargs):
        if self.verify is False:
            verify = False

        return super(WrappedSession, self).merge_environment_settings(url,
                                                                      proxies,
                                                                      stream,
                                                                      verify,
                                                                      *args,
                                                                      **kwargs)


class Transport(object):

    def __init__(self, url, username=None, password=None, timeout=None,
                 crumb=False):
        '''Create the HTTP side of a Jenkins handle.

        Redirects are never followed: several operations report success
        with a 302. HTTP error statuses are returned, not raised; only
        connection-level failures raise.

        :param url: URL of Jenkins server, ``str``
        :param username: Server username, ``str``
        :param password: Server password, ``str``
        :param timeout: Server connection timeout in secs (default: not set), ``int``
        :param crumb: Fetch a CSRF crumb and send it with each request, ``bool``
        '''
        if url[-1] == '/':
            self.server = url
        else:
            self.server = url + '/'

        self.timeout = timeout
        # None: not fetched yet, False: not used
        self.crumb = None if crumb else False
        self._crumb_lock = threading.Lock()
        self._session = WrappedSession()

        if username is not None and password is not None:
            self._session.auth = requests.auth.HTTPBasicAuth(
                username.encode('utf-8'), password.encode('utf-8'))

        extra_headers = os.environ.get("JENKINS_API_EXTRA_HEADERS", "")
        if extra_headers:
            logger.warning("JENKINS_API_EXTRA_HEADERS adds these HTTP headers: %s",
                           extra_headers.split("\n"))
        for token in extra_headers.split("\n"):
            if ":" in token:
                header, value = token.split(":", 1)
                self._session.headers[header] = value.strip()

        if os.getenv('PYTHONHTTPSVERIFY', '1') == '0':
            logger.debug('PYTHONHTTPSVERIFY=0 detected so we will '
                         'disable requests library SSL verification.')
            urllib3.disable_warnings(InsecureRequestWarning)
            self._session.verify = False

    @property
    def auth(self):
        return self._session.auth

    def _build_url(self, path, query=None):
        # a leading / would drop any path prefix of the server url
        url = urljoin(self.server, path.lstrip('/'))
        if query:
            url += '?' + codec.encode_query(query)
        return url

    def maybe_add_crumb(self, req):
        if self.crumb is None:
            with self._crumb_lock:
                # another thread may have fetched it meanwhile
                if self.crumb is None:
                    self._fetch_crumb()
        if self.crumb:
            req.headers[self.crumb['crumbRequestField']] = self.crumb['crumb']

    def _fetch_crumb(self):
        response = self._open(requests.Request(
            'GET', self._build_url(CRUMB_URL)))
        if response.status_code == 404:
            self.crumb = False
        elif response.status_code == 200:
            try:
                self.crumb = response.json()
            except ValueError:
                raise ProtocolException('could not parse crumb from '
                                        'server[%s]' % self.server)
        else:
            raise JenkinsException('crumb request to server[%s] failed '
                                   '[%d]' % (self.server,
                                             response.status_code),
                                   status=response.status_code)

    def _request(self, req):
        r = self._session.prepare_request(req)
        # requests.Session.send() does not honor env settings by design
        # see https://github.com/requests/requests/issues/2807
        _settings = self._session.merge_environment_settings(
            r.url, {}, None, self._session.verify, None)
        _settings['timeout'] = self.timeout
        _settings['allow_redirects'] = False
        return self._session.send(r, **_settings)

    def _open(self, req):
        try:
            return self._request(req)
        except req_exc.Timeout as e:
            raise TimeoutException('Error in request: %s' % (e)) from e
        except req_exc.RequestException as e:
            raise TransportException('Error in request: %s' % (e)) from e

    def send(self, method, path, query=None, body=None, headers=None):
        '''Issue one request and return the raw response.

        :param method: ``GET``, ``POST`` or ``HEAD``
        :param path: path relative to the server url, ``str``
        :param query: ordered query parameters, ``[(str, str)]``
        :param body: request body, ``bytes``
        :param headers: extra request headers, ``dict``
        :returns: ``requests.Response``
        :raises TransportException: on connection-level failures
        '''
        req = requests.Request(method, self._build_url(path, query),
                               data=body, headers=dict(headers or {}))
        self.maybe_add_crumb(req)
        response = self._open(req)
        logger.debug('%s %s -> %d', method, req.url, response.status_code)
        return response
