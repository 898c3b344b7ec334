# Copyright 2014: Mirantis Inc.
# All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

import ipaddress
import os
import re
from urllib import parse

from opentsdbrest import exceptions

DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 4242
DEFAULT_ENDPOINT = 'http://%s:%d' % (DEFAULT_HOST, DEFAULT_PORT)

ENV_ENDPOINT = 'OPENTSDB_ENDPOINT'
ENV_TIMEOUT = 'OPENTSDB_TIMEOUT'
ENV_USERNAME = 'OPENTSDB_USERNAME'
ENV_PASSWORD = 'OPENTSDB_PASSWORD'

HOSTNAME_RE = re.compile(r'[\w.-]+')


def parse_endpoint(endpoint):
    """Parse the OpenTSDB base URL.

    An empty endpoint falls back to ``DEFAULT_ENDPOINT``. Only absolute
    http(s) URLs are accepted.

    :param endpoint: base URL string, e.g. ``http://tsdb.example:4242``
    :returns: ``urllib.parse.SplitResult``
    :raises InvalidEndpoint: if the string is not a usable URL
    """
    if not endpoint:
        endpoint = DEFAULT_ENDPOINT
    try:
        url = parse.urlsplit(endpoint)
        # port is only validated on access
        url.port
    except ValueError as e:
        raise exceptions.InvalidEndpoint(endpoint, e)
    if url.scheme not in ('http', 'https'):
        raise exceptions.InvalidEndpoint(
            endpoint, 'scheme must be http or https')
    if not url.hostname:
        raise exceptions.InvalidEndpoint(endpoint, 'no host given')
    if not _valid_host(url):
        raise exceptions.InvalidEndpoint(
            endpoint, 'invalid host %r' % url.hostname)
    return url


def _valid_host(url):
    if '[' in url.netloc:
        # zone index is allowed after the address, e.g. fe80::1%eth0
        try:
            ipaddress.ip_address(url.hostname.split('%')[0])
        except ValueError:
            return False
        return True
    return bool(HOSTNAME_RE.fullmatch(url.hostname))


def normalize_timeout(timeout):
    """Zero or None means the request may block forever."""
    if not timeout:
        return None
    try:
        timeout = float(timeout)
    except (TypeError, ValueError):
        raise exceptions.ConfigError(
            'Timeout must be a number of seconds, got %r' % (timeout,))
    if timeout == 0:
        return None
    if timeout < 0:
        raise exceptions.ConfigError('Timeout must not be negative: %s'
                                     % timeout)
    return timeout


class Options(object):
    """Connection settings for an OpenTSDB client.

    :param endpoint: base URL of the TSD, ``DEFAULT_ENDPOINT`` when empty
    :param timeout: per-request timeout in seconds, 0 or None to disable
    :param username: basic auth user; auth is only sent when it is set
    :param password: basic auth password
    """

    def __init__(self, endpoint=None, timeout=None, username=None,
                 password=None):
        self.endpoint = endpoint or DEFAULT_ENDPOINT
        self.timeout = timeout
        self.username = username
        self.password = password

    @classmethod
    def from_environ(cls, environ=None):
        if environ is None:
            environ = os.environ
        timeout = environ.get(ENV_TIMEOUT)
        if timeout:
            try:
                timeout = float(timeout)
            except ValueError:
                raise exceptions.ConfigError(
                    '%s must be a number of seconds, got %r'
                    % (ENV_TIMEOUT, timeout))
        return cls(endpoint=environ.get(ENV_ENDPOINT),
                   timeout=timeout or None,
                   username=environ.get(ENV_USERNAME),
                   password=environ.get(ENV_PASSWORD))

    def __repr__(self):
        return ('Options(endpoint=%r, timeout=%r, username=%r)'
                % (self.endpoint, self.timeout, self.username))
