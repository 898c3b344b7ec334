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

import json
import logging

import requests

from opentsdbrest import base
from opentsdbrest import config
from opentsdbrest import exceptions
from opentsdbrest import utils

LOG = logging.getLogger('opentsdbrest')

JSON_HEADERS = {'Content-Type': 'application/json'}


class OpenTSDBClient(base.BaseOpenTSDBClient):
    """Synchronous client for the OpenTSDB HTTP API.

    One client may be shared by several threads: every request derives its
    own URL from the parsed endpoint, connections are pooled by a single
    ``requests.Session``.

    :param endpoint: base URL of the TSD, ``config.DEFAULT_ENDPOINT`` when
                     empty
    :param timeout: timeout in seconds applied to every request, 0 or None
                    means no timeout
    :param username: basic auth user, auth is only sent when it is not empty
    :param password: basic auth password
    :raises InvalidEndpoint: if the endpoint is not a valid http(s) URL
    """

    def __init__(self, endpoint=None, timeout=None, username=None,
                 password=None):
        self.url = config.parse_endpoint(endpoint)
        self.timeout = config.normalize_timeout(timeout)
        self.username = username
        self.password = password
        self.session = requests.Session()

    @classmethod
    def from_options(cls, options):
        return cls(endpoint=options.endpoint, timeout=options.timeout,
                   username=options.username, password=options.password)

    def set_password(self, password):
        """Replace the basic auth password used by subsequent requests."""
        self.password = password

    def close(self):
        """Release pooled connections, safe to call more than once."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def put_meter(self, meters, params=''):
        """Post new meter(s) to the database.

        :param meters: ``BatchPoints``, a ``Point``, a meter dictionary or a
                       list of points/dictionaries with the four required
                       fields: metric, timestamp, value and tags.
        :param params: raw query string for ``api/put``, e.g. ``details`` or
                       ``summary&sync``. It is sent without any escaping.
        :returns: raw response body
        :raises RemoteError: on 4xx/5xx, with the response body attached so
                             that ``details`` output can still be inspected
        """
        data = self._check_meters(meters).to_json()
        response, body = self._send('POST', utils.PUT_PATH, data, params)
        if response.status_code >= 400:
            LOG.warning('Writing meters failed with %s %s',
                        response.status_code, response.reason)
            LOG.debug('api/put error body: %s', body)
            raise exceptions.RemoteError(response.status_code,
                                         response.reason, body)
        return body

    def query(self, params):
        """Run a query, returns the raw JSON response body."""
        return self._execute('POST', utils.QUERY_PATH, params.to_json())

    def query_delete(self, params):
        """Delete the data points matched by the query.

        The TSD has to be running with ``tsd.http.query.allow_delete``.
        """
        return self._execute('DELETE', utils.QUERY_PATH, params.to_json())

    def suggest(self, params):
        """Autocomplete metric names, tag keys or tag values.

        :param params: ``SuggestParams``
        :returns: list of matching names
        :raises ResponseParseError: if the body is not a JSON list of strings
        """
        body = self._execute('POST', utils.SUGGEST_PATH, params.to_json())
        values = self._parse_json(body)
        if (not isinstance(values, list)
                or not all(isinstance(v, str) for v in values)):
            raise exceptions.ResponseParseError(
                body, 'expected a list of strings')
        return values

    def get_statistics(self):
        return self._get_json(utils.STATS_PATH)

    def get_aggregators(self):
        return self._get_json(utils.AGGR_PATH)

    def get_version(self):
        return self._get_json(utils.VERSION_PATH)

    def get_serializers(self):
        return self._get_json(utils.SERIALIZERS_PATH)

    def get_config(self):
        return self._get_json(utils.CONF_PATH)

    def drop_caches(self):
        return self._get_json(utils.DROPCACHES_PATH)

    def _get_json(self, path):
        return self._parse_json(self._execute('GET', path))

    @staticmethod
    def _parse_json(body):
        try:
            return json.loads(body.decode('utf-8'))
        except ValueError as e:
            raise exceptions.ResponseParseError(body, e)

    def _execute(self, method, path, data=None):
        """Issue a request and return its body.

        Any status above 300 is a failure and the body is dropped.
        """
        response, body = self._send(method, path, data)
        if response.status_code > 300:
            LOG.warning('%s %s failed with %s %s', method, path,
                        response.status_code, response.reason)
            raise exceptions.RemoteError(response.status_code,
                                         response.reason)
        return body

    def _send(self, method, path, data=None, params=''):
        url = utils.build_url(self.url, path, params)
        auth = None
        if self.username:
            auth = (self.username, self.password or '')

        LOG.debug('%s %s', method, url)
        try:
            response = self.session.request(method, url, data=data,
                                            headers=JSON_HEADERS, auth=auth,
                                            timeout=self.timeout)
            body = response.content
        except requests.RequestException as e:
            LOG.warning('Request %s %s failed: %s', method, url, e)
            raise exceptions.TransportError(url, e) from e
        LOG.debug('%s %s returned %s', method, url, response.status_code)
        return response, body
