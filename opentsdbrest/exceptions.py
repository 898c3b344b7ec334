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


class OpenTSDBError(Exception):
    """Base class for every error raised by the client."""


class ConfigError(OpenTSDBError):
    pass


class InvalidEndpoint(ConfigError):
    def __init__(self, endpoint, reason):
        self.endpoint = endpoint
        self.reason = reason
        super(InvalidEndpoint, self).__init__(
            'Invalid OpenTSDB endpoint %r: %s' % (endpoint, reason))


class SerializationError(OpenTSDBError):
    pass


class InvalidOpenTSDBFormat(SerializationError):
    def __init__(self, actual, expected):
        self.actual = actual
        self.expected = expected
        super(InvalidOpenTSDBFormat, self).__init__(
            'Bad data point format: got %s, expected %s' % (actual, expected))


class TransportError(OpenTSDBError):
    """Request never got an HTTP response (DNS, refused connection, timeout).

    :param url: the URL the request was sent to
    :param original_error: the underlying ``requests`` exception
    """

    def __init__(self, url, original_error):
        self.url = url
        self.original_error = original_error
        super(TransportError, self).__init__(
            'Failed to reach %s: %s' % (url, original_error))


class RemoteError(OpenTSDBError):
    """OpenTSDB answered with a failure status.

    ``body`` holds the raw response bytes for writes, so that per-point
    failure details returned by ``api/put?details`` are not lost. Generic
    requests leave it as None.
    """

    def __init__(self, status_code, reason, body=None):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super(RemoteError, self).__init__(self.status)

    @property
    def status(self):
        if self.reason:
            return '%d %s' % (self.status_code, self.reason)
        return str(self.status_code)


class ResponseParseError(OpenTSDBError):
    def __init__(self, body, message):
        self.body = body
        super(ResponseParseError, self).__init__(
            'Unexpected response body: %s' % message)


class NotImplementedOpenTSDBAPI(OpenTSDBError, NotImplementedError):
    def __init__(self, endpoint):
        self.endpoint = endpoint
        super(NotImplementedOpenTSDBAPI, self).__init__(
            'OpenTSDB endpoint %s is not supported by this client' % endpoint)
