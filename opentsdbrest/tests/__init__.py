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

from http import server
import json
import threading
import unittest

import mock


class BaseTestCase(unittest.TestCase):
    def setUp(self):
        super(BaseTestCase, self).setUp()
        self.host = '127.0.0.1'
        self.port = 4242
        self.endpoint = 'http://%s:%d' % (self.host, self.port)

    @staticmethod
    def fake_response(status_code=200, reason='OK', content=b''):
        return mock.Mock(status_code=status_code, reason=reason,
                         content=content)


class StubTSDHandler(server.BaseHTTPRequestHandler):
    """Records every request and answers with the server's canned reply.

    When no reply is configured the request body is echoed back together
    with the path and query string.
    """

    def _handle(self):
        length = int(self.headers.get('Content-Length') or 0)
        body = self.rfile.read(length)
        path, _, query = self.path.partition('?')
        self.server.requests.append({
            'method': self.command,
            'path': path,
            'query': query,
            'headers': dict(self.headers),
            'body': body,
        })
        status, content = self.server.reply
        if content is None:
            content = json.dumps({'path': path, 'query': query,
                                  'body': body.decode('utf-8')})
            content = content.encode('utf-8')
        self.send_response(status)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(content)))
        self.end_headers()
        self.wfile.write(content)

    do_GET = do_POST = do_DELETE = do_PUT = _handle

    def log_message(self, format, *args):
        pass


class StubTSD(object):
    def __init__(self, status=200, content=None):
        self.httpd = server.ThreadingHTTPServer(('127.0.0.1', 0),
                                                StubTSDHandler)
        self.httpd.requests = []
        self.httpd.reply = (status, content)
        self.thread = threading.Thread(target=self.httpd.serve_forever)
        self.thread.daemon = True

    @property
    def endpoint(self):
        host, port = self.httpd.server_address[:2]
        return 'http://%s:%d' % (host, port)

    @property
    def requests(self):
        return self.httpd.requests

    def reply_with(self, status, content):
        self.httpd.reply = (status, content)

    def __enter__(self):
        self.thread.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.httpd.shutdown()
        self.httpd.server_close()
        self.thread.join()
