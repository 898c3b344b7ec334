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

from urllib import parse

PUT_PATH = 'api/put'
QUERY_PATH = 'api/query'
SUGGEST_PATH = 'api/suggest'
STATS_PATH = 'api/stats'
AGGR_PATH = 'api/aggregators'
VERSION_PATH = 'api/version'
SERIALIZERS_PATH = 'api/serializers'
CONF_PATH = 'api/config'
DROPCACHES_PATH = 'api/dropcaches'
ANNOTATION_PATH = 'api/annotation'
SEARCH_PATH = 'api/search'
TREE_PATH = 'api/tree'
UID_PATH = 'api/uid'


def build_url(base, path, query=''):
    """Derive a request URL from the client's base URL.

    The base path and query string are replaced, never merged, and the base
    itself is left untouched so it can be shared between threads.

    :param base: ``urllib.parse.SplitResult`` of the endpoint
    :param path: API path such as ``api/put``
    :param query: raw query string, appended as is
    """
    url = base._replace(path='/' + path.lstrip('/'), query=query or '',
                        fragment='')
    return parse.urlunsplit(url)
