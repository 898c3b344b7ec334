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

from opentsdbrest import exceptions

METER_KEYS = frozenset(['metric', 'timestamp', 'value', 'tags'])
SUGGEST_TYPES = ('metrics', 'tagk', 'tagv')


def to_json(obj):
    """Dump to strict JSON, NaN and infinities are refused like OpenTSDB."""
    try:
        return json.dumps(obj, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise exceptions.SerializationError(
            'Cannot encode %r as JSON: %s' % (obj, e))


class Point(object):
    """Single data point.

    :param metric: the name of the metric you are storing
    :param timestamp: a Unix epoch style timestamp in seconds or
                      milliseconds
    :param value: the value to record for this data point
    :param tags: a map of tag name/tag value pairs
    """

    def __init__(self, metric, timestamp, value, tags=None):
        self.metric = metric
        self.timestamp = timestamp
        self.value = value
        self.tags = dict(tags or {})

    @classmethod
    def from_dict(cls, meter_dict):
        if (not isinstance(meter_dict, dict)
                or set(meter_dict.keys()) != METER_KEYS):
            raise exceptions.InvalidOpenTSDBFormat(
                actual=meter_dict,
                expected="{'metric': <meter_name>, 'timestamp': <ts>, "
                         "'value': <value>, 'tags': <at least one pair>}")
        return cls(meter_dict['metric'], meter_dict['timestamp'],
                   meter_dict['value'], meter_dict['tags'])

    def to_dict(self):
        return {'metric': self.metric,
                'timestamp': self.timestamp,
                'value': self.value,
                'tags': dict(self.tags)}

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __repr__(self):
        return 'Point(%r, %r, %r, %r)' % (self.metric, self.timestamp,
                                          self.value, self.tags)


class BatchPoints(object):
    """Ordered batch of points sent to ``api/put`` in one request."""

    def __init__(self, points=None):
        self.points = []
        for point in points or []:
            self.add_point(point)

    def add_point(self, point):
        if not isinstance(point, Point):
            point = Point.from_dict(point)
        self.points.append(point)

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def to_json(self):
        return to_json([point.to_dict() for point in self.points])

    @classmethod
    def from_json(cls, data):
        if isinstance(data, bytes):
            data = data.decode('utf-8')
        try:
            meters = json.loads(data)
        except ValueError as e:
            raise exceptions.SerializationError(
                'Cannot decode points: %s' % e)
        if isinstance(meters, dict):
            meters = [meters]
        return cls(meters)


class SubQuery(object):
    """One metric query within a ``QueryParams``.

    ``downsample`` uses the OpenTSDB ``<interval>-<aggregator>`` form, e.g.
    ``1m-avg``.
    """

    def __init__(self, metric, aggregator='sum', tags=None, downsample=None,
                 rate=False, rate_options=None, filters=None,
                 explicit_tags=False):
        self.metric = metric
        self.aggregator = aggregator
        self.tags = tags
        self.downsample = downsample
        self.rate = rate
        self.rate_options = rate_options
        self.filters = filters
        self.explicit_tags = explicit_tags

    def to_dict(self):
        sub = {'metric': self.metric, 'aggregator': self.aggregator}
        if self.tags:
            sub['tags'] = dict(self.tags)
        if self.downsample:
            sub['downsample'] = self.downsample
        if self.rate:
            sub['rate'] = True
        if self.rate_options:
            sub['rateOptions'] = dict(self.rate_options)
        if self.filters:
            sub['filters'] = list(self.filters)
        if self.explicit_tags:
            sub['explicitTags'] = True
        return sub


class QueryParams(object):
    """Body of an ``api/query`` request.

    :param start: start time, absolute timestamp or relative (``1h-ago``)
    :param queries: list of ``SubQuery`` (or already built dicts)
    :param end: optional end time, defaults to now on the server side
    """

    _FLAGS = (('ms_resolution', 'msResolution'),
              ('no_annotations', 'noAnnotations'),
              ('global_annotations', 'globalAnnotations'),
              ('show_tsuids', 'showTSUIDs'),
              ('show_summary', 'showSummary'),
              ('show_query', 'showQuery'),
              ('delete', 'delete'))

    def __init__(self, start, queries, end=None, ms_resolution=False,
                 no_annotations=False, global_annotations=False,
                 show_tsuids=False, show_summary=False, show_query=False,
                 delete=False, timezone=None):
        self.start = start
        self.queries = list(queries or [])
        self.end = end
        self.ms_resolution = ms_resolution
        self.no_annotations = no_annotations
        self.global_annotations = global_annotations
        self.show_tsuids = show_tsuids
        self.show_summary = show_summary
        self.show_query = show_query
        self.delete = delete
        self.timezone = timezone

    def to_dict(self):
        if not self.queries:
            raise exceptions.SerializationError(
                'Query needs at least one sub query')
        body = {'start': self.start,
                'queries': [q.to_dict() if isinstance(q, SubQuery) else q
                            for q in self.queries]}
        if self.end is not None:
            body['end'] = self.end
        for attr, key in self._FLAGS:
            if getattr(self, attr):
                body[key] = True
        if self.timezone:
            body['timezone'] = self.timezone
        return body

    def to_json(self):
        return to_json(self.to_dict())


class SuggestParams(object):
    """Body of an ``api/suggest`` request.

    :param type: what to look up, one of ``metrics``, ``tagk``, ``tagv``
    :param q: prefix to match, everything when omitted
    :param max: maximum number of results, server default is 25
    """

    def __init__(self, type, q=None, max=None):
        self.type = type
        self.q = q
        self.max = max

    def to_dict(self):
        if self.type not in SUGGEST_TYPES:
            raise exceptions.SerializationError(
                'Suggest type must be one of %s, got %r'
                % (', '.join(SUGGEST_TYPES), self.type))
        body = {'type': self.type}
        if self.q is not None:
            body['q'] = self.q
        if self.max is not None:
            body['max'] = self.max
        return body

    def to_json(self):
        return to_json(self.to_dict())
