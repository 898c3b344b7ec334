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

from opentsdbrest import exceptions
from opentsdbrest import models
from opentsdbrest import utils


class BaseOpenTSDBClient(object):
    """OpenTSDB 2.x REST API surface.

    Endpoints that have no implementation raise
    ``NotImplementedOpenTSDBAPI`` instead of pretending to succeed.
    """

    def put_meter(self, meters, params=''):
        """Post new meter(s) to the database.

        Meter dictionary *should* contain the following four required fields:
          - metric: the name of the metric you are storing
          - timestamp: a Unix epoch style timestamp in seconds or milliseconds.
                       The timestamp must not contain non-numeric characters.
          - value: the value to record for this data point. It may be quoted or
                   not quoted and must conform to the OpenTSDB value rules.
          - tags: a map of tag name/tag value pairs. At least one pair must be
                  supplied.
        """
        raise NotImplementedError

    def query(self, params):
        raise NotImplementedError

    def query_delete(self, params):
        raise NotImplementedError

    def suggest(self, params):
        raise NotImplementedError

    def get_statistics(self):
        """Get info about what metrics are registered and with what stats."""
        raise NotImplementedError

    def get_aggregators(self):
        """Used to get the list of default aggregation functions."""
        raise NotImplementedError

    def get_version(self):
        """Used to check OpenTSDB version.

        That might be needed in case of unknown bugs - this code is written
        only for the 2.x REST API version, so some of the failures might refer
        to the wrong OpenTSDB version installed.
        """
        raise NotImplementedError

    def get_serializers(self):
        raise NotImplementedError

    def get_config(self):
        raise NotImplementedError

    def drop_caches(self):
        raise NotImplementedError

    def annotation(self, *args, **kwargs):
        raise exceptions.NotImplementedOpenTSDBAPI(utils.ANNOTATION_PATH)

    def search(self, *args, **kwargs):
        raise exceptions.NotImplementedOpenTSDBAPI(utils.SEARCH_PATH)

    def tree(self, *args, **kwargs):
        raise exceptions.NotImplementedOpenTSDBAPI(utils.TREE_PATH)

    def uid(self, *args, **kwargs):
        raise exceptions.NotImplementedOpenTSDBAPI(utils.UID_PATH)

    @staticmethod
    def _check_meters(meters):
        """Check that meters to be put are having nice format."""
        if isinstance(meters, models.BatchPoints):
            return meters
        if isinstance(meters, (dict, models.Point)):
            meters = [meters]
        return models.BatchPoints(meters)
