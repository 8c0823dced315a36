#!/usr/bin/env python3
#
#   Copyright 2026 - The Android Open Source Project
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
"""This class is where error information will be stored.
"""

import json


class Sl4aEventsError(Exception):
    """Base sl4a_events error"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args)
        class_name = self.__class__.__name__
        self.message = self.__class__.__doc__
        self.error_code = getattr(Sl4aEventsErrorCode, class_name)
        self.extra = args

    def json_str(self):
        """Converts this error to a string in json format.

        Format of the json string is:
            {
                "ErrorCode": int
                "Message": str
                "Extras": any
            }

        Returns:
            A json-format string representing the errors
        """
        d = {}
        d['ErrorCode'] = self.error_code
        d['Message'] = self.message
        d['Extras'] = [str(e) for e in self.extra]
        json_str = json.dumps(d, indent=5)
        return json_str


class EncodingError(Sl4aEventsError):
    """Event could not be encoded to JSON"""


class Sl4aEventsErrorCode:
    # Framework Errors 0-999
    Sl4aEventsError = 100

    # Serialization Errors 2000-2999
    EncodingError = 2001
