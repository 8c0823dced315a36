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
"""Wraps serialized connectivity events the way an event queue carries them.

An event posted to the harness is a dict of the form:
    {
        "name": str,           # e.g. "NetworkCallback"
        "data": dict,          # the serialized event
        "time": int,           # ms since the epoch
        "callbackId": str,     # only for snippet callbacks
    }
"""

import logging

from mobly.snippet import callback_event

from sl4a_events import connectivity_const as cconst
from sl4a_events import connectivity_events
from sl4a_events.connectivity_events import EventKind
from sl4a_events.error import EncodingError


def event_name_for(event):
    """Returns the name an event is posted under.

    Raises:
        EncodingError: if the event is not a known event record.
    """
    kind = getattr(event, 'kind', None)
    if kind is EventKind.PACKET_KEEPALIVE:
        return cconst.EVENT_PACKET_KEEPALIVE
    if isinstance(kind, EventKind):
        return cconst.EVENT_NETWORK_CALLBACK
    raise EncodingError('Unknown event type: %s' % type(event).__name__)


def to_event_dict(event, callback_id=None, event_time=None):
    """Builds the event queue entry for an event.

    Args:
        event: An event record from sl4a_events.connectivity_events.
        callback_id: The id of the snippet callback the event is posted to.
            Left out of the entry if None.
        event_time: The post time in ms since the epoch. Defaults to the
            event's current_timestamp, or the current time for events that
            have none.

    Returns:
        A dict with the name, data and time of the event.

    Raises:
        EncodingError: if the event can't be serialized.
    """
    name = event_name_for(event)
    data = connectivity_events.serialize(event)
    if event_time is None:
        event_time = getattr(event, 'current_timestamp', None)
    if event_time is None:
        event_time = connectivity_events.current_time_millis()

    event_dict = {
        cconst.EVENT_KEY_NAME: name,
        cconst.EVENT_KEY_DATA: data,
        cconst.EVENT_KEY_TIME: event_time,
    }
    if callback_id is not None:
        event_dict[cconst.EVENT_KEY_CALLBACK_ID] = callback_id
    logging.debug('Posting %s: %s', name, data)
    return event_dict


def to_callback_event(event, callback_id, event_time=None):
    """Builds a Mobly CallbackEvent for an event.

    Args:
        event: An event record from sl4a_events.connectivity_events.
        callback_id: The id of the snippet callback the event belongs to.
        event_time: See to_event_dict.

    Returns:
        A mobly.snippet.callback_event.CallbackEvent.
    """
    return callback_event.from_dict(
        to_event_dict(event, callback_id=callback_id, event_time=event_time))


def match_event_data(event, *keyvalues):
    """Checks that an event's data holds all the given key/value pairs.

    Args:
        event: An event queue entry (dict) or a Mobly CallbackEvent.
        keyvalues: (key, value) pairs.

    Returns:
        True if every key is in the event data with the given value.
    """
    if isinstance(event, callback_event.CallbackEvent):
        data = event.data
    else:
        data = event[cconst.EVENT_KEY_DATA]
    for key, value in keyvalues:
        if key not in data or data[key] != value:
            return False
    return True
