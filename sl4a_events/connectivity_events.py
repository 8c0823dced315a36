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
"""Records for ConnectivityManager callback events and their JSON form.

Each record is an immutable value built once by the callback that observed
the event, serialized, then dropped. Not all information of a callback is
carried; add fields to the records as more information is needed.
"""

import collections
import enum
import json
import logging
import math
import time

from sl4a_events import connectivity_const as cconst
from sl4a_events.error import EncodingError
from sl4a_events.transport_info import TransportInfoKind

NETWORK_CB = cconst.NetworkCallbackContainer
KEEPALIVE = cconst.PacketKeepaliveContainer
AWARE = cconst.WifiAwareNetworkInfoContainer

_NETWORK_CALLBACK_FIELDS = ['id', 'event', 'create_timestamp',
                            'current_timestamp']


def current_time_millis():
    """Returns the wall clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class EventKind(enum.Enum):
    """Tags the event records the translator knows how to serialize."""
    PACKET_KEEPALIVE = 'packet_keepalive'
    NETWORK_CALLBACK = 'network_callback'
    ON_LOSING = 'on_losing'
    ON_CAPABILITIES_CHANGED = 'on_capabilities_changed'
    ON_LINK_PROPERTIES_CHANGED = 'on_link_properties_changed'


class PacketKeepaliveEvent(
        collections.namedtuple('PacketKeepaliveEvent', ['id', 'event'])):
    """A packet keep-alive status change.

    Attributes:
        id: The key of the keepalive the event belongs to.
        event: The keepalive event type, e.g. cconst.PACKET_KEEPALIVE_STARTED.
    """
    __slots__ = ()
    kind = EventKind.PACKET_KEEPALIVE


class NetworkCallbackEvent(
        collections.namedtuple('NetworkCallbackEvent',
                               _NETWORK_CALLBACK_FIELDS)):
    """A ConnectivityManager.NetworkCallback event with no extra data.

    Used for callbacks like onAvailable() and onLost(). The other network
    callback records carry the same four fields plus their own.

    Attributes:
        id: The key of the network request the callback belongs to.
        event: The callback event type, e.g. cconst.NETWORK_CB_AVAILABLE.
        create_timestamp: When the callback was registered, in ms since the
            epoch.
        current_timestamp: When this record was built, in ms since the epoch.
            Taken from the clock at construction unless given.
    """
    __slots__ = ()
    kind = EventKind.NETWORK_CALLBACK

    def __new__(cls, id, event, create_timestamp, current_timestamp=None):
        if current_timestamp is None:
            current_timestamp = current_time_millis()
        return super().__new__(cls, id, event, create_timestamp,
                               current_timestamp)


class NetworkCallbackEventOnLosing(
        collections.namedtuple('NetworkCallbackEventOnLosing',
                               _NETWORK_CALLBACK_FIELDS +
                               ['max_ms_to_live'])):
    """An onLosing() callback.

    Attributes:
        max_ms_to_live: How long the network is expected to stay up, in ms.
    """
    __slots__ = ()
    kind = EventKind.ON_LOSING

    def __new__(cls, id, event, create_timestamp, max_ms_to_live,
                current_timestamp=None):
        if current_timestamp is None:
            current_timestamp = current_time_millis()
        return super().__new__(cls, id, event, create_timestamp,
                               current_timestamp, max_ms_to_live)


class NetworkCallbackEventOnCapabilitiesChanged(
        collections.namedtuple('NetworkCallbackEventOnCapabilitiesChanged',
                               _NETWORK_CALLBACK_FIELDS +
                               ['rssi', 'transport_info'])):
    """An onCapabilitiesChanged() callback.

    Attributes:
        rssi: The signal strength of the network.
        transport_info: A record from sl4a_events.transport_info, or None.
    """
    __slots__ = ()
    kind = EventKind.ON_CAPABILITIES_CHANGED

    def __new__(cls, id, event, create_timestamp, rssi, transport_info=None,
                current_timestamp=None):
        if current_timestamp is None:
            current_timestamp = current_time_millis()
        return super().__new__(cls, id, event, create_timestamp,
                               current_timestamp, rssi, transport_info)


class NetworkCallbackEventOnLinkPropertiesChanged(
        collections.namedtuple('NetworkCallbackEventOnLinkPropertiesChanged',
                               _NETWORK_CALLBACK_FIELDS +
                               ['interface_name'])):
    """An onLinkPropertiesChanged() callback.

    Attributes:
        interface_name: The name of the network's interface.
    """
    __slots__ = ()
    kind = EventKind.ON_LINK_PROPERTIES_CHANGED

    def __new__(cls, id, event, create_timestamp, interface_name,
                current_timestamp=None):
        if current_timestamp is None:
            current_timestamp = current_time_millis()
        return super().__new__(cls, id, event, create_timestamp,
                               current_timestamp, interface_name)


def _put(json_obj, key, value):
    """Adds a key/value pair to a JSON object.

    A value of None removes the key. Values JSON can't hold raise instead of
    being added.

    Raises:
        EncodingError: if the value is a non-finite number, a string that
            can't be encoded as UTF-8, or not a JSON scalar.
    """
    if value is None:
        json_obj.pop(key, None)
        return
    if isinstance(value, str):
        try:
            value.encode('utf-8')
        except UnicodeEncodeError as e:
            raise EncodingError('Invalid string for "%s"' % key) from e
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError('Non-finite number for "%s": %r' %
                                (key, value))
    elif not isinstance(value, int):
        raise EncodingError('Unsupported type for "%s": %s' %
                            (key, type(value).__name__))
    json_obj[key] = value


def _serialize_packet_keepalive(event):
    json_obj = {}
    _put(json_obj, KEEPALIVE.ID, event.id)
    _put(json_obj, KEEPALIVE.PACKET_KEEPALIVE_EVENT, event.event)
    return json_obj


def _serialize_network_callback(event):
    json_obj = {}
    _put(json_obj, NETWORK_CB.ID, event.id)
    _put(json_obj, NETWORK_CB.NETWORK_CALLBACK_EVENT, event.event)
    _put(json_obj, NETWORK_CB.CREATE_TIMESTAMP, event.create_timestamp)
    _put(json_obj, NETWORK_CB.CURRENT_TIMESTAMP, event.current_timestamp)
    return json_obj


def _serialize_on_losing(event):
    json_obj = _serialize_network_callback(event)
    _put(json_obj, NETWORK_CB.MAX_MS_TO_LIVE, event.max_ms_to_live)
    return json_obj


def _serialize_on_capabilities_changed(event):
    json_obj = _serialize_network_callback(event)
    _put(json_obj, NETWORK_CB.RSSI, event.rssi)

    transport_info = event.transport_info
    if transport_info is None:
        return json_obj
    kind = getattr(transport_info, 'kind', None)
    if not isinstance(kind, TransportInfoKind):
        kind = TransportInfoKind.OPAQUE
    if kind is TransportInfoKind.WIFI_AWARE:
        ipv6 = transport_info.peer_ipv6_str
        if ipv6 is None:
            raise EncodingError('Missing peer IPv6 address for "%s"' %
                                AWARE.IPV6)
        _put(json_obj, AWARE.IPV6, ipv6)
        if transport_info.has_port():
            _put(json_obj, AWARE.PORT, transport_info.port)
        if transport_info.has_transport_protocol():
            _put(json_obj, AWARE.TRANSPORT_PROTOCOL,
                 transport_info.transport_protocol)
    else:
        logging.debug('Not serializing %s transport info of "%s": %s',
                      kind.value, event.id, transport_info)
    return json_obj


def _serialize_on_link_properties_changed(event):
    json_obj = _serialize_network_callback(event)
    _put(json_obj, NETWORK_CB.INTERFACE_NAME, event.interface_name)
    return json_obj


_SERIALIZERS = {
    EventKind.PACKET_KEEPALIVE: _serialize_packet_keepalive,
    EventKind.NETWORK_CALLBACK: _serialize_network_callback,
    EventKind.ON_LOSING: _serialize_on_losing,
    EventKind.ON_CAPABILITIES_CHANGED: _serialize_on_capabilities_changed,
    EventKind.ON_LINK_PROPERTIES_CHANGED:
        _serialize_on_link_properties_changed,
}


def serialize(event):
    """Creates the JSON data-structure of an event.

    Args:
        event: One of the event records of this module.

    Returns:
        A dict holding the event's fields under their JSON keys.

    Raises:
        EncodingError: if a field can't be represented in JSON, or the event
            is not a known event record.
    """
    serializer = _SERIALIZERS.get(getattr(event, 'kind', None))
    if serializer is None:
        logging.error('Cannot serialize unknown event %r', event)
        raise EncodingError('Unknown event type: %s' % type(event).__name__)
    try:
        return serializer(event)
    except EncodingError as e:
        logging.error('Failed to serialize %s: %s', event, e)
        raise


def to_json(event):
    """Serializes an event to a JSON string."""
    return json.dumps(serialize(event), allow_nan=False)


def to_json_bytes(event):
    """Serializes an event to UTF-8 encoded JSON, as sent over the wire."""
    return to_json(event).encode('utf-8')
