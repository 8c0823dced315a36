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
"""TransportInfo payloads attached to a NetworkCapabilities update.

Each concrete TransportInfo kind known to the event translator gets its own
record. Anything else is carried as an OpaqueTransportInfo, which adds
nothing to a serialized event.
"""

import collections
import enum

from sl4a_events import connectivity_const as cconst


class TransportInfoKind(enum.Enum):
    """The kinds of TransportInfo an event may carry.

    OPAQUE: A TransportInfo the translator has no schema for.
    WIFI_AWARE: android.net.wifi.aware.WifiAwareNetworkInfo.
    """
    OPAQUE = 'opaque'
    WIFI_AWARE = 'wifi_aware'


class OpaqueTransportInfo(
        collections.namedtuple('OpaqueTransportInfo', ['description'])):
    """A TransportInfo of a kind with no serialized form.

    Attributes:
        description: Optional free-form text naming the transport (for
            example the platform class name). Only used for logging.
    """
    __slots__ = ()
    kind = TransportInfoKind.OPAQUE

    def __new__(cls, description=None):
        return super().__new__(cls, description)


class WifiAwareNetworkInfo(
        collections.namedtuple('WifiAwareNetworkInfo',
                               ['peer_ipv6_addr', 'port',
                                'transport_protocol'])):
    """Network info of a Wi-Fi Aware data path.

    Attributes:
        peer_ipv6_addr: The peer's IPv6 address, either a string or an
            ipaddress.IPv6Address.
        port: The port the peer advertised, 0 if not set.
        transport_protocol: The transport protocol id the peer advertised
            (e.g. 6 for TCP), -1 if not set.
    """
    __slots__ = ()
    kind = TransportInfoKind.WIFI_AWARE

    def __new__(cls, peer_ipv6_addr, port=cconst.AWARE_PORT_UNSET,
                transport_protocol=cconst.AWARE_TRANSPORT_PROTOCOL_UNSET):
        return super().__new__(cls, peer_ipv6_addr, port, transport_protocol)

    @property
    def peer_ipv6_str(self):
        """The peer address as it appears in an event.

        Platform address formatting prefixes the address with a '/' when the
        host name is unknown. Exactly one leading '/' is dropped. None if the
        address is not set.
        """
        if self.peer_ipv6_addr is None:
            return None
        ipv6 = str(self.peer_ipv6_addr)
        if ipv6.startswith('/'):
            ipv6 = ipv6[1:]
        return ipv6

    def has_port(self):
        return self.port != cconst.AWARE_PORT_UNSET

    def has_transport_protocol(self):
        return (self.transport_protocol !=
                cconst.AWARE_TRANSPORT_PROTOCOL_UNSET)
