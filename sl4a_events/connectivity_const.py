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

######################################################
# ConnectivityManager.NetworkCallback events
######################################################
EVENT_NETWORK_CALLBACK = "NetworkCallback"

# event types
NETWORK_CB_AVAILABLE = "Available"
NETWORK_CB_LOSING = "Losing"
NETWORK_CB_LOST = "Lost"
NETWORK_CB_UNAVAILABLE = "Unavailable"
NETWORK_CB_CAPABILITIES_CHANGED = "CapabilitiesChanged"
NETWORK_CB_SUSPENDED = "Suspended"
NETWORK_CB_RESUMED = "Resumed"
NETWORK_CB_LINK_PROPERTIES_CHANGED = "LinkPropertiesChanged"


class NetworkCallbackContainer:
    """Keys of a serialized network callback event."""
    ID = "id"
    NETWORK_CALLBACK_EVENT = "network_callback_event"
    CREATE_TIMESTAMP = "create_timestamp"
    CURRENT_TIMESTAMP = "current_timestamp"
    MAX_MS_TO_LIVE = "max_ms_to_live"
    RSSI = "rssi"
    INTERFACE_NAME = "interface_name"


######################################################
# ConnectivityManager.PacketKeepaliveCallback events
######################################################
EVENT_PACKET_KEEPALIVE = "PacketKeepaliveCallback"

# event types
PACKET_KEEPALIVE_STARTED = "Started"
PACKET_KEEPALIVE_STOPPED = "Stopped"
PACKET_KEEPALIVE_ERROR = "Error"


class PacketKeepaliveContainer:
    """Keys of a serialized packet keepalive event."""
    ID = "id"
    PACKET_KEEPALIVE_EVENT = "packet_keepalive_event"


######################################################
# WifiAwareNetworkInfo (TransportInfo) keys
######################################################
class WifiAwareNetworkInfoContainer:
    """Keys added to a capabilities changed event by Wi-Fi Aware."""
    IPV6 = "aware_ipv6"
    PORT = "aware_port"
    TRANSPORT_PROTOCOL = "aware_transport_protocol"


# Values meaning "not set" on a WifiAwareNetworkInfo. Keys holding these are
# left out of the event.
AWARE_PORT_UNSET = 0
AWARE_TRANSPORT_PROTOCOL_UNSET = -1

######################################################
# Event queue envelope keys
######################################################
EVENT_KEY_NAME = "name"
EVENT_KEY_DATA = "data"
EVENT_KEY_TIME = "time"
EVENT_KEY_CALLBACK_ID = "callbackId"
