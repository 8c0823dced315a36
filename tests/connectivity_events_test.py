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
import ipaddress
import json
import unittest

import mock

from sl4a_events import connectivity_const as cconst
from sl4a_events import connectivity_events
from sl4a_events.connectivity_events import NetworkCallbackEvent
from sl4a_events.connectivity_events import NetworkCallbackEventOnCapabilitiesChanged
from sl4a_events.connectivity_events import NetworkCallbackEventOnLinkPropertiesChanged
from sl4a_events.connectivity_events import NetworkCallbackEventOnLosing
from sl4a_events.connectivity_events import PacketKeepaliveEvent
from sl4a_events.error import EncodingError
from sl4a_events.transport_info import OpaqueTransportInfo
from sl4a_events.transport_info import WifiAwareNetworkInfo

BASE_KEYS = {'id', 'network_callback_event', 'create_timestamp',
             'current_timestamp'}


class PacketKeepaliveEventTest(unittest.TestCase):
    """Tests the serialization of PacketKeepaliveEvent."""

    def test_serialize_has_only_id_and_event(self):
        event = PacketKeepaliveEvent('ka1', cconst.PACKET_KEEPALIVE_STARTED)

        self.assertEqual(connectivity_events.serialize(event), {
            'id': 'ka1',
            'packet_keepalive_event': 'Started',
        })

    def test_serialize_keeps_values_unmodified(self):
        for key, event_name in [('', ''), ('/x', 'Error'), ('ü', 'Stopped')]:
            with self.subTest(key=key, event_name=event_name):
                json_obj = connectivity_events.serialize(
                    PacketKeepaliveEvent(key, event_name))
                self.assertEqual(json_obj['id'], key)
                self.assertEqual(json_obj['packet_keepalive_event'],
                                 event_name)
                self.assertEqual(len(json_obj), 2)

    def test_none_value_is_left_out(self):
        json_obj = connectivity_events.serialize(
            PacketKeepaliveEvent(None, 'Started'))

        self.assertEqual(json_obj, {'packet_keepalive_event': 'Started'})


class NetworkCallbackEventTest(unittest.TestCase):
    """Tests the serialization of the network callback records."""

    @mock.patch('time.time', return_value=1.5)
    def test_current_timestamp_taken_at_construction(self, *_):
        event = NetworkCallbackEvent('net1', cconst.NETWORK_CB_AVAILABLE, 1000)

        self.assertEqual(event.current_timestamp, 1500)

    def test_current_timestamp_not_taken_at_serialization(self):
        with mock.patch('time.time', return_value=1.5):
            event = NetworkCallbackEvent('net1', 'Available', 1000)
        with mock.patch('time.time', return_value=99.0):
            first = connectivity_events.serialize(event)
            second = connectivity_events.serialize(event)

        self.assertEqual(first['current_timestamp'], 1500)
        self.assertEqual(first, second)

    def test_current_timestamp_can_be_given(self):
        event = NetworkCallbackEvent('net1', 'Lost', 1000,
                                     current_timestamp=1234)

        self.assertEqual(connectivity_events.serialize(event), {
            'id': 'net1',
            'network_callback_event': 'Lost',
            'create_timestamp': 1000,
            'current_timestamp': 1234,
        })

    @mock.patch('sl4a_events.connectivity_events.current_time_millis',
                return_value=1050)
    def test_on_losing(self, *_):
        event = NetworkCallbackEventOnLosing(id='net1', event='onLosing',
                                             create_timestamp=1000,
                                             max_ms_to_live=30000)

        self.assertEqual(connectivity_events.serialize(event), {
            'id': 'net1',
            'network_callback_event': 'onLosing',
            'create_timestamp': 1000,
            'current_timestamp': 1050,
            'max_ms_to_live': 30000,
        })
        self.assertEqual(
            connectivity_events.to_json(event),
            '{"id": "net1", "network_callback_event": "onLosing", '
            '"create_timestamp": 1000, "current_timestamp": 1050, '
            '"max_ms_to_live": 30000}')

    def test_on_link_properties_changed(self):
        event = NetworkCallbackEventOnLinkPropertiesChanged(
            'net2', cconst.NETWORK_CB_LINK_PROPERTIES_CHANGED, 10,
            'aware_data0', current_timestamp=20)

        json_obj = connectivity_events.serialize(event)

        self.assertEqual(set(json_obj), BASE_KEYS | {'interface_name'})
        self.assertEqual(json_obj['interface_name'], 'aware_data0')

    def test_variants_keep_every_base_field(self):
        base = NetworkCallbackEvent('net3', 'ev', 7, current_timestamp=8)
        base_json = connectivity_events.serialize(base)
        variants = [
            (NetworkCallbackEventOnLosing('net3', 'ev', 7, 500,
                                          current_timestamp=8),
             {'max_ms_to_live'}),
            (NetworkCallbackEventOnCapabilitiesChanged(
                'net3', 'ev', 7, -60, current_timestamp=8), {'rssi'}),
            (NetworkCallbackEventOnLinkPropertiesChanged(
                'net3', 'ev', 7, 'wlan0', current_timestamp=8),
             {'interface_name'}),
        ]
        for event, extra_keys in variants:
            with self.subTest(event=type(event).__name__):
                json_obj = connectivity_events.serialize(event)
                self.assertEqual(set(json_obj), BASE_KEYS | extra_keys)
                for key, value in base_json.items():
                    self.assertEqual(json_obj[key], value)

    def test_records_are_immutable(self):
        event = NetworkCallbackEvent('net1', 'Available', 1000,
                                     current_timestamp=1)

        with self.assertRaises(AttributeError):
            event.current_timestamp = 2


class CapabilitiesChangedTest(unittest.TestCase):
    """Tests the transport info handling of onCapabilitiesChanged()."""

    def serialize(self, transport_info):
        event = NetworkCallbackEventOnCapabilitiesChanged(
            'net1', cconst.NETWORK_CB_CAPABILITIES_CHANGED, 1000, -55,
            transport_info, current_timestamp=1100)
        return connectivity_events.serialize(event)

    def test_no_transport_info_adds_only_rssi(self):
        json_obj = self.serialize(None)

        self.assertEqual(set(json_obj), BASE_KEYS | {'rssi'})
        self.assertEqual(json_obj['rssi'], -55)

    def test_opaque_transport_info_adds_only_rssi(self):
        json_obj = self.serialize(OpaqueTransportInfo('WifiInfo'))

        self.assertEqual(set(json_obj), BASE_KEYS | {'rssi'})

    def test_transport_info_without_kind_is_skipped(self):
        json_obj = self.serialize(object())

        self.assertEqual(set(json_obj), BASE_KEYS | {'rssi'})

    def test_transport_info_with_foreign_kind_is_skipped(self):
        class ForeignTransportInfo(object):
            kind = 'wifi'

        json_obj = self.serialize(ForeignTransportInfo())

        self.assertEqual(set(json_obj), BASE_KEYS | {'rssi'})

    def test_aware_ipv6_strips_leading_slash(self):
        json_obj = self.serialize(WifiAwareNetworkInfo('/2001:db8::1'))

        self.assertEqual(json_obj['aware_ipv6'], '2001:db8::1')

    def test_aware_ipv6_without_slash_is_unchanged(self):
        json_obj = self.serialize(WifiAwareNetworkInfo('fe80::1%aware_data0'))

        self.assertEqual(json_obj['aware_ipv6'], 'fe80::1%aware_data0')

    def test_aware_ipv6_strips_only_one_slash(self):
        json_obj = self.serialize(WifiAwareNetworkInfo('//fe80::1'))

        self.assertEqual(json_obj['aware_ipv6'], '/fe80::1')

    def test_aware_ipv6_from_address_object(self):
        json_obj = self.serialize(
            WifiAwareNetworkInfo(ipaddress.IPv6Address('2001:db8::1')))

        self.assertEqual(json_obj['aware_ipv6'], '2001:db8::1')

    def test_missing_aware_ipv6_raises(self):
        with self.assertRaises(EncodingError):
            self.serialize(WifiAwareNetworkInfo(None, port=5353))

    def test_unset_port_and_protocol_are_left_out(self):
        json_obj = self.serialize(
            WifiAwareNetworkInfo('/2001:db8::1', port=0,
                                 transport_protocol=-1))

        self.assertEqual(set(json_obj), BASE_KEYS | {'rssi', 'aware_ipv6'})

    def test_port_and_protocol_are_added_when_set(self):
        json_obj = self.serialize(
            WifiAwareNetworkInfo('/2001:db8::1', port=5353,
                                 transport_protocol=6))

        self.assertEqual(json_obj['aware_port'], 5353)
        self.assertEqual(json_obj['aware_transport_protocol'], 6)

    def test_port_without_protocol(self):
        json_obj = self.serialize(
            WifiAwareNetworkInfo('2001:db8::1', port=5353))

        self.assertIn('aware_port', json_obj)
        self.assertNotIn('aware_transport_protocol', json_obj)


class EncodingErrorTest(unittest.TestCase):
    """Tests the failures of serialize()."""

    def test_non_finite_number_raises(self):
        for value in [float('nan'), float('inf'), float('-inf')]:
            with self.subTest(value=value):
                event = NetworkCallbackEventOnCapabilitiesChanged(
                    'net1', 'CapabilitiesChanged', 1, value,
                    current_timestamp=2)
                with self.assertRaises(EncodingError):
                    connectivity_events.serialize(event)

    def test_lone_surrogate_raises(self):
        event = PacketKeepaliveEvent('\ud800', 'Started')

        with self.assertRaises(EncodingError) as context:
            connectivity_events.serialize(event)
        self.assertIsInstance(context.exception.__cause__, UnicodeEncodeError)

    def test_unsupported_value_type_raises(self):
        event = NetworkCallbackEventOnLinkPropertiesChanged(
            'net1', 'LinkPropertiesChanged', 1, ['wlan0'],
            current_timestamp=2)

        with self.assertRaises(EncodingError):
            connectivity_events.serialize(event)

    def test_unknown_event_raises(self):
        with self.assertRaises(EncodingError):
            connectivity_events.serialize({'id': 'net1'})

    def test_to_json_raises_on_bad_event(self):
        with self.assertRaises(EncodingError):
            connectivity_events.to_json(
                NetworkCallbackEvent('net1', 'Lost', float('nan'),
                                     current_timestamp=2))


class ToJsonTest(unittest.TestCase):
    """Tests to_json() and to_json_bytes()."""

    def test_to_json_bytes_is_utf8_json(self):
        event = NetworkCallbackEventOnLinkPropertiesChanged(
            'réseau', 'LinkPropertiesChanged', 1, 'wlan0',
            current_timestamp=2)

        payload = connectivity_events.to_json_bytes(event)

        self.assertIsInstance(payload, bytes)
        self.assertEqual(json.loads(payload.decode('utf-8')),
                         connectivity_events.serialize(event))


if __name__ == '__main__':
    unittest.main()
