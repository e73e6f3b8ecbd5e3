import asyncio
import unittest
from unittest.mock import AsyncMock, Mock

from dlna_renderer.av_transport import INSTANCE_ID, AVTransportBinding, find_capability
from dlna_renderer.device import DeviceDescriptor, ServiceCapability
from dlna_renderer.errors import CapabilityMissing, InvalidArgument, RemoteActionFault


def make_descriptor(*service_types):
    return DeviceDescriptor(
        id="uuid:renderer-1",
        services=tuple(ServiceCapability(service_type, Mock(name=service_type)) for service_type in service_types),
        friendly_name="Test Renderer",
    )


class TestFindCapability(unittest.TestCase):
    def test_missing_service(self):
        descriptor = make_descriptor(
            "urn:schemas-upnp-org:service:RenderingControl:1",
            "urn:schemas-upnp-org:service:ConnectionManager:1",
        )
        with self.assertRaises(CapabilityMissing) as ctx:
            find_capability(descriptor, AVTransportBinding.SERVICE_TYPE)
        self.assertEqual(ctx.exception.required_type, AVTransportBinding.SERVICE_TYPE)

    def test_no_services(self):
        with self.assertRaises(CapabilityMissing):
            find_capability(make_descriptor(), AVTransportBinding.SERVICE_TYPE)

    def test_case_insensitive_prefix_match(self):
        descriptor = make_descriptor(
            "urn:schemas-upnp-org:service:RenderingControl:1",
            "URN:Schemas-UPnP-Org:Service:avtransport:2",
        )
        capability = find_capability(descriptor, AVTransportBinding.SERVICE_TYPE)
        self.assertIs(capability, descriptor.services[1])

    def test_first_match_wins(self):
        descriptor = make_descriptor(
            "urn:schemas-upnp-org:service:AVTransport:1",
            "urn:schemas-upnp-org:service:AVTransport:2",
        )
        self.assertIs(find_capability(descriptor, AVTransportBinding.SERVICE_TYPE), descriptor.services[0])

    def test_invalid_arguments(self):
        with self.assertRaises(InvalidArgument):
            find_capability(None, AVTransportBinding.SERVICE_TYPE)
        with self.assertRaises(InvalidArgument):
            find_capability(make_descriptor("urn:schemas-upnp-org:service:AVTransport:1"), "")


class TestAVTransportBinding(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.descriptor = make_descriptor(
            "urn:schemas-upnp-org:service:ConnectionManager:1",
            "urn:schemas-upnp-org:service:AVTransport:1",
        )
        self.invoker = Mock()
        self.invoker.invoke = AsyncMock(return_value=[])
        self.binding = AVTransportBinding.bind(self.descriptor, self.invoker)
        self.endpoint = self.descriptor.services[1].endpoint

    def test_bind(self):
        self.assertIs(self.binding.capability, self.descriptor.services[1])
        self.assertIs(self.binding.invoker, self.invoker)
        self.assertEqual(self.binding.service_type, "urn:schemas-upnp-org:service:AVTransport:1")

    async def test_set_transport_uri(self):
        await self.binding.set_transport_uri(INSTANCE_ID, "http://test.url/media.mp3", "<DIDL-Lite/>")
        self.invoker.invoke.assert_awaited_once_with(self.endpoint, 'SetAVTransportURI', [
            ('InstanceID', 0),
            ('CurrentURI', "http://test.url/media.mp3"),
            ('CurrentURIMetaData', "<DIDL-Lite/>"),
        ])

    async def test_play_pause_stop(self):
        await self.binding.play(INSTANCE_ID, "1")
        self.invoker.invoke.assert_awaited_with(self.endpoint, 'Play', [('InstanceID', 0), ('Speed', "1")])

        await self.binding.pause(INSTANCE_ID)
        self.invoker.invoke.assert_awaited_with(self.endpoint, 'Pause', [('InstanceID', 0)])

        await self.binding.stop(INSTANCE_ID)
        self.invoker.invoke.assert_awaited_with(self.endpoint, 'Stop', [('InstanceID', 0)])
        self.assertEqual(self.invoker.invoke.await_count, 3)

    async def test_get_transport_info(self):
        self.invoker.invoke.return_value = [
            ('CurrentTransportState', 'PLAYING'),
            ('CurrentTransportStatus', 'OK'),
            ('CurrentSpeed', '1'),
        ]
        info = await self.binding.get_transport_info(INSTANCE_ID)
        self.assertEqual(info['CurrentTransportState'], 'PLAYING')
        self.invoker.invoke.assert_awaited_once_with(self.endpoint, 'GetTransportInfo', [('InstanceID', 0)])

    async def test_invalid_instance_id(self):
        for instance_id in (-1, "0", True):
            with self.assertRaises(InvalidArgument):
                await self.binding.play(instance_id, "1")
        with self.assertRaises(InvalidArgument):
            await self.binding.stop(-3)
        self.invoker.invoke.assert_not_awaited()

    async def test_empty_uri(self):
        with self.assertRaises(InvalidArgument):
            await self.binding.set_transport_uri(INSTANCE_ID, "", "")
        self.invoker.invoke.assert_not_awaited()

    async def test_fault_propagates_unchanged(self):
        fault = RemoteActionFault(701, "Transition not available", action='Pause')
        self.invoker.invoke.side_effect = fault
        with self.assertRaises(RemoteActionFault) as ctx:
            await self.binding.pause(INSTANCE_ID)
        self.assertIs(ctx.exception, fault)
        self.assertEqual(self.invoker.invoke.await_count, 1)

    async def test_cancellation_is_not_a_fault(self):
        self.invoker.invoke.side_effect = asyncio.CancelledError()
        with self.assertRaises(asyncio.CancelledError):
            await self.binding.stop(INSTANCE_ID)


if __name__ == '__main__':
    unittest.main()
