import unittest

from swf_fleet.fleet.fleet_provisioner import provision_fleet
from swf_fleet.fleet.vm_factory import DefaultVmFactory
from tests.helpers import new_context


class TestProvisionFleet(unittest.TestCase):

    def test_fleet_composition(self):
        context = new_context()
        fleet = provision_fleet(86400, context)

        self.assertEqual([vm.cores for vm in fleet], [1, 4, 2, 1, 2])
        for vm in fleet:
            self.assertEqual(vm.start_time, 86400)
            self.assertEqual(vm.application_tag, "3")
            self.assertEqual(vm.instance_count, 1)

    def test_vms_submitted_in_order(self):
        context = new_context()
        fleet = provision_fleet(172800, context)
        self.assertEqual(context.broker.vm_waiting_list, fleet)

    def test_vms_wait_in_factory_queue(self):
        context = new_context()
        fleet = provision_fleet(86400, context)
        self.assertEqual(context.vm_factory.vm_queue, fleet)

    def test_every_call_provisions_a_new_fleet(self):
        context = new_context()
        first = provision_fleet(86400, context)
        second = provision_fleet(86400, context)
        self.assertEqual(len(context.broker.vm_waiting_list), 10)
        self.assertEqual([vm.vm_id for vm in first], [0, 1, 2, 3, 4])
        self.assertEqual([vm.vm_id for vm in second], [5, 6, 7, 8, 9])


class TestDefaultVmFactory(unittest.TestCase):

    def test_create_vm(self):
        factory = DefaultVmFactory(mips=1000, first_vm_id=40)
        vm = factory.create_vm(1, 259200, "3", 4)
        self.assertEqual(vm.vm_id, 40)
        self.assertEqual(vm.mips, 1000)
        self.assertEqual(vm.cores, 4)
        self.assertIsNone(vm.host)
        self.assertFalse(vm.destroyed)
        self.assertEqual(factory.next_vm_id, 41)

    def test_create_vm_needs_a_core(self):
        with self.assertRaises(AssertionError):
            DefaultVmFactory().create_vm(1, 0, "3", 0)


if __name__ == '__main__':
    unittest.main()
