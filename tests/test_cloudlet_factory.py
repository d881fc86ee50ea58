import unittest

from swf_fleet.cloudlet.cloudlet import CloudletStatus
from swf_fleet.cloudlet.cloudlet_factory import (create_cloudlet,
                                                 create_fleet_cloudlets)
from swf_fleet.cloudlet.utilization import UtilizationModel
from tests.helpers import new_context


class TestCreateCloudlet(unittest.TestCase):

    def test_cloudlet_attributes(self):
        context = new_context()
        cloudlet = create_cloudlet(2, 3600, context, 86400)

        self.assertEqual(cloudlet.cloudlet_id, 0)
        self.assertEqual(cloudlet.pes, 4)
        self.assertEqual(cloudlet.length, 3600)
        self.assertEqual(cloudlet.file_size, 300)
        self.assertEqual(cloudlet.output_size, 300)
        self.assertEqual(cloudlet.utilization_cpu.get_utilization(), 0.1)
        self.assertEqual(cloudlet.utilization_ram.get_utilization(1e6), 0.5)
        self.assertIs(cloudlet.status, CloudletStatus.INSTANTIATED)
        self.assertIsNone(cloudlet.vm)

    def test_cloudlet_is_queued_and_submitted(self):
        context = new_context()
        cloudlet = create_cloudlet(1, 10, context, 86400)
        self.assertEqual(list(context.cloudlet_queue), [cloudlet])
        self.assertEqual(context.broker.cloudlet_waiting_list, [cloudlet])

    def test_id_is_queue_length(self):
        context = new_context()
        ids = [create_cloudlet(1, 10, context, 86400).cloudlet_id
               for _ in range(3)]
        self.assertEqual(ids, [0, 1, 2])

    def test_unused_variant_five_has_two_cores(self):
        context = new_context()
        self.assertEqual(create_cloudlet(5, 10, context, 86400).pes, 2)

    def test_unknown_variant(self):
        context = new_context()
        with self.assertRaises(ValueError):
            create_cloudlet(6, 10, context, 86400)
        self.assertEqual(len(context.cloudlet_queue), 0)


class TestCreateFleetCloudlets(unittest.TestCase):

    def test_fleet_cloudlets(self):
        context = new_context()
        cloudlets = create_fleet_cloudlets(42, context, 86400)

        self.assertEqual([c.pes for c in cloudlets], [1, 4, 2, 1, 2])
        self.assertEqual([c.cloudlet_id for c in cloudlets], [0, 1, 2, 3, 4])
        self.assertTrue(all(c.length == 42 for c in cloudlets))
        self.assertEqual(context.broker.cloudlet_waiting_list, cloudlets)


class TestUtilizationModel(unittest.TestCase):

    def test_fraction_out_of_range(self):
        with self.assertRaises(ValueError):
            UtilizationModel(1.5)
        with self.assertRaises(ValueError):
            UtilizationModel(-0.1)


if __name__ == '__main__':
    unittest.main()
