import io
import unittest

from satcom import Satellite, Subscriber


class TestSatellite(unittest.TestCase):
    def test_receive_writes_id_and_message(self):
        out = io.StringIO()
        sat = Satellite(519, stream=out)
        sat.receive("Hello!")
        self.assertEqual(out.getvalue(), "Satellite 519 received this message: Hello!\n")
        self.assertEqual(sat.messages_received, 1)

    def test_deliver_goes_through_receive(self):
        out = io.StringIO()
        sat = Satellite(12, stream=out)
        sat.deliver("a")
        sat.deliver("b")
        self.assertEqual(out.getvalue().splitlines(), [
            "Satellite 12 received this message: a",
            "Satellite 12 received this message: b",
        ])

    def test_is_a_subscriber(self):
        sat = Satellite(1)
        self.assertIsInstance(sat, Subscriber)
        self.assertEqual(sat.subscriber_id, 1)
        self.assertEqual(repr(sat), "Satellite(id=1)")

    def test_rejects_bad_ids(self):
        for bad in ("327", 3.5, None, True):
            with self.subTest(bad=bad):
                with self.assertRaises(TypeError):
                    Satellite(bad)
        with self.assertRaises(ValueError):
            Satellite(-1)

    def test_subscriber_is_abstract(self):
        with self.assertRaises(TypeError):
            Subscriber(1)


if __name__ == "__main__":
    unittest.main()
