from unittest import TestCase

from hyperagent.codec import JSONCodec
from hyperagent.exceptions import DecodeError


class JSONCodecTestCase(TestCase):

    def setUp(self):
        self.codec = JSONCodec(sort_keys=True)

    def test_encode(self):
        self.assertIsNone(self.codec.encode(None))
        self.assertEqual(b'{"a": 1, "b": [true, null]}', self.codec.encode({"b": [True, None], "a": 1}))
        self.assertEqual(b'[]', self.codec.encode([]))

    def test_decode(self):
        self.assertEqual({"a": 1}, self.codec.decode(b'{"a": 1}'))
        self.assertEqual([1, 2], self.codec.decode('[1, 2]'))
        self.assertIsNone(self.codec.decode(b''))
        self.assertIsNone(self.codec.decode(None))

    def test_decode_error(self):
        with self.assertRaises(DecodeError) as cx:
            self.codec.decode(b'<html></html>')

        self.assertEqual('<html></html>', cx.exception.content)
        self.assertIsInstance(cx.exception, ValueError)

        with self.assertRaises(DecodeError):
            self.codec.decode(b'\xff\xfe')
