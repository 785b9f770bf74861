import unittest

from optionpy import Some, NONE, InvalidState, ops


class TestOps(unittest.TestCase):
    def test_constructors_and_inspection(self):
        self.assertTrue(ops.is_some(ops.some(1)))
        self.assertFalse(ops.is_none(ops.some(1)))
        self.assertFalse(ops.is_some(ops.none()))
        self.assertTrue(ops.is_none(ops.none()))

    def test_extraction(self):
        self.assertEqual(ops.unwrap(ops.some(1)), 1)
        with self.assertRaises(InvalidState):
            ops.unwrap(ops.none())
        with self.assertRaises(InvalidState):
            ops.expect(ops.none(), "gone")
        self.assertEqual(ops.unwrap_or(ops.none(), 2), 2)
        self.assertEqual(ops.unwrap_or_else(ops.none(), lambda: 3), 3)

    def test_transformation(self):
        inc = lambda x: x + 1
        self.assertEqual(ops.map(Some(1), inc), Some(2))
        self.assertIs(ops.map(NONE, inc), NONE)
        self.assertEqual(ops.map_or(Some(1), 0, inc), 2)
        self.assertEqual(ops.map_or(NONE, 0, inc), 0)
        self.assertEqual(ops.map_or_else(NONE, lambda: -1, inc), -1)
        seen = []
        self.assertEqual(ops.inspect(Some(5), seen.append), Some(5))
        self.assertEqual(seen, [5])

    def test_composition(self):
        self.assertEqual(ops.and_(Some(1), Some(2)), Some(2))
        self.assertEqual(ops.and_then(Some(2), lambda x: Some(x * 3)), Some(6))
        self.assertIs(ops.and_then(Some(2), lambda _: NONE), NONE)
        self.assertEqual(ops.filter(Some(4), lambda x: x % 2 == 0), Some(4))
        self.assertIs(ops.filter(Some(3), lambda x: x % 2 == 0), NONE)
        self.assertEqual(ops.or_(NONE, Some(2)), Some(2))
        self.assertEqual(ops.or_else(NONE, lambda: Some(9)), Some(9))
        self.assertEqual(ops.xor(Some(2), NONE), Some(2))
        self.assertIs(ops.xor(Some(2), Some(2)), NONE)
        self.assertIs(ops.xor(NONE, NONE), NONE)

    def test_structure(self):
        self.assertEqual(ops.replace(Some(1), 2), Some(2))
        self.assertIs(ops.replace(NONE, 2), NONE)
        self.assertEqual(ops.zip(Some(1), Some("hi")), Some((1, "hi")))
        self.assertIs(ops.zip(Some(1), NONE), NONE)
        self.assertEqual(ops.flatten(Some(Some(6))), Some(6))
        self.assertIs(ops.flatten(Some(NONE)), NONE)
        self.assertIs(ops.flatten(NONE), NONE)

    def test_end_to_end(self):
        add = lambda x: x + " World!"
        self.assertEqual(ops.unwrap(ops.map(ops.some("Hello"), add)), "Hello World!")
        self.assertEqual(ops.unwrap_or(ops.map(ops.none(), add), "Good Bye!"), "Good Bye!")
