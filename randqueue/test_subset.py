import io
import random
import unittest

from randqueue.subset import Subset, subset


class TestSubset(unittest.TestCase):
    lines = ['AA', 'BB', 'CC', 'DD', 'EE']

    def setUp(self):
        self.input = io.StringIO(''.join(line + '\n' for line in self.lines))
        self.output = io.StringIO()

    def run_subset(self, k: int) -> list:
        written = subset(k, self.input, self.output, rng=random.Random(42))
        output_lines = self.output.getvalue().splitlines()
        self.assertEqual(written, len(output_lines))
        return output_lines

    def test_writes_k_distinct_lines_from_input(self):
        output_lines = self.run_subset(3)

        self.assertEqual(3, len(output_lines))
        self.assertEqual(3, len(set(output_lines)))
        self.assertTrue(set(output_lines) <= set(self.lines))

    def test_writes_every_line_when_k_exceeds_input(self):
        output_lines = self.run_subset(10)
        self.assertCountEqual(self.lines, output_lines)

    def test_writes_nothing_when_k_is_zero(self):
        self.assertListEqual([], self.run_subset(0))
        self.assertEqual('', self.output.getvalue())

    def test_empty_input(self):
        self.input = io.StringIO('')
        self.assertListEqual([], self.run_subset(3))

    def test_each_line_ends_with_newline(self):
        self.run_subset(2)
        self.assertTrue(self.output.getvalue().endswith('\n'))
        self.assertEqual(2, self.output.getvalue().count('\n'))

    def test_last_line_without_newline_is_kept(self):
        self.input = io.StringIO('a\nb')
        self.assertCountEqual(['a', 'b'], self.run_subset(5))

    def test_blank_lines_are_records(self):
        self.input = io.StringIO('\n\nx\n')
        self.assertCountEqual(['', '', 'x'], self.run_subset(5))

    def test_negative_k_raises_value_error(self):
        with self.assertRaises(ValueError):
            Subset(-1, self.input, self.output)

    def test_run_reads_then_drains_queue(self):
        s = Subset(2, self.input, self.output, rng=random.Random(0))

        self.assertEqual(2, s.run())
        self.assertEqual(3, s.queue.size())
