import unittest

from text_buffer import TextBuffer


class TextBufferEditTests(unittest.TestCase):
    def test_default_buffer_has_one_empty_line(self):
        buf = TextBuffer()
        self.assertEqual(buf.lines, [""])
        self.assertEqual(TextBuffer([]).lines, [""])

    def test_insert_char_shifts_remainder_right(self):
        buf = TextBuffer(["held"])
        pos = buf.insert_char(0, 3, "l")
        self.assertEqual(buf.lines, ["hell" + "d"])
        self.assertEqual(pos, (0, 4))

    def test_insert_char_at_end_of_line_slot(self):
        buf = TextBuffer(["ab"])
        self.assertEqual(buf.insert_char(0, 2, "c"), (0, 3))
        self.assertEqual(buf.lines, ["abc"])

    def test_insert_char_out_of_bounds_raises(self):
        buf = TextBuffer(["ab"])
        with self.assertRaises(IndexError):
            buf.insert_char(0, 3, "x")
        with self.assertRaises(IndexError):
            buf.insert_char(1, 0, "x")
        with self.assertRaises(IndexError):
            buf.insert_char(0, -1, "x")

    def test_delete_before_removes_previous_char(self):
        buf = TextBuffer(["abc"])
        self.assertEqual(buf.delete_before(0, 2), (0, 1))
        self.assertEqual(buf.lines, ["ac"])

    def test_delete_before_at_line_start_joins_previous_line(self):
        buf = TextBuffer(["ab", "cd", "ef"])
        self.assertEqual(buf.delete_before(1, 0), (0, 2))
        self.assertEqual(buf.lines, ["abcd", "ef"])

    def test_delete_before_at_origin_is_noop(self):
        buf = TextBuffer(["ab", "cd"])
        self.assertEqual(buf.delete_before(0, 0), (0, 0))
        self.assertEqual(buf.lines, ["ab", "cd"])

    def test_split_at_moves_remainder_to_new_line(self):
        buf = TextBuffer(["hello world"])
        self.assertEqual(buf.split_at(0, 5), (1, 0))
        self.assertEqual(buf.lines, ["hello", " world"])

    def test_split_at_end_of_line_appends_empty_line(self):
        buf = TextBuffer(["hello"])
        self.assertEqual(buf.split_at(0, 5), (1, 0))
        self.assertEqual(buf.lines, ["hello", ""])

    def test_split_then_delete_before_round_trips(self):
        for text in ["", "a", "hello", "two words"]:
            for col in range(len(text) + 1):
                buf = TextBuffer(["above", text, "below"])
                pos = buf.split_at(1, col)
                back = buf.delete_before(*pos)
                self.assertEqual(buf.lines, ["above", text, "below"])
                self.assertEqual(back, (1, col))

    def test_insert_then_delete_before_restores_line(self):
        buf = TextBuffer(["abc"])
        pos = buf.insert_char(0, 1, "X")
        buf.delete_before(*pos)
        self.assertEqual(buf.lines, ["abc"])

    def test_delete_before_crossing_line_boundary_joins(self):
        buf = TextBuffer(["ab", "cd"])
        # the cursor after inserting at the start of a line, moved back to col 0
        buf.insert_char(1, 0, "X")
        buf.delete_before(1, 1)
        self.assertEqual(buf.lines, ["ab", "cd"])
        pos = buf.delete_before(1, 0)
        self.assertEqual(buf.lines, ["abcd"])
        self.assertEqual(pos, (0, 2))

    def test_delete_at_removes_char_or_joins_next(self):
        buf = TextBuffer(["abc", "de"])
        self.assertEqual(buf.delete_at(0, 1), (0, 1))
        self.assertEqual(buf.lines, ["ac", "de"])
        buf.delete_at(0, 2)
        self.assertEqual(buf.lines, ["acde"])
        buf.delete_at(0, 4)
        self.assertEqual(buf.lines, ["acde"])

    def test_mutations_never_leave_zero_lines(self):
        buf = TextBuffer(["a", ""])
        buf.delete_before(1, 0)
        buf.delete_before(0, 1)
        self.assertEqual(buf.lines, [""])
        self.assertEqual(buf.line_count, 1)


class TextBufferTextTests(unittest.TestCase):
    def test_from_text_keeps_trailing_newline_as_empty_line(self):
        buf = TextBuffer.from_text("a\nb\n")
        self.assertEqual(buf.lines, ["a", "b", ""])
        self.assertEqual(buf.to_text(), "a\nb\n")

    def test_from_empty_text(self):
        self.assertEqual(TextBuffer.from_text("").lines, [""])

    def test_line_access_checks_row(self):
        buf = TextBuffer(["x"])
        self.assertEqual(buf.line_length(0), 1)
        with self.assertRaises(IndexError):
            buf.line(1)


if __name__ == "__main__":
    unittest.main()
