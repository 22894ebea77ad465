from django.test import SimpleTestCase

from django_metabox.transpose import to_columns, to_rows


class ToRowsTests(SimpleTestCase):
    def test_empty_columns_give_no_rows(self):
        self.assertEqual(to_rows({}), [])

    def test_equal_length_columns(self):
        rows = to_rows({"street": ["Main St", "2nd Ave"], "city": ["Town", ""]})
        self.assertEqual(
            rows,
            [
                {"street": "Main St", "city": "Town"},
                {"street": "2nd Ave", "city": ""},
            ],
        )

    def test_ragged_columns_create_rows_up_to_longest_list(self):
        rows = to_rows({"a": ["x", "y", "z"], "b": ["p"]})
        self.assertEqual(rows, [{"a": "x", "b": "p"}, {"a": "y"}, {"a": "z"}])

    def test_shorter_first_column_still_fills_later_rows(self):
        rows = to_rows({"a": ["x"], "b": ["p", "q"]})
        self.assertEqual(rows, [{"a": "x", "b": "p"}, {"b": "q"}])

    def test_empty_rows_are_kept(self):
        rows = to_rows({"a": ["", ""], "b": ["", ""]})
        self.assertEqual(rows, [{"a": "", "b": ""}, {"a": "", "b": ""}])

    def test_input_is_not_modified(self):
        columns = {"a": ["x", "y"]}
        to_rows(columns)
        self.assertEqual(columns, {"a": ["x", "y"]})


class ToColumnsTests(SimpleTestCase):
    def test_empty_rows_give_no_columns(self):
        self.assertEqual(to_columns([]), {})

    def test_missing_values_are_padded(self):
        columns = to_columns([{"a": "x", "b": "p"}, {"a": "y"}, {"b": "r"}])
        self.assertEqual(columns, {"a": ["x", "y", ""], "b": ["p", "", "r"]})

    def test_field_order_follows_first_appearance(self):
        columns = to_columns([{"b": "1"}, {"a": "2", "b": "3"}])
        self.assertEqual(list(columns), ["b", "a"])

    def test_round_trip_for_equal_length_columns(self):
        samples = [
            {"street": ["Main St", "2nd Ave"], "city": ["Town", ""]},
            {"only": ["one"]},
            {"a": ["", "", ""], "b": ["", "v", ""]},
        ]
        for columns in samples:
            with self.subTest(columns=columns):
                self.assertEqual(to_columns(to_rows(columns)), columns)

    def test_ragged_columns_come_back_padded(self):
        self.assertEqual(
            to_columns(to_rows({"a": ["x", "y", "z"], "b": ["p"]})),
            {"a": ["x", "y", "z"], "b": ["p", "", ""]},
        )
