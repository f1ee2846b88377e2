"""Mode spec parsing, application and display."""

from __future__ import annotations

import unittest

from rper.modespec import InvalidModeSpec, ModeSpec


class ModeSpecParseTests(unittest.TestCase):
    def test_parses_plain_three_digit_mode(self) -> None:
        spec = ModeSpec.parse("755")
        self.assertEqual(spec.slots, (7, 5, 5))

    def test_wildcards_become_none(self) -> None:
        spec = ModeSpec.parse("6*4")
        self.assertEqual(spec.slots, (6, None, 4))

    def test_leading_zero_of_four_digit_mode_is_stripped(self) -> None:
        self.assertEqual(ModeSpec.parse("0644"), ModeSpec.parse("644"))
        self.assertEqual(str(ModeSpec.parse("0*5*")), "*5*")

    def test_render_reproduces_input(self) -> None:
        for text in ("777", "***", "6*4", "*45", "54*", "0755", "0***"):
            with self.subTest(text=text):
                self.assertEqual(str(ModeSpec.parse(text)), text[-3:])

    def test_rejects_digits_below_four(self) -> None:
        for text in ("644x", "700", "640", "123", "0600", "3**"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidModeSpec):
                    ModeSpec.parse(text)

    def test_rejects_wrong_lengths_and_characters(self) -> None:
        for text in ("", "7", "75", "7555", "07555", "1755", "*755", "rwx", "8**", "7 5", "+x"):
            with self.subTest(text=text):
                with self.assertRaises(InvalidModeSpec):
                    ModeSpec.parse(text)

    def test_invalid_mode_spec_is_a_value_error_with_the_text(self) -> None:
        with self.assertRaises(ValueError) as caught:
            ModeSpec.parse("1755")
        self.assertEqual(caught.exception.text, "1755")
        self.assertIn("Invalid octal value: 1755", str(caught.exception))

    def test_invalid_mode_spec_reports_text_without_leading_zero(self) -> None:
        with self.assertRaises(InvalidModeSpec) as caught:
            ModeSpec.parse("0600")
        self.assertEqual(caught.exception.text, "600")
        self.assertIn("Invalid octal value: 600 ", str(caught.exception))

    def test_constructor_rejects_out_of_range_slots(self) -> None:
        with self.assertRaises(InvalidModeSpec):
            ModeSpec(user=8, group=None, other=4)

    def test_constructor_allows_low_digits(self) -> None:
        spec = ModeSpec(user=0, group=None, other=3)
        self.assertEqual(spec.render(), "0*3")


class ModeSpecApplyTests(unittest.TestCase):
    def test_fixed_spec_replaces_all_groups(self) -> None:
        self.assertEqual(ModeSpec.parse("755").apply(0o644), 0o755)
        self.assertEqual(ModeSpec.parse("755").apply(0o755), 0o755)

    def test_wildcard_keeps_original_group(self) -> None:
        self.assertEqual(ModeSpec.parse("6*4").apply(0o750), 0o654)
        self.assertEqual(ModeSpec.parse("*4*").apply(0o731), 0o741)

    def test_all_wildcards_is_identity(self) -> None:
        spec = ModeSpec.parse("***")
        for mode in (0o000, 0o644, 0o755, 0o777, 0o123):
            with self.subTest(mode=oct(mode)):
                self.assertEqual(spec.apply(mode), mode)

    def test_apply_is_idempotent(self) -> None:
        for text in ("755", "6*4", "**7", "4**"):
            spec = ModeSpec.parse(text)
            for mode in (0o000, 0o640, 0o777, 0o501):
                with self.subTest(spec=text, mode=oct(mode)):
                    once = spec.apply(mode)
                    self.assertEqual(spec.apply(once), once)

    def test_mode_is_masked_to_permission_bits(self) -> None:
        # Regular file type bits plus setuid are dropped
        self.assertEqual(ModeSpec.parse("***").apply(0o104755), 0o755)
        self.assertEqual(ModeSpec.parse("6**").apply(0o40700), 0o600)


if __name__ == "__main__":
    unittest.main()
