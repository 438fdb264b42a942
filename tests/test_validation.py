"""
Tests for range, mask and pattern validation.

Run with: pytest tests/ -v
"""

import re
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from aform.constants import PHONE_MASK, PHONE_WITH_AREA_MASK
from aform.context import FormContext
from aform.event import FieldEvent
from aform.host import RecordingApp, SimpleField
from aform.validation import (
    MaskStatus,
    MaskValidator,
    RangeValidator,
    check_mask,
    email_validate,
    exact_match,
    select_phone_mask,
    simplify_mask,
)


class TestRangeValidator:
    """Tests for numeric bounds checks."""

    def setup_method(self):
        self.app = RecordingApp()
        self.validator = RangeValidator(FormContext(app=self.app))

    def test_above_both_bounds(self):
        event = FieldEvent(value="25", will_commit=True)
        self.validator.validate(event, True, 10, True, 20)
        assert event.rc is False
        assert self.app.alerts == [
            "Invalid value: must be greater than or equal to 10 "
            "and less than or equal to 20."
        ]

    def test_within_bounds(self):
        event = FieldEvent(value="15", will_commit=True)
        self.validator.validate(event, True, 10, True, 20)
        assert event.rc is True
        assert self.app.alerts == []

    def test_inclusive_bounds(self):
        for value in ("10", "20"):
            event = FieldEvent(value=value, will_commit=True)
            self.validator.validate(event, True, 10, True, 20)
            assert event.rc is True

    def test_lower_bound_only(self):
        event = FieldEvent(value="5", will_commit=True)
        self.validator.validate(event, True, 2.5, False, 0)
        assert event.rc is False
        assert self.app.alerts == [
            "Invalid value: must be greater than or equal to 2.5."
        ]

    def test_upper_bound_only(self):
        event = FieldEvent(value="25", will_commit=True)
        self.validator.validate(event, False, 0, True, 20)
        assert self.app.alerts == ["Invalid value: must be less than or equal to 20."]

    def test_no_bounds_still_checks_max(self):
        event = FieldEvent(value="25", will_commit=True)
        self.validator.validate(event, False, 0, False, 20)
        assert event.rc is False

    def test_empty_and_unparsable_ignored(self):
        for value in ("", "abc"):
            event = FieldEvent(value=value, will_commit=True)
            self.validator.validate(event, True, 10, True, 20)
            assert event.rc is True
        assert self.app.alerts == []


class TestCheckMask:
    """Tests for the pure mask check."""

    def test_prefix_while_typing(self):
        outcome = check_mask("555-1", PHONE_MASK, False, False)
        assert outcome.accepted

    def test_too_short_on_commit(self):
        outcome = check_mask("555-1", PHONE_MASK, True, False)
        assert outcome.status is MaskStatus.REJECT_SILENT
        assert outcome.message is None

    def test_rejection_message(self):
        outcome = check_mask("12a", "999", True, True, "Bad")
        assert outcome.status is MaskStatus.REJECT_WITH_MESSAGE
        assert outcome.message == 'Bad = "999"'

    def test_too_long(self):
        assert not check_mask("123456", "99999", False, False).accepted

    def test_wildcards(self):
        assert check_mask("aB1-x", "AOO-X", True, False).accepted
        assert not check_mask("1B1-x", "AOO-X", True, False).accepted

    def test_empty_accepted(self):
        assert check_mask("", "999", True, True).accepted

    def test_simplify(self):
        assert simplify_mask("(999) 999-9999") == "9999999999"


class TestSpecialKeystroke:
    """Tests for preset mask keystrokes."""

    def setup_method(self):
        self.app = RecordingApp()
        self.validator = MaskValidator(FormContext(app=self.app))

    def commit(self, value, psf):
        event = FieldEvent(value=value, will_commit=True, target=SimpleField(name="Id"))
        self.validator.special_keystroke(event, psf)
        return event

    def test_ssn_digits_accepted(self):
        event = self.commit("123456789", 3)
        assert event.rc is True
        assert event.value == "123456789"

        self.validator.special_format(event, 3)
        assert event.value == "123-45-6789"

    def test_ssn_rejected(self):
        event = self.commit("12a456789", 3)
        assert event.rc is False
        assert self.app.alerts == [
            'The value entered does not match the format of the field = "999-99-9999"'
        ]

    def test_zip(self):
        assert self.commit("12345", 0).rc is True
        assert self.commit("1234", 0).rc is False

    def test_typing_phone(self):
        event = FieldEvent(value="555-1", change="2", sel_start=5, sel_end=5)
        self.validator.special_keystroke(event, 2)
        assert event.rc is True
        assert self.app.alerts == []

    def test_phone_without_area_code(self):
        assert self.commit("5551234", 2).rc is True
        assert self.commit("555-1234", 2).rc is True

    def test_phone_with_area_code(self):
        assert self.commit("(555) 123-4567", 2).rc is True
        assert self.commit("5551234567", 2).rc is True

    def test_seven_digits_use_short_phone_mask(self):
        event = self.commit("1234567x", 2)
        assert event.rc is False
        assert self.app.alerts[-1].endswith(f'"{PHONE_MASK}"')

    def test_eight_digits_use_area_code_mask(self):
        event = self.commit("12345678x", 2)
        assert event.rc is False
        assert self.app.alerts[-1].endswith(f'"{PHONE_WITH_AREA_MASK}"')

    def test_select_phone_mask(self):
        assert select_phone_mask("1234567") == PHONE_MASK
        assert select_phone_mask("12345678") == PHONE_WITH_AREA_MASK

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            self.commit("123", 7)


class TestCustomMask:
    """Tests for custom mask keystrokes."""

    def setup_method(self):
        self.app = RecordingApp()
        self.validator = MaskValidator(FormContext(app=self.app))

    def test_commit_full_mask(self):
        event = FieldEvent(value="ab-123", will_commit=True)
        self.validator.keystroke_ex(event, "AA-999")
        assert event.rc is True

    def test_commit_simplified_mask(self):
        event = FieldEvent(value="ab123", will_commit=True)
        self.validator.keystroke_ex(event, "AA-999")
        assert event.rc is True

    def test_typing_rejection_alerts(self):
        event = FieldEvent(value="a", change="1", sel_start=1, sel_end=1)
        self.validator.keystroke_ex(event, "AA-999")
        assert event.rc is False
        assert len(self.app.alerts) == 1

    def test_literal_mismatch_on_commit(self):
        event = FieldEvent(value="ab+123", will_commit=True)
        self.validator.keystroke_ex(event, "AA-999")
        assert event.rc is False
        assert self.app.alerts == [
            'The value entered does not match the format of the field = "AA-999"'
        ]


class TestSpecialFormat:
    """Tests for preset mask formatting."""

    def setup_method(self):
        self.validator = MaskValidator(FormContext())

    @pytest.mark.parametrize("psf,value,expected", [
        (0, "123456789", "12345"),
        (1, "123456789", "12345-6789"),
        (2, "5551234567", "(555) 123-4567"),
        (2, "5551234", "555-1234"),
        (3, "123456789", "123-45-6789"),
    ])
    def test_presets(self, psf, value, expected):
        event = FieldEvent(value=value)
        self.validator.special_format(event, psf)
        assert event.value == expected

    def test_empty(self):
        event = FieldEvent(value="")
        self.validator.special_format(event, 3)
        assert event.value == ""

    def test_unknown_preset(self):
        with pytest.raises(ValueError):
            self.validator.special_format(FieldEvent(value="1"), 9)


class TestPatterns:
    """Tests for e-mail validation and exact matching."""

    def test_email(self):
        assert email_validate("user@example.com")
        assert email_validate("a.b+c@sub.example.org")

    def test_invalid_email(self):
        assert not email_validate("user@")
        assert not email_validate("user@-bad.com")
        assert not email_validate("no at sign")
        assert not email_validate(None)
        assert not email_validate("user@example.com\n")

    def test_exact_match_single(self):
        assert exact_match(r"\d+", "123") is True
        assert exact_match(r"\d+", "123abc") == 0
        assert exact_match(re.compile(r"\d+"), "a123") == 0

    def test_exact_match_list(self):
        assert exact_match([r"a", r"b"], "b") == 2
        assert exact_match([r"a+", r"a"], "aa") == 1
        assert exact_match([r"a", r"b"], "c") == 0
