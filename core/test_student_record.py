"""
Tests for StudentRecord payload decoding
"""

from django.core.exceptions import ValidationError
from django.test import TestCase

from reports.student_record import StudentRecord


class StudentRecordTestCase(TestCase):
    """Test cases for StudentRecord.from_payload"""

    def test_full_payload(self):
        """Test mapping of JSON keys to record attributes"""
        record = StudentRecord.from_payload({
            'id': 7,
            'name': 'Asha Rao',
            'roll': 12,
            'class': '7',
            'admissionDate': '2016-06-01T00:00:00Z',
            'relationOfGuardian': 'Father',
            'systemAccess': True,
        })

        self.assertEqual(record.id, 7)
        self.assertEqual(record.name, 'Asha Rao')
        self.assertEqual(record.roll, 12)
        self.assertEqual(record.student_class, '7')
        self.assertEqual(record.admission_date, '2016-06-01T00:00:00Z')
        self.assertEqual(record.relation_of_guardian, 'Father')
        self.assertTrue(record.system_access)

    def test_defaults(self):
        """Test that absent fields take empty defaults"""
        record = StudentRecord.from_payload({})

        self.assertEqual(record.id, 0)
        self.assertEqual(record.name, '')
        self.assertIsNone(record.roll)
        self.assertFalse(record.system_access)

    def test_null_and_unknown_keys(self):
        """Test that nulls keep defaults and unknown keys are ignored"""
        record = StudentRecord.from_payload({
            'name': None,
            'roll': None,
            'photo': 'ignored.png',
        })

        self.assertEqual(record, StudentRecord())

    def test_non_object_rejected(self):
        """Test that only JSON objects are accepted"""
        for payload in ([], 'Asha', 12, None):
            with self.assertRaises(ValidationError):
                StudentRecord.from_payload(payload)

    def test_wrong_types_rejected(self):
        """Test that every type error is reported"""
        with self.assertRaises(ValidationError) as cm:
            StudentRecord.from_payload({
                'name': 5,
                'roll': '12',
                'systemAccess': 'yes',
            })

        self.assertEqual(cm.exception.messages, [
            "'name' must be a string",
            "'roll' must be an integer",
            "'systemAccess' must be a boolean",
        ])

    def test_boolean_is_not_an_integer(self):
        """Test that true is not accepted as a roll number"""
        with self.assertRaises(ValidationError):
            StudentRecord.from_payload({'roll': True})

    def test_record_is_immutable(self):
        """Test that records cannot be changed during a render"""
        record = StudentRecord(name='Asha Rao')

        with self.assertRaises(AttributeError):
            record.name = 'Changed'

    def test_unpaired_surrogates_are_replaced(self):
        """Test that lone surrogates from JSON escapes become U+FFFD"""
        record = StudentRecord.from_payload({
            'name': 'Asha \ud800',
            'currentAddress': '\udfff12 MG Road',
        })

        self.assertEqual(record.name, 'Asha \ufffd')
        self.assertEqual(record.current_address, '\ufffd12 MG Road')
        record.name.encode('utf-8')
