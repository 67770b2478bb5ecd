"""
Student record consumed by the student report template.
"""

import re
from dataclasses import dataclass, field, fields
from typing import Optional

from django.core.exceptions import ValidationError

# Lone UTF-16 surrogates survive json.loads but cannot be encoded to a PDF
SURROGATE_PATTERN = re.compile('[\ud800-\udfff]')
REPLACEMENT_CHARACTER = '\ufffd'


def _json(key: str, kind: type = str, default=''):
    """Dataclass field bound to a JSON key of the given type"""
    return field(default=default, metadata={'json': key, 'kind': kind})


@dataclass(frozen=True)
class StudentRecord:
    """
    Flat student profile. Every attribute is optional; absent strings are
    empty, an absent roll number is None.
    """

    id: int = _json('id', int, 0)
    name: str = _json('name')
    email: str = _json('email')
    roll: Optional[int] = _json('roll', int, None)
    phone: str = _json('phone')
    gender: str = _json('gender')
    dob: str = _json('dob')
    student_class: str = _json('class')
    section: str = _json('section')
    father_name: str = _json('fatherName')
    father_phone: str = _json('fatherPhone')
    mother_name: str = _json('motherName')
    mother_phone: str = _json('motherPhone')
    guardian_name: str = _json('guardianName')
    guardian_phone: str = _json('guardianPhone')
    relation_of_guardian: str = _json('relationOfGuardian')
    current_address: str = _json('currentAddress')
    permanent_address: str = _json('permanentAddress')
    admission_date: str = _json('admissionDate')
    reporter_name: str = _json('reporterName')
    system_access: bool = _json('systemAccess', bool, False)

    @classmethod
    def from_payload(cls, data) -> 'StudentRecord':
        """
        Build a record from a decoded JSON object.

        Unknown keys are ignored and null values keep the default. Unpaired
        surrogates in strings are replaced with U+FFFD.

        Args:
            data: Decoded JSON value

        Returns:
            StudentRecord instance

        Raises:
            ValidationError: If data is not an object or a value has the wrong type
        """
        if not isinstance(data, dict):
            raise ValidationError('Student record must be a JSON object')

        values = {}
        errors = []
        for record_field in fields(cls):
            key = record_field.metadata['json']
            kind = record_field.metadata['kind']
            value = data.get(key)
            if value is None:
                continue

            # bool is a subclass of int, so check it explicitly
            if isinstance(value, kind) and (kind is bool or not isinstance(value, bool)):
                if kind is str:
                    value = SURROGATE_PATTERN.sub(REPLACEMENT_CHARACTER, value)
                values[record_field.name] = value
            else:
                errors.append(f"'{key}' must be {_KIND_NAMES[kind]}")

        if errors:
            raise ValidationError(errors)

        return cls(**values)


_KIND_NAMES = {
    str: 'a string',
    int: 'an integer',
    bool: 'a boolean',
}
