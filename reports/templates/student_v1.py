"""
Student Report Template (v1)

Template for generating student profile PDF reports.
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from core.services.reporting.dates import format_long_date, normalize_date
from core.services.reporting.layout import Document, LayoutBuilder
from core.services.reporting.styles import get_report_styles

# Row heights and gaps in mm
TITLE_HEIGHT = 15
CAPTION_HEIGHT = 5
BANNER_HEIGHT = 10
FIELD_HEIGHT = 8
FOOTER_HEIGHT = 5

HEADER_GAP = 5
BANNER_GAP = 2
SECTION_GAP = 5
FOOTER_GAP = 10

LABEL_WIDTH = 50

REPORT_TITLE = 'STUDENT REPORT'
FOOTER_TEXT = 'This is a computer-generated document. No signature required.'


@dataclass(frozen=True)
class FieldSpec:
    """One label/value row bound to a StudentRecord attribute"""

    label: str
    attribute: str
    formatter: Optional[Callable[[object], str]] = None

    def value_for(self, record) -> str:
        value = getattr(record, self.attribute)
        if self.formatter:
            return self.formatter(value)
        return '' if value is None else str(value)


@dataclass(frozen=True)
class SectionSpec:
    title: str
    fields: tuple


SECTIONS = (
    SectionSpec('Personal Information', (
        FieldSpec('Name:', 'name'),
        FieldSpec('Roll No:', 'roll'),
        FieldSpec('Date of Birth:', 'dob', normalize_date),
        FieldSpec('Gender:', 'gender'),
        FieldSpec('Admission Date:', 'admission_date', normalize_date),
    )),
    SectionSpec('Contact Information', (
        FieldSpec('Email:', 'email'),
        FieldSpec('Phone:', 'phone'),
        FieldSpec('Current Address:', 'current_address'),
        FieldSpec('Permanent Address:', 'permanent_address'),
    )),
    SectionSpec('Academic Information', (
        FieldSpec('Class:', 'student_class'),
        FieldSpec('Section:', 'section'),
        FieldSpec('Reporter/Teacher:', 'reporter_name'),
    )),
    SectionSpec('Family Information', (
        FieldSpec('Father Name:', 'father_name'),
        FieldSpec('Father Phone:', 'father_phone'),
        FieldSpec('Mother Name:', 'mother_name'),
        FieldSpec('Mother Phone:', 'mother_phone'),
        FieldSpec('Guardian Name:', 'guardian_name'),
        FieldSpec('Guardian Phone:', 'guardian_phone'),
        FieldSpec('Guardian Relation:', 'relation_of_guardian'),
    )),
)


class StudentReportV1:
    """Template for student reports version 1"""

    author = 'Student PDF Report Service'
    sections = SECTIONS

    def __init__(self):
        self.styles = get_report_styles()

    def get_title(self, record) -> str:
        return f"Student Report - {record.name}" if record.name else "Student Report"

    def get_filename(self, record) -> str:
        return f"student_{record.id}_report.pdf"

    def build_document(self, record, generated_on: date) -> Document:
        """
        Lay out the full report for one record.

        Layout:
            title, generation date, then the Personal, Contact, Academic and
            Family sections (banner plus field rows, one gap after each),
            then the footer line.
        """
        builder = LayoutBuilder()

        self.draw_header(builder, generated_on)
        for section in self.sections:
            self.draw_section(builder, section, record)
        self.draw_footer(builder)

        return builder.build()

    def draw_header(self, builder, generated_on: date):
        """Draw the title banner and the 'generated on' caption"""
        builder.add_text_row(REPORT_TITLE, self.styles['ReportTitle'], TITLE_HEIGHT)
        builder.add_gap(HEADER_GAP)

        caption = f"Generated on: {format_long_date(generated_on)}"
        builder.add_text_row(caption, self.styles['ReportCaption'], CAPTION_HEIGHT)
        builder.add_gap(HEADER_GAP)

    def draw_section(self, builder, section: SectionSpec, record):
        """Draw a section banner followed by its field rows"""
        builder.add_text_row(section.title, self.styles['SectionBanner'], BANNER_HEIGHT)
        builder.add_gap(BANNER_GAP)

        for spec in section.fields:
            builder.add_field_row(
                spec.label,
                spec.value_for(record),
                self.styles['FieldLabel'],
                self.styles['FieldValue'],
                LABEL_WIDTH,
                FIELD_HEIGHT
            )

        builder.add_gap(SECTION_GAP)

    def draw_footer(self, builder):
        builder.add_gap(FOOTER_GAP)
        builder.add_text_row(FOOTER_TEXT, self.styles['ReportFooter'], FOOTER_HEIGHT)
