"""
Reports package

Contains the student record and report templates for PDF generation.
"""
