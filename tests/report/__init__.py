"""Tests for report module.

Test Files and Coverage:
========================

| Test File      | Test Classes      | Tested Constructs                | Tested Functionalities                     |
|----------------|-------------------|----------------------------------|--------------------------------------------|
| test_text.py   | RenderReportTest  | render_report(), format_elapsed()| Group labels, empty files, no-files notice |
"""
