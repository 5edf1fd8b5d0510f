"""Tests for upload type classification."""

from django.test import SimpleTestCase

from apps.files.utils import content_type_for, detect_file_type


class DetectFileTypeTest(SimpleTestCase):

    def test_mime_based_types(self):
        self.assertEqual(detect_file_type('image/png', 'logo.png'), 'Image')
        self.assertEqual(detect_file_type('application/pdf', 'brief.pdf'), 'PDF')
        self.assertEqual(detect_file_type('application/json', 'data.json'), 'JSON')
        self.assertEqual(detect_file_type('application/vnd.ms-excel', 'sheet.xls'), 'Spreadsheet')
        self.assertEqual(
            detect_file_type(
                'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet', 'sheet.xlsx'
            ),
            'Spreadsheet',
        )
        self.assertEqual(
            detect_file_type(
                'application/vnd.openxmlformats-officedocument.wordprocessingml.document', 'notes.docx'
            ),
            'Document',
        )

    def test_csv_is_spreadsheet(self):
        self.assertEqual(detect_file_type('text/csv', 'report.csv'), 'Spreadsheet')

    def test_extension_based_types(self):
        self.assertEqual(detect_file_type('text/javascript', 'app.js'), 'JavaScript')
        self.assertEqual(detect_file_type('text/html', 'index.html'), 'HTML')
        self.assertEqual(detect_file_type('text/css', 'site.css'), 'CSS')
        self.assertEqual(detect_file_type('application/octet-stream', 'App.TSX'), 'TypeScript')
        self.assertEqual(detect_file_type('application/octet-stream', 'main.py'), 'Python')
        self.assertEqual(detect_file_type('application/octet-stream', 'Main.java'), 'Java')
        self.assertEqual(detect_file_type('application/octet-stream', 'util.h'), 'C/C++')

    def test_fallbacks(self):
        self.assertEqual(detect_file_type('text/plain', 'notes.txt'), 'Text')
        self.assertEqual(detect_file_type('application/octet-stream', 'bundle.zip'), 'ZIP')
        self.assertEqual(detect_file_type('application/octet-stream', 'README'), 'Unknown')
        self.assertEqual(detect_file_type(None, ''), 'Unknown')


class ContentTypeForTest(SimpleTestCase):

    def test_known_types(self):
        self.assertEqual(content_type_for('PDF'), 'application/pdf')
        self.assertEqual(content_type_for('Image'), 'image/jpeg')
        self.assertEqual(content_type_for('JavaScript'), 'text/plain')

    def test_unknown_type(self):
        self.assertEqual(content_type_for('Python'), 'application/octet-stream')
