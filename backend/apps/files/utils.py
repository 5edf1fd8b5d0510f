"""
File type classification helpers for uploads and downloads.
"""

EXTENSION_TYPES = {
    'js': 'JavaScript',
    'html': 'HTML',
    'css': 'CSS',
    'ts': 'TypeScript',
    'tsx': 'TypeScript',
    'py': 'Python',
    'java': 'Java',
    'c': 'C/C++',
    'cpp': 'C/C++',
    'h': 'C/C++',
}

DOWNLOAD_CONTENT_TYPES = {
    'Image': 'image/jpeg',
    'PDF': 'application/pdf',
    'Document': 'application/msword',
    'Spreadsheet': 'application/vnd.ms-excel',
    'Text': 'text/plain',
    'JavaScript': 'text/plain',
    'HTML': 'text/plain',
    'CSS': 'text/plain',
}


def get_extension(filename):
    if not filename or '.' not in filename:
        return ''
    return filename.rsplit('.', 1)[-1].lower()


def detect_file_type(mime_type, filename):
    """
    Map an upload's MIME type and name to the coarse category shown in
    the dashboard (e.g. "Image", "Spreadsheet", "Python").
    """
    mime_type = (mime_type or '').lower()
    extension = get_extension(filename)

    if mime_type.startswith('image/'):
        return 'Image'
    if mime_type == 'application/pdf':
        return 'PDF'
    if mime_type == 'application/json':
        return 'JSON'
    if 'excel' in mime_type or 'spreadsheet' in mime_type or extension == 'csv':
        return 'Spreadsheet'
    if 'word' in mime_type or 'document' in mime_type:
        return 'Document'
    if extension in EXTENSION_TYPES:
        return EXTENSION_TYPES[extension]
    if 'text' in mime_type:
        return 'Text'
    return extension.upper() if extension else 'Unknown'


def content_type_for(file_type):
    return DOWNLOAD_CONTENT_TYPES.get(file_type, 'application/octet-stream')
