"""
Test doubles for external collaborators.
"""
import itertools


class InMemoryContentStore:
    """Content store that keeps bytes in a dict."""

    def __init__(self):
        self.objects = {}
        self._counter = itertools.count(1)

    def store(self, content, filename='', prefix='uploads'):
        key = f"{prefix}/{next(self._counter)}-{filename or 'file'}"
        self.objects[key] = bytes(content)
        return key

    def retrieve(self, key):
        try:
            return self.objects[key]
        except KeyError:
            raise FileNotFoundError(key)
