""" Local Storage Vendor Package """

from .document_store import LocalDocumentStore
from .record_store import JsonRecordStore

__all__ = ['LocalDocumentStore', 'JsonRecordStore']
