# storefront/models/storage_entry.py
from storefront.extensions import db
from storefront.utils.transaction import transactional
from .base import BaseModel
from .store_mixin import StoreMixin


class StorageEntry(BaseModel, StoreMixin):
    """One persisted document (e.g. ``store-page-layout``) per store and key."""
    __tablename__ = "storage_entries"

    key = db.Column(db.String(128), nullable=False)
    value = db.Column(db.Text, nullable=False)

    __table_args__ = (
        db.UniqueConstraint("store_id", "key", name="uq_storage_entry_store_key"),
    )


class SqlStorage:
    """
    LocalStorage backed by the ``storage_entries`` table.

    Every call runs in its own application context, so the autosave
    timer thread can use it outside a request.
    """

    def __init__(self, app, store_id: str):
        self.app = app
        self.store_id = store_id

    def get_item(self, key):
        with self.app.app_context():
            entry = StorageEntry.query.filter_by(store_id=self.store_id, key=key).first()
            return entry.value if entry else None

    def set_item(self, key, value):
        with self.app.app_context():
            with transactional():
                entry = StorageEntry.query.filter_by(store_id=self.store_id, key=key).first()
                if not entry:
                    entry = StorageEntry()
                    entry.store_id = self.store_id
                    entry.key = key

                entry.value = value
                db.session.add(entry)
