from storefront.extensions import db

class StoreMixin:
    store_id = db.Column(
        db.String(64),
        nullable=False,
        index=True
    )
