from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from storefront.layout.sessions import LayoutEditors

db = SQLAlchemy()
migrate = Migrate()
editors = LayoutEditors()
