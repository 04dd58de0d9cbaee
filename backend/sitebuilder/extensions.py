from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_jwt_extended import JWTManager

from .cache import RenderCache

db = SQLAlchemy()
migrate = Migrate()
jwt = JWTManager()
render_cache = RenderCache()
