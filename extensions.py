from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Extensions are created unbound and attached in create_app()

# Database (engine is created lazily on first use and shared by the process)
db = SQLAlchemy()

# Session-based authentication
login_manager = LoginManager()
