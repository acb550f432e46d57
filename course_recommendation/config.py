"""
Runtime configuration

Values are read once from the environment (a local .env is loaded first).
DATABASE_URL is read by db.py.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Host database
DB_TABLE_PREFIX = os.getenv("DB_TABLE_PREFIX", "mdl_")
DB_CREATE_TABLES = os.getenv("DB_CREATE_TABLES", "0") == "1"

# Host site
WWWROOT = os.getenv("WWWROOT", "http://localhost").rstrip("/")
DEFAULT_LANG = os.getenv("DEFAULT_LANG", "en")
GUEST_USERNAME = os.getenv("GUEST_USERNAME", "guest")

# Viewer tokens
JWT_SECRET = os.getenv("JWT_SECRET", "dev_secret_change_me_before_deploying")
JWT_ALG = "HS256"

# Course image storage (R2 / S3 compatible)
R2_BUCKET = os.getenv("R2_BUCKET")
R2_ACCESS_KEY = os.getenv("R2_ACCESS_KEY")
R2_SECRET_KEY = os.getenv("R2_SECRET_KEY")
R2_ENDPOINT = os.getenv("R2_ENDPOINT")
R2_PUBLIC_URL = (os.getenv("R2_PUBLIC_URL") or "").rstrip("/") or None
IMAGE_URL_EXPIRY_SECONDS = int(os.getenv("IMAGE_URL_EXPIRY_SECONDS", "3600"))

# Serve recommendations from the built-in sample dataset instead of the database
USE_MOCK_DATA = os.getenv("USE_MOCK_DATA", "0") == "1"
