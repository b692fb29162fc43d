from dotenv import load_dotenv
import os
from pathlib import Path

# Load environment variables from .env file
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

# Database configuration
# LightBnB itself ran on PostgreSQL; the default here is MySQL through PyMySQL.
# Point DB_DRIVER (e.g. postgresql+psycopg2) or DATABASE_URL elsewhere to change it.
DB_DRIVER = os.getenv("DB_DRIVER", "mysql+pymysql")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_USER = os.getenv("DB_USER", "vagrant")
DB_PASSWORD = os.getenv("DB_PASSWORD", "123")
DB_NAME = os.getenv("DB_NAME", "lightbnb")
DB_PORT = os.getenv("DB_PORT", "3306")

# Application configuration
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Query limits
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
RESERVATION_LIMIT = 10

# In-memory property store seed (JSON object keyed by id)
PROPERTIES_SEED_FILE = os.getenv("PROPERTIES_SEED_FILE", "")

# Database URL
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"{DB_DRIVER}://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)
