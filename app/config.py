from dotenv import load_dotenv
import os

# Load environment variables from .env file
load_dotenv()

# Database configuration
DB_HOST = os.getenv("MYSQL_HOST", "db")
DB_USER = os.getenv("MYSQL_USER", "user")
DB_PASSWORD = os.getenv("MYSQL_PASSWORD", "123456")
DB_NAME = os.getenv("MYSQL_DB", "pg_manager")
DB_PORT = os.getenv("MYSQL_PORT", "3306")

DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "20"))

# JWT configuration
SECRET_KEY = os.getenv("SECRET_KEY", "your_secret_key_here")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

# Application configuration
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Tenant table management
# "retain" keeps an admin's tables after the admin is deleted, "drop" removes them
TENANT_TABLE_RETENTION = os.getenv("TENANT_TABLE_RETENTION", "retain").lower()
# Seconds to wait for the per-tenant provisioning lock, 0 disables locking
PROVISION_LOCK_TIMEOUT = int(os.getenv("PROVISION_LOCK_TIMEOUT", "10"))
PROVISION_ON_STARTUP = os.getenv("PROVISION_ON_STARTUP", "true").lower() == "true"
VERIFY_TABLES_ON_REQUEST = os.getenv("VERIFY_TABLES_ON_REQUEST", "false").lower() == "true"

# Database URL
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)
