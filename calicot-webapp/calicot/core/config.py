# Standard library imports
import os
from typing import Final, Optional
from urllib.parse import quote_plus, urlparse


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    Variables are grouped the way the deployed configuration groups them:
    CosmosDb, BlobStorage, Authentication:Google and AppSettings (JWT).
    """

    def __init__(self) -> None:
        # Hosting
        self.environment: Final[str] = os.getenv("APP_ENV", "production").strip().lower()
        self.force_https: Final[bool] = _env_flag("FORCE_HTTPS", "true")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.static_root: Final[str] = os.getenv("STATIC_ROOT", "wwwroot")
        self.form_value_count_limit: Final[int] = int(os.getenv("FORM_VALUE_COUNT_LIMIT", "10"))

        # CosmosDb
        self.cosmos_db_database_name: Final[str] = os.getenv("COSMOS_DB_DATABASE_NAME", "calicot")
        self.cosmos_db_container_name: Final[str] = os.getenv("COSMOS_DB_CONTAINER_NAME", "produits")
        self.cosmos_db_account: Final[str] = os.getenv("COSMOS_DB_ACCOUNT", "")
        self.cosmos_db_key: Final[str] = os.getenv("COSMOS_DB_KEY", "")
        self.cosmos_db_connection_string: Final[str] = os.getenv("COSMOS_DB_CONNECTION_STRING", "")
        self.cosmos_db_partition_key: Final[str] = os.getenv("COSMOS_DB_PARTITION_KEY", "/id")
        self.users_collection_name: Final[str] = os.getenv("USERS_COLLECTION_NAME", "users")

        # BlobStorage
        self.blob_storage_connection_string: Final[str] = os.getenv("BLOB_STORAGE_CONNECTION_STRING", "")
        self.blob_storage_database_name: Final[str] = os.getenv("BLOB_STORAGE_DATABASE_NAME", "calicot-files")
        self.blob_storage_default_container: Final[str] = os.getenv("BLOB_STORAGE_DEFAULT_CONTAINER", "images")

        # Authentication:Google
        self.google_client_id: Final[str] = os.getenv("AUTHENTICATION_GOOGLE_CLIENT_ID", "")
        self.google_client_secret: Final[str] = os.getenv("AUTHENTICATION_GOOGLE_CLIENT_SECRET", "")
        self.google_redirect_uri: Final[str] = os.getenv(
            "AUTHENTICATION_GOOGLE_REDIRECT_URI",
            "https://localhost/account/externallogincallback"
        )

        # AppSettings (JWT bearer)
        self.jwt_secret_key: Final[str] = os.getenv("JWT_SECRET_KEY", "change_this_secret_in_production")
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.jwt_public_key: Final[str] = os.getenv("JWT_PUBLIC_KEY", "")
        self.jwt_private_key: Final[str] = os.getenv("JWT_PRIVATE_KEY", "")
        self.access_token_expire_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def partition_key_field(self) -> str:
        """Document field named by the partition key path ("/id" -> "id")"""
        return self.cosmos_db_partition_key.strip("/") or "id"

    @property
    def document_store_uri(self) -> str:
        """
        Resolve the MongoDB URI of the document store.

        An explicit connection string wins. Otherwise an account endpoint and
        key are turned into a Cosmos DB API for MongoDB URI.
        """
        if self.cosmos_db_connection_string:
            return self.cosmos_db_connection_string
        if self.cosmos_db_account and self.cosmos_db_key:
            account = self.cosmos_db_account
            host = urlparse(account).hostname or account
            account_name = host.split(".")[0]
            return (
                f"mongodb://{account_name}:{quote_plus(self.cosmos_db_key)}"
                f"@{account_name}.mongo.cosmos.azure.com:10255/"
                f"?ssl=true&replicaSet=globaldb&retrywrites=false&maxIdleTimeMS=120000"
                f"&appName=@{account_name}@"
            )
        return "mongodb://localhost:27017"

    @property
    def blob_storage_uri(self) -> str:
        return self.blob_storage_connection_string or self.document_store_uri


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
