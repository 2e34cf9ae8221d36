from typing import Set

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Database
    DATABASE_URL: str = "sqlite:///./libboard.db"

    # API
    API_TITLE: str = "Library Board API"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Security
    SECRET_KEY: str = "change-me"

    # Attachments
    UPLOAD_DIR: str = "./uploads"
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB
    ALLOWED_EXTENSIONS: str = "jpg,jpeg,png,gif,pdf,doc,docx,hwp,xls,xlsx,ppt,pptx,txt,zip,rar,gz,bz2"
    VERIFY_FILE_SIGNATURE: bool = False

    # Listing
    DEFAULT_PAGE_SIZE: int = 10

    @property
    def allowed_extensions(self) -> Set[str]:
        """ALLOWED_EXTENSIONS as a set of lower-case extensions without the dot."""
        return {
            ext.strip().lstrip(".").lower()
            for ext in self.ALLOWED_EXTENSIONS.split(",")
            if ext.strip()
        }

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
