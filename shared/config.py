import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()

_DEFAULT_DOCS_DIR = os.getenv("DOCS_DIR", "./docs")

class Settings(BaseModel):
    app_env: str = Field(default=os.getenv("APP_ENV", "dev"))
    log_level: str = Field(default=os.getenv("LOG_LEVEL", "INFO"))

    # Local corpora (externally authored llms.txt files)
    docs_dir: str = Field(default=_DEFAULT_DOCS_DIR)
    tauri_docs_path: str = Field(
        default=os.getenv("TAURI_DOCS_PATH", os.path.join(_DEFAULT_DOCS_DIR, "TAURIllms.txt"))
    )
    svelte_docs_path: str = Field(
        default=os.getenv("SVELTE_DOCS_PATH", os.path.join(_DEFAULT_DOCS_DIR, "SVELTEllms-full.txt"))
    )
    max_excerpt_length: int = Field(default=int(os.getenv("MAX_EXCERPT_LENGTH", "8000")), gt=0)

    # docs.rs
    docs_rs_base_url: str = Field(default=os.getenv("DOCS_RS_BASE_URL", "https://docs.rs"))
    default_crate: str = Field(default=os.getenv("DEFAULT_CRATE", "tokio"))
    http_timeout: float = Field(default=float(os.getenv("HTTP_TIMEOUT", "30")))
    wordwrap: int = Field(default=int(os.getenv("WORDWRAP", "130")), gt=0)

    # MCP
    mcp_server_name: str = Field(default=os.getenv("MCP_SERVER_NAME", "dev-docs"))
    mcp_server_path: str = Field(default=os.getenv("MCP_SERVER_PATH", "./mcp_server/server.py"))

    # HTTP API
    api_host: str = Field(default=os.getenv("API_HOST", "127.0.0.1"))
    api_port: int = Field(default=int(os.getenv("API_PORT", "3000")))

settings = Settings()
