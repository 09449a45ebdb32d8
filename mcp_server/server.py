# Do not print to stdout; MCP uses stdio. Use logging to stderr.
import asyncio
import logging
import sys
from typing import Literal, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from backend.app.models.schemas import CrateLookupRequest, SvelteLookupRequest, TopicLookupRequest
from backend.app.services.lookup import DocsLookup, LookupResult
from shared.config import Settings, settings as default_settings

logger = logging.getLogger("mcp-server")

_FOCUS_POINTS = """Focus on:
1. The main concepts and features
2. Key APIs and functionality
3. Common usage patterns
4. Any important notes or warnings
5. Latest Version information

Documentation content will follow."""


def _tool_text(result: LookupResult) -> str:
    # Raising marks the MCP response with isError; FastMCP keeps serving.
    if result.is_error:
        raise ToolError(result.text)
    return result.text


def build_server(settings: Optional[Settings] = None, log: Optional[logging.Logger] = None,
                 lookup: Optional[DocsLookup] = None) -> FastMCP:
    """Create the 'dev-docs' MCP server with its lookup tools and prompts."""
    settings = settings or default_settings
    log = log or logger
    lookup = lookup or DocsLookup(settings, logger=log)
    mcp = FastMCP(settings.mcp_server_name)

    @mcp.tool()
    async def lookup_crate_docs(crateName: Optional[str] = None) -> str:
        """Lookup documentation for a Rust crate from docs.rs"""
        log.info(f"MCP tool 'lookup_crate_docs' called: crateName={crateName}")
        request = CrateLookupRequest(crate_name=crateName)
        return _tool_text(await lookup.lookup_crate(request))

    @mcp.tool()
    async def lookup_tauri_docs(topic: Optional[str] = None) -> str:
        """Lookup documentation for Tauri"""
        log.info(f"MCP tool 'lookup_tauri_docs' called: topic={topic}")
        request = TopicLookupRequest(topic=topic)
        return _tool_text(await lookup.lookup_tauri(request))

    @mcp.tool()
    async def lookup_svelte_docs(topic: Optional[str] = None,
                                 type: Optional[Literal["svelte", "sveltekit"]] = None) -> str:
        """Lookup documentation for Svelte or SvelteKit"""
        log.info(f"MCP tool 'lookup_svelte_docs' called: topic={topic}, type={type}")
        request = SvelteLookupRequest(topic=topic, type=type)
        return _tool_text(await lookup.lookup_svelte(request))

    @mcp.prompt(name="lookup_crate_docs")
    def crate_docs_prompt(crateName: str) -> str:
        """Analyze the documentation of a Rust crate."""
        return (
            f"Please analyze and summarize the documentation for the Rust crate '{crateName}'. Focus on:\n"
            "1. The main purpose and features of the crate\n"
            "2. Key types and functions\n"
            "3. Common usage patterns\n"
            "4. Any important notes or warnings\n"
            "5. VERY IMPORTANT: Latest Version\n\n"
            "Documentation content will follow."
        )

    @mcp.prompt(name="lookup_tauri_docs")
    def tauri_docs_prompt(topic: str) -> str:
        """Analyze the Tauri documentation for a topic."""
        return f"Please analyze and summarize the Tauri documentation for '{topic}'. {_FOCUS_POINTS}"

    @mcp.prompt(name="lookup_svelte_docs")
    def svelte_docs_prompt(topic: str, type: str = "svelte") -> str:
        """Analyze the Svelte or SvelteKit documentation for a topic."""
        label = "SvelteKit" if type == "sveltekit" else "Svelte"
        return f"Please analyze and summarize the {label} documentation for '{topic}'. {_FOCUS_POINTS}"

    return mcp


def main() -> None:
    # Configure logging to stderr before any usage
    logging.basicConfig(level=default_settings.log_level.upper(), stream=sys.stderr)
    mcp = build_server(default_settings, logger)
    try:
        logger.info(f"Starting MCP server '{default_settings.mcp_server_name}' over stdio...")
        mcp.run(transport="stdio")
    except (KeyboardInterrupt, asyncio.CancelledError):
        logger.info("MCP server shutdown requested")
    except Exception as e:
        logger.error(f"MCP server terminated with error: {e}")
        raise


if __name__ == "__main__":
    main()
