"""
MCP Server for File System Operations.

Exposes a single root directory to MCP clients. Every requested path is
resolved as a typed path below the root, anything escaping it is refused.

Usage:
    server = FileMCPServer("/path/to/root")
    await server.run()
"""

import asyncio
import json
import logging
from typing import Any, Iterable

from mcp.server import Server, NotificationOptions
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from typed_fs.application.common.entry_filter import DEFAULT_IGNORED_DIRECTORIES
from typed_fs.application.common.path_guard import resolve_root, resolve_under_root
from typed_fs.application.interfaces.i_file_system import IFileSystem
from typed_fs.application.use_cases.hash_file import HashFileUseCase
from typed_fs.application.use_cases.list_directory import ListDirectoryUseCase
from typed_fs.domain.exceptions.domain_exceptions import (
    DomainError,
    PathNotFoundError,
)
from typed_fs.infrastructure.config.logging_config import setup_logging
from typed_fs.infrastructure.config.settings import get_settings
from typed_fs.infrastructure.file_system.local_file_system import LocalFileSystem

logger = logging.getLogger(__name__)


class FileMCPServer:
    """MCP Server for typed file system operations below a root directory."""

    def __init__(
        self,
        root_path: str,
        file_system: IFileSystem | None = None,
        ignored_directories: Iterable[str] = DEFAULT_IGNORED_DIRECTORIES,
    ):
        self.root_path = resolve_root(root_path)
        self.file_system = file_system or LocalFileSystem()
        self.ignored_directories = frozenset(ignored_directories)

        self.server = Server("typed-fs")
        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register MCP handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return self.tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            return await self.dispatch(name, arguments)

    @staticmethod
    def tools() -> list[Tool]:
        return [
            Tool(
                name="read_file",
                description="Read the contents of a text file",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "path": {
                            "type": "string",
                            "description": "File path relative to the root directory",
                        }
                    },
                    "required": ["path"],
                },
            ),
            Tool(
                name="list_directory",
                description="List contents of a directory, directories first",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "path": {
                            "type": "string",
                            "description": "Directory path relative to the root directory",
                            "default": "",
                        }
                    },
                },
            ),
            Tool(
                name="hash_file",
                description="Compute the SHA-1 and SHA-256 digests of a file",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "path": {
                            "type": "string",
                            "description": "File path relative to the root directory",
                        }
                    },
                    "required": ["path"],
                },
            ),
        ]

    async def dispatch(self, name: str, arguments: dict[str, Any]) -> list[TextContent]:
        if name == "read_file":
            return await self._read_file(arguments["path"])
        elif name == "list_directory":
            return await self._list_directory(arguments.get("path", ""))
        elif name == "hash_file":
            return await self._hash_file(arguments["path"])
        return [TextContent(type="text", text=f"Unknown tool: {name}")]

    async def _read_file(self, path: str) -> list[TextContent]:
        """Read a file."""
        try:
            target = resolve_under_root(self.root_path, path)
            content = self.file_system.read_all_text(target)
            return [TextContent(type="text", text=content)]
        except PathNotFoundError:
            return [TextContent(type="text", text=f"File not found: {path}")]
        except UnicodeDecodeError:
            return [TextContent(type="text", text=f"Not a UTF-8 text file: {path}")]
        except (DomainError, OSError) as e:
            return [TextContent(type="text", text=f"Error reading file: {e}")]

    async def _list_directory(self, path: str) -> list[TextContent]:
        """List directory contents."""
        use_case = ListDirectoryUseCase(
            file_system=self.file_system,
            root_path=self.root_path,
            ignored_directories=self.ignored_directories,
        )
        try:
            listing = await use_case.execute(path)
        except DomainError as e:
            return [TextContent(type="text", text=f"Error: {e}")]

        items = [
            {
                "name": str(entry.relative_path),
                "type": "dir" if entry.is_directory else "file",
            }
            for entry in listing.entries
        ]
        return [TextContent(type="text", text=json.dumps(items, indent=2))]

    async def _hash_file(self, path: str) -> list[TextContent]:
        """Hash a file."""
        use_case = HashFileUseCase(file_system=self.file_system, root_path=self.root_path)
        try:
            result = await use_case.execute(path)
        except DomainError as e:
            return [TextContent(type="text", text=f"Error: {e}")]

        return [TextContent(type="text", text=result.model_dump_json(indent=2))]

    async def run(self) -> None:
        """Run the MCP server."""
        logger.info("Serving %s over MCP stdio", self.root_path)
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            )


def main() -> None:
    """Console entry point: serve the configured root over stdio."""
    settings = get_settings()
    # stdout carries the MCP protocol, logs go to stderr
    setup_logging(settings.log_level, settings.log_file)
    server = FileMCPServer(
        settings.root_path,
        LocalFileSystem(chunk_size=settings.hash_chunk_size),
        ignored_directories=settings.ignored_directories,
    )
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
