"""
Integration tests for the MCP file server tools.

Tool calls go straight to ``dispatch`` so no stdio transport is needed.
"""

import json
import pytest
from pathlib import Path

from conftest import EMPTY_SHA1, HELLO_SHA256, native
from typed_fs.domain.value_objects import AbsolutePath
from typed_fs.infrastructure.mcp.servers.file_server import FileMCPServer


@pytest.fixture
def server(tmp_tree: Path) -> FileMCPServer:
    return FileMCPServer(str(tmp_tree))


class TestFileMCPServerSetup:
    """Tests for server construction and tool metadata."""

    def test_root_is_absolute(self, server: FileMCPServer, tmp_tree: Path):
        assert server.root_path == AbsolutePath(tmp_tree)

    def test_relative_root_uses_cwd(self, tmp_tree: Path, monkeypatch):
        monkeypatch.chdir(tmp_tree)

        server = FileMCPServer("src")

        assert server.root_path == AbsolutePath(tmp_tree / "src")

    def test_tool_names(self):
        assert [tool.name for tool in FileMCPServer.tools()] == [
            "read_file",
            "list_directory",
            "hash_file",
        ]


@pytest.mark.asyncio
class TestFileMCPServerTools:
    """Tests for the tool handlers."""

    async def test_read_file(self, server: FileMCPServer):
        result = await server.dispatch("read_file", {"path": "src/main.py"})

        assert result[0].type == "text"
        assert result[0].text == "print('hi')\n"

    async def test_read_missing_file(self, server: FileMCPServer):
        result = await server.dispatch("read_file", {"path": "nope.txt"})
        assert result[0].text == "File not found: nope.txt"

    async def test_read_binary_file(self, server: FileMCPServer, tmp_tree: Path):
        (tmp_tree / "blob.bin").write_bytes(b"\xff\xfe\x00")

        result = await server.dispatch("read_file", {"path": "blob.bin"})

        assert result[0].text == "Not a UTF-8 text file: blob.bin"

    async def test_read_directory(self, server: FileMCPServer):
        result = await server.dispatch("read_file", {"path": "src"})
        assert result[0].text.startswith("Error reading file:")

    async def test_read_outside_root(self, server: FileMCPServer):
        result = await server.dispatch("read_file", {"path": "../../etc/passwd"})
        assert result[0].text.startswith("Error reading file: Path traversal not allowed")

    async def test_list_directory(self, server: FileMCPServer):
        result = await server.dispatch("list_directory", {})

        assert json.loads(result[0].text) == [
            {"name": "src", "type": "dir"},
            {"name": "empty.txt", "type": "file"},
            {"name": "hello.txt", "type": "file"},
        ]

    async def test_list_directory_uses_ignore_list(self, tmp_tree: Path):
        server = FileMCPServer(str(tmp_tree), ignored_directories=["src"])

        result = await server.dispatch("list_directory", {})

        names = [item["name"] for item in json.loads(result[0].text)]
        assert names == ["node_modules", "empty.txt", "hello.txt"]

    async def test_list_subdirectory(self, server: FileMCPServer):
        result = await server.dispatch("list_directory", {"path": "src/pkg"})

        assert json.loads(result[0].text) == [
            {"name": native("src/pkg/deep"), "type": "dir"},
            {"name": native("src/pkg/mod.py"), "type": "file"},
        ]

    async def test_list_missing_directory(self, server: FileMCPServer):
        result = await server.dispatch("list_directory", {"path": "missing"})
        assert result[0].text == "Error: Directory not found: missing"

    async def test_hash_file(self, server: FileMCPServer):
        result = await server.dispatch("hash_file", {"path": "hello.txt"})

        data = json.loads(result[0].text)
        assert data["path"] == "hello.txt"
        assert data["sha256"] == HELLO_SHA256

    async def test_hash_empty_file(self, server: FileMCPServer):
        result = await server.dispatch("hash_file", {"path": "empty.txt"})
        assert json.loads(result[0].text)["sha1"] == EMPTY_SHA1

    async def test_hash_outside_root(self, server: FileMCPServer):
        result = await server.dispatch("hash_file", {"path": "../x"})
        assert result[0].text.startswith("Error: Path traversal not allowed")

    async def test_unknown_tool(self, server: FileMCPServer):
        result = await server.dispatch("delete_everything", {})
        assert result[0].text == "Unknown tool: delete_everything"
