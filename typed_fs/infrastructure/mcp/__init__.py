# MCP (Model Context Protocol) Infrastructure
#
# This module provides an MCP Server exposing a sandboxed root directory
# (read, list, hash) to MCP clients over stdio.
