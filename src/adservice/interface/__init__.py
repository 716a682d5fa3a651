"""Transports: gRPC and MCP surfaces over AdService."""
