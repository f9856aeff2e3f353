"""
Shared utilities for Claude CLI

This module holds the debug logger used across services.
"""
