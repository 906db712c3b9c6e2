"""Shared utilities for proto-i18n."""
