"""Storefront 工具模块."""
