"""Playwright UI testing for the ngx-admin demo application."""
