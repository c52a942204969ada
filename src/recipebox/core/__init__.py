"""Core application plumbing: config, exceptions, events, middleware."""
