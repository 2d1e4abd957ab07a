"""Small study programs: sorting, grep, greeting samples, a thread pool and a JSON HTTP server."""

__version__ = "0.1.0"