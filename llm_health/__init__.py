"""LLM Health Check API: oracle-backed system health checks."""
