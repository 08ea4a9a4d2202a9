#!/usr/bin/env python3
"""
Connection Test Script

Checks every storage backend and the AI endpoint, then shows which
backend STORAGE_BACKEND would select.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from hiresense.core.config import get_settings
from hiresense.core.log import configure_logging
from hiresense.db.mongodb import test_mongo_connection
from hiresense.db.postgres import test_postgres_connection
from hiresense.services.file_repository import JsonFileRepository
from hiresense.services.llm_client import get_llm_client


def main():
    settings = get_settings()
    configure_logging("WARNING")
    print("=" * 50)
    print("HIRESENSE - CONNECTION TEST")
    print("=" * 50)

    results = {}

    # Test PostgreSQL
    print("\n[1] Testing PostgreSQL...")
    print(f"    URL: postgresql://{settings.postgres_user}:****@{settings.postgres_host}:{settings.postgres_port}/{settings.postgres_db}")
    results["postgres"] = test_postgres_connection()
    print("    ✅ PostgreSQL: CONNECTED" if results["postgres"] else "    ❌ PostgreSQL: FAILED")

    # Test MongoDB
    print("\n[2] Testing MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    results["mongodb"] = test_mongo_connection()
    print("    ✅ MongoDB: CONNECTED" if results["mongodb"] else "    ❌ MongoDB: FAILED")

    # Test flat file
    print("\n[3] Testing local JSON file...")
    print(f"    Path: {settings.data_file}")
    results["file"] = JsonFileRepository(settings.data_file).ping()
    print("    ✅ File: WRITABLE" if results["file"] else "    ❌ File: NOT WRITABLE")

    # Test DeepSeek (only if API key is set)
    print("\n[4] Testing DeepSeek API...")
    if settings.deepseek_api_key and settings.deepseek_api_key != "your_deepseek_api_key_here":
        print(f"    Base URL: {settings.deepseek_base_url}")
        print(f"    Model: {settings.deepseek_model}")
        if get_llm_client().test_connection():
            print("    ✅ DeepSeek: CONNECTED")
        else:
            print("    ❌ DeepSeek: FAILED (AI endpoints will return fallback results)")
    else:
        print("    ⚠️  DeepSeek: API key not configured (AI endpoints will return fallback results)")

    backend = settings.storage_backend.lower()
    if backend == "auto":
        backend = next((b for b in ("postgres", "mongodb") if results[b]), "file")
    print(f"\nStorage in use with STORAGE_BACKEND={settings.storage_backend}: {backend}")

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
