#!/usr/bin/env python3
"""
Setup Check Script

Run this to verify the environment before starting the server.
Usage: python scripts/check_setup.py
"""
import sys

from careerion.core.config import get_settings, mask_key
from careerion.db.mongodb import check_mongo_connection, get_mongo_db
from careerion.services.gemini_client import get_gemini_client


def main() -> int:
    settings = get_settings()
    ok = True
    print("=" * 50)
    print("CAREERION - SETUP CHECK")
    print("=" * 50)

    print("\n[1] Environment...")
    if settings.jwt_secret:
        print("    ✅ JWT_SECRET set")
    else:
        print("    ⚠️  JWT_SECRET not set (development fallback in use)")
    if not settings.gemini_api_key:
        print("    ⚠️  GEMINI_API_KEY not set - AI features will not work")
        print("       Get one from: https://makersuite.google.com/app/apikey")
    else:
        print(f"    ✅ GEMINI_API_KEY: {mask_key(settings.gemini_api_key)}")

    print("\n[2] Testing MongoDB...")
    print(f"    URI: {settings.mongo_uri}")
    print(f"    Database: {settings.mongodb_db}")
    if check_mongo_connection():
        names = get_mongo_db().list_collection_names()
        print(f"    ✅ MongoDB: CONNECTED ({len(names)} collections)")
    else:
        print("    ❌ MongoDB: FAILED")
        print("       Is mongod running? Try MONGO_URI=mongodb://localhost:27017")
        ok = False

    print("\n[3] Testing Gemini API...")
    if settings.gemini_api_key:
        print(f"    Model: {settings.model_name}")
        if get_gemini_client(settings).test_connection():
            print("    ✅ Gemini: CONNECTED")
        else:
            print("    ❌ Gemini: FAILED")
            ok = False
    else:
        print("    ⚠️  Gemini: skipped (no API key)")

    print("\n" + "=" * 50)
    print("Setup check complete!" if ok else "Setup check found problems.")
    print("=" * 50)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
