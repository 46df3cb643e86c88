#!/usr/bin/env python3
"""
Smoke test for a T-Drive API deployment
Checks that the public routes answer and protected routes demand a token
"""
import os
import sys

import requests

# Base URL - override with SMOKE_BASE_URL
BASE_URL = os.getenv("SMOKE_BASE_URL", "http://localhost:4000")

# (path, name, expected status)
ROUTES = [
    ("/api/health", "Health", 200),
    ("/api/public-config", "Public config", 200),
    ("/api/sessions", "Sessions (no token)", 401),
    ("/api/stats", "Stats (no token)", 401),
]

def check_route(path, name, expected):
    """Check a single route"""
    url = BASE_URL + path
    try:
        response = requests.get(url, timeout=10)
        if response.status_code == expected:
            print(f"✓ {name:20} - OK ({expected})")
            return True
        else:
            print(f"✗ {name:20} - FAILED (Status: {response.status_code}, expected {expected})")
            return False
    except requests.exceptions.RequestException as e:
        print(f"✗ {name:20} - ERROR: {str(e)}")
        return False

def main():
    """Run smoke checks"""
    print(f"\n🔍 Running smoke tests on {BASE_URL}\n")
    print("-" * 50)

    results = []
    for path, name, expected in ROUTES:
        results.append(check_route(path, name, expected))

    print("-" * 50)
    passed = sum(results)
    total = len(results)
    print(f"\n✅ Passed: {passed}/{total}")

    if passed == total:
        print("🎉 All smoke tests passed!")
        sys.exit(0)
    else:
        print("❌ Some tests failed")
        sys.exit(1)

if __name__ == "__main__":
    main()
